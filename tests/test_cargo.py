import pytest

from cadastro.cargo import DESCONHECIDO, Cargo


@pytest.mark.parametrize(
    "cargo, rotulo",
    [
        (Cargo.CEO, "CEO"),
        (Cargo.CTO, "CTO"),
        (Cargo.SECRETARIA, "Secretária"),
        (Cargo.PRESIDENTE, "Presidente"),
        (Cargo.ESTAGIARIO, "Estagiário"),
    ],
)
def test_rotulos(cargo, rotulo):
    assert str(cargo) == rotulo


def test_valores_seguem_ordem_do_menu():
    assert [c.value for c in Cargo] == list(range(len(Cargo)))
    assert Cargo(0) is Cargo.CEO
    assert Cargo(4) is Cargo.ESTAGIARIO


def test_valor_fora_da_faixa():
    with pytest.raises(ValueError):
        Cargo(5)


def test_nenhum_rotulo_e_desconhecido():
    rotulos = [Cargo(valor).__str__() for valor in range(5)]
    assert rotulos == ["CEO", "CTO", "Secretária", "Presidente", "Estagiário"]
    assert DESCONHECIDO not in rotulos
    assert DESCONHECIDO == "Desconhecido"