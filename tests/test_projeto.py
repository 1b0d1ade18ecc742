from cadastro.projeto import Projeto


def test_formato():
    assert str(Projeto(3, "Site")) == "Projeto Código: 3, Nome: Site"


def test_padrao():
    p = Projeto()
    assert p.codigo == 0
    assert p.nome == ""


def test_alteracao():
    p = Projeto(1, "A")
    p.codigo = 9
    p.nome = "B"
    assert p == Projeto(9, "B")
    assert "Nome: B" in str(p)