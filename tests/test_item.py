import pytest

from cadastro.produtos.categoria import Categoria
from cadastro.produtos.item import Item, PedidoNaoEncontrado
from cadastro.produtos.pedido import Pedido
from cadastro.produtos.produto import Produto


def test_categoria_padrao_alimento():
    assert Item(1, 2).categoria is Categoria.ALIMENTO
    assert "Categoria do item: Alimento" in Item(1, 2).render()


def test_render_estrutura():
    produto = Produto(1, "Monster de manga(Mango loko)", 7.45)
    item = Item(19, 6, produto, Categoria.BEBIDA)
    linhas = item.render().splitlines()
    assert linhas[0] == linhas[-1]
    assert set(linhas[0]) == {"-"}
    assert linhas[1] == "Printando DADOS: "
    assert linhas[2] == "Número do Produto: 19"
    assert linhas[3] == "Quantidade do Produto: 6"
    assert linhas[4] == "Categoria do item: Bebida"
    assert produto.render() in item.render()


def test_pedidos_aparecem_em_ordem():
    item = Item(1, 1)
    primeiro = Pedido(1, "primeiro")
    segundo = Pedido(2, "segundo")
    item.adicionar_pedido(primeiro)
    item.adicionar_pedido(segundo)
    texto = item.render()
    assert texto.index(primeiro.render()) < texto.index(segundo.render())
    assert item.pedidos == [primeiro, segundo]


def test_pedido_por_codigo_retorna_primeiro():
    item = Item(1, 1)
    item.adicionar_pedido(Pedido(5, "a"))
    item.adicionar_pedido(Pedido(5, "b"))
    assert item.pedido_por_codigo(5).nome == "a"


def test_pedido_inexistente():
    item = Item(1, 1, pedidos=[Pedido(1, "a")])
    with pytest.raises(PedidoNaoEncontrado):
        item.pedido_por_codigo(2)


def test_erro_e_lookup_error():
    with pytest.raises(LookupError):
        Item().pedido_por_codigo(0)


def test_itens_nao_compartilham_pedidos():
    a = Item()
    b = Item()
    a.adicionar_pedido(Pedido(1, "x"))
    assert b.pedidos == []