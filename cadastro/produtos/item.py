"""Items: a product with quantity, category and orders."""

from __future__ import annotations

from dataclasses import dataclass, field

from cadastro.produtos.categoria import Categoria
from cadastro.produtos.pedido import Pedido
from cadastro.produtos.produto import Produto

_SEPARADOR = "-" * 44


class PedidoNaoEncontrado(LookupError):
    """No order with the requested code."""


@dataclass
class Item:
    """A numbered item holding a product, its quantity and its orders."""

    numero: int = 0
    quantidade: int = 0
    produto: Produto = field(default_factory=Produto)
    categoria: Categoria = Categoria.ALIMENTO
    pedidos: list[Pedido] = field(default_factory=list)

    def render(self) -> str:
        """Return the item's full description block."""
        linhas = [
            _SEPARADOR,
            "Printando DADOS: ",
            f"Número do Produto: {self.numero}",
            f"Quantidade do Produto: {self.quantidade}",
            f"Categoria do item: {self.categoria}",
            self.produto.render(),
            *(pedido.render() for pedido in self.pedidos),
            _SEPARADOR,
        ]
        return "\n".join(linhas)

    def pedido_por_codigo(self, codigo: int) -> Pedido:
        """Return the first order with the given code."""
        for pedido in self.pedidos:
            if pedido.codigo == codigo:
                return pedido
        raise PedidoNaoEncontrado("Esse código não pertence à nenhum Pedido.")

    def adicionar_pedido(self, pedido: Pedido) -> None:
        self.pedidos.append(pedido)