"""Orders attached to an item."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Pedido:
    """An order identified by a numeric code."""

    codigo: int = 0
    nome: str = ""

    def render(self) -> str:
        """Return the order's description block."""
        return "\n".join(
            [
                "IMPRIMINDO DADOS DO PEDIDO",
                f"Nome do pedido: {self.nome}",
                f"Código do pedido: {self.codigo}",
            ]
        )