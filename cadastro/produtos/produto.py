"""Products sold in items."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Produto:
    """A product with code, name and price; changed by copying with new values."""

    codigo: int = 0
    nome: str = ""
    preco: float = 0.0

    def render(self) -> str:
        """Return the product's description block."""
        return "\n".join(
            [
                "DADOS DO PRODUTO",
                f"Código: {self.codigo}",
                f"Nome: {self.nome}",
                f"Preço: {self.preco:g}",
            ]
        )