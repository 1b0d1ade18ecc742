"""Product categories."""

from __future__ import annotations

from enum import Enum

DESCONHECIDA = "Categoria desconhecida"


class Categoria(Enum):
    """A product category, numbered from zero in menu order."""

    ALIMENTO = 0
    BEBIDA = 1
    ELETRONICO = 2
    VESTUARIO = 3
    LIVRO = 4
    LIMPEZA = 5

    def __str__(self) -> str:
        return _ROTULOS.get(self, DESCONHECIDA)


_ROTULOS = {
    Categoria.ALIMENTO: "Alimento",
    Categoria.BEBIDA: "Bebida",
    Categoria.ELETRONICO: "Eletrônico",
    Categoria.VESTUARIO: "Vestuário",
    Categoria.LIVRO: "Livro",
    Categoria.LIMPEZA: "Limpeza",
}