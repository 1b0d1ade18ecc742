"""Job positions an employee can hold."""

from __future__ import annotations

from enum import Enum

DESCONHECIDO = "Desconhecido"


class Cargo(Enum):
    """A job position, numbered in the order offered by the menu."""

    CEO = 0
    CTO = 1
    SECRETARIA = 2
    PRESIDENTE = 3
    ESTAGIARIO = 4

    def __str__(self) -> str:
        return _ROTULOS.get(self, DESCONHECIDO)


_ROTULOS = {
    Cargo.CEO: "CEO",
    Cargo.CTO: "CTO",
    Cargo.SECRETARIA: "Secretária",
    Cargo.PRESIDENTE: "Presidente",
    Cargo.ESTAGIARIO: "Estagiário",
}