"""Projects an employee works on."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Projeto:
    """A project identified by a numeric code."""

    codigo: int = 0
    nome: str = ""

    def __str__(self) -> str:
        return f"Projeto Código: {self.codigo}, Nome: {self.nome}"