"""Postal address of an employee."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Endereco:
    """A street address."""

    rua: str = ""
    cidade: str = ""
    estado: str = ""
    cep: str = ""

    def __str__(self) -> str:
        return f"Endereco: {self.rua}, {self.cidade} - {self.estado}, {self.cep}"