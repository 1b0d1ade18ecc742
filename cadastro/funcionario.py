"""Employees and the projects assigned to them."""

from __future__ import annotations

from dataclasses import dataclass, field

from cadastro.cargo import DESCONHECIDO, Cargo
from cadastro.endereco import Endereco
from cadastro.projeto import Projeto


class ProjetoNaoEncontrado(LookupError):
    """No project with the requested code."""


@dataclass
class Funcionario:
    """An employee with address, position and projects."""

    codigo: int = 0
    nome: str = ""
    idade: int = 0
    endereco: Endereco = field(default_factory=Endereco)
    cargo: Cargo | None = Cargo.CEO
    projetos: list[Projeto] = field(default_factory=list)

    def render(self) -> str:
        """Return the employee's full description as printed by the menu."""
        cargo = DESCONHECIDO if self.cargo is None else str(self.cargo)
        linhas = [
            "--- PRINTANDO DADOS ---",
            f"Codigo: {self.codigo}",
            f"Nome: {self.nome}",
            f"Idade: {self.idade}",
            f"Cargo: {cargo}",
            str(self.endereco),
            "Projetos do funcionário:",
            *(str(p) for p in self.projetos),
            "------------------",
        ]
        return "\n".join(linhas)

    def projeto_por_codigo(self, codigo: int) -> Projeto:
        """Return the first project with the given code."""
        for projeto in self.projetos:
            if projeto.codigo == codigo:
                return projeto
        raise ProjetoNaoEncontrado("Projeto com o código informado não encontrado.")

    def adicionar_projeto(self, projeto: Projeto) -> None:
        self.projetos.append(projeto)