"""In-memory employee registry."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from cadastro.funcionario import Funcionario
from cadastro.projeto import Projeto


class FuncionarioNaoEncontrado(LookupError):
    """No employee with the requested code."""


class Registro:
    """An ordered collection of employees looked up by code."""

    def __init__(self, funcionarios: Iterable[Funcionario] = ()) -> None:
        self._funcionarios: list[Funcionario] = list(funcionarios)

    def __len__(self) -> int:
        return len(self._funcionarios)

    def __iter__(self) -> Iterator[Funcionario]:
        return iter(self._funcionarios)

    def cadastrar(self, funcionario: Funcionario) -> None:
        self._funcionarios.append(funcionario)

    def _indice(self, codigo: int) -> int:
        for indice, funcionario in enumerate(self._funcionarios):
            if funcionario.codigo == codigo:
                return indice
        raise FuncionarioNaoEncontrado("Funcionario nao encontrado!")

    def buscar(self, codigo: int) -> Funcionario:
        """Return the first employee with the given code."""
        return self._funcionarios[self._indice(codigo)]

    def alterar(self, codigo: int, nome: str, idade: int) -> Funcionario:
        funcionario = self.buscar(codigo)
        funcionario.nome = nome
        funcionario.idade = idade
        return funcionario

    def remover(self, codigo: int) -> Funcionario:
        return self._funcionarios.pop(self._indice(codigo))

    def listar(self) -> list[Funcionario]:
        return list(self._funcionarios)

    def adicionar_projeto(self, codigo: int, projeto: Projeto) -> Funcionario:
        funcionario = self.buscar(codigo)
        funcionario.adicionar_projeto(projeto)
        return funcionario