"""Interactive menu for managing employees."""

from __future__ import annotations

import argparse

from cadastro.cargo import Cargo
from cadastro.endereco import Endereco
from cadastro.funcionario import Funcionario
from cadastro.projeto import Projeto
from cadastro.registro import FuncionarioNaoEncontrado, Registro

_MENU = (
    "\nMenu:\n"
    "1. Cadastrar novo funcionário\n"
    "2. Alterar funcionário\n"
    "3. Remover funcionário\n"
    "4. Listar todos os funcionários\n"
    "5. Adicionar projeto a um funcionário\n"
    "6. Sair\n"
    "Escolha uma opcao: "
)

_OPCOES_CARGO = (
    "Escolha o cargo:\n"
    "0 - CEO\n1 - CTO\n2 - Secretária\n3 - Presidente\n4 - Estagiário\n"
)

_NAO_ENCONTRADO = "Funcionario nao encontrado!"


class _EntradaInvalida(ValueError):
    """A number was expected but something else was typed."""


def _ler(prompt: str) -> str:
    return input(prompt)


def _ler_int(prompt: str) -> int:
    texto = _ler(prompt).strip()
    try:
        return int(texto)
    except ValueError:
        raise _EntradaInvalida(texto) from None


def _cadastrar(registro: Registro) -> None:
    codigo = _ler_int("Digite o codigo: ")
    nome = _ler("Digite o nome: ")
    idade = _ler_int("Digite a idade: ")
    rua = _ler("Digite a rua: ")
    cidade = _ler("Digite a cidade: ")
    estado = _ler("Digite o estado: ")
    cep = _ler("Digite o CEP: ")
    print(_OPCOES_CARGO, end="")
    opcao = _ler_int("Escolha a opcao do cargo (0 a 4): ")
    try:
        cargo: Cargo | None = Cargo(opcao)
    except ValueError:
        cargo = None
    registro.cadastrar(
        Funcionario(codigo, nome, idade, Endereco(rua, cidade, estado, cep), cargo)
    )
    print("Funcionario cadastrado com sucesso!")


def _alterar(registro: Registro) -> None:
    codigo = _ler_int("Digite o codigo do funcionario a ser alterado: ")
    try:
        registro.buscar(codigo)
    except FuncionarioNaoEncontrado:
        print(_NAO_ENCONTRADO)
        return
    nome = _ler("Digite o novo nome: ")
    idade = _ler_int("Digite a nova idade: ")
    registro.alterar(codigo, nome, idade)
    print("Funcionario alterado com sucesso!")


def _remover(registro: Registro) -> None:
    codigo = _ler_int("Digite o codigo do funcionario a ser removido: ")
    try:
        registro.remover(codigo)
    except FuncionarioNaoEncontrado:
        print(_NAO_ENCONTRADO)
        return
    print("Funcionario removido com sucesso!")


def _listar(registro: Registro) -> None:
    print("\nLista de funcionarios:")
    for funcionario in registro:
        print(funcionario.render())
        print("------------------------")


def _adicionar_projeto(registro: Registro) -> None:
    codigo = _ler_int("Digite o codigo do funcionario: ")
    try:
        registro.buscar(codigo)
    except FuncionarioNaoEncontrado:
        print(_NAO_ENCONTRADO)
        return
    codigo_projeto = _ler_int("Digite o codigo do projeto: ")
    titulo = _ler("Digite o titulo do projeto: ")
    _ler("Digite a descricao do projeto: ")
    registro.adicionar_projeto(codigo, Projeto(codigo_projeto, titulo))
    print("Projeto adicionado com sucesso ao funcionario!")


_ACOES = {
    1: _cadastrar,
    2: _alterar,
    3: _remover,
    4: _listar,
    5: _adicionar_projeto,
}

_SAIR = 6


def main(argv: list[str] | None = None) -> int:
    """Run the employee menu on standard input until the user quits."""
    parser = argparse.ArgumentParser(
        prog="cadastro", description="Cadastro interativo de funcionarios."
    )
    parser.parse_args(argv)

    registro = Registro()
    try:
        while True:
            try:
                opcao = _ler_int(_MENU)
            except _EntradaInvalida:
                opcao = None
            if opcao == _SAIR:
                print("Saindo...")
                break
            acao = _ACOES.get(opcao) if opcao is not None else None
            if acao is None:
                print("Opcao invalida! Tente novamente.")
                continue
            try:
                acao(registro)
            except _EntradaInvalida:
                print("Entrada invalida!")
    except EOFError:
        print()
    return 0