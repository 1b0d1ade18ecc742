# cadastro

`cadastro` keeps a register of employees (*funcionários*) in memory. Each employee has a code, a name, an age, an address (*endereço*), a role (*cargo*) and a list of projects (*projetos*). The package also has a small catalogue of products, items, categories and orders (*produtos*, *itens*, *categorias* and *pedidos*).

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Interactive register

```
cadastro
```

This opens a menu in the terminal:

1. Register a new employee: code, name, age, street, city, state, postal code and a role from 0 to 4.
2. Change an employee's name and age.
3. Remove an employee.
4. List every employee with their address, role and projects.
5. Add a project to an employee.
6. Quit.

The roles are CEO, CTO, Secretária, Presidente and Estagiário. A role number outside 0 to 4 is accepted and the employee's role is then shown as "Desconhecido". When an option or a number is not a whole number, the menu says so and asks again. The menu also ends when standard input is closed.

Option 5 asks for a project description, but only the project's code and title are kept.

## Using the library

```python
from cadastro.cargo import Cargo
from cadastro.endereco import Endereco
from cadastro.projeto import Projeto
from cadastro.funcionario import Funcionario
from cadastro.registro import Registro, FuncionarioNaoEncontrado

registro = Registro()
registro.cadastrar(
    Funcionario(
        codigo=1,
        nome="Ana",
        idade=30,
        endereco=Endereco("Rua A", "Recife", "PE", "50000-000"),
        cargo=Cargo.CTO,
    )
)
registro.adicionar_projeto(1, Projeto(10, "Portal"))
registro.alterar(1, "Ana Maria", 31)

for funcionario in registro.listar():
    print(funcionario.render())

try:
    registro.remover(99)
except FuncionarioNaoEncontrado:
    print("Funcionario nao encontrado!")
```

`Registro` keeps employees in the order they were registered. It supports `len()` and iteration. `buscar`, `alterar`, `remover` and `adicionar_projeto` act on the first employee with the given code and raise `FuncionarioNaoEncontrado` when there is none.

`Funcionario.projeto_por_codigo(codigo)` returns the first project with that code. It raises `ProjetoNaoEncontrado` when the employee has no such project.

`str()` of a `Cargo`, an `Endereco` or a `Projeto` gives the text the menu prints for it.

## Product catalogue

```
cadastro-produtos
```

This runs a short demonstration. It builds two items from two products, prints them, changes their codes, quantities and numbers, and prints them again.

In code:

```python
from cadastro.produtos.categoria import Categoria
from cadastro.produtos.produto import Produto
from cadastro.produtos.pedido import Pedido
from cadastro.produtos.item import Item, PedidoNaoEncontrado

item = Item(19, 6, Produto(1, "Suco", 7.45), Categoria.BEBIDA)
item.adicionar_pedido(Pedido(1, "Pedido da loja"))
print(item.render())
print(item.pedido_por_codigo(1))
```

`Produto` is immutable; make a changed copy with `dataclasses.replace`. An `Item` has the category `Categoria.ALIMENTO` unless another is given. `Item.pedido_por_codigo(codigo)` raises `PedidoNaoEncontrado` when no order has that code.

## What it does not do

The register lives only in memory. Nothing is saved to a file or a database, and all employees are lost when `cadastro` exits. The product catalogue has no menu of its own. `cadastro-produtos` only runs the fixed demonstration.