"""Demonstration of items built from products and then changed."""

from __future__ import annotations

import argparse
import dataclasses

from cadastro.produtos.item import Item
from cadastro.produtos.produto import Produto


def main(argv: list[str] | None = None) -> int:
    """Print two items, change them, and print them again."""
    parser = argparse.ArgumentParser(
        prog="cadastro-produtos", description="Demonstracao de itens e produtos."
    )
    parser.parse_args(argv)

    p1 = Produto(1, "Monster de manga(Mango loko)", 7.45)
    p2 = Produto(2, "NORGET DE FRANGO GRANDÃO", 4.50)

    i1 = Item(19, 6, p1)
    i2 = Item(19, 10, p2)

    print(i1.render())
    print(i2.render())

    p1 = dataclasses.replace(p1, codigo=19)
    i1.quantidade = 18
    i1.produto = p1

    i2.numero = 20
    p2 = dataclasses.replace(p2, codigo=10)
    i2.produto = p2

    print(i1.render())
    print(i2.render())
    return 0