"""Solutions on hash maps and vectors."""

from __future__ import annotations

import enum


def fruit_basket() -> dict[str, int]:
    """Return a basket with at least three kinds and five fruits in total."""
    basket = {"banana": 2}
    basket["pineapple"] = 3
    basket["passion fruit"] = 2
    return basket


class Fruit(enum.Enum):
    """Kinds of fruit that can go into a basket."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one banana and one pineapple, leaving the other fruits untouched."""
    for fruit in Fruit:
        if fruit in (Fruit.BANANA, Fruit.PINEAPPLE):
            basket[fruit] = 1


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a vector holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(v: list[int]) -> list[int]:
    """Return the numbers each multiplied by two."""
    return [i * 2 for i in v]