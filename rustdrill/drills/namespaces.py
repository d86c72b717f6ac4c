"""Solutions on macros and modules: a two-form macro and re-exported names."""

from __future__ import annotations

_FRUITS = {"PEAR": "Pear", "APPLE": "Apple"}
_VEGGIES = {"CUCUMBER": "Cucumber", "CARROT": "Carrot"}

FRUIT = _FRUITS["PEAR"]
VEGGIE = _VEGGIES["CUCUMBER"]


def my_macro(*args: object) -> str:
    """Print and return the macro's line; takes no value or exactly one."""
    match args:
        case ():
            line = "Check out my macro!"
        case (value,):
            line = f"Look at this other macro: {value}"
        case _:
            raise TypeError(f"my_macro takes at most one value, got {len(args)}")
    print(line)
    return line


def make_sausage() -> str:
    """Print and return the sausage line."""
    line = "sausage!"
    print(line)
    return line


def favorite_snacks() -> str:
    """Print and return the favourite fruit and vegetable."""
    line = f"favorite snacks: {FRUIT} and {VEGGIE}"
    print(line)
    return line