"""Solutions on optional values: unwrapping, if-let, while-let and matching."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def print_number(maybe_number: int | None) -> None:
    """Print the number, raising ValueError when there is none."""
    if maybe_number is None:
        raise ValueError("called unwrap on a missing value")
    print(f"printing: {maybe_number}")


def computed_numbers() -> list[int]:
    """Return the five numbers computed by the option exercise."""
    return [(i * 1235 + 2) // (4 * 16) for i in range(5)]


def describe_word(optional_word: str | None) -> str:
    """Print and return a line describing the optional word."""
    if optional_word is not None:
        line = f"The word is: {optional_word}"
    else:
        line = "The optional word doesn't contain anything"
    print(line)
    return line


def drain_integers(values: Iterable[int | None]) -> list[int]:
    """Pop integers from the end, stopping at the first missing one.

    Each popped integer is printed; they are returned in the order popped.
    """
    stack = list(values)
    drained = []
    while stack and (integer := stack.pop()) is not None:
        print(f"current value: {integer}")
        drained.append(integer)
    return drained


def describe_point(point: Any | None) -> str:
    """Print and return the co-ordinates of a point, or "no match" without one."""
    if point is not None:
        line = f"Co-ordinates are {point.x},{point.y} "
    else:
        line = "no match"
    print(line)
    return line