"""Solutions on primitive types: booleans, characters, arrays, slices and tuples."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

BIG_ARRAY_LENGTH = 100


def greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """Print and return the greetings that apply."""
    lines = []
    if is_morning:
        lines.append("Good morning!")
    if is_evening:
        lines.append("Good evening!")
    for line in lines:
        print(line)
    return lines


def classify_character(character: str) -> str:
    """Print and return whether a single character is alphabetic or numeric."""
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    if character.isalpha():
        line = "Alphabetical!"
    elif character.isnumeric():
        line = "Numerical!"
    else:
        line = "Neither alphabetic nor numeric!"
    print(line)
    return line


def describe_array(values: Sequence[Any]) -> str:
    """Print and return a remark on how big the array is."""
    if len(values) >= BIG_ARRAY_LENGTH:
        line = "Wow, that's a big array!"
    else:
        line = "Meh, I eat arrays like that for breakfast."
    print(line)
    return line


def nice_slice(values: Sequence[Any]) -> Sequence[Any]:
    """Return the elements at positions one to three."""
    return values[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    """Print and return a line built from a (name, age) pair."""
    name, age = cat
    line = f"{name} is {age} years old."
    print(line)
    return line


def second(numbers: Sequence[Any]) -> Any:
    """Return the second element."""
    return numbers[1]