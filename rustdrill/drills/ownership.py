"""Solutions on move semantics: building, extending and describing vectors."""

from __future__ import annotations

from collections.abc import Iterable

_FILLERS = (22, 44, 66)


def fill_vec(vec: Iterable[int] | None = None) -> list[int]:
    """Return a new list holding the given items followed by 22, 44 and 66.

    The argument is left untouched; without one, a fresh list is filled.
    """
    return [*(vec or ()), *_FILLERS]


def describe_vec(label: str, vec: list[int]) -> str:
    """Print and return a line giving the vector's length and contents."""
    line = f"{label} has length {len(vec)} content `{vec!r}`"
    print(line)
    return line


def reborrow_total() -> int:
    """Add to a value through successive handles and return the result."""
    x = [100]
    y = x
    y[0] += 100
    z = y
    z[0] += 1000
    return x[0]