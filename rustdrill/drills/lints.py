"""Solutions on lint-friendly code: float comparison and optional addition."""

from __future__ import annotations

TOLERANCE = 0.001


def nearly_equal(x: float, y: float) -> bool:
    """Return whether two floats differ by less than the tolerance."""
    return abs(x - y) < TOLERANCE


def add_option(res: int, option: int | None) -> int:
    """Add the optional value to res when it is present."""
    if option is not None:
        res += option
    return res