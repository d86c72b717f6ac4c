"""Solutions on error handling: messages, parse errors and custom error types."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_BITS = 32
_I64_BITS = 64

PROCESSING_FEE = 1
COST_PER_ITEM = 5


class _ParseIntError(ValueError):
    """Raised when text is not a valid integer of the requested width."""


def _parse_int(text: str, bits: int) -> int:
    if not text:
        raise _ParseIntError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise _ParseIntError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise _ParseIntError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise _ParseIntError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text, raising ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the token cost of buying the typed quantity of items."""
    qty = _parse_int(item_quantity, _I32_BITS)
    cost = qty * COST_PER_ITEM + PROCESSING_FEE
    if not -(2 ** (_I32_BITS - 1)) <= cost <= 2 ** (_I32_BITS - 1) - 1:
        raise OverflowError("attempt to compute the cost with overflow")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable, print the outcome, return tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """Raised when a value cannot become a positive nonzero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.description == other.description

    def __hash__(self) -> int:
        return hash((CreationError, self.description))


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap a value, raising CreationError when it is negative or zero."""
        if value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if value == 0:
            raise CreationError(CreationError.ZERO)
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Raised when text is not a positive nonzero integer; `cause` says why."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        return type(self.cause) is type(other.cause) and (
            self.cause == other.cause or str(self.cause) == str(other.cause)
        )

    def __hash__(self) -> int:
        return hash((ParsePosNonzeroError, type(self.cause), str(self.cause)))


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a positive nonzero integer."""
    try:
        value = _parse_int(s, _I64_BITS)
    except _ParseIntError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err