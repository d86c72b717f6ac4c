"""Solutions on shared data, cons lists, iterators and counting with iterators."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

_U64_MAX = 2**64 - 1
_I32_MIN = -(2**31)
_DIVIDEND_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every `workers`-th number in parallel, one worker per offset.

    Each worker prints its sum; the sums are returned ordered by offset.
    """
    if workers < 1:
        raise ValueError(f"at least one worker is needed, got {workers}")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(shared[offset::workers])
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass(frozen=True)
class Cons:
    """A cell of a cons list; `next` is None at the end of the list."""

    value: int
    next: Cons | None = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.next


def create_empty_list() -> Cons | None:
    """Return the empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """Return a cons list holding a single zero."""
    return Cons(0, create_empty_list())


def favourite_fruits() -> Iterator[str]:
    """Return an iterator over the favourite fruits, in order."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them without separators."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """Raised when an exact integer division is impossible."""


class NotDivisibleError(DivisionError):
    """Raised when the dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((NotDivisibleError, self.dividend, self.divisor))


class DivideByZeroError(DivisionError, ZeroDivisionError):
    """Raised when dividing by zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Return a / b when a is evenly divisible by b."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    if a == _I32_MIN and b == -1:
        raise OverflowError("attempt to divide with overflow")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def result_with_list() -> list[int]:
    """Divide the sample numbers, raising on the first failed division."""
    return [divide(n, _DIVISOR) for n in _DIVIDEND_NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Divide the sample numbers, keeping each failure in place as its error."""
    return [_try_divide(n, _DIVISOR) for n in _DIVIDEND_NUMBERS]


def factorial(num: int) -> int:
    """Return num! for num >= 1, within the range of an unsigned 64-bit integer."""
    if num < 1:
        raise ValueError(f"factorial is defined here for positive numbers, got {num}")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(enum.Enum):
    """How far an exercise has been worked through."""

    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)