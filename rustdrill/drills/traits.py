"""Solutions on traits: appending "Bar" to strings and lists of strings."""

from functools import singledispatch


@singledispatch
def append_bar(value):
    """Return the value with "Bar" appended."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_to_text(value: str) -> str:
    return f"{value}Bar"


@append_bar.register(list)
def _append_bar_to_list(value: list) -> list:
    return [*value, "Bar"]