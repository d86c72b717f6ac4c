"""Solutions on strings: owned return values and borrowed comparisons."""

COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Return whether the text is one of the known colour words."""
    return attempt in COLOR_WORDS