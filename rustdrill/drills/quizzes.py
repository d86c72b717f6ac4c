"""Quiz solutions covering functions, strings, tests and macros."""


def calculate_apple_price(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if quantity > 40:
        return quantity
    return 2 * quantity


def string_slice(arg: str) -> None:
    """Print a borrowed string."""
    print(arg)


def string(arg: str) -> None:
    """Print an owned string."""
    print(arg)


def string_values() -> list[str]:
    """Build the quiz's string values, printing each as it is made."""
    values = [
        ("slice", "blue"),
        ("owned", "red"),
        ("owned", "hi"),
        ("owned", "rust is fun!"),
        ("owned", "nice weather"),
        ("owned", "Interpolation {}".format("Station")),
        ("slice", "abc"[0:1]),
        ("slice", "  hello there ".strip()),
        ("owned", "Happy Monday!".replace("Mon", "Tues")),
        ("owned", "mY sHiFt KeY iS sTiCkY".lower()),
    ]
    for kind, value in values:
        (string_slice if kind == "slice" else string)(value)
    return [value for _, value in values]


def times_two(num: int) -> int:
    """Double a number."""
    return num * 2


def my_macro(val: object) -> str:
    """Greet the given value."""
    return f"Hello {val}"