from rustdrill.drills.quizzes import (
    calculate_apple_price,
    my_macro,
    string,
    string_slice,
    string_values,
    times_two,
)


def test_verify_apple_prices():
    assert calculate_apple_price(35) == 70
    assert calculate_apple_price(40) == 80
    assert calculate_apple_price(65) == 65


def test_string_functions_print(capsys):
    string_slice("blue")
    string("red")
    assert capsys.readouterr().out == "blue\nred\n"


def test_string_values(capsys):
    values = string_values()
    assert values == [
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation Station",
        "a",
        "hello there",
        "Happy Tuesday!",
        "my shift key is sticky",
    ]
    assert capsys.readouterr().out.splitlines() == values


def test_returns_twice_of_positive_numbers():
    assert times_two(4) == 8


def test_returns_twice_of_negative_numbers():
    assert times_two(-4) == -8


def test_my_macro_world():
    assert my_macro("world!") == "Hello world!"


def test_my_macro_goodbye():
    assert my_macro("goodbye!") == "Hello goodbye!"