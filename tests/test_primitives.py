import pytest

from rustdrill.drills.primitives import (
    classify_character,
    describe_array,
    describe_cat,
    greetings,
    nice_slice,
    second,
)


def test_slice_out_of_array():
    a = [1, 2, 3, 4, 5]
    assert nice_slice(a) == [2, 3, 4]


def test_slice_of_tuple():
    assert nice_slice((1, 2, 3, 4, 5)) == (2, 3, 4)


def test_indexing_tuple():
    numbers = (1, 2, 3)
    assert second(numbers) == 2


def test_second_out_of_range():
    with pytest.raises(IndexError):
        second((1,))


def test_greetings_morning_only(capsys):
    assert greetings(True, False) == ["Good morning!"]
    assert capsys.readouterr().out == "Good morning!\n"


def test_greetings_none():
    assert greetings(False, False) == []


def test_greetings_both():
    assert greetings(True, True) == ["Good morning!", "Good evening!"]


@pytest.mark.parametrize(
    "character, expected",
    [
        ("C", "Alphabetical!"),
        ("Ö", "Alphabetical!"),
        ("7", "Numerical!"),
        ("!", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_character(character, expected):
    assert classify_character(character) == expected


@pytest.mark.parametrize("text", ["", "ab"])
def test_classify_character_rejects_non_single(text):
    with pytest.raises(ValueError):
        classify_character(text)


def test_big_array():
    assert describe_array(["Dalmatians"] * 101) == "Wow, that's a big array!"


def test_array_of_exactly_hundred_is_big():
    assert describe_array([0] * 100) == "Wow, that's a big array!"


def test_small_array():
    assert describe_array([0] * 99) == "Meh, I eat arrays like that for breakfast."


def test_describe_cat(capsys):
    line = describe_cat(("Furry McFurson", 3.5))
    assert line == "Furry McFurson is 3.5 years old."
    assert capsys.readouterr().out == line + "\n"