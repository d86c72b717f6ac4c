import pytest

from rustdrill.drills.lints import add_option, nearly_equal


def test_close_floats_are_nearly_equal():
    assert nearly_equal(1.2331, 1.2332) is True


def test_distant_floats_are_not_nearly_equal():
    assert nearly_equal(1.0, 2.0) is False


@pytest.mark.parametrize("x, y", [(1.2331, 1.2332), (0.0, 5.0), (-3.0, -3.0005)])
def test_nearly_equal_is_symmetric(x, y):
    assert nearly_equal(x, y) == nearly_equal(y, x)


def test_value_is_nearly_equal_to_itself():
    assert nearly_equal(42.5, 42.5) is True


def test_add_present_option():
    assert add_option(42, 12) == 54


def test_add_missing_option_keeps_value():
    assert add_option(42, None) == 42


def test_add_zero_option_keeps_value():
    assert add_option(7, 0) == 7