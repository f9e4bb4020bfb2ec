import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_white_space,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c) is True
    assert is_alnum(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits_are_digit_and_alnum(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", list(string.punctuation) + [" ", "\t", "\x7f"])
def test_non_alnum(c):
    assert is_alnum(c) is False
    assert is_alpha(c) is False


def test_integer_code_points_accepted():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("5")) is True
    assert is_alpha(ord("[")) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert all(is_print(c) for c in string.ascii_letters + string.digits + string.punctuation)


def test_is_white_space_only_three_characters():
    assert is_white_space(" ") is True
    assert is_white_space("\t") is True
    assert is_white_space("\n") is True
    assert is_white_space("\r") is False
    assert is_white_space("\v") is False
    assert is_white_space("x") is False


def test_case_conversion_over_alphabet():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_upper(upper) == upper
        assert to_lower(lower) == lower


def test_case_conversion_keeps_integer_kind():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " \t\n") + ["é"])
def test_case_conversion_leaves_others(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_round_trip_case():
    for c in string.ascii_letters:
        assert to_lower(to_upper(c)) == c.lower()
        assert to_upper(to_lower(c)) == c.upper()


@pytest.mark.parametrize("bad", ["", "ab", None, 1.5])
def test_invalid_input_raises(bad):
    with pytest.raises(TypeError):
        is_alpha(bad)