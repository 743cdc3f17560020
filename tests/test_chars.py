import pytest

from fractol.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch.isascii() and ch.isalpha())


@pytest.mark.parametrize("ch", ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in "0123456789")


@pytest.mark.parametrize("ch", ASCII)
def test_is_alnum_is_letter_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII)
def test_is_print_matches_printable_range(ch):
    assert is_print(ch) == (ch.isprintable() and ch.isascii())


def test_integer_code_points_accepted():
    assert is_alpha(65) is True
    assert is_digit(ord("7")) is True
    assert is_alpha(ord("[")) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_print_edges():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print("\x7f") is False
    assert is_print("\t") is False


def test_case_conversion_on_strings():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"
    assert to_upper("1") == "1"
    assert to_lower("!") == "!"


def test_case_conversion_keeps_integer_kind():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(300) == 300


@pytest.mark.parametrize("ch", "abcdefghijklmnopqrstuvwxyz")
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch
    assert to_upper(ch) == ch.upper()


def test_non_ascii_letters_left_alone():
    assert to_upper("é") == "é"
    assert is_alpha("é") is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")