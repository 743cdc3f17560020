import pytest

from fractol.numbers import is_valid_float, parse_float


@pytest.mark.parametrize(
    "text", ["0.32", "0.42", "-0.7", "0.27015", "12", "+3.5", "-0.0", "100.125"]
)
def test_parse_float_agrees_with_builtin_on_plain_numbers(text):
    assert parse_float(text) == pytest.approx(float(text))


def test_parse_float_skips_leading_whitespace():
    assert parse_float(" \t\n 2.5") == pytest.approx(2.5)


def test_parse_float_multiple_signs_flip():
    assert parse_float("--2") == pytest.approx(2.0)
    assert parse_float("+-1.5") == pytest.approx(-1.5)
    assert parse_float("-+-4") == pytest.approx(4.0)


def test_parse_float_stops_at_garbage():
    assert parse_float("12abc") == pytest.approx(12.0)
    assert parse_float("3.25x9") == pytest.approx(3.25)
    assert parse_float("1.2.3") == pytest.approx(1.2)


def test_parse_float_without_digits_is_zero():
    assert parse_float("") == 0.0
    assert parse_float("abc") == 0.0
    assert parse_float("-") == 0.0


def test_parse_float_fraction_only():
    assert parse_float(".5") == pytest.approx(0.5)
    assert parse_float("7.") == pytest.approx(7.0)


@pytest.mark.parametrize("text", ["0.32", "-0.7", "+1", "42", ".5", "3.", "-", "+", "."])
def test_valid_floats(text):
    assert is_valid_float(text) is True


@pytest.mark.parametrize(
    "text", ["", None, "1.2.3", "1e5", " 1", "1 ", "--1", "abc", "1-", "0x10"]
)
def test_invalid_floats(text):
    assert is_valid_float(text) is False


@pytest.mark.parametrize("text", ["0.32", "-0.7", "+12.5", "8"])
def test_valid_text_parses_like_builtin(text):
    assert is_valid_float(text)
    assert parse_float(text) == pytest.approx(float(text))