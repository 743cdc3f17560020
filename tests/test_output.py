import io

import pytest

from fractol.output import (
    format_printf,
    printf,
    putchar,
    putendl,
    putnbr,
    putstr,
)


def test_plain_text_passes_through():
    assert format_printf("hello world") == "hello world"


def test_string_and_char_conversions():
    assert format_printf("[%s|%c]", "abc", "z") == "[abc|z]"


def test_char_from_integer_code():
    assert format_printf("%c", ord("A")) == "A"


def test_char_integer_taken_modulo_256():
    assert format_printf("%c", ord("B") + 256) == "B"


def test_null_string_prints_nothing():
    assert format_printf("<%s>", None) == "<>"


def test_percent_escape():
    assert format_printf("100%%") == "100%"


def test_unknown_specifier_written_without_consuming_argument():
    assert format_printf("%q%d", 5) == "q5"


@pytest.mark.parametrize("value", [0, 7, 42, -1, -42, 123456, 2147483647])
def test_decimal_round_trip(value):
    assert int(format_printf("%d", value)) == value
    assert format_printf("%i", value) == format_printf("%d", value)


def test_decimal_minimum_int():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_unsigned_of_negative_one():
    assert format_printf("%u", -1) == "4294967295"


@pytest.mark.parametrize("value", [0, 9, 10, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(value):
    text = format_printf("%x", value)
    assert int(text, 16) == value
    assert text == text.lower()


@pytest.mark.parametrize("value", [0, 10, 255, 0xABCDEF])
def test_upper_hex_only_last_digit_upper(value):
    lower = format_printf("%x", value)
    upper = format_printf("%X", value)
    assert upper.lower() == lower
    assert upper[:-1] == lower[:-1]
    assert upper[-1] == lower[-1].upper()


def test_pointer_null():
    assert format_printf("%p", None) == "0x0"


@pytest.mark.parametrize("address", [1, 0x1234, 0xFFFF])
def test_pointer_round_trip(address):
    text = format_printf("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_pointer_keeps_low_32_bits():
    assert format_printf("%p", (1 << 40) | 0x10) == format_printf("%p", 0x10)


def test_lone_percent_raises():
    with pytest.raises(ValueError):
        format_printf("abc%")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d and %d", 1)


def test_non_integer_for_decimal_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "12")


def test_surplus_arguments_ignored():
    assert format_printf("%s", "a", "b", "c") == "a"


def test_printf_writes_to_stream_and_counts():
    buffer = io.StringIO()
    count = printf("x=%d %s", -5, "ok", stream=buffer)
    assert buffer.getvalue() == "x=-5 ok"
    assert count == len(buffer.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("value %u\n", 3)
    captured = capsys.readouterr()
    assert captured.out == "value 3\n"
    assert count == len(captured.out)


def test_putchar():
    buffer = io.StringIO()
    putchar("q", buffer)
    putchar(ord("r"), buffer)
    assert buffer.getvalue() == "qr"


def test_putstr():
    buffer = io.StringIO()
    putstr("hello", buffer)
    assert buffer.getvalue() == "hello"


def test_putendl_appends_newline():
    buffer = io.StringIO()
    putendl("line", buffer)
    assert buffer.getvalue() == "line\n"


def test_putendl_none_writes_nothing():
    buffer = io.StringIO()
    putendl(None, buffer)
    assert buffer.getvalue() == ""


def test_putendl_defaults_to_stdout(capsys):
    putendl("Error: Invalid arguments")
    assert capsys.readouterr().out == "Error: Invalid arguments\n"


@pytest.mark.parametrize("value", [0, 5, -5, 987654, -2147483648, 2147483647])
def test_putnbr_round_trip(value):
    buffer = io.StringIO()
    putnbr(value, buffer)
    assert int(buffer.getvalue()) == value


def test_putnbr_minimum_int():
    buffer = io.StringIO()
    putnbr(-2147483648, buffer)
    assert buffer.getvalue() == "-2147483648"


def test_putnbr_matches_decimal_format():
    buffer = io.StringIO()
    putnbr(2**31 + 17, buffer)
    assert buffer.getvalue() == format_printf("%d", 2**31 + 17)