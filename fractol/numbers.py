"""Lenient decimal parsing and validation of command-line numbers."""

from __future__ import annotations

from .chars import is_digit

_WHITESPACE = frozenset(" \t\n\v\f\r")


def parse_float(text: str) -> float:
    """Parse the leading decimal number of ``text``.

    Leading whitespace is skipped and any run of sign characters is
    accepted, each '-' flipping the sign. Parsing stops at the first
    character that does not fit; text with no digits yields 0.0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1

    sign = 1.0
    while pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -sign
        pos += 1

    result = 0.0
    while pos < length and is_digit(text[pos]):
        result = result * 10.0 + (ord(text[pos]) - ord("0"))
        pos += 1

    if pos < length and text[pos] == ".":
        pos += 1
        fraction = 0.0
        divisor = 1.0
        while pos < length and is_digit(text[pos]):
            fraction = fraction * 10.0 + (ord(text[pos]) - ord("0"))
            divisor *= 10.0
            pos += 1
        result += fraction / divisor

    return result * sign


def is_valid_float(text: str | None) -> bool:
    """Tell whether ``text`` is an optional sign, digits and at most one dot."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    seen_dot = False
    for ch in body:
        if ch == ".":
            if seen_dot:
                return False
            seen_dot = True
        elif not is_digit(ch):
            return False
    return True