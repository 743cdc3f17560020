"""Formatted and plain text output with the semantics of a minimal printf.

The formatter understands ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x`` and ``%X``. Any other character after ``%`` is written as it is,
so ``%%`` produces a single percent sign. Integers follow 32-bit C
arithmetic: ``%d`` and ``%i`` wrap to a signed value, ``%u``, ``%x`` and
``%X`` to an unsigned one. ``%X`` upper-cases only the lowest hex digit,
and ``%p`` prints the low 32 bits of the address.
"""

from __future__ import annotations

import sys
from operator import index
from typing import Any, Callable, Iterator, Optional, TextIO, Union

CharLike = Union[str, int]

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN_BIT = 0x80000000


def _to_uint32(value: Any) -> int:
    return index(value) & _UINT_MASK


def _to_int32(value: Any) -> int:
    unsigned = _to_uint32(value)
    return unsigned - (1 << 32) if unsigned & _INT_SIGN_BIT else unsigned


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(index(c) & 0xFF)


def _string(s: Optional[str]) -> str:
    if s is None:
        return ""
    if not isinstance(s, str):
        raise TypeError(f"%s expects a string, got {type(s).__name__}")
    return s


def _address(ptr: Any) -> str:
    if ptr is None:
        address = 0
    elif isinstance(ptr, int):
        address = ptr
    else:
        address = id(ptr)
    return "0x" + format(address & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    digits = format(_to_uint32(value), "x")
    return digits[:-1] + digits[-1].upper()


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _address,
    "d": lambda n: str(_to_int32(n)),
    "i": lambda n: str(_to_int32(n)),
    "u": lambda n: str(_to_uint32(n)),
    "x": lambda n: format(_to_uint32(n), "x"),
    "X": _hex_upper,
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    conversion = _CONVERSIONS.get(spec)
    if conversion is None:
        return spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"missing argument for %{spec}") from None
    return conversion(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    Surplus arguments are ignored. A missing argument raises TypeError,
    and a format ending in a lone '%' raises ValueError.
    """
    arguments = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        pieces.append(_convert(spec, arguments))
    return "".join(pieces)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    _target(stream).write(text)
    return len(text)


def putchar(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer is taken modulo 256."""
    _target(stream).write(_char(c))


def putstr(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` as it is."""
    _target(stream).write(s)


def putendl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; write nothing for None."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal, wrapped to a signed 32-bit value."""
    _target(stream).write(str(_to_int32(n)))