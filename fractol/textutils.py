"""String helpers with the semantics of the classic C string routines.

Text arguments are ordinary Python strings. A search returns the index of
the match, or None when there is none. The bounded copy and concatenation
functions work on ``bytearray`` buffers holding NUL-terminated data.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_NUL = "\0"


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) % 256)


def _c_text(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    return s.split(_NUL, 1)[0]


def _c_length(buffer: Union[bytes, bytearray]) -> int:
    """Length of the NUL-terminated data in ``buffer``."""
    end = buffer.find(0)
    return len(buffer) if end < 0 else end


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading integer: skip whitespace, accept one sign, read digits."""
    chars = iter(text)
    ch = next(chars, "")
    while ch and ch in _WHITESPACE:
        ch = next(chars, "")
    negative = False
    if ch in ("-", "+") and ch:
        negative = ch == "-"
        ch = next(chars, "")
    result = 0
    while ch and "0" <= ch <= "9":
        result = result * 10 + (ord(ch) - ord("0"))
        ch = next(chars, "")
    return -result if negative else result


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; NUL matches the end of the string."""
    target = _as_char(c)
    text = _c_text(s)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL matches the end of the string."""
    target = _as_char(c)
    text = _c_text(s)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` lying wholly within the first ``length`` characters of ``big``."""
    _require_non_negative("length", length)
    needle = _c_text(little)
    if not needle:
        return 0
    index = _c_text(big)[:length].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``."""
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    text = _c_text(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _c_text(s1) + _c_text(s2)


def strtrim(s: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``s``."""
    return _c_text(s).strip(_c_text(charset))


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    delimiter = _as_char(sep)
    text = _c_text(s)
    if delimiter == _NUL:
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to every character."""
    return "".join(f(index, ch) for index, ch in enumerate(_c_text(s)))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Replace each character in ``chars`` with ``f(index, char)``, in place.

    A result of None leaves that character unchanged.
    """
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strlcpy(dest: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Copy ``src`` into ``dest`` bounded by ``size``, NUL-terminating it.

    Returns the length of ``src``, so a result >= ``size`` means truncation.
    """
    _require_non_negative("size", size)
    source_length = _c_length(src)
    if size == 0:
        return source_length
    if size > len(dest):
        raise ValueError(f"size {size} exceeds the buffer length {len(dest)}")
    count = min(source_length, size - 1)
    dest[:count] = src[:count]
    dest[count] = 0
    return source_length


def strlcat(dest: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Append ``src`` to the string in ``dest`` within ``size`` bytes in total.

    Returns the length the full result would have had; when ``size`` does
    not exceed the current length, ``size`` plus the length of ``src``.
    """
    _require_non_negative("size", size)
    dest_length = _c_length(dest)
    source_length = _c_length(src)
    if size <= dest_length:
        return size + source_length
    if size > len(dest):
        raise ValueError(f"size {size} exceeds the buffer length {len(dest)}")
    count = min(source_length, size - 1 - dest_length)
    end = dest_length + count
    dest[dest_length:end] = src[:count]
    dest[end] = 0
    return dest_length + source_length


def _difference(s1: str, s2: str, limit: Optional[int]) -> int:
    pairs = zip_longest(_c_text(s1), _c_text(s2), fillvalue=_NUL)
    if limit is not None:
        pairs = islice(pairs, limit)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the ordering."""
    _require_non_negative("n", n)
    return _difference(s1, s2, n)


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the sign tells the ordering."""
    return _difference(s1, s2, None)