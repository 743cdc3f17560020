"""Byte-buffer helpers with the semantics of the classic C memory routines.

Buffers are ``bytearray`` objects (or read-only ``bytes`` where nothing is
written). Byte values are taken modulo 256, as an ``unsigned char`` would.
Requests that reach past the end of a buffer raise ``ValueError``.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

ByteSource = Union[bytes, bytearray, memoryview]


def _check_count(name: str, n: int, available: int) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    if n > available:
        raise ValueError(f"{name} {n} exceeds the {available} bytes available")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` and return it."""
    _check_count("n", n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: ByteSource, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_count("n", n, min(len(dest), len(src)))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` within ``buffer``.

    The regions may overlap; the result is as if the source were copied
    out first. Returns ``buffer``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count("n", n, len(buffer) - max(dest, src))
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: ByteSource, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_count("n", n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ByteSource, b: ByteSource, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_count("n", n, min(len(a), len(b)))
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb`` elements of ``size`` bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    total = nmemb * size
    if total > sys.maxsize:
        raise OverflowError(f"{nmemb} * {size} bytes is too large to allocate")
    return bytearray(total)