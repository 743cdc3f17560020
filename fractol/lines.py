"""Reading input one line at a time, in fixed-size chunks.

A reader keeps whatever it read past the last newline and hands it out
on the next call, so a line is never split across calls. Lines are
returned as ``bytes`` with their trailing newline, except a final line
that has none.
"""

from __future__ import annotations

import os
from typing import BinaryIO, Iterator, Optional, Union

BUFFER_SIZE = 42
FD_SIZE = 1024

Source = Union[int, BinaryIO]


class LineReader:
    """Split the bytes of a file descriptor or binary stream into lines.

    ``source`` is either an integer file descriptor, read with
    ``os.read``, or an object with a ``read(size)`` method returning
    bytes. Each read asks for at most ``buffer_size`` bytes.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.source = source
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)
        chunk = self.source.read(self.buffer_size)
        return bytes(chunk) if chunk else b""

    def _fill(self) -> None:
        """Read until the pending data holds a newline or the input is exhausted."""
        scan_from = 0
        while self._pending.find(b"\n", scan_from) < 0:
            scan_from = len(self._pending)
            try:
                chunk = self._read_chunk()
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def next_line(self) -> Optional[bytes]:
        """Return the next line, or None once no data is left.

        A read error propagates as ``OSError`` and discards any data
        held back from earlier reads.
        """
        self._fill()
        if not self._pending:
            return None
        cut = self._pending.find(b"\n")
        end = len(self._pending) if cut < 0 else cut + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line read from file descriptor ``fd``, or None at the end.

    Each descriptor keeps its own pending data between calls, so several
    descriptors can be read in turn. Descriptors outside
    ``0 <= fd < FD_SIZE`` raise ``ValueError``.
    """
    if fd < 0 or fd >= FD_SIZE:
        raise ValueError(f"file descriptor must be in [0, {FD_SIZE}), got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    try:
        line = reader.next_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line