"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from ftkit.conversion import itoa
from ftkit.cstring import strdup

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s) -> bytes:
    return s.encode() if isinstance(s, str) else bytes(s)


def put_char(c, fd: int) -> None:
    """Write one character: a one-character ``str`` or a byte value."""
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    else:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        data = _encode(c)
    _write_all(fd, data)


def put_str(s, fd: int) -> None:
    """Write ``s`` up to its first NUL; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, _encode(strdup(s)))


def put_endl(s, fd: int) -> None:
    """Write ``s`` followed by a newline."""
    put_str(s, fd)
    put_char("\n", fd)


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _write_all(fd, itoa(n).encode("ascii"))