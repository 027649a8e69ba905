"""Operations on raw byte buffers.

Buffers are objects that support the buffer protocol, such as ``bytes``,
``bytearray`` or ``memoryview``. Functions that write need a writable one.
Every length is checked against the buffers it applies to.
"""

from __future__ import annotations

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]


def _view(buf, *, writable: bool = False) -> memoryview:
    view = memoryview(buf).cast("B")
    if writable and view.readonly:
        raise TypeError("buffer is read-only")
    return view


def _check_length(view: memoryview, n: int) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(view):
        raise ValueError(f"length {n} exceeds buffer size {len(view)}")


def memset(buf, value: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``value`` truncated to a byte."""
    view = _view(buf, writable=True)
    _check_length(view, n)
    view[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to the start of ``dest``.

    Returns ``dest``; when both buffers are ``None`` nothing happens and
    ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    dview = _view(dest, writable=True)
    sview = _view(src)
    _check_length(dview, n)
    _check_length(sview, n)
    dview[:n] = sview[:n]
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` to ``dest``; the regions may overlap."""
    if dest is src or n == 0:
        return dest
    dview = _view(dest, writable=True)
    sview = _view(src)
    _check_length(dview, n)
    _check_length(sview, n)
    dview[:n] = bytes(sview[:n])
    return dest


def memchr(buf, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``n``, else None."""
    view = _view(buf)
    _check_length(view, n)
    index = view[:n].tobytes().find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    aview = _view(a)
    bview = _view(b)
    _check_length(aview, n)
    _check_length(bview, n)
    return next((x - y for x, y in zip(aview[:n], bview[:n]) if x != y), 0)


def calloc(count: int, size: int) -> bytearray:
    """A new zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)