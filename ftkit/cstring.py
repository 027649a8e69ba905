"""NUL-terminated string operations.

Strings may be ``str`` or bytes-like objects. A string ends at its first
NUL character (``"\\0"`` or byte 0), or at its end if it holds none.
Positions are returned as indexes, and ``None`` stands for "not found".
The copying functions write into a writable byte buffer such as a
``bytearray``.
"""

from __future__ import annotations

from itertools import islice, zip_longest

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strdup",
]


def _terminated(s):
    """The part of ``s`` before its first NUL, keeping the type of ``s``."""
    if isinstance(s, str):
        index = s.find("\0")
    else:
        if not isinstance(s, (bytes, bytearray)):
            s = memoryview(s).cast("B").tobytes()
        index = s.find(0)
    return s if index < 0 else s[:index]


def _char(s, ch):
    """Turn ``ch`` into an element that can be searched for in ``s``."""
    if isinstance(ch, (str, bytes, bytearray)) and len(ch) != 1:
        raise ValueError(f"expected a single character, got {len(ch)}")
    if isinstance(s, str):
        if isinstance(ch, str):
            return ch
        if isinstance(ch, int):
            return chr(ch)
        return chr(ch[0])
    if isinstance(ch, int):
        return ch & 0xFF
    if isinstance(ch, str):
        return ord(ch) & 0xFF
    return ch[0]


def _is_nul(c) -> bool:
    return c == 0 or c == "\0"


def _codes(s):
    return (ord(c) for c in s) if isinstance(s, str) else iter(s)


def _writable(buf) -> memoryview:
    view = memoryview(buf).cast("B")
    if view.readonly:
        raise TypeError("destination buffer is read-only")
    return view


def _check_size(view: memoryview, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(view):
        raise ValueError(f"size {size} exceeds buffer size {len(view)}")


def strlen(buf) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(buf))


def strlcpy(dst, src, size: int) -> int:
    """Copy ``src`` into ``dst``, writing at most ``size`` bytes including the NUL.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated.
    """
    view = _writable(dst)
    data = bytes(_terminated(src))
    _check_size(view, size)
    if size == 0:
        return len(data)
    count = min(len(data), size - 1)
    view[:count] = data[:count]
    view[count] = 0
    return len(data)


def strlcat(dst, src, size: int) -> int:
    """Append ``src`` to the string in ``dst``, for a total of at most ``size`` bytes.

    Returns the length the full result would have had. When ``size`` is not
    larger than the string already in ``dst``, nothing is written and
    ``len(src) + size`` is returned.
    """
    view = _writable(dst)
    dlen = strlen(view.tobytes())
    data = bytes(_terminated(src))
    _check_size(view, size)
    if size == 0:
        return len(data)
    if size <= dlen:
        return len(data) + size
    count = min(len(data), size - 1 - dlen)
    view[dlen : dlen + count] = data[:count]
    view[dlen + count] = 0
    return len(data) + dlen


def strchr(s, ch) -> int | None:
    """Index of the first ``ch`` in ``s``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    c = _char(s, ch)
    if _is_nul(c):
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s, ch) -> int | None:
    """Index of the last ``ch`` in ``s``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    c = _char(s, ch)
    if _is_nul(c):
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(s1, s2, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of character codes that
    differ, with the terminator counting as 0, or 0 if none differ.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    pairs = zip_longest(_codes(_terminated(s1)), _codes(_terminated(s2)), fillvalue=0)
    return next((a - b for a, b in islice(pairs, n) if a != b), 0)


def strnstr(haystack, needle, n: int) -> int | None:
    """Index of the first ``needle`` that lies wholly within ``n`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    target = _terminated(needle)
    if not target:
        return 0
    index = _terminated(haystack)[:n].find(target)
    return None if index < 0 else index


def strdup(s):
    """A new copy of ``s`` up to its first NUL, of the same type."""
    text = _terminated(s)
    if isinstance(text, str):
        return text
    return type(text)(text) if isinstance(text, (bytes, bytearray)) else bytes(text)