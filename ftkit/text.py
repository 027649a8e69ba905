"""Building new strings out of existing ones.

Strings may be ``str`` or bytes-like objects and, as elsewhere in this
package, end at their first NUL character. Results keep the type of the
input where the input type allows it.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from ftkit.cstring import strdup

__all__ = ["substr", "strjoin", "strtrim", "split", "strmapi", "striteri"]


def _separator(s, sep):
    """Turn ``sep`` into a one-element separator matching the type of ``s``."""
    if isinstance(sep, (str, bytes, bytearray)) and len(sep) != 1:
        raise ValueError(f"expected a single character separator, got {len(sep)}")
    if isinstance(s, str):
        if isinstance(sep, str):
            return sep
        if isinstance(sep, int):
            return chr(sep)
        return chr(sep[0])
    if isinstance(sep, int):
        return bytes([sep & 0xFF])
    if isinstance(sep, str):
        return bytes([ord(sep) & 0xFF])
    return bytes(sep)


def _is_nul(c) -> bool:
    return c == 0 or c == "\0"


def substr(s, start: int, length: int):
    """At most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string; ``None`` gives ``None``.
    """
    if s is None:
        return None
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = strdup(s)
    return text[start : start + length]


def strjoin(s1, s2):
    """The concatenation of two strings, each taken up to its first NUL."""
    return strdup(s1) + strdup(s2)


def strtrim(s, charset):
    """``s`` with every character in ``charset`` removed from both ends.

    Returns ``None`` if either argument is ``None``.
    """
    if s is None or charset is None:
        return None
    return strdup(s).strip(strdup(charset))


def split(s, sep) -> list | None:
    """The non-empty runs of ``s`` between occurrences of the character ``sep``.

    Returns ``None`` if ``s`` is ``None``.
    """
    if s is None:
        return None
    text = strdup(s)
    return [word for word in text.split(_separator(text, sep)) if word]


def strmapi(s, f: Callable):
    """A new string made of ``f(index, char)`` for each character of ``s``.

    For ``str`` input ``f`` receives and returns one-character strings; for
    bytes-like input it receives and returns byte values. ``None`` gives
    ``None``.
    """
    if s is None:
        return None
    text = strdup(s)
    mapped = (f(index, c) for index, c in enumerate(text))
    if isinstance(text, str):
        return "".join(mapped)
    return type(text)(mapped)


def striteri(s: MutableSequence, f: Callable) -> None:
    """Call ``f(index, char)`` for each character of ``s`` before its first NUL.

    ``s`` must be mutable, such as a ``bytearray`` or a list of characters.
    Where ``f`` returns something other than ``None``, that value replaces
    the character in place.
    """
    if not isinstance(s, MutableSequence):
        raise TypeError(f"expected a mutable sequence, got {type(s).__name__}")
    for index, c in enumerate(s):
        if _is_nul(c):
            break
        result = f(index, c)
        if result is not None:
            s[index] = result