"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

import re

__all__ = ["atoi", "itoa"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile("[\t\n\x0b\x0c\r ]*([+-]?)([0-9]*)")


def _wrap(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(s) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits gives 0. The result wraps to
    the 32-bit signed range.
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("latin-1")
    match = _NUMBER.match(s)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return _wrap(-value if sign == "-" else value)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)