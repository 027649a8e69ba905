"""Classification and case conversion of single ASCII characters.

Every function takes a character code (an ``int``) or a one-character
``str``. Only the ASCII ranges count: anything outside them is never
classified as a letter or digit and is returned unchanged by the case
converters.
"""

from __future__ import annotations

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the character code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: int | str) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for the printable ASCII codes 32 (space) through 126 (tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; return anything else unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; return anything else unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code