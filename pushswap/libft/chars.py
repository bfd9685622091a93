"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alnum(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_ascii(c: CharLike) -> bool:
    """Tell whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_digit(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_print(c: CharLike) -> bool:
    """Tell whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is.

    A character code gives back a code, a string gives back a string.
    """
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is.

    A character code gives back a code, a string gives back a string.
    """
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code