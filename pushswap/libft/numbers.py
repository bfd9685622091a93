"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_MIN = -2147483648
_INT_MAX = 2147483647


def _wrap32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace and one sign are skipped, reading stops at the first
    non-digit, and text without digits gives 0. The result wraps around like
    a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
    return _wrap32(sign * result)


def itoa(n: int) -> str:
    """Write a 32-bit signed integer in decimal.

    Raises OverflowError when ``n`` does not fit in 32 bits.
    """
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)