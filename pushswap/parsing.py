"""Reading the list of integers to sort from command-line words."""

from __future__ import annotations

from typing import Sequence

_INT_MIN = -2147483648
_INT_MAX = 2147483647
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ParseError(ValueError):
    """Raised when the input is not a valid list of distinct integers."""


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Read a leading 32-bit integer from ``text``.

    Leading whitespace and a single minus sign are accepted; reading stops at
    the first non-digit. Raises ParseError without digits or out of range.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if char not in _DIGITS:
            break
        digits += char
    if not digits:
        raise ParseError(f"not a number: {text!r}")
    value = sign * int(digits)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ParseError(f"out of range: {text!r}")
    return value


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn program arguments into the list of integers to sort.

    A single argument is split on spaces; several arguments are read one
    number each. Raises ParseError on empty input, bad numbers or duplicates.
    """
    if not args or (len(args) == 1 and not args[0]):
        raise ParseError("no numbers given")
    words = split_words(args[0], " ") if len(args) == 1 else list(args)
    numbers = [parse_int(word) for word in words]
    if len(set(numbers)) != len(numbers):
        raise ParseError("duplicate numbers")
    return numbers