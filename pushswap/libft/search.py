"""String length, copy, comparison and search."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character gives the index just past the end.
    """
    char = _char(c)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character gives the index just past the end.
    """
    char = _char(c)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of characters that differ, the
    end of a string counting as a NUL character, or 0.
    """
    if n < 0:
        raise ValueError(f"negative length: {n}")
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for left, right in islice(pairs, n):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return where ``little`` first occurs wholly within ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when not found.
    """
    if not little:
        return 0
    if length < 0:
        raise ValueError(f"negative length: {length}")
    index = big[:length].find(little)
    return None if index < 0 else index