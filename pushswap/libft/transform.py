"""String building: join, bounded concatenation and copy, mapping, trimming."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings, a missing one counting as empty.

    Returns None only when both are missing.
    """
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full concatenation would
    have. When ``size`` does not exceed the length of ``dst``, ``dst`` is
    left unchanged and the length reported is ``size`` plus that of ``src``.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copy, truncated to leave room for the terminator, and the
    length of ``src``. A size of zero copies nothing.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each character of ``text`` in place.

    A character returned by ``func`` replaces the one it was given; None
    leaves it unchanged.
    """
    for index, char in enumerate(list(text)):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]