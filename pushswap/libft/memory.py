"""Byte-buffer helpers: fill, allocate, search, compare and copy."""

from __future__ import annotations

import sys
from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError(f"negative byte count: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buffer)} bytes")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count`` elements of ``size`` bytes.

    Raises ValueError on a negative argument and MemoryError when the total
    size cannot be represented.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise MemoryError(f"cannot allocate {count} * {size} bytes")
    return bytearray(total)


def memchr(buffer: Bytes, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` among the first ``n``.

    ``c`` is reduced to a byte as an unsigned char would be. Returns None when
    the byte does not occur.
    """
    _check_count(n, buffer)
    offset = bytes(buffer[:n]).find(bytes([c & 0xFF]))
    return None if offset < 0 else offset


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, first, second)
    for left, right in zip(first[:n], second[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the copy behaves as if through a temporary.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"negative byte count: {n}")
    if max(dest, src) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` reduced to a byte."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer