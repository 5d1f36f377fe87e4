"""Byte-buffer operations on bytes, bytearray and memoryview objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_SIZE_MAX = (1 << 64) - 1


def _check_span(data, start: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name}: length must not be negative")
    if start < 0 or start + n > len(data):
        raise ValueError(f"{name}: range {start}..{start + n} exceeds buffer of {len(data)} bytes")


def memset(buffer: Buffer, c: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buffer`` with ``c & 0xFF``."""
    _check_span(buffer, 0, length, "memset")
    buffer[:length] = bytes([c & 0xFF]) * length
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_span(src, 0, n, "memcpy")
    _check_span(dst, 0, n, "memcpy")
    if dst is not src:
        dst[:n] = src[:n]
    return dst


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    The regions may overlap; the result is as if the source were copied
    to a temporary first.
    """
    _check_span(buffer, src, n, "memmove")
    _check_span(buffer, dest, n, "memmove")
    if dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c & 0xFF`` among the first ``n``, or None."""
    _check_span(data, 0, n, "memchr")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first unequal bytes among the first ``n``, or 0."""
    _check_span(a, 0, n, "memcmp")
    _check_span(b, 0, n, "memcmp")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the product does not fit a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    total = count * size
    if total > _SIZE_MAX:
        raise OverflowError("calloc: requested size overflows")
    return bytearray(total)