"""Byte-buffer operations: fill, copy, search and compare.

Buffers are mutable byte sequences such as :class:`bytearray` or a writable
:class:`memoryview`. Lengths that reach past the end of a buffer raise
:class:`ValueError` instead of touching memory that is not there.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(name: str, buffer: ReadableBuffer, length: int) -> None:
    if length < 0:
        raise ValueError(f"{name}: length must not be negative, got {length}")
    if length > len(buffer):
        raise ValueError(
            f"{name}: length {length} exceeds buffer of {len(buffer)} bytes"
        )


def memset(buffer: Buffer, value: int, length: int) -> Buffer:
    """Set the first ``length`` bytes of ``buffer`` to ``value`` (taken mod 256)."""
    _check_length("memset", buffer, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Buffer, length: int) -> Buffer:
    """Zero the first ``length`` bytes of ``buffer``."""
    return memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"calloc: count and size must not be negative ({count}, {size})")
    return bytearray(count * size)


def memcpy(dst: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length("memcpy", dst, length)
    _check_length("memcpy", src, length)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(dst: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to ``dst``; the two may overlap."""
    _check_length("memmove", dst, length)
    _check_length("memmove", src, length)
    # Taking a snapshot of the source first makes overlapping views safe.
    dst[:length] = bytes(src[:length])
    return dst


def memchr(data: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Return the index of the first ``value`` byte within ``length`` bytes, or None."""
    _check_length("memchr", data, length)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, length: int) -> int:
    """Compare ``length`` bytes as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_length("memcmp", a, length)
    _check_length("memcmp", b, length)
    return next(
        (x - y for x, y in zip(bytes(a[:length]), bytes(b[:length])) if x != y),
        0,
    )