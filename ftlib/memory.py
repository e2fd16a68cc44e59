"""Byte-buffer operations: fill, copy, search and compare."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: ReadableBuffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def memset(buf: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (low 8 bits) and return it."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Buffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def memcpy(dest: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_length(length, dest, src)
    dest[:length] = bytes(src[:length])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` into ``dest``, correct even when they overlap."""
    _check_length(length, dest, src)
    snapshot = bytes(src[:length])
    dest[:length] = snapshot
    return dest


def memchr(data: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes; one byte when either is zero."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    return bytearray(count * size)