"""Byte-buffer helpers: fill, copy, search and compare raw bytes.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). Buffers that are only read may be any bytes-like object.
A requested length larger than a buffer raises :class:`ValueError`.
"""

from __future__ import annotations

from typing import Optional, Union

ByteSource = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

_SIZE_LIMIT = 2**64


def _check_length(n: int, *buffers: ByteSource) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of size {len(buffer)}")


def memset(buffer: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dest: WritableBuffer, src: ByteSource, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``; return ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: WritableBuffer, src: ByteSource, n: int) -> WritableBuffer:
    """Copy ``n`` bytes like :func:`memcpy`, safe when the two regions overlap."""
    _check_length(n, dest, src)
    staged = bytes(src[:n])
    dest[:n] = staged
    return dest


def memchr(data: ByteSource, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes.

    ``value`` is taken modulo 256. Returns ``None`` when it does not occur.
    """
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ByteSource, second: ByteSource, n: int) -> int:
    """Compare ``n`` bytes; return the difference at the first mismatch, or 0."""
    _check_length(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises :class:`ValueError` for negative arguments and
    :class:`OverflowError` when the total size does not fit in 64 bits.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total >= _SIZE_LIMIT:
        raise OverflowError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(total)