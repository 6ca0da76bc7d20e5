"""Byte-buffer helpers over bytearray and bytes-like objects."""

from __future__ import annotations


def _check_span(size: int, length: int) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if length > size:
        raise ValueError(f"length {length} exceeds buffer of {size} bytes")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (low byte only)."""
    _check_span(len(buf), length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy the first ``length`` bytes of ``src`` into ``dst``."""
    _check_span(len(dst), length)
    _check_span(len(src), length)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes from offset ``src`` to offset ``dst`` inside ``buf``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_span(len(buf) - src, length)
    _check_span(len(buf) - dst, length)
    buf[dst:dst + length] = bytes(buf[src:src + length])
    return buf


def memchr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first
    ``length`` bytes of ``data``, or ``None`` if there is none."""
    _check_span(len(data), length)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, length: int) -> int:
    """Compare the first ``length`` bytes; return the difference of the first
    differing pair, or 0 when they are equal."""
    _check_span(len(a), length)
    _check_span(len(b), length)
    for left, right in zip(a[:length], b[:length]):
        if left != right:
            return left - right
    return 0