"""Byte-buffer helpers working on bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_length(name: str, data: Bytes, n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, {n} requested")


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of c."""
    _check_length("buffer", buffer, n)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest."""
    _check_length("dest", dest, n)
    _check_length("src", src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move n bytes inside buffer from src_offset to dest_offset; regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("move runs past the end of the buffer")
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: Bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of c in data[:n], or None."""
    _check_length("data", data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Difference of the first unequal bytes among the first n, or 0."""
    _check_length("first", first, n)
    _check_length("second", second, n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)