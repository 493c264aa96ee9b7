"""Integer parsing and formatting with the rules of the C runtime helpers."""

from __future__ import annotations

import math

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse_leading(text: str) -> int:
    """Value of the number at the start of text, ignoring what follows it.

    Leading whitespace (tab, newline, vertical tab, form feed, carriage
    return and space) is skipped, then one optional sign, then as many
    ASCII digits as there are. Anything else ends the number.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    value = 0
    for char in text[position:]:
        if char not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(char)
    return sign * value


def atoi(text: str) -> int:
    """Parse the leading integer of text as a 32-bit signed int.

    Values that do not fit wrap around the way a 32-bit int does.
    Text with no digits gives 0.
    """
    return _wrap(_parse_leading(text), 32)


def atol(text: str) -> int:
    """Parse the leading integer of text as a 64-bit signed long.

    Values that do not fit wrap around the way a 64-bit long does.
    Text with no digits gives 0.
    """
    return _wrap(_parse_leading(text), 64)


def itoa(n: int) -> str:
    """Decimal text of n, with a leading minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def integer_sqrt(n: int) -> int:
    """Largest i with i * i <= n; -1 when n is negative."""
    if n < 0:
        return -1
    return math.isqrt(n)