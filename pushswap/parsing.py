"""Turning command-line arguments into the numbers for stack a."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.ft.chars import is_digit
from pushswap.ft.conversions import atol
from pushswap.ft.strbuild import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """The arguments do not describe a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_arguments(args: Iterable[str]) -> List[str]:
    """Split every argument on spaces and join the words into one list.

    An argument that holds no word at all is an error.
    """
    tokens: List[str] = []
    for arg in args:
        words = split(arg, " ")
        if not words:
            raise ParseError()
        tokens.extend(words)
    return tokens


def is_integer(text: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    digits = text[1:] if text[:1] in ("-", "+") else text
    return bool(digits) and all(is_digit(char) for char in digits)


def parse_numbers(tokens: Iterable[str]) -> List[int]:
    """Convert tokens to distinct integers that fit in a 32-bit int."""
    numbers: List[int] = []
    seen = set()
    for token in tokens:
        if not is_integer(token):
            raise ParseError()
        number = atol(token)
        if not INT_MIN <= number <= INT_MAX:
            raise ParseError()
        if number in seen:
            raise ParseError()
        seen.add(number)
        numbers.append(number)
    return numbers


def parse_arguments(args: Iterable[str]) -> List[int]:
    """The numbers that the command-line arguments describe, in order."""
    return parse_numbers(split_arguments(args))