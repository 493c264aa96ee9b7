"""String search, comparison and bounded copying.

Strings end at their first NUL character, as C strings do. Functions that
locate a character return its index instead of a pointer, and None where
nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Tuple, Union

Char = Union[str, int]


def _cstr(text: str) -> str:
    """The part of text before its first NUL character."""
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _char(c: Char) -> str:
    """A one-character string; integers are cut to their low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(text))


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first c in text; the terminator's index when c is NUL."""
    text = _cstr(text)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last c in text; the terminator's index when c is NUL."""
    text = _cstr(text)
    target = _char(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """A copy of text up to its first NUL."""
    return _cstr(text)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; the difference of the first unequal pair, or 0."""
    _check_size(n)
    pairs = zip_longest(_cstr(first), _cstr(second), fillvalue="\0")
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle within the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    _check_size(length)
    haystack = _cstr(haystack)
    needle = _cstr(needle)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters.

    Returns the text that fits, at most size - 1 characters, and the full
    length of src, which tells whether the copy was cut short.
    """
    _check_size(size)
    src = _cstr(src)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst inside a buffer of size characters.

    Returns the resulting text and the length it tried to create: the
    length of dst (counted no further than size) plus the length of src.
    When dst already fills the buffer it comes back unchanged.
    """
    _check_size(size)
    dst = _cstr(dst)
    src = _cstr(src)
    dst_len = min(len(dst), size)
    if dst_len < size:
        room = size - dst_len - 1
        result = dst[:dst_len] + src[:room]
    else:
        result = dst
    return result, dst_len + len(src)