"""Building new strings from old ones: splitting, joining, trimming and mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

from pushswap.ft.strings import strdup


def _separator(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def split(text: str, sep: str) -> List[str]:
    """The non-empty runs of text between occurrences of sep, in order."""
    sep = _separator(sep)
    return [word for word in strdup(text).split(sep) if word]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """first followed by second; a missing side is left out, both missing gives None."""
    if first is None and second is None:
        return None
    if first is None:
        return strdup(second)
    if second is None:
        return strdup(first)
    return strdup(first) + strdup(second)


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """text without the characters of charset at either end; None if either is None."""
    if text is None or charset is None:
        return None
    text = strdup(text)
    charset = strdup(charset)
    if not charset:
        return text
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """At most length characters of text from index start; empty past the end."""
    if text is None:
        return None
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = strdup(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strmapi(text: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """A new string made of func(index, char) for every character of text."""
    if text is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(strdup(text)))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call func(index, char) on every character of chars, in place.

    Where func returns a character, it replaces the one at that index;
    where it returns None the character is kept.
    """
    if chars is None or func is None:
        return
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement