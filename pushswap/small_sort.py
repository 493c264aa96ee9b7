"""Hand-tuned sorts for stacks of three, four and five numbers."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable

from pushswap.stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True when every value is strictly smaller than the one after it."""
    return all(first < second for first, second in pairwise(values))


def _position(stack: Iterable[int], value: int) -> int:
    """Index of value in stack, counted from the top; -1 when absent."""
    for index, item in enumerate(stack):
        if item == value:
            return index
    return -1


def move_to_top(stacks: Stacks, position: int, stack_id: str) -> None:
    """Bring the element at position to the top of stack a or b.

    The shorter way round is taken: forward rotations when the element
    lies in the upper half, reverse rotations otherwise.
    """
    if stack_id == "a":
        stack, rotate, reverse = stacks.a, stacks.ra, stacks.rra
    elif stack_id == "b":
        stack, rotate, reverse = stacks.b, stacks.rb, stacks.rrb
    else:
        raise ValueError(f"stack id must be 'a' or 'b', got {stack_id!r}")
    size = len(stack)
    if position <= size // 2:
        for _ in range(position):
            rotate()
    else:
        for _ in range(size - position):
            reverse()


def sort_3(stacks: Stacks) -> None:
    """Sort the three elements of stack a with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("sort_3 needs at least three elements in stack a")
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _push_min_to_b(stacks: Stacks) -> None:
    smallest = min(stacks.a)
    move_to_top(stacks, _position(stacks.a, smallest), "a")
    stacks.pb()


def sort_4(stacks: Stacks) -> None:
    """Sort four elements: park the minimum on b, sort three, bring it back."""
    _push_min_to_b(stacks)
    sort_3(stacks)
    stacks.pa()


def sort_5(stacks: Stacks) -> None:
    """Sort five elements: park the two smallest on b, sort three, bring them back."""
    _push_min_to_b(stacks)
    _push_min_to_b(stacks)
    sort_3(stacks)
    if stacks.b[0] < stacks.b[1]:
        stacks.sb()
    stacks.pa()
    stacks.pa()