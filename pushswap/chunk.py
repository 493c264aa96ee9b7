"""Chunk sort for stacks of more than five numbers."""

from __future__ import annotations

from typing import Dict, Iterable, List

from pushswap.ft.conversions import integer_sqrt
from pushswap.stacks import Stacks


def rank_values(values: Iterable[int]) -> List[int]:
    """Replace each value by its index in the sorted order.

    Equal values share the index of their first place in that order.
    """
    values = list(values)
    first_index: Dict[int, int] = {}
    for index, value in enumerate(sorted(values)):
        first_index.setdefault(value, index)
    return [first_index[value] for value in values]


def _bring_max_back(stacks: Stacks) -> None:
    largest = max(stacks.b)
    position = list(stacks.b).index(largest)
    rotate = stacks.rb if position <= len(stacks.b) // 2 else stacks.rrb
    while stacks.b[0] != largest:
        rotate()
    stacks.pa()


def chunk_sort(stacks: Stacks) -> None:
    """Sort stack a through b in chunks of ranks.

    The values of a are first replaced by their ranks. Ranks are pushed to
    b in windows as wide as the integer square root of the stack size, the
    smallest ones rotated to the bottom of b; then the largest rank left in
    b is brought back to a each time until b is empty.
    """
    chunk = integer_sqrt(len(stacks.a))
    ranks = rank_values(stacks.a)
    stacks.a.clear()
    stacks.a.extend(ranks)
    pushed = 0
    while stacks.a:
        top = stacks.a[0]
        if top <= pushed:
            stacks.pb()
            stacks.rb()
            pushed += 1
        elif top <= pushed + chunk:
            stacks.pb()
            pushed += 1
        else:
            stacks.ra()
    while stacks.b:
        _bring_max_back(stacks)