"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from pushswap.chunk import chunk_sort
from pushswap.parsing import ParseError, parse_arguments
from pushswap.small_sort import is_sorted, sort_3, sort_4, sort_5
from pushswap.stacks import Operation, Stacks


def sort_dispatch(stacks: Stacks) -> None:
    """Sort stack a with the strategy that suits its size."""
    size = len(stacks.a)
    if is_sorted(stacks.a):
        return
    if size == 2 and stacks.a[0] > stacks.a[1]:
        stacks.sa()
    elif size == 3:
        sort_3(stacks)
    elif size == 4:
        sort_4(stacks)
    elif size == 5:
        sort_5(stacks)
    elif size > 5:
        chunk_sort(stacks)


def solve(values: Iterable[int]) -> List[Operation]:
    """The operations that sort values, in the order they are applied."""
    stacks = Stacks(values)
    sort_dispatch(stacks)
    return stacks.operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read numbers from the arguments and print one operation per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    sort_dispatch(Stacks(values, output=sys.stdout))
    return 0


if __name__ == "__main__":
    sys.exit(main())