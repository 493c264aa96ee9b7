"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Iterable, List, Optional, TextIO, Union


class Operation(str, Enum):
    """The instructions a solution is made of."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


def _swap(stack: Deque[int]) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        stack.insert(1, first)


def _push(src: Deque[int], dest: Deque[int]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: Deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: Deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks a and b, tops on the left, recording every operation applied.

    Each operation is appended to ``operations`` and, when an output stream
    is given, written to it on a line of its own. An operation that cannot
    move anything is still recorded.
    """

    def __init__(self, values: Iterable[int] = (), output: Optional[TextIO] = None) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.operations: List[Operation] = []
        self._output = output

    def _emit(self, operation: Operation) -> None:
        self.operations.append(operation)
        if self._output is not None:
            self._output.write(operation.value + "\n")

    def sa(self) -> None:
        """Swap the top two elements of a."""
        _swap(self.a)
        self._emit(Operation.SA)

    def sb(self) -> None:
        """Swap the top two elements of b."""
        _swap(self.b)
        self._emit(Operation.SB)

    def ss(self) -> None:
        """sa and sb at once."""
        _swap(self.a)
        _swap(self.b)
        self._emit(Operation.SS)

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.b, self.a)
        self._emit(Operation.PA)

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.a, self.b)
        self._emit(Operation.PB)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        _rotate(self.a)
        self._emit(Operation.RA)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        _rotate(self.b)
        self._emit(Operation.RB)

    def rr(self) -> None:
        """ra and rb at once."""
        _rotate(self.a)
        _rotate(self.b)
        self._emit(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        _reverse_rotate(self.a)
        self._emit(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        _reverse_rotate(self.b)
        self._emit(Operation.RRB)

    def rrr(self) -> None:
        """rra and rrb at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit(Operation.RRR)

    def apply(self, operation: Union[Operation, str]) -> None:
        """Apply an operation given as an Operation or by its name."""
        operation = Operation(operation)
        actions = {
            Operation.SA: self.sa,
            Operation.SB: self.sb,
            Operation.SS: self.ss,
            Operation.PA: self.pa,
            Operation.PB: self.pb,
            Operation.RA: self.ra,
            Operation.RB: self.rb,
            Operation.RR: self.rr,
            Operation.RRA: self.rra,
            Operation.RRB: self.rrb,
            Operation.RRR: self.rrr,
        }
        actions[operation]()

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"