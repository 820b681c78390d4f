"""The two stacks of the puzzle and the operations that act on them.

A stack is a list whose top is at index 0.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, Sequence
from enum import Enum
from itertools import pairwise


class Operation(str, Enum):
    """The instructions understood by the puzzle, named as they are printed."""

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

    def __str__(self) -> str:
        return self.value


def swap(stack: MutableSequence[int]) -> None:
    """Exchange the two top elements; fewer than two elements is a no-op."""
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def push(destination: MutableSequence[int], source: MutableSequence[int]) -> None:
    """Move the top of ``source`` onto ``destination``; an empty source is a no-op."""
    if source:
        destination.insert(0, source.pop(0))


def rotate(stack: MutableSequence[int]) -> None:
    """Move the top element to the bottom."""
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def reverse_rotate(stack: MutableSequence[int]) -> None:
    """Move the bottom element to the top."""
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when no element is greater than the one after it."""
    return all(first <= second for first, second in pairwise(values))


def min_index(values: Sequence[int]) -> int:
    """Return the position of the first smallest element."""
    if not values:
        raise ValueError("min_index() of an empty sequence")
    return min(range(len(values)), key=values.__getitem__)


def max_index(values: Sequence[int]) -> int:
    """Return the position of the first largest element."""
    if not values:
        raise ValueError("max_index() of an empty sequence")
    return max(range(len(values)), key=values.__getitem__)


class Stacks:
    """The pair of stacks ``a`` and ``b`` that operations are applied to."""

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: list[int] = list(a)
        self.b: list[int] = list(b)

    def apply(self, operation: Operation | str) -> None:
        """Carry out one operation, given as an Operation or its name."""
        _ACTIONS[Operation(operation)](self)

    def is_solved(self) -> bool:
        """Return True when ``a`` is in ascending order and ``b`` is empty."""
        return is_sorted(self.a) and not self.b

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"


def _both(action: Callable[[MutableSequence[int]], None]) -> Callable[[Stacks], None]:
    def run(stacks: Stacks) -> None:
        action(stacks.a)
        action(stacks.b)

    return run


_ACTIONS: dict[Operation, Callable[[Stacks], None]] = {
    Operation.SA: lambda s: swap(s.a),
    Operation.SB: lambda s: swap(s.b),
    Operation.SS: _both(swap),
    Operation.PA: lambda s: push(s.a, s.b),
    Operation.PB: lambda s: push(s.b, s.a),
    Operation.RA: lambda s: rotate(s.a),
    Operation.RB: lambda s: rotate(s.b),
    Operation.RR: _both(rotate),
    Operation.RRA: lambda s: reverse_rotate(s.a),
    Operation.RRB: lambda s: reverse_rotate(s.b),
    Operation.RRR: _both(reverse_rotate),
}