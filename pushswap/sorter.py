"""Choosing the operations that sort stack ``a``.

Up to five numbers are sorted with fixed patterns.  Larger inputs are
split by pushing every value at or above the running average onto ``b``,
then each element of ``b`` is moved back into place, always picking the
one that needs the fewest rotations.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .stack import Operation, Stacks, is_sorted, min_index


def average(values: Sequence[int]) -> int:
    """Return the mean of ``values``, truncated toward zero."""
    if not values:
        raise ValueError("average() of an empty sequence")
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


def find_target(stack: Sequence[int], value: int) -> int:
    """Return the position in ``stack`` where ``value`` belongs on top of.

    That is the smallest element greater than ``value``, or the smallest
    element of all when none is greater.
    """
    larger = [index for index, item in enumerate(stack) if item > value]
    if larger:
        return min(larger, key=stack.__getitem__)
    return min_index(stack)


def move_cost(size: int, index: int) -> int:
    """Return how many rotations bring position ``index`` to the top."""
    return index if index <= size // 2 else size - index


class Sorter:
    """Sorts a list of numbers by applying operations to a pair of stacks."""

    def __init__(self, values: Iterable[int]) -> None:
        self.stacks = Stacks(values)
        self.operations: list[Operation] = []

    def sort(self) -> list[Operation]:
        """Sort stack ``a`` and return the operations used, in order."""
        a = self.stacks.a
        if not is_sorted(a):
            if 1 < len(a) < 6:
                self._sort_small()
            else:
                self._sort_big()
        return list(self.operations)

    def _do(self, operation: Operation) -> None:
        self.stacks.apply(operation)
        self.operations.append(operation)

    def _sort_small(self) -> None:
        a = self.stacks.a
        if len(a) == 2:
            self._sort_two()
        if len(a) == 3:
            self._sort_three()
        if len(a) > 3:
            self._sort_five()

    def _sort_two(self) -> None:
        if not is_sorted(self.stacks.a):
            self._do(Operation.SA)

    def _sort_three(self) -> None:
        a = self.stacks.a
        first, second, third = a[:3]
        if (
            (first > second and first < third)
            or (second > first and second > third and first < third)
            or (first > second and second > third)
        ):
            self._do(Operation.SA)
        if not is_sorted(a) and a[0] > a[1]:
            self._do(Operation.RA)
        if not is_sorted(a):
            self._do(Operation.RRA)

    def _sort_five(self) -> None:
        a = self.stacks.a
        self._move_min_to_top()
        self._do(Operation.PB)
        self._move_min_to_top()
        self._do(Operation.PB)
        if len(a) == 2:
            self._sort_two()
        if len(a) == 3:
            self._sort_three()
        self._do(Operation.PA)
        self._do(Operation.PA)

    def _move_min_to_top(self) -> None:
        a = self.stacks.a
        smallest = min(a)
        index = a.index(smallest)
        operation = Operation.RA if index < len(a) // 2 else Operation.RRA
        while a[0] != smallest:
            self._do(operation)

    def _sort_big(self) -> None:
        a = self.stacks.a
        while len(a) > 3:
            if a[0] >= average(a):
                self._do(Operation.PB)
            else:
                self._do(Operation.RA)
        self._sort_three()
        self._insert_back()

    def _insert_back(self) -> None:
        b = self.stacks.b
        while b:
            target, cheapest = self._cheapest_move()
            self._move_both(target, cheapest)
            self._bring_to_top(self.stacks.a, target, Operation.RA, Operation.RRA)
            self._bring_to_top(b, cheapest, Operation.RB, Operation.RRB)
            self._do(Operation.PA)
        self._move_min_to_top()

    def _cheapest_move(self) -> tuple[int, int]:
        a, b = self.stacks.a, self.stacks.b
        best: tuple[int, int] | None = None
        best_cost = 0
        for index, value in enumerate(b):
            target = find_target(a, value)
            cost = move_cost(len(a), target) + move_cost(len(b), index)
            if best is None or cost < best_cost:
                best = (a[target], value)
                best_cost = cost
        assert best is not None
        return best

    def _move_both(self, target: int, cheapest: int) -> None:
        a, b = self.stacks.a, self.stacks.b
        half_a, half_b = len(a) // 2, len(b) // 2
        while True:
            t, c = a.index(target), b.index(cheapest)
            if t == 0 or c == 0:
                return
            if t <= half_a and c <= half_b:
                self._do(Operation.RR)
            elif t > half_a and c > half_b:
                self._do(Operation.RRR)
            else:
                return

    def _bring_to_top(
        self,
        stack: list[int],
        value: int,
        forward: Operation,
        backward: Operation,
    ) -> None:
        half = len(stack) // 2
        while (index := stack.index(value)) > 0:
            self._do(forward if index <= half else backward)


def sort_values(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` into ascending order."""
    return Sorter(values).sort()