"""Command that checks whether a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .stack import Operation, Stacks

EXIT_FAILURE = 1


def parse_instruction(line: str) -> Operation:
    """Turn one input line, newline included, into an Operation.

    A line that is not exactly an operation name followed by a newline
    raises InputError.
    """
    if not line.endswith("\n"):
        raise InputError()
    try:
        return Operation(line[:-1])
    except ValueError:
        raise InputError() from None


def run_instructions(stacks: Stacks, lines: Iterable[str]) -> None:
    """Apply every instruction line to ``stacks`` in order."""
    for line in lines:
        stacks.apply(parse_instruction(line))


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Return True when the instruction lines leave ``values`` sorted in ``a`` and ``b`` empty."""
    stacks = Stacks(values)
    run_instructions(stacks, lines)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``.

    The numbers must be given as two or more arguments; a single argument
    or any invalid input or instruction prints ``Error`` on standard error.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        if len(args) == 1:
            raise InputError()
        values = parse_arguments(args)
        solved = check(values, sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return EXIT_FAILURE
    sys.stdout.write("OK\n" if solved else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())