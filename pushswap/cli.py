"""Command that prints the operations sorting the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_arguments, parse_string
from .sorter import sort_values

EXIT_FAILURE = 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print, one per line, the operations that sort the numbers in ``argv``.

    A single argument is read as a space-separated list of numbers;
    several arguments give one number each.  Invalid input prints
    ``Error`` on standard error and returns a failure status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_string(args[0]) if len(args) == 1 else parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return EXIT_FAILURE
    operations = sort_values(values)
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())