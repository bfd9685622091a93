"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .algorithm import sort_numbers
from .parsing import ParseError, parse_arguments


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the integers given as arguments and print one operation per line.

    Invalid input prints "Error" to standard error.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 0
    for operation in sort_numbers(numbers):
        sys.stdout.write(f"{operation.value}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())