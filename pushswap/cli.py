"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.formatting import printf
from pushswap.parsing import ParseError, parse_arguments
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers, print one operation per line and return the exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(values):
        printf("%s\n", operation, file=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())