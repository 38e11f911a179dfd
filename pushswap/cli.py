"""Command-line entry point: print the instructions that sort the arguments."""

import sys
from typing import List, Optional, Sequence

from .parser import is_sorted, parse_stack, simplify
from .stack import Stacks
from .turk import push_swap
from .validation import InputError, validate

PROGRAM = "push_swap"


def solve(argv: Sequence[str]) -> List[str]:
    """Return the instructions that sort the given arguments.

    ``argv`` holds the arguments without the program name. Raises InputError
    when they are missing or invalid.
    """
    args = validate([PROGRAM, *argv])
    values = parse_stack(args)
    if is_sorted(values):
        return []
    instructions: List[str] = []
    stacks = Stacks(simplify(values), (), instructions.append)
    push_swap(stacks, len(values))
    return instructions


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        instructions = solve(argv)
    except InputError as error:
        if error.reported:
            sys.stderr.write("Error\n")
        return 1
    for instruction in instructions:
        sys.stdout.write(instruction + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())