"""Turning validated arguments into stack values."""

from itertools import pairwise
from typing import List, Sequence

from .validation import c_atoi


def parse_stack(args: Sequence[str]) -> List[int]:
    """Read every argument as a 32-bit integer, top of the stack first."""
    return [c_atoi(arg) for arg in args]


def is_sorted(values: Sequence[int]) -> bool:
    """Tell whether the values never decrease from top to bottom."""
    return all(upper <= lower for upper, lower in pairwise(values))


def simplify(values: Sequence[int]) -> List[int]:
    """Replace every value by its rank among the original values.

    Ranks are written in place in ascending order of the original values, so a
    rank already written can be caught again by a later original value equal
    to it.
    """
    ranked = list(values)
    for rank, original in enumerate(sorted(values)):
        ranked = [rank if value == original else value for value in ranked]
    return ranked