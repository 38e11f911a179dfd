"""Binary radix sort over the two stacks."""

from .stack import Stacks


def max_bits(size: int) -> int:
    """Number of bits needed for the largest rank, ``size - 1``."""
    return max(size - 1, 0).bit_length()


def radix_sort(stacks: Stacks, size: int) -> None:
    """Sort ranks ``0 .. size - 1`` on a, one bit at a time from the lowest."""
    for bit in range(max_bits(size)):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()