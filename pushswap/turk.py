"""Cost-driven sorting: move values to b in order, then bring them back."""

from typing import Optional, Sequence, Tuple

from .stack import Stacks

Prices = Tuple[int, int, int, int]


def find_pos(values: Sequence[int], value: int) -> int:
    """Return the depth of the first occurrence of ``value``; ValueError if absent."""
    return values.index(value)


def _is_ascending(values: Sequence[int], count: int) -> bool:
    """Compare ``count - 1`` neighbouring pairs, wrapping around the stack."""
    size = len(values)
    return all(
        values[index % size] <= values[(index + 1) % size]
        for index in range(count - 1)
    )


def find_target(b: Sequence[int], value: int) -> Optional[int]:
    """Return the value in b that ``value`` should sit above.

    That is the largest value not above ``value``, or the maximum of b when
    there is none. An empty b has no target.
    """
    if not b:
        return None
    best = None
    for candidate in b:
        if candidate <= value and (best is None or candidate > best):
            best = candidate
    return max(b) if best is None else best


def move_prices(stacks: Stacks, value: int, target: int) -> Prices:
    """Cost of bringing ``value`` to the top of a and ``target`` to the top of b.

    The four costs are, in order: rotating both up, a up and b down,
    a down and b up, and both down.
    """
    pos_a = find_pos(stacks.a, value)
    pos_b = find_pos(stacks.b, target)
    down_a = len(stacks.a) - pos_a
    down_b = len(stacks.b) - pos_b
    return (
        max(pos_a, pos_b),
        pos_a + down_b,
        down_a + pos_b,
        max(down_a, down_b),
    )


def cheapest(stacks: Stacks) -> Tuple[int, int]:
    """Return the first value of a, with its target, that is cheapest to move."""
    best = None
    best_price = 0
    for value in stacks.a:
        target = find_target(stacks.b, value)
        price = min(move_prices(stacks, value, target))
        if best is None or price < best_price:
            best, best_price = (value, target), price
    if best is None:
        raise ValueError("stack a is empty")
    return best


def _rotate_ra_rb(stacks: Stacks, value: int, target: int) -> None:
    while stacks.a[0] != value and stacks.b[0] != target:
        stacks.rr()
    while stacks.a[0] != value:
        stacks.ra()
    while stacks.b[0] != target:
        stacks.rb()


def _rotate_ra_rrb(stacks: Stacks, value: int, target: int) -> None:
    while stacks.a[0] != value:
        stacks.ra()
    while stacks.b[0] != target:
        stacks.rrb()


def _rotate_rra_rb(stacks: Stacks, value: int, target: int) -> None:
    while stacks.a[0] != value:
        stacks.rra()
    while stacks.b[0] != target:
        stacks.rb()


def _rotate_rra_rrb(stacks: Stacks, value: int, target: int) -> None:
    while stacks.a[0] != value and stacks.b[0] != target:
        stacks.rrr()
    while stacks.a[0] != value:
        stacks.rra()
    while stacks.b[0] != target:
        stacks.rrb()


_STRATEGIES = (_rotate_ra_rb, _rotate_ra_rrb, _rotate_rra_rb, _rotate_rra_rrb)


def rotate_best(stacks: Stacks, value: int, target: int) -> None:
    """Bring ``value`` and ``target`` to the tops by the first cheapest strategy."""
    prices = move_prices(stacks, value, target)
    _STRATEGIES[prices.index(min(prices))](stacks, value, target)


def sort_three(stacks: Stacks) -> None:
    """Order the (at most three) values left on a."""
    a = stacks.a
    low, high = min(a), max(a)
    if a[0] == low:
        stacks.rra()
        stacks.sa()
    elif a[0] == high:
        stacks.ra()
        if not _is_ascending(stacks.a, 3):
            stacks.sa()
    elif find_pos(a, high) == 1:
        stacks.rra()
    else:
        stacks.sa()


def push_all_b(stacks: Stacks) -> None:
    """Push two values to b, then the cheapest value each turn until three remain."""
    stacks.pb()
    stacks.pb()
    while len(stacks.a) > 3:
        value, target = cheapest(stacks)
        rotate_best(stacks, value, target)
        stacks.pb()


def push_back_a(stacks: Stacks) -> None:
    """Bring the maximum of b to its top, then push every value back to a."""
    if not stacks.b:
        return
    highest = max(stacks.b)
    while stacks.b[0] != highest:
        stacks.rrb()
    while stacks.b:
        stacks.pa()


def push_swap(stacks: Stacks, size: int) -> None:
    """Sort stack a holding ``size`` values."""
    if size <= 2:
        if size == 2 and stacks.a[0] > stacks.a[1]:
            stacks.sa()
        return
    if size == 3:
        sort_three(stacks)
        return
    push_all_b(stacks)
    sort_three(stacks)
    push_back_a(stacks)