"""The two stacks and the instruction set that moves values between them."""

from collections import deque
from typing import Callable, Iterable, Optional

Emit = Callable[[str], None]


def _discard(_instruction: str) -> None:
    """Drop an instruction name."""


def _swap(stack: deque) -> bool:
    """Exchange the two top values; return whether the move is announced.

    A stack of exactly two values is swapped without being announced.
    """
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return len(stack) > 2


def _push(source: deque, target: deque) -> bool:
    """Move the top of ``source`` onto ``target``; return whether anything moved."""
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


def _rotate(stack: deque, steps: int) -> bool:
    """Rotate a stack of two or more values; return whether it turned."""
    if len(stack) < 2:
        return False
    stack.rotate(steps)
    return True


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is at index 0.

    Every instruction that takes effect is reported by name to ``emit``.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        emit: Optional[Emit] = None,
    ) -> None:
        self.a: deque = deque(a)
        self.b: deque = deque(b)
        self._emit: Emit = emit if emit is not None else _discard

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def sa(self) -> None:
        """Swap the two top values of a."""
        if _swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the two top values of b."""
        if _swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        if _push(self.b, self.a):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if _push(self.a, self.b):
            self._emit("pb")

    def ra(self) -> None:
        """Shift a up: its top value becomes its bottom."""
        if _rotate(self.a, -1):
            self._emit("ra")

    def rb(self) -> None:
        """Shift b up: its top value becomes its bottom."""
        if _rotate(self.b, -1):
            self._emit("rb")

    def rr(self) -> None:
        """Shift both stacks up."""
        _rotate(self.a, -1)
        _rotate(self.b, -1)
        self._emit("rr")

    def rra(self) -> None:
        """Shift a down: its bottom value becomes its top."""
        if _rotate(self.a, 1):
            self._emit("rra")

    def rrb(self) -> None:
        """Shift b down: its bottom value becomes its top."""
        if _rotate(self.b, 1):
            self._emit("rrb")

    def rrr(self) -> None:
        """Shift both stacks down."""
        _rotate(self.a, 1)
        _rotate(self.b, 1)
        self._emit("rrr")