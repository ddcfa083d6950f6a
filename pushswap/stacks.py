"""The two stacks and the moves that rearrange them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from itertools import zip_longest
from typing import Iterable


class Move(Enum):
    """A recorded stack operation."""

    RA = 1
    RB = 2
    RRA = 3
    RRB = 4
    SA = 5
    SB = 6
    PA = 7
    PB = 8

    def __str__(self) -> str:
        return self.name.lower()


def _rotate(stack: deque[int], steps: int) -> None:
    if not stack:
        raise IndexError("cannot rotate an empty stack")
    stack.rotate(steps)


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


class Stacks:
    """Stacks ``a`` and ``b`` (top at index 0) and the moves applied to them."""

    def __init__(self, numbers: Iterable[int]) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.moves: list[Move] = []

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        _rotate(self.a, -1)
        self.moves.append(Move.RA)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        _rotate(self.b, -1)
        self.moves.append(Move.RB)

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        _rotate(self.a, 1)
        self.moves.append(Move.RRA)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        _rotate(self.b, 1)
        self.moves.append(Move.RRB)

    def sa(self) -> None:
        """Swap the two top elements of ``a``; nothing happens with fewer than two."""
        if _swap(self.a):
            self.moves.append(Move.SA)

    def sb(self) -> None:
        """Swap the two top elements of ``b``; nothing happens with fewer than two."""
        if _swap(self.b):
            self.moves.append(Move.SB)

    def pa(self) -> None:
        """Push the top of ``b`` onto ``a``; nothing happens when ``b`` is empty."""
        if self.b:
            self.a.appendleft(self.b.popleft())
            self.moves.append(Move.PA)

    def pb(self) -> None:
        """Push the top of ``a`` onto ``b``; nothing happens when ``a`` is empty."""
        if self.a:
            self.b.appendleft(self.a.popleft())
            self.moves.append(Move.PB)


def check_order(stack: Iterable[int]) -> int:
    """Classify the order of a stack.

    Returns 0 when it is ascending, 1 when it is an ascending sequence rotated
    by some amount, and -1 otherwise.
    """
    values = list(stack)
    if not values:
        return 0
    first = values[0]
    rotated = False
    for value, following in zip_longest(values, values[1:]):
        descends = following is not None and value > following
        if descends or (rotated and first < value):
            if rotated:
                return -1
            rotated = True
    return 1 if rotated else 0