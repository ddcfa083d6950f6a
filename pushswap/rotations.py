"""Choosing and performing the rotations that bring a stack into position."""

from __future__ import annotations

from collections import deque
from itertools import takewhile
from typing import Callable, Iterable, Sequence

from .stacks import Stacks

_Fits = Callable[[int, Sequence[int]], bool]


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _fits_a(n: int, stack: Sequence[int]) -> bool:
    first, last = stack[0], stack[-1]
    return (first >= n and last <= n) or (first <= last and n <= first)


def _fits_b(n: int, stack: Sequence[int]) -> bool:
    first, last = stack[0], stack[-1]
    if len(stack) == 2 and last <= n <= first:
        return False
    return (
        (first <= n and last >= n)
        or (first >= last and n >= first)
        or (n >= first and first >= last and first >= stack[1])
        or (n <= last and first >= last and first >= stack[1])
    )


def _fits_mass_a(n: int, stack: Sequence[int]) -> bool:
    first, last = stack[0], stack[-1]
    return (
        (first >= n and last <= n)
        or (first <= last and n <= first)
        or (n <= first and first <= last and first <= stack[1])
        or (n >= last and first <= last and first <= stack[1])
    )


def _rotations_until_fit(n: int, stack: Iterable[int], fits: _Fits) -> int:
    """Count forward rotations of a copy of ``stack`` until ``n`` fits on top."""
    view = deque(stack)
    if not view:
        return 0
    for steps in range(len(view)):
        if fits(n, view):
            return steps
        view.rotate(-1)
    raise ValueError(f"no position in the stack accepts {n}")


def _index_of_min(stack: Iterable[int]) -> int:
    values = list(stack)
    return values.index(min(values))


def _rotate_shortest(
    size: int, rot: int, forward: Callable[[], None], backward: Callable[[], None]
) -> None:
    """Perform ``rot`` forward rotations, or the equivalent shorter reverse ones."""
    if size - rot < rot:
        for _ in range(size - rot):
            backward()
    else:
        for _ in range(rot):
            forward()


def rotate_a_into_place(stacks: Stacks) -> None:
    """Rotate ``a`` so the top of ``b`` can be pushed onto it in order.

    With ``b`` empty, ``a`` is rotated until its smallest value is on top.
    """
    size = len(stacks.a)
    if stacks.b:
        rot = _rotations_until_fit(stacks.b[0], stacks.a, _fits_a)
    else:
        rot = _index_of_min(stacks.a)
    _rotate_shortest(size, rot, stacks.ra, stacks.rra)


def rotate_b_into_place(stacks: Stacks) -> None:
    """Rotate ``b`` so the top of ``a`` can be pushed onto it in descending order."""
    size = len(stacks.b)
    if size < 2:
        return
    rot = _rotations_until_fit(stacks.a[0], stacks.b, _fits_b)
    _rotate_shortest(size, rot, stacks.rb, stacks.rrb)


def rotate_mass_a(stacks: Stacks) -> None:
    """Bring the cheapest element of ``b`` to its top, then rotate ``a`` to receive it.

    With ``b`` empty, ``a`` is rotated until its smallest value is on top.
    """
    size_a = len(stacks.a)
    if stacks.b:
        if len(stacks.b) > 1:
            fewer_moves(stacks, size_a)
        rot = _rotations_until_fit(stacks.b[0], stacks.a, _fits_mass_a)
    else:
        rot = _index_of_min(stacks.a)
    _rotate_shortest(size_a, rot, stacks.ra, stacks.rra)


def count_rotations(n: int, stack: Iterable[int]) -> int:
    """Estimate how far ``stack`` must rotate before ``n`` can be placed.

    Differences are taken with 32-bit wrap-around.  Returns 0 when the scan
    runs past the end of the stack.
    """
    diffs = [_wrap_int32(n - value) for value in stack]
    prev = 0
    steps = 0
    for diff in diffs:
        if diff >= prev:
            break
        prev = diff
        steps += 1
    steps += sum(1 for _ in takewhile(lambda diff: diff > prev, diffs[steps:]))
    return steps if steps < len(diffs) else 0


def _combined_cost(size_a: int, size_b: int, index: int, rot: int) -> int:
    a_reversed = size_a - rot < rot
    rot_a = size_a - rot if a_reversed else rot
    b_reversed = size_b - index < index
    rot_b = size_b - index if b_reversed else index
    if a_reversed == b_reversed:
        return max(rot_a, rot_b)
    return rot_a + rot_b


def fewer_moves(stacks: Stacks, size_a: int) -> None:
    """Rotate ``b`` to bring up the element that is cheapest to place into ``a``."""
    size_b = len(stacks.b)
    costs = [
        _combined_cost(size_a, size_b, index, count_rotations(value, stacks.a))
        for index, value in enumerate(stacks.b)
    ]
    best = costs.index(min(costs))
    _rotate_shortest(size_b, best, stacks.rb, stacks.rrb)