"""Finding a sequence of stack moves that sorts a list of numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .output import render_moves
from .parsing import ArgumentError, parse_numbers
from .rotations import rotate_a_into_place, rotate_b_into_place, rotate_mass_a
from .stacks import Move, Stacks, check_order

SMALL_LIMIT = 19


def _chunk_step(size: int) -> int:
    return size // (2 * ((size + 325) // 200))


def build_chunks(stacks: Stacks, size: int) -> None:
    """Push all but a few elements of ``a`` onto ``b`` in rough chunks.

    Small values are pushed as they are found; large values are pushed and
    rotated to the bottom of ``b``.  The chunk boundary grows each time a
    chunk of small values has been pushed.
    """
    ordered = sorted(stacks.a)
    step = _chunk_step(size)
    bound = step
    pushed = 0
    while pushed < size - 3 and check_order(stacks.a) < 0:
        top = stacks.a[0]
        if bound >= size or top < ordered[bound]:
            pushed += 1
            stacks.pb()
        elif top >= ordered[size - bound]:
            stacks.pb()
            stacks.rb()
        else:
            stacks.ra()
        if pushed == bound:
            bound += step


def sort_small(stacks: Stacks) -> None:
    """Sort ``a`` by building a descending ``b`` and merging it back."""
    while check_order(stacks.a) < 0:
        if stacks.a[0] > stacks.a[1]:
            stacks.sa()
        if check_order(stacks.a) < 0:
            rotate_b_into_place(stacks)
            stacks.pb()
    while stacks.b or check_order(stacks.a):
        rotate_a_into_place(stacks)
        if stacks.b:
            stacks.pa()


def sort_large(stacks: Stacks, size: int) -> None:
    """Sort ``a`` by chunking it onto ``b`` and inserting back the cheapest element each time."""
    build_chunks(stacks, size)
    if check_order(stacks.a) < 0:
        stacks.sa()
    while stacks.b or check_order(stacks.a):
        rotate_mass_a(stacks)
        if stacks.b:
            stacks.pa()


def solve(numbers: Iterable[int]) -> list[Move]:
    """Return the moves that sort ``numbers`` in ascending order on stack ``a``."""
    stacks = Stacks(numbers)
    size = len(stacks.a)
    if size < SMALL_LIMIT:
        sort_small(stacks)
    else:
        sort_large(stacks, size)
    return stacks.moves


def main(argv: Sequence[str] | None = None) -> int:
    """Print the instructions that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except ArgumentError:
        sys.stdout.write("Error\n")
        return -1
    sys.stdout.write(render_moves(solve(numbers)))
    return 0