"""Checking that a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from collections import deque
from itertools import pairwise
from typing import Callable, Iterable, Iterator, Sequence, TextIO

from .parsing import ArgumentError, parse_numbers


class InstructionError(ValueError):
    """Raised for an instruction that is not one of the known moves."""


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse(stack: deque[int]) -> None:
    stack.rotate(1)


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(to: deque[int], source: deque[int]) -> None:
    if source:
        to.appendleft(source.popleft())


_Action = Callable[[deque, deque], None]

_ACTIONS: dict[str, _Action] = {
    "sa": lambda a, b: _swap(a),
    "sb": lambda a, b: _swap(b),
    "ss": lambda a, b: (_swap(a), _swap(b)),
    "pa": lambda a, b: _push(a, b),
    "pb": lambda a, b: _push(b, a),
    "ra": lambda a, b: _rotate(a),
    "rb": lambda a, b: _rotate(b),
    "rr": lambda a, b: (_rotate(a), _rotate(b)),
    "rra": lambda a, b: _reverse(a),
    "rrb": lambda a, b: _reverse(b),
    "rrr": lambda a, b: (_reverse(a), _reverse(b)),
}


def apply_instruction(a: deque[int], b: deque[int], instruction: str) -> None:
    """Apply one instruction to the stacks ``a`` and ``b`` in place."""
    action = _ACTIONS.get(instruction)
    if action is None:
        raise InstructionError(f"unknown instruction: {instruction!r}")
    action(a, b)


def is_sorted(stack: Iterable[int]) -> bool:
    """Return True when the values are strictly ascending."""
    return all(first < second for first, second in pairwise(stack))


def run_checker(numbers: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the instructions in ``lines`` and tell whether they sort ``numbers``.

    Reading stops at the first empty line.  The result is True only when
    ``a`` ends strictly ascending and ``b`` ends empty.
    """
    a: deque[int] = deque(numbers)
    b: deque[int] = deque()
    for line in lines:
        instruction = line[:-1] if line.endswith("\n") else line
        if not instruction:
            break
        apply_instruction(a, b, instruction)
    return not b and is_sorted(a)


def _read_instructions(stream: TextIO) -> Iterator[str]:
    """Yield instructions separated by newlines or NUL characters."""
    for line in stream:
        body = line[:-1] if line.endswith("\n") else line
        yield from body.split("\0")


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    try:
        sorted_ok = run_checker(numbers, _read_instructions(sys.stdin))
    except InstructionError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0