"""Turning a recorded move list into the instruction lines that are printed."""

from __future__ import annotations

from typing import Iterable

from .stacks import Move

_ROTATION_STEPS = {
    Move.RA: (1, 0),
    Move.RB: (0, 1),
    Move.RRA: (-1, 0),
    Move.RRB: (0, -1),
}


def _rotation_lines(net_a: int, net_b: int) -> list[str]:
    """Lines for a run of rotations whose net effect is ``net_a`` and ``net_b``.

    Positive counts are forward rotations, negative counts reverse ones.
    Rotations in the same direction on both stacks are merged into rr or rrr.
    """
    lines: list[str] = []
    if net_a < 0 and net_b < 0:
        shared = max(net_a, net_b)
        lines.extend(["rrr"] * -shared)
        net_a -= shared
        net_b -= shared
    elif net_a > 0 and net_b > 0:
        shared = min(net_a, net_b)
        lines.extend(["rr"] * shared)
        net_a -= shared
        net_b -= shared
    lines.extend(["ra"] * net_a if net_a > 0 else ["rra"] * -net_a)
    lines.extend(["rb"] * net_b if net_b > 0 else ["rrb"] * -net_b)
    return lines


def format_moves(moves: Iterable[Move]) -> list[str]:
    """Return the instruction lines for ``moves``.

    Rotations between two swaps or pushes are reduced to their net effect on
    each stack, and matching rotations on both stacks are combined.
    """
    lines: list[str] = []
    net_a = net_b = 0
    for move in moves:
        step = _ROTATION_STEPS.get(move)
        if step is not None:
            net_a += step[0]
            net_b += step[1]
            continue
        lines.extend(_rotation_lines(net_a, net_b))
        net_a = net_b = 0
        lines.append(str(move))
    lines.extend(_rotation_lines(net_a, net_b))
    return lines


def render_moves(moves: Iterable[Move]) -> str:
    """Return the printed form of ``moves``: one instruction per line."""
    return "".join(f"{line}\n" for line in format_moves(moves))