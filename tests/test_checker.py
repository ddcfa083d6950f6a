import io
import random
import sys
from collections import deque

import pytest

from pushswap.checker import (
    InstructionError,
    apply_instruction,
    is_sorted,
    main,
    run_checker,
)
from pushswap.output import format_moves
from pushswap.solver import solve


def _stacks():
    return deque([1, 2, 3]), deque([4, 5])


@pytest.mark.parametrize(
    "instruction, expected_a, expected_b",
    [
        ("sa", [2, 1, 3], [4, 5]),
        ("sb", [1, 2, 3], [5, 4]),
        ("ss", [2, 1, 3], [5, 4]),
        ("pa", [4, 1, 2, 3], [5]),
        ("pb", [2, 3], [1, 4, 5]),
        ("ra", [2, 3, 1], [4, 5]),
        ("rb", [1, 2, 3], [5, 4]),
        ("rr", [2, 3, 1], [5, 4]),
        ("rra", [3, 1, 2], [4, 5]),
        ("rrb", [1, 2, 3], [5, 4]),
        ("rrr", [3, 1, 2], [5, 4]),
    ],
)
def test_apply_instruction(instruction, expected_a, expected_b):
    a, b = _stacks()
    apply_instruction(a, b, instruction)
    assert list(a) == expected_a
    assert list(b) == expected_b


@pytest.mark.parametrize("instruction", ["", "xx", "ra ", "RA", "rrrr", "pa\r"])
def test_apply_instruction_rejects_unknown(instruction):
    a, b = _stacks()
    with pytest.raises(InstructionError):
        apply_instruction(a, b, instruction)


@pytest.mark.parametrize("instruction", ["pa", "rb", "rrb", "sb"])
def test_instructions_on_empty_b_leave_stacks_alone(instruction):
    a, b = deque([3, 1]), deque()
    apply_instruction(a, b, instruction)
    assert list(a) == [3, 1]
    assert list(b) == []


def test_is_sorted():
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([]) is True
    assert is_sorted([2, 1]) is False
    assert is_sorted([1, 1]) is False


def test_run_checker_accepts_sorting_instructions():
    assert run_checker([2, 1, 3], ["sa"]) is True
    assert run_checker([2, 1, 3], ["sa\n"]) is True


def test_run_checker_rejects_unsorted_result():
    assert run_checker([2, 1, 3], []) is False


def test_run_checker_requires_empty_b():
    assert run_checker([1, 2, 3], ["pb"]) is False


def test_run_checker_stops_at_empty_line():
    assert run_checker([2, 1, 3], ["", "sa"]) is False


def test_run_checker_raises_on_bad_instruction():
    with pytest.raises(InstructionError):
        run_checker([2, 1, 3], ["sa", "bogus"])


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_solver_output_passes_checker(seed):
    numbers = list(range(25))
    random.Random(seed).shuffle(numbers)
    assert run_checker(numbers, format_moves(solve(numbers))) is True


def test_main_prints_ok(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("sa\n"))
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_prints_ko(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ra\n"))
    assert main(["2 1 3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_handles_nul_separators(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("pb\0pa\n"))
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_reports_bad_instruction(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("nope\n"))
    assert main(["2", "1", "3"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_reports_bad_arguments(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["1", "1"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""