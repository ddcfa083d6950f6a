# pushswap

Sort a list of distinct integers with two stacks and a small set of
instructions, and check whether a sequence of instructions sorts a list.

Stack `a` starts with the numbers, the first one on top. Stack `b` starts
empty. The instructions are:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | push the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both upwards (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both downwards (the bottom goes to the top) |

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Sorting

Give the numbers as separate arguments, or as one quoted argument with the
numbers separated by spaces:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The instructions that sort the numbers are printed one per line. Between two
swaps or pushes, the rotations are reduced to their net effect on each stack.
Where rotations of `a` and `b` go the same way they are printed as `rr` or
`rrr`. If there are no arguments, nothing is printed.

Lists of fewer than 19 numbers are sorted by building a descending stack `b`
and merging it back. Larger lists are first pushed onto `b` in chunks, and
then the element that is cheapest to place is moved back into `a` each time.

An argument is invalid if it is not an optional `+` or `-` followed by
digits, if its value is outside the 32-bit signed integer range, or if it
repeats another number. In that case `Error` is printed to standard output
and the command exits with a non-zero status.

## Checking

`push-swap-checker` takes the same arguments and reads instructions from
standard input, one per line (a NUL character also ends an instruction),
until an empty instruction or the end of input. It prints `OK` if the
instructions leave `a` in strictly ascending order with `b` empty, and `KO`
otherwise. An unknown instruction or an invalid argument prints `Error` to
standard error and exits with status 1. With no arguments it does nothing.

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

## Using it from Python

```python
from pushswap.solver import solve
from pushswap.output import render_moves
from pushswap.checker import run_checker

moves = solve([3, 2, 5, 1, 4])          # list of pushswap.stacks.Move
text = render_moves(moves)              # the lines push-swap prints
assert run_checker([3, 2, 5, 1, 4], text.splitlines())
```

- `pushswap.parsing.parse_numbers(argv)` splits and validates command-line
  arguments and returns the integers; it raises
  `pushswap.parsing.ArgumentError` for invalid input. `split_arguments`,
  `validate_arguments` and `atoi` are available separately.
- `pushswap.stacks.Stacks` holds the two stacks as deques (`a` and `b`, top
  first) and records every move applied through its `sa`, `sb`, `pa`, `pb`,
  `ra`, `rb`, `rra` and `rrb` methods in `moves`.
- `pushswap.stacks.check_order(stack)` returns 0 for an ascending stack, 1
  for a rotated ascending stack, and -1 otherwise.
- `pushswap.output.format_moves(moves)` returns the instruction lines as a
  list; `render_moves(moves)` joins them with newlines.
- `pushswap.checker.apply_instruction(a, b, instruction)` applies one
  instruction to two deques and raises `pushswap.checker.InstructionError`
  for an unknown one; `is_sorted(stack)` tells whether values are strictly
  ascending.