"""Command-line argument handling: splitting, validating and converting numbers."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \n\t\v\f\r"
_DIGITS = "0123456789"
_SIGNS = ("+", "-")


class ArgumentError(ValueError):
    """Raised when the numbers given on the command line are not acceptable."""


def atoi(text: str) -> int:
    """Convert the leading integer of ``text`` the way the original parser does.

    Leading whitespace is skipped, one optional sign is honoured, and digits
    are read until the first non-digit.  Two signs in a row give 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in _SIGNS:
        if rest[1:2] in _SIGNS:
            return 0
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def split_arguments(argv: Iterable[str]) -> list[str]:
    """Return the individual number arguments.

    A single argument is split on spaces; several arguments are taken as they are.
    """
    arguments = list(argv)
    if len(arguments) == 1:
        return [token for token in arguments[0].split(" ") if token]
    return arguments


def _is_well_formed(argument: str) -> bool:
    return all(
        ch in _DIGITS or (position == 0 and ch in _SIGNS)
        for position, ch in enumerate(argument)
    )


def validate_arguments(args: Iterable[str]) -> list[int]:
    """Check every argument and return the numbers they hold.

    Raises ArgumentError for a character other than a leading sign or a digit,
    for a value outside the 32-bit signed range, or for a repeated value.
    """
    numbers: list[int] = []
    seen: set[int] = set()
    for argument in args:
        if not _is_well_formed(argument):
            raise ArgumentError(f"invalid argument: {argument!r}")
        value = atoi(argument)
        if not INT_MIN <= value <= INT_MAX:
            raise ArgumentError(f"argument out of range: {argument!r}")
        if value in seen:
            raise ArgumentError(f"duplicate argument: {argument!r}")
        seen.add(value)
        numbers.append(value)
    return numbers


def parse_numbers(argv: Iterable[str]) -> list[int]:
    """Split and validate the command-line arguments, returning the numbers."""
    return validate_arguments(split_arguments(argv))