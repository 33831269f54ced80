"""Validating the command-line numbers and building the initial stack."""

from __future__ import annotations

from typing import Iterable, List

from .chars import isdigit
from .linked_list import LinkedList
from .strings import atoi, split

INT_MIN = -2147483648
INT_MAX = 2147483647


class InvalidArgumentsError(ValueError):
    """Raised when the arguments do not describe a valid stack of integers."""


def is_number(text: str) -> bool:
    """True when ``text`` is an optional sign followed by at least one ASCII digit."""
    if not text:
        return False
    digits = text[1:] if text[0] in "+-" else text
    return bool(digits) and all(isdigit(ch) for ch in digits)


def _tokens(args: Iterable[str]) -> List[str]:
    """A single argument is split on spaces; several are taken as they are."""
    args = list(args)
    if len(args) == 1:
        return split(args[0], " ")
    return args


def check_args(args: Iterable[str]) -> List[int]:
    """Validate the arguments and return their integer values in order.

    Every token must be a number, fit in a 32-bit signed integer and appear
    only once.  No arguments give an empty list.
    """
    values: List[int] = []
    seen = set()
    for token in _tokens(args):
        if not is_number(token):
            raise InvalidArgumentsError(f"not a number: {token!r}")
        value = atoi(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InvalidArgumentsError(f"out of range: {token!r}")
        if value in seen:
            raise InvalidArgumentsError(f"duplicate number: {token!r}")
        seen.add(value)
        values.append(value)
    return values


def initialize_stack(args: Iterable[str]) -> LinkedList:
    """Build a stack from the arguments, first argument on top."""
    return LinkedList(atoi(token) for token in _tokens(args))