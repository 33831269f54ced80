"""Command-line entry point: validate the numbers and run a short demonstration."""

from __future__ import annotations

import sys
from typing import Deque, List, Optional, Sequence

from .output import putendl, putnbr
from .parsing import InvalidArgumentsError, check_args, initialize_stack
from .stacks import PushSwap


def _show_top(stack: Deque[int]) -> None:
    if not stack:
        raise IndexError("stack is empty")
    putnbr(stack[0])
    putendl("")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program on ``argv`` (the process arguments by default)."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        check_args(args)
    except InvalidArgumentsError:
        putendl("Error")
        return 0

    game = PushSwap(initialize_stack(args))
    try:
        game.sa()
        _show_top(game.a)
        game.pb()
        _show_top(game.b)
        game.ra()
        _show_top(game.a)
        game.rra()
        _show_top(game.a)
    except IndexError as exc:
        sys.stdout.flush()
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())