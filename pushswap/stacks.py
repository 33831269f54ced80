"""The two stacks of the puzzle and the instructions that act on them."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Optional, TextIO

from .output import putendl


def _swap(stack: Deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _push(dest: Deque[int], src: Deque[int]) -> bool:
    if not src:
        return False
    dest.appendleft(src.popleft())
    return True


def _rotate(stack: Deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: Deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


class PushSwap:
    """Stacks ``a`` and ``b``, top at index 0.

    Each instruction returns True and writes its name when it took effect,
    and returns False, writing nothing, when it could not.
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self._out = out

    def _done(self, name: str) -> bool:
        putendl(name, self._out)
        return True

    def sa(self) -> bool:
        """Swap the top two elements of ``a``."""
        return _swap(self.a) and self._done("sa")

    def sb(self) -> bool:
        """Swap the top two elements of ``b``."""
        return _swap(self.b) and self._done("sb")

    def ss(self) -> bool:
        """Swap the top two of ``a``, then of ``b``; stops at the first that cannot."""
        return _swap(self.a) and _swap(self.b) and self._done("ss")

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        return _push(self.a, self.b) and self._done("pa")

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        return _push(self.b, self.a) and self._done("pb")

    def ra(self) -> bool:
        """Move the top of ``a`` to its bottom."""
        return _rotate(self.a) and self._done("ra")

    def rb(self) -> bool:
        """Move the top of ``b`` to its bottom."""
        return _rotate(self.b) and self._done("rb")

    def rr(self) -> bool:
        """Rotate ``a``, then ``b``; stops at the first that cannot."""
        return _rotate(self.a) and _rotate(self.b) and self._done("rr")

    def rra(self) -> bool:
        """Move the bottom of ``a`` to its top."""
        return _reverse_rotate(self.a) and self._done("rra")

    def rrb(self) -> bool:
        """Move the bottom of ``b`` to its top."""
        return _reverse_rotate(self.b) and self._done("rrb")

    def rrr(self) -> bool:
        """Reverse-rotate ``a``, then ``b``; stops at the first that cannot."""
        return _reverse_rotate(self.a) and _reverse_rotate(self.b) and self._done("rrr")