"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def putchar(c: str, out: Optional[TextIO] = None) -> None:
    """Write a single character to ``out`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(out).write(c)


def putstr(s: str, out: Optional[TextIO] = None) -> None:
    """Write a string to ``out``."""
    _stream(out).write(s)


def putendl(s: str, out: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline to ``out``."""
    stream = _stream(out)
    stream.write(s)
    stream.write("\n")


def putnbr(n: int, out: Optional[TextIO] = None) -> None:
    """Write an integer in decimal to ``out``."""
    _stream(out).write(f"{n:d}")