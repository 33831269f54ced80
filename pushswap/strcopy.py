"""Bounded and unbounded string copying and concatenation."""

from __future__ import annotations

from typing import Tuple


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text, holding at most ``size - 1`` characters, and the
    full length of ``src``.  With ``size`` 0 nothing is copied.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` is no larger than ``dst``, ``dst`` is left unchanged and the
    length returned is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strcat(dest: str, src: str) -> str:
    """Return ``src`` appended to ``dest``."""
    return dest + src


def strncat(dest: str, src: str, num: int) -> str:
    """Return at most ``num`` characters of ``src`` appended to ``dest``."""
    _check_non_negative("num", num)
    return dest + src[:num]


def strcpy(src: str) -> str:
    """Return a copy of ``src``."""
    return str(src)


def strncpy(src: str, num: int) -> str:
    """Return exactly ``num`` characters: ``src`` cut to ``num``, padded with NULs."""
    _check_non_negative("num", num)
    return src[:num].ljust(num, "\0")