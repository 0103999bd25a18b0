"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character; an int is truncated to a byte first."""
    if isinstance(c, int):
        c = chr(c & 0xFF)
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def putendl(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal, with a leading minus sign when negative."""
    _target(stream).write(str(int(n)))