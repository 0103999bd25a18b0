"""Building new strings from existing ones: copies, slices, joins, splits, maps."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [part for part in s.split(sep) if part]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(buf: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Replace each element of ``buf`` in place with ``f(index, element)``.

    Iteration stops at the first NUL element (0 or ``"\\0"``), as for a
    NUL-terminated buffer.
    """
    for index, value in enumerate(buf):
        if value == 0 or value == "\0":
            break
        buf[index] = f(index, value)