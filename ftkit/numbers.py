"""Conversion between decimal text and C ``int`` values."""

from __future__ import annotations

import operator
import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1

_WHITESPACE = " \t\v\n\r\f"
_DIGITS = re.compile(r"[0-9]*")
_LONG_DIGITS = len(str(LONG_MAX))


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a 32-bit signed integer, keeping the low 32 bits."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(s: str) -> int:
    """Parse a decimal integer the way the C library's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. A text that names no number gives 0.
    A value beyond the 64-bit signed range gives -1 when positive and 0 when
    negative; any other value is reduced to its low 32 bits as a signed int.
    """
    text = s.lstrip(_WHITESPACE)
    negative = text.startswith("-")
    if text and text[0] in "+-":
        text = text[1:]
    digits = _DIGITS.match(text).group()
    significant = digits.lstrip("0")
    limit = LONG_MAX + 1 if negative else LONG_MAX
    if len(significant) > _LONG_DIGITS or (significant and int(significant) > limit):
        return 0 if negative else -1
    value = int(significant) if significant else 0
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, which must fit in a 32-bit signed int."""
    value = operator.index(n)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit signed integer")
    return str(value)