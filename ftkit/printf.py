"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from ftkit.numbers import itoa
from ftkit.output import putstr

_UINT_MASK = 2**32 - 1
_PTR_MASK = 2**64 - 1


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument."""


def _to_int32(arg: Any) -> int:
    value = operator.index(arg) & _UINT_MASK
    return value - 2**32 if value > 2**31 - 1 else value


def _to_uint32(arg: Any) -> int:
    return operator.index(arg) & _UINT_MASK


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _string(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a string or None, got {type(arg).__name__}")
    return arg


def _pointer(arg: Any) -> str:
    if arg is None:
        address = 0
    elif isinstance(arg, int):
        address = arg
    else:
        address = id(arg)
    return f"0x{address & _PTR_MASK:x}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda arg: itoa(_to_int32(arg)),
    "i": lambda arg: itoa(_to_int32(arg)),
    "u": lambda arg: str(_to_uint32(arg)),
    "x": lambda arg: f"{_to_uint32(arg):x}",
    "X": lambda arg: f"{_to_uint32(arg):X}",
    "%": lambda arg: "%",
}


def format_conversion(spec: str, arg: Any = None) -> str:
    """Render one argument under the conversion character ``spec``.

    ``%`` ignores ``arg``. Integers are reduced to the width of the C type
    the conversion reads: 32 bits for d, i, u, x and X, 64 bits for p.
    """
    try:
        converter = _CONVERTERS[spec]
    except KeyError:
        raise FormatError(f"unknown conversion %{spec}") from None
    return converter(arg)


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    """Yield the pieces of output for ``fmt`` in order, raising at the first error."""
    fmt = fmt.split("\0", 1)[0]
    pending = iter(args)
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            yield fmt[pos:]
            return
        if percent > pos:
            yield fmt[pos:percent]
        if percent + 1 >= len(fmt):
            return
        spec = fmt[percent + 1]
        if spec not in _CONVERTERS:
            raise FormatError(f"unknown conversion %{spec} at offset {percent}")
        if spec == "%":
            yield "%"
        else:
            try:
                arg = next(pending)
            except StopIteration:
                raise FormatError(
                    f"missing argument for %{spec} at offset {percent}"
                ) from None
            yield format_conversion(spec, arg)
        pos = percent + 2


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    A lone ``%`` at the end is dropped, extra arguments are ignored and the
    format ends at its first NUL character.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written. On a FormatError the text
    before the faulty conversion has already been written.
    """
    written = 0
    for piece in _render(fmt, args):
        putstr(piece, stream)
        written += len(piece)
    return written