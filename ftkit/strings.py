"""Searching, comparing and bounded copying of NUL-terminated strings."""

from __future__ import annotations


def _cstr(data: bytes | bytearray) -> bytes:
    """Return the bytes of ``data`` before its first NUL byte."""
    raw = bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _byte_code(c: int | str) -> int:
    """Return ``c`` as a character code truncated to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    return int(c) & 0xFF


def _check_size(size: int, buffer: bytearray, what: str) -> None:
    if size < 0:
        raise ValueError(f"{what}: size must not be negative, got {size}")
    if size > len(buffer):
        raise IndexError(
            f"{what}: size {size} exceeds destination buffer of length {len(buffer)}"
        )


def strlen(s: str | bytes | bytearray) -> int:
    """Length of a string; for bytes, the number of bytes before the first NUL."""
    if isinstance(s, str):
        return len(s)
    return len(_cstr(s))


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy ``src`` into ``dst`` using at most ``size`` bytes, NUL included.

    Nothing is written when ``size`` is 0. Returns the length of ``src``,
    so a result of ``size`` or more means the copy was truncated.
    """
    data = _cstr(src)
    _check_size(size, dst, "strlcpy")
    if size > 0:
        chunk = data[: size - 1]
        dst[: len(chunk)] = chunk
        dst[len(chunk)] = 0
    return len(data)


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst`` within ``size`` bytes.

    Returns the length of the string it tried to build. When no NUL is found
    in the first ``size`` bytes of ``dst``, nothing is written and the result
    is ``size`` plus the length of ``src``.
    """
    data = _cstr(src)
    _check_size(size, dst, "strlcat")
    nul = dst.find(0, 0, size)
    dst_len = size if nul < 0 else nul
    if dst_len >= size:
        return size + len(data)
    chunk = data[: size - 1 - dst_len]
    end = dst_len + len(chunk)
    dst[dst_len:end] = chunk
    dst[end] = 0
    return dst_len + len(data)


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    ``c`` is truncated to a byte; searching for NUL finds the terminator
    at index ``len(s)``.
    """
    code = _byte_code(c)
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    ``c`` is truncated to a byte; searching for NUL finds the terminator
    at index ``len(s)``.
    """
    code = _byte_code(c)
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when equal, otherwise the difference of the character codes
    at the first mismatch, where the end of a string counts as code 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    a, b = s1[:n], s2[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index