"""Byte-buffer operations on bytearray objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(buf: bytes | bytearray, start: int, n: int, what: str) -> None:
    if start < 0 or start + n > len(buf):
        raise IndexError(
            f"{what}: range [{start}, {start + n}) outside buffer of length {len(buf)}"
        )


def memset(buf: bytearray, ch: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``ch`` truncated to a byte."""
    _check_count(n)
    _check_span(buf, 0, n, "memset")
    buf[:n] = bytes([ch & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check_count(n)
    if n == 0 or dst is src:
        return dst
    _check_span(src, 0, n, "memcpy source")
    _check_span(dst, 0, n, "memcpy destination")
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied first.
    """
    _check_count(n)
    if n == 0 or dst == src:
        return buf
    _check_span(buf, src, n, "memmove source")
    _check_span(buf, dst, n, "memmove destination")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: bytes | bytearray, ch: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``ch`` among the first ``n``.

    ``ch`` is truncated to a byte. Returns None when it is not found.
    """
    _check_count(n)
    _check_span(buf, 0, n, "memchr")
    index = bytes(buf[:n]).find(bytes([ch & 0xFF]))
    return None if index < 0 else index


def memcmp(b1: bytes | bytearray, b2: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch, or 0."""
    _check_count(n)
    _check_span(b1, 0, n, "memcmp first buffer")
    _check_span(b2, 0, n, "memcmp second buffer")
    for x, y in zip(b1[:n], b2[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    _check_count(count)
    _check_count(size)
    if count and size and count > SIZE_MAX // size:
        raise OverflowError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(count * size)