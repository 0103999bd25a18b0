import pytest

from ftkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_and_returns_same_buffer():
    buf = bytearray(5)
    result = memset(buf, ord("a"), 3)
    assert result is buf
    assert buf[:3] == bytes([ord("a")]) * 3
    assert buf[3:] == bytes(2)


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 256 + ord("A"), 4)
    assert set(buf) == {ord("A")}


def test_memset_zero_count_leaves_buffer():
    buf = bytearray(b"xyz")
    memset(buf, 0, 0)
    assert buf == bytearray(b"xyz")


def test_memset_beyond_buffer_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"cd"


def test_memcpy_copies_and_returns_destination():
    dst = bytearray(6)
    result = memcpy(dst, b"abcd", 4)
    assert result is dst
    assert dst[:4] == b"abcd"
    assert dst[4:] == bytes(2)


def test_memcpy_zero_count_is_noop():
    dst = bytearray(b"keep")
    assert memcpy(dst, b"xxxx", 0) == bytearray(b"keep")


def test_memcpy_source_too_short_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_same_offset_unchanged():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 1, 1, 3) == bytearray(b"abcdef")


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    buf = b"A5BCD5EFGH"
    assert memchr(buf, ord("5"), len(buf)) == buf.index(b"5")


def test_memchr_respects_limit():
    buf = b"A5BCD5EFGH"
    assert memchr(buf, ord("5"), 1) is None
    assert memchr(buf, ord("Z"), len(buf)) is None


def test_memchr_truncates_value():
    buf = b"xyz"
    assert memchr(buf, 256 + ord("y"), 3) == buf.index(b"y")


def test_memcmp_equal_and_difference():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_bytes_are_unsigned():
    assert memcmp(bytes([200]), bytes([1]), 1) > 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(0, 8) == bytearray()
    assert calloc(8, 0) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 2)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, -1)
    with pytest.raises(ValueError):
        calloc(-1, 1)