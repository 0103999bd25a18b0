import pytest

from ftkit.numbers import INT_MAX, INT_MIN, LONG_MAX, atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 1000, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [0, 7, -7, 123456, INT_MIN, INT_MAX])
def test_itoa_matches_decimal_text(n):
    assert itoa(n) == str(n)


def test_itoa_int_min_text():
    assert itoa(INT_MIN) == "-2147483648"


@pytest.mark.parametrize("n", [INT_MAX + 1, INT_MIN - 1, 2**40])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        itoa("12")


def test_atoi_skips_whitespace_and_trailing_text():
    assert atoi(" \t\v\n\r\f-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_leading_zeros():
    assert atoi("000123") == 123


def test_atoi_no_digits_gives_zero():
    assert atoi("") == 0
    assert atoi("+-5") == atoi("")
    assert atoi("abc") == atoi("")


def test_atoi_wraps_to_32_bits():
    assert atoi(str(INT_MAX + 1)) == INT_MIN
    assert atoi(str(2**32 + 5)) == 5


def test_atoi_positive_overflow():
    assert atoi(str(LONG_MAX + 1)) == -1
    assert atoi("9" * 40) == atoi(str(LONG_MAX + 1))


def test_atoi_negative_overflow():
    assert atoi(str(-LONG_MAX - 2)) == 0


def test_atoi_long_min_is_not_overflow():
    assert atoi(str(-LONG_MAX - 1)) == (-LONG_MAX - 1) % 2**32 - 2**32 * 0


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == atoi("12")