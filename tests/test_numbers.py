import pytest

from rtmath.numbers import atoi, itoa


def test_atoi_double_sign_yields_zero():
    assert atoi("    ++52a4sd") == 0


def test_atoi_plain_negative():
    assert atoi("-42") == -42


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r+123abc") == 123


def test_atoi_empty_and_no_digits():
    assert atoi("") == 0
    assert atoi("   -") == 0
    assert atoi("abc") == 0


def test_atoi_whitespace_after_sign_stops_parsing():
    assert atoi("- 5") == 0


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648, 123456789])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [5, -5, 1000, -999])
def test_itoa_negative_prefix(n):
    assert itoa(n).startswith("-") == (n < 0)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa(1.5)


def test_atoi_rejects_non_str():
    with pytest.raises(TypeError):
        atoi(12)