import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftcore.numbers import atoi, itoa

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"
    assert atoi("-2147483648") == -2147483648


def test_itoa_zero():
    assert itoa(0) == "0"


@given(INT32)
def test_round_trip(n):
    assert atoi(itoa(n)) == n


@given(INT32)
def test_itoa_has_no_leading_plus_or_zeros(n):
    text = itoa(n)
    assert not text.startswith("+")
    body = text.lstrip("-")
    assert body == "0" or not body.startswith("0")
    assert text.startswith("-") == (n < 0)


@given(INT32, st.sampled_from([" ", "\t", "\n", "\v", "\f", "\r"]))
def test_atoi_skips_leading_whitespace(n, space):
    assert atoi(space * 3 + itoa(n)) == n


@given(st.integers(min_value=0, max_value=2**31 - 1))
def test_atoi_explicit_plus(n):
    assert atoi("+" + str(n)) == n


@given(INT32, st.text(alphabet="abc xyz.-+", max_size=5))
def test_atoi_stops_at_first_non_digit(n, tail):
    assert atoi(itoa(n) + "x" + tail) == n


@pytest.mark.parametrize("text", ["", "   ", "abc", "-", "+", "+-5", "--5", "x12"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_only_one_sign_and_no_space_after_it():
    assert atoi("- 5") == 0
    assert atoi("-0") == 0


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483649") == 2**31 - 1


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)