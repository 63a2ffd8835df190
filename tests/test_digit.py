import pytest
from hypothesis import given
from hypothesis import strategies as st

from bignum.digit import (
    BITS,
    bit_length,
    cmp_digits,
    from_double_digit,
    normalize,
    to_double_digit,
    u32_from_u128,
    u32_to_u128,
)

U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1


def _to_int(digits):
    return sum(d << (BITS * i) for i, d in enumerate(digits))


def _to_digits(n):
    out = []
    while n:
        out.append(n & ((1 << BITS) - 1))
        n >>= BITS
    return out


def test_u32_u128():
    assert u32_from_u128(0) == (0, 0, 0, 0)
    assert u32_from_u128(U128_MAX) == (U32_MAX, U32_MAX, U32_MAX, U32_MAX)
    assert u32_from_u128(U32_MAX) == (0, 0, 0, U32_MAX)
    assert u32_from_u128(U64_MAX) == (0, 0, U32_MAX, U32_MAX)
    assert u32_from_u128(U64_MAX + U32_MAX) == (0, 1, 0, U32_MAX - 1)
    assert u32_from_u128(36_893_488_151_714_070_528) == (0, 2, 1, 0)


@pytest.mark.parametrize(
    "value",
    [0, 1, U64_MAX * 3, U32_MAX, U64_MAX, U64_MAX + U32_MAX, U128_MAX],
)
def test_u128_u32_roundtrip(value):
    assert u32_to_u128(*u32_from_u128(value)) == value


@pytest.mark.parametrize(
    "digits, expected",
    [
        ([1], [1]),
        ([0, 0, 0], []),
        ([1, 2, 0, 0], [1, 2]),
        ([0, 0, 1, 2], [0, 0, 1, 2]),
        ([0, 0, 1, 2, 0, 0], [0, 0, 1, 2]),
        ([U32_MAX], [U32_MAX]),
    ],
)
def test_normalize_from_slice_cases(digits, expected):
    assert normalize(digits) == expected


def test_normalize_does_not_modify_input():
    digits = [1, 0, 0]
    normalize(digits)
    assert digits == [1, 0, 0]


@given(st.integers(min_value=0, max_value=U64_MAX))
def test_double_digit_roundtrip(n):
    hi, lo = from_double_digit(n)
    assert to_double_digit(hi, lo) == n
    assert hi <= U32_MAX and lo <= U32_MAX


@given(st.integers(min_value=0, max_value=1 << 300), st.integers(min_value=0, max_value=1 << 300))
def test_cmp_digits_matches_int_order(a, b):
    expected = (a > b) - (a < b)
    assert cmp_digits(_to_digits(a), _to_digits(b)) == expected


@given(st.integers(min_value=0, max_value=1 << 500))
def test_bit_length_matches_int(n):
    assert bit_length(_to_digits(n)) == n.bit_length()


def test_bit_length_of_zero_is_zero():
    assert bit_length([]) == 0


@given(st.lists(st.integers(min_value=0, max_value=U32_MAX), max_size=12))
def test_normalize_keeps_value(digits):
    result = normalize(digits)
    assert _to_int(result) == _to_int(digits)
    assert not result or result[-1] != 0