import struct

from hypothesis import given
from hypothesis import strategies as st

from bignum.bitwise import and_digits, or_digits, xor_digits
from bignum.digit import MAX

values = st.integers(min_value=0, max_value=1 << 300)


def to_digits(n):
    if n == 0:
        return []
    count = (n.bit_length() + 31) // 32
    return list(struct.unpack(f"<{count}I", n.to_bytes(count * 4, "little")))


@given(values, values)
def test_and_matches_integers(a, b):
    assert and_digits(to_digits(a), to_digits(b)) == to_digits(a & b)


@given(values, values)
def test_or_matches_integers(a, b):
    assert or_digits(to_digits(a), to_digits(b)) == to_digits(a | b)


@given(values, values)
def test_xor_matches_integers(a, b):
    assert xor_digits(to_digits(a), to_digits(b)) == to_digits(a ^ b)


@given(values)
def test_self_identities(a):
    digits = to_digits(a)
    assert and_digits(digits, digits) == digits
    assert or_digits(digits, digits) == digits
    assert xor_digits(digits, digits) == []


@given(values)
def test_zero_identities(a):
    digits = to_digits(a)
    assert and_digits(digits, []) == []
    assert or_digits(digits, []) == digits
    assert or_digits([], digits) == digits
    assert xor_digits([], digits) == digits


@given(values, values)
def test_xor_round_trip(a, b):
    x = to_digits(a)
    y = to_digits(b)
    assert xor_digits(xor_digits(x, y), y) == x


def test_and_truncates_to_shorter_and_normalizes():
    assert and_digits([MAX, MAX, 1], [MAX, 0]) == [MAX]
    assert and_digits([1, 2], [2, 1]) == []


def test_or_keeps_longer_tail():
    assert or_digits([1], [2, 3, 4]) == [3, 3, 4]


def test_xor_clears_top_digit():
    assert xor_digits([1, 7], [0, 7]) == [1]