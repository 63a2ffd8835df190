import pytest
from hypothesis import given
from hypothesis import strategies as st

from bignum.division import div_rem
from bignum.power import modpow, plain_modpow, pow_digits


def _value(digits):
    return sum(d << (32 * i) for i, d in enumerate(digits))


def _digits(n):
    out = []
    while n:
        out.append(n & 0xFFFFFFFF)
        n >>= 32
    return out


TWO = [2]
MODULUS = [0x1100]


@pytest.mark.parametrize(
    "exp_data, exponent",
    [
        ([0, 0b1], 0b1_00000000),
        ([0, 0b10], 0b10_00000000),
        ([0, 0b110010], 0b110010_00000000),
        ([0b1, 0b1], 0b1_00000001),
        ([0b1100, 0, 0b1], 0b1_00000000_00001100),
    ],
)
def test_plain_modpow(exp_data, exponent):
    expected = div_rem(pow_digits(TWO, exponent), MODULUS)[1]
    assert plain_modpow(TWO, exp_data, MODULUS) == expected


def test_pow_biguint():
    assert pow_digits([5], 3) == [125]


@given(st.integers(min_value=0, max_value=2**200), st.integers(min_value=0, max_value=40))
def test_pow_matches_int(base, exp):
    assert _value(pow_digits(_digits(base), exp)) == base**exp


@given(
    st.integers(min_value=0, max_value=2**200),
    st.integers(min_value=0, max_value=2**100),
    st.integers(min_value=1, max_value=2**150),
)
def test_modpow_matches_int(x, e, m):
    assert _value(modpow(_digits(x), _digits(e), _digits(m))) == pow(x, e, m)


@given(
    st.integers(min_value=0, max_value=2**200),
    st.integers(min_value=1, max_value=2**100),
    st.integers(min_value=2, max_value=2**150),
)
def test_plain_modpow_matches_int(x, e, m):
    assert _value(plain_modpow(_digits(x), _digits(e), _digits(m))) == pow(x, e, m)


def test_modpow_zero_exponent_modulus_one():
    assert modpow([5], [], [1]) == []


def test_plain_modpow_zero_exponent_is_one():
    assert plain_modpow([5], [0, 0], [1]) == [1]


def test_modpow_zero_modulus():
    with pytest.raises(ZeroDivisionError, match="zero modulus"):
        modpow([2], [3], [])


def test_plain_modpow_zero_modulus():
    with pytest.raises(ZeroDivisionError):
        plain_modpow([2], [3], [0])


def test_pow_zero_exponent():
    assert pow_digits([], 0) == [1]
    assert pow_digits([7, 9], 0) == [1]


def test_pow_huge_exponent_trivial_bases():
    assert pow_digits([1], 1 << 200) == [1]
    assert pow_digits([], 1 << 200) == []


def test_pow_huge_exponent_overflows():
    with pytest.raises(MemoryError, match="memory overflow"):
        pow_digits([2], 1 << 128)


def test_pow_negative_exponent():
    with pytest.raises(ValueError):
        pow_digits([2], -1)