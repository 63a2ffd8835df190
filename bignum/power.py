"""Powers and modular powers of little-endian base 2**32 digit lists."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from bignum.digit import BITS, normalize
from bignum.division import div_rem
from bignum.mul import mul_digits

_U128_MAX = (1 << 128) - 1
_ZERO_MODULUS = "attempt to calculate with zero modulus!"


def pow_digits(base: Sequence[int], exp: int) -> list[int]:
    """Return ``base ** exp`` for a digit list and a non-negative integer.

    Raises MemoryError when the exponent is too large for any result to fit.
    """
    if exp < 0:
        raise ValueError("the exponent must not be negative")
    base = normalize(base)
    if exp == 0 or base == [1]:
        return [1]
    if not base:
        return []
    if exp > _U128_MAX:
        raise MemoryError("memory overflow")

    while exp & 1 == 0:
        base = mul_digits(base, base)
        exp >>= 1
    if exp == 1:
        return base

    acc = base
    while exp > 1:
        exp >>= 1
        base = mul_digits(base, base)
        if exp & 1:
            acc = mul_digits(acc, base)
    return acc


def _reduce(value: Sequence[int], modulus: Sequence[int]) -> list[int]:
    return div_rem(value, modulus)[1]


def _mulmod(a: Sequence[int], b: Sequence[int], modulus: Sequence[int]) -> list[int]:
    return _reduce(mul_digits(a, b), modulus)


def modpow(
    x: Sequence[int], exponent: Sequence[int], modulus: Sequence[int]
) -> list[int]:
    """Return ``x ** exponent % modulus``; raise ZeroDivisionError for a zero modulus."""
    modulus = normalize(modulus)
    if not modulus:
        raise ZeroDivisionError(_ZERO_MODULUS)
    return _reduce(plain_modpow(x, exponent, modulus), modulus)


def _exponent_bits(r: int, consumed: int, rest: Sequence[int]) -> Iterator[int]:
    """Yield the exponent bits still to be processed, lowest first."""
    if rest:
        for _ in range(consumed, BITS):
            yield r & 1
            r >>= 1
        for digit in rest[:-1]:
            for _ in range(BITS):
                yield digit & 1
                digit >>= 1
        r = rest[-1]
    while r:
        yield r & 1
        r >>= 1


def plain_modpow(
    base: Sequence[int], exp_data: Sequence[int], modulus: Sequence[int]
) -> list[int]:
    """Square-and-multiply ``base ** exp_data % modulus``.

    A zero exponent yields one without reduction by the modulus.
    """
    modulus = normalize(modulus)
    if not modulus:
        raise ZeroDivisionError(_ZERO_MODULUS)
    exp_data = list(exp_data)

    first = next((pos for pos, digit in enumerate(exp_data) if digit), None)
    if first is None:
        return [1]

    base = _reduce(base, modulus)
    for _ in range(first * BITS):
        base = _mulmod(base, base, modulus)

    r = exp_data[first]
    consumed = 0
    while r & 1 == 0:
        base = _mulmod(base, base, modulus)
        r >>= 1
        consumed += 1

    rest = exp_data[first + 1:]
    if not rest and r == 1:
        return base

    acc = base
    r >>= 1
    consumed += 1
    for odd in _exponent_bits(r, consumed, rest):
        base = _mulmod(base, base, modulus)
        if odd:
            acc = _mulmod(acc, base, modulus)
    return acc