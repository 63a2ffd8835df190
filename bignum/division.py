"""Division of little-endian base 2**32 digit lists."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from bignum.arith import add2_carry
from bignum.digit import (
    BITS,
    HALF,
    HALF_BITS,
    MAX,
    cmp_digits,
    from_double_digit,
    normalize,
    to_double_digit,
)

_DIVIDE_BY_ZERO = "attempt to divide by zero"


def div_wide(hi: int, lo: int, divisor: int) -> tuple[int, int]:
    """Divide the two-digit value ``[hi, lo]`` by one digit.

    Returns (quotient, remainder). ``hi`` must be smaller than ``divisor``
    so that both results fit in a single digit.
    """
    if divisor == 0:
        raise ZeroDivisionError(_DIVIDE_BY_ZERO)
    if hi >= divisor:
        raise ValueError("the high digit must be smaller than the divisor")
    return divmod(to_double_digit(hi, lo), divisor)


def div_half(rem: int, digit: int, divisor: int) -> tuple[int, int]:
    """Divide ``[rem, digit]`` by a divisor of at most half a digit.

    Works in half-digit pieces, like long division. Returns
    (quotient, remainder).
    """
    if divisor == 0:
        raise ZeroDivisionError(_DIVIDE_BY_ZERO)
    if not rem < divisor <= HALF:
        raise ValueError("need rem < divisor <= HALF")
    hi, rem = divmod((rem << HALF_BITS) | (digit >> HALF_BITS), divisor)
    lo, rem = divmod((rem << HALF_BITS) | (digit & HALF), divisor)
    return (hi << HALF_BITS) | lo, rem


def _digit_step(divisor: int) -> Callable[[int, int, int], tuple[int, int]]:
    if divisor == 0:
        raise ZeroDivisionError(_DIVIDE_BY_ZERO)
    return div_half if divisor <= HALF else div_wide


def div_rem_digit(a: Sequence[int], b: int) -> tuple[list[int], int]:
    """Divide a digit list by a single digit, returning (quotient, remainder)."""
    step = _digit_step(b)
    rem = 0
    quotient = []
    for digit in reversed(a):
        q, rem = step(rem, digit, b)
        quotient.append(q)
    quotient.reverse()
    return normalize(quotient), rem


def rem_digit(a: Sequence[int], b: int) -> int:
    """Return the remainder of a digit list divided by a single digit."""
    step = _digit_step(b)
    rem = 0
    for digit in reversed(a):
        _, rem = step(rem, digit, b)
    return rem


def sub_mul_digit_same_len(
    a: Sequence[int], b: Sequence[int], c: int
) -> tuple[list[int], int]:
    """Compute ``a - b * c`` digit by digit over equal-length lists.

    Returns the resulting digits and the borrow out of the top digit,
    which is non-zero when ``b * c`` exceeds ``a``.
    """
    if len(a) != len(b):
        raise ValueError("operands must have the same length")
    # The carry lies in [-MAX, 0]; keep it offset by MAX to stay non-negative.
    offset_carry = MAX
    result = []
    for x, y in zip(a, b):
        offset_sum = to_double_digit(MAX, x) - MAX + offset_carry - y * c
        offset_carry, new_x = from_double_digit(offset_sum)
        result.append(new_x)
    return result, MAX - offset_carry


def _shl_bits(digits: Sequence[int], shift: int) -> list[int]:
    result = []
    carry = 0
    for digit in digits:
        result.append(((digit << shift) | carry) & MAX)
        carry = digit >> (BITS - shift)
    if carry:
        result.append(carry)
    return result


def _shr_bits(digits: Sequence[int], shift: int) -> list[int]:
    result = []
    borrow = 0
    for digit in reversed(digits):
        result.append((digit >> shift) | borrow)
        borrow = (digit << (BITS - shift)) & MAX
    result.reverse()
    return normalize(result)


def div_rem(u: Sequence[int], d: Sequence[int]) -> tuple[list[int], list[int]]:
    """Return the normalized (quotient, remainder) of two digit lists."""
    u = normalize(u)
    d = normalize(d)
    if not d:
        raise ZeroDivisionError(_DIVIDE_BY_ZERO)
    if not u:
        return [], []

    if len(d) == 1:
        if d == [1]:
            return u, []
        quotient, rem = div_rem_digit(u, d[0])
        return quotient, normalize([rem])

    order = cmp_digits(u, d)
    if order < 0:
        return [], u
    if order == 0:
        return [1], []

    # Knuth, TAOCP vol 2 section 4.3, algorithm D: normalize so that the top
    # bit of the divisor's top digit is set.
    shift = BITS - d[-1].bit_length()
    if shift == 0:
        return div_rem_core(u, d)
    quotient, rem = div_rem_core(_shl_bits(u, shift), _shl_bits(d, shift))
    return quotient, _shr_bits(rem, shift)


def div_rem_core(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], list[int]]:
    """Schoolbook long division (Knuth's algorithm D).

    ``b`` must have at least two digits and its top bit set, and ``a``
    must be at least as long as ``b``.
    """
    a = list(a)
    b = list(b)
    if not len(a) >= len(b) > 1:
        raise ValueError("need len(a) >= len(b) > 1")
    if b[-1] >> (BITS - 1) == 0:
        raise ValueError("the divisor must have its top bit set")

    # a0 is an extra most significant digit of the dividend, not kept in a.
    a0 = 0
    b0 = b[-1]
    b1 = b[-2]

    q_len = len(a) - len(b) + 1
    quotient = [0] * q_len

    for j in reversed(range(q_len)):
        a1 = a[-1]
        a2 = a[-2]

        # [a0, a1] / b0 is never too small and at most 2 too large.
        if a0 < b0:
            q0, r = div_wide(a0, a1, b0)
        else:
            q0, r = MAX, a0 + a1

        # Refine with the next digits: q0 is too large if
        # (r << BITS) + a2 < q0 * b1.
        while r <= MAX and to_double_digit(r, a2) < q0 * b1:
            q0 -= 1
            r += b0

        # q0 is now correct or, rarely, one too large.
        a[j:], borrow = sub_mul_digit_same_len(a[j:], b, q0)
        if borrow > a0:
            q0 -= 1
            a[j:], carry = add2_carry(a[j:], b)
            borrow -= carry

        quotient[j] = q0
        a0 = a.pop()

    a.append(a0)
    return normalize(quotient), normalize(a)