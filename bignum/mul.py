"""Multiplication of little-endian base 2**32 digit lists."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from enum import Enum

from bignum.arith import add2, add2_carry, sub2
from bignum.digit import BITS, MAX, cmp_digits, normalize

_LONG_LIMIT = 32
_KARATSUBA_LIMIT = 256


class Sign(Enum):
    """The sign of an integer value."""

    MINUS = -1
    NO_SIGN = 0
    PLUS = 1

    def __mul__(self, other: Sign) -> Sign:
        if not isinstance(other, Sign):
            return NotImplemented
        return Sign(self.value * other.value)


def _value(digits: Sequence[int]) -> int:
    """Return the integer held by a digit list."""
    return int.from_bytes(struct.pack(f"<{len(digits)}I", *digits), "little")


def _digits(n: int) -> list[int]:
    """Return the normalized digit list of a non-negative integer."""
    if n == 0:
        return []
    count = (n.bit_length() + BITS - 1) // BITS
    return list(struct.unpack(f"<{count}I", n.to_bytes(count * 4, "little")))


def mac_with_carry(a: int, b: int, c: int, acc: int) -> tuple[int, int]:
    """Compute ``acc + a + b * c``, returning (low digit, carry for the next digit)."""
    acc += a + b * c
    return acc & MAX, acc >> BITS


def _mul_with_carry(a: int, b: int, acc: int) -> tuple[int, int]:
    acc += a * b
    return acc & MAX, acc >> BITS


def mac_digit(acc: Sequence[int], b: Sequence[int], c: int) -> list[int]:
    """Return ``acc + b * c`` in as many digits as ``acc`` has."""
    result = list(acc)
    if c == 0:
        return result
    carry = 0
    low = []
    for a_digit, b_digit in zip(result, b):
        digit, carry = mac_with_carry(a_digit, b_digit, c, carry)
        low.append(digit)
    tail = result[len(b):]
    if carry:
        if not tail:
            raise OverflowError("carry overflow during multiplication!")
        tail, final_carry = add2_carry(tail, [carry])
        if final_carry:
            raise OverflowError("carry overflow during multiplication!")
    return low + tail


def _strip_low_zeros(digits: list[int]) -> int | None:
    """Return how many zero digits lead the list, or None if all are zero."""
    return next((pos for pos, d in enumerate(digits) if d), None)


def mac3(acc: Sequence[int], b: Sequence[int], c: Sequence[int]) -> list[int]:
    """Return ``acc + b * c`` in as many digits as ``acc`` has."""
    result = list(acc)
    b = list(b)
    c = list(c)
    offset = 0
    # Least-significant zeros have no effect on the output.
    if b and b[0] == 0:
        skip = _strip_low_zeros(b)
        if skip is None:
            return result
        b = b[skip:]
        offset += skip
    if c and c[0] == 0:
        skip = _strip_low_zeros(c)
        if skip is None:
            return result
        c = c[skip:]
        offset += skip

    x, y = (b, c) if len(b) < len(c) else (c, b)
    result[offset:] = _accumulate(result[offset:], x, y)
    return result


def _accumulate(acc: list[int], x: list[int], y: list[int]) -> list[int]:
    """Add ``x * y`` into ``acc``, where ``x`` is no longer than ``y``."""
    if len(x) <= _LONG_LIMIT:
        for pos, x_digit in enumerate(x):
            acc[pos:] = mac_digit(acc[pos:], y, x_digit)
        return acc
    if len(x) <= _KARATSUBA_LIMIT:
        return _karatsuba(acc, x, y)
    return _toom3(acc, x, y)


def _karatsuba(acc: list[int], x: list[int], y: list[int]) -> list[int]:
    half = len(x) // 2
    x0, x1 = x[:half], x[half:]
    y0, y1 = y[:half], y[half:]
    length = len(x1) + len(y1) + 1

    # x * y = p2 * b^2 + p2 * b + p0 * b + p0 - p1 * b
    p2 = normalize(mac3([0] * length, x1, y1))
    acc[half:] = add2(acc[half:], p2)
    acc[2 * half:] = add2(acc[2 * half:], p2)

    p0 = normalize(mac3([0] * length, x0, y0))
    acc = add2(acc, p0)
    acc[half:] = add2(acc[half:], p0)

    j0_sign, j0 = sub_sign(x1, x0)
    j1_sign, j1 = sub_sign(y1, y0)
    sign = j0_sign * j1_sign
    if sign is Sign.PLUS:
        p1 = normalize(mac3([0] * length, j0, j1))
        acc[half:] = sub2(acc[half:], p1)
    elif sign is Sign.MINUS:
        acc[half:] = mac3(acc[half:], j0, j1)
    return acc


def _signed_mul(a: int, b: int) -> int:
    magnitude = _value(mul_digits(_digits(abs(a)), _digits(abs(b))))
    return -magnitude if (a < 0) != (b < 0) else magnitude


def _toom3(acc: list[int], x: list[int], y: list[int]) -> list[int]:
    part = len(y) // 3 + 1

    x0_len = min(len(x), part)
    x1_len = min(len(x) - x0_len, part)
    y0_len = part
    y1_len = min(len(y) - y0_len, part)

    x0 = _value(x[:x0_len])
    x1 = _value(x[x0_len:x0_len + x1_len])
    x2 = _value(x[x0_len + x1_len:])
    y0 = _value(y[:y0_len])
    y1 = _value(y[y0_len:y0_len + y1_len])
    y2 = _value(y[y0_len + y1_len:])

    p = x0 + x2
    q = y0 + y2
    p2 = p - x1
    q2 = q - y1

    # Evaluate w(t) = x(t) * y(t) at t = 0, inf, 1, -1 and -2.
    r0 = _signed_mul(x0, y0)
    r4 = _signed_mul(x2, y2)
    r1 = _signed_mul(p + x1, q + y1)
    r2 = _signed_mul(p2, q2)
    r3 = _signed_mul((p2 + x2) * 2 - x0, (q2 + y2) * 2 - y0)

    # Bodrato's interpolation sequence; every division here is exact.
    comp3 = (r3 - r1) // 3
    comp1 = (r1 - r2) >> 1
    comp2 = r2 - r0
    comp3 = ((comp2 - comp3) >> 1) + (r4 << 1)
    comp2 += comp1 - r4
    comp1 -= comp3

    coefficients = (r0, comp1, comp2, comp3, r4)
    for power, coefficient in reversed(list(enumerate(coefficients))):
        start = part * power
        if coefficient > 0:
            acc[start:] = add2(acc[start:], _digits(coefficient))
        elif coefficient < 0:
            acc[start:] = sub2(acc[start:], _digits(-coefficient))
    return acc


def mul3(x: Sequence[int], y: Sequence[int]) -> list[int]:
    """Return the normalized product of two digit lists."""
    length = len(x) + len(y) + 1
    return normalize(mac3([0] * length, x, y))


def _shl_bits(a: Sequence[int], shift: int) -> list[int]:
    result = []
    carry = 0
    for digit in a:
        result.append(((digit << shift) | carry) & MAX)
        carry = digit >> (BITS - shift)
    if carry:
        result.append(carry)
    return result


def scalar_mul(a: Sequence[int], b: int) -> list[int]:
    """Return the digit list ``a`` multiplied by the single digit ``b``."""
    if b == 0:
        return []
    if b == 1:
        return list(a)
    if b & (b - 1) == 0:
        return _shl_bits(a, b.bit_length() - 1)
    result = []
    carry = 0
    for digit in a:
        low, carry = _mul_with_carry(digit, b, carry)
        result.append(low)
    if carry:
        result.append(carry)
    return result


def sub_sign(a: Sequence[int], b: Sequence[int]) -> tuple[Sign, list[int]]:
    """Return the sign and the magnitude of ``a - b``."""
    a = normalize(a)
    b = normalize(b)
    order = cmp_digits(a, b)
    if order > 0:
        return Sign.PLUS, normalize(sub2(a, b))
    if order < 0:
        return Sign.MINUS, normalize(sub2(b, a))
    return Sign.NO_SIGN, []


def mul_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the normalized product of two normalized digit lists."""
    if not a or not b:
        return []
    if len(b) == 1:
        return scalar_mul(a, b[0])
    if len(a) == 1:
        return scalar_mul(b, a[0])
    return mul3(a, b)