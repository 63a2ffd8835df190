"""Addition and subtraction of little-endian base 2**32 digit lists."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import zip_longest

from bignum.digit import BITS, MAX, normalize

_UNDERFLOW = "Cannot subtract b from a because b is larger than a."


def adc(carry: int, a: int, b: int) -> tuple[int, int]:
    """Add two digits and a carry, returning (digit, carry out)."""
    total = a + b + carry
    return total & MAX, total >> BITS


def sbb(borrow: int, a: int, b: int) -> tuple[int, int]:
    """Subtract a digit and a borrow from a digit, returning (digit, borrow out)."""
    difference = a - b - borrow
    return difference & MAX, int(difference < 0)


def add2_carry(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], int]:
    """Add ``b`` to ``a`` within the length of ``a``.

    Returns the digits of the sum, as many as ``a`` has, and the carry out
    of the top digit. ``a`` must be at least as long as ``b``.
    """
    if len(a) < len(b):
        raise ValueError("the first operand must be at least as long as the second")
    carry = 0
    result = []
    for x, y in zip_longest(a, b, fillvalue=0):
        digit, carry = adc(carry, x, y)
        result.append(digit)
    return result, carry


def add2(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add ``b`` to ``a``; the sum must fit in as many digits as ``a`` has."""
    result, carry = add2_carry(a, b)
    if carry:
        raise OverflowError("carry out of the top digit")
    return result


def sub2(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Subtract ``b`` from ``a``, keeping the length of ``a``.

    Raises ValueError if ``b`` is larger than ``a``.
    """
    span = min(len(a), len(b))
    if any(b[span:]):
        raise ValueError(_UNDERFLOW)
    borrow = 0
    result = []
    for x, y in zip_longest(a, b[:span], fillvalue=0):
        digit, borrow = sbb(borrow, x, y)
        result.append(digit)
    if borrow:
        raise ValueError(_UNDERFLOW)
    return result


def sub2rev(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Compute ``a - b`` with the length of ``b``, which must not be shorter.

    Raises ValueError if ``b`` is larger than ``a``.
    """
    if len(b) < len(a):
        raise ValueError("the second operand must be at least as long as the first")
    span = len(a)
    borrow = 0
    result = []
    for x, y in zip(a, b):
        digit, borrow = sbb(borrow, x, y)
        result.append(digit)
    high = list(b[span:])
    if borrow or any(high):
        raise ValueError(_UNDERFLOW)
    return result + high


def add_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the normalized sum of two digit lists of any lengths."""
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    result, carry = add2_carry(longer, shorter)
    if carry:
        result.append(carry)
    return normalize(result)


def sub_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the normalized difference ``a - b``; raise ValueError if negative."""
    return normalize(sub2(a, b))