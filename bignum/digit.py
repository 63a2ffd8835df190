"""Digit-level primitives for little-endian base 2**32 numbers.

A number is a list of digits, least significant first. A normalized
list carries no zero digits at its most significant end, so zero is
the empty list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

BITS = 32
HALF_BITS = BITS // 2
HALF = (1 << HALF_BITS) - 1
MAX = (1 << BITS) - 1
LO_MASK = MAX

U32_MAX = (1 << 32) - 1


def from_double_digit(n: int) -> tuple[int, int]:
    """Split a double-width value into its (high, low) digits."""
    return (n >> BITS) & MAX, n & LO_MASK


def to_double_digit(hi: int, lo: int) -> int:
    """Join a high and a low digit into one double-width value."""
    return (lo & MAX) | ((hi & MAX) << BITS)


def u32_from_u128(n: int) -> tuple[int, int, int, int]:
    """Split a 128-bit value into four 32-bit words, most significant first."""
    return (
        (n >> 96) & U32_MAX,
        (n >> 64) & U32_MAX,
        (n >> 32) & U32_MAX,
        n & U32_MAX,
    )


def u32_to_u128(a: int, b: int, c: int, d: int) -> int:
    """Combine four 32-bit words, most significant first, into one value."""
    return d | (c << 32) | (b << 64) | (a << 96)


def normalize(digits: Iterable[int]) -> list[int]:
    """Return the digits with the zero digits at the top stripped off."""
    result = list(digits)
    while result and result[-1] == 0:
        result.pop()
    return result


def cmp_digits(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare two normalized digit lists, returning -1, 0 or 1."""
    key_a = (len(a), list(reversed(a)))
    key_b = (len(b), list(reversed(b)))
    return (key_a > key_b) - (key_a < key_b)


def bit_length(digits: Sequence[int]) -> int:
    """Return the fewest bits needed to express a normalized digit list."""
    if not digits:
        return 0
    return (len(digits) - 1) * BITS + digits[-1].bit_length()