"""Bitwise operations on little-endian base 2**32 digit lists."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import zip_longest

from bignum.digit import normalize


def and_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the normalized bitwise AND of two digit lists."""
    return normalize(x & y for x, y in zip(a, b))


def or_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the bitwise OR of two digit lists."""
    return [x | y for x, y in zip_longest(a, b, fillvalue=0)]


def xor_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the normalized bitwise XOR of two digit lists."""
    return normalize(x ^ y for x, y in zip_longest(a, b, fillvalue=0))