"""Arithmetic on unsigned integers held as little-endian base 2**32 digit lists."""

__version__ = "0.1.0"
__all__ = ["arith", "bitwise", "digit", "division", "mul", "power"]