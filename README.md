# bignum

Arithmetic on arbitrary-precision unsigned integers. A number is a plain
Python list of base 2**32 digits, least significant digit first. A
*normalized* list has no zero digits at its top end, so zero is `[]`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `bignum.digit`: the digit constants (`BITS`, `HALF_BITS`, `HALF`, `MAX`) and
  helpers `normalize`, `cmp_digits`, `bit_length`, `from_double_digit`,
  `to_double_digit`, `u32_from_u128` and `u32_to_u128`.
- `bignum.arith`: digit primitives `adc` and `sbb`, plus `add2_carry`,
  `add2`, `sub2` and `sub2rev`, which keep the operand length. The
  normalized forms are `add_digits` and `sub_digits`.
- `bignum.mul`: `mul_digits` is the entry point. It uses long multiplication
  for small operands, Karatsuba for medium ones and Toom-3 for the largest.
  It also has the helpers `mac_with_carry`, `mac_digit`, `mac3`, `mul3`,
  `scalar_mul`, `sub_sign`, and the `Sign` enum (`MINUS`, `NO_SIGN`, `PLUS`,
  multipliable with `*`).
- `bignum.bitwise`: `and_digits`, `or_digits`, `xor_digits`.
- `bignum.division`: `div_rem` returns quotient and remainder using Knuth's
  algorithm D. Related helpers are `div_rem_core`, `div_rem_digit`,
  `rem_digit`, `div_wide`, `div_half` and `sub_mul_digit_same_len`.
- `bignum.power`: `pow_digits` takes an `int` exponent. `modpow` and
  `plain_modpow` take digit-list exponents and moduli.

## Usage

```python
from bignum.arith import add_digits, sub_digits
from bignum.bitwise import xor_digits
from bignum.digit import bit_length, cmp_digits
from bignum.division import div_rem
from bignum.mul import Sign, mul_digits, sub_sign
from bignum.power import modpow, pow_digits

add_digits([0xFFFFFFFF], [1])           # [0, 1]        (2**32)
sub_digits([0, 1], [1])                 # [4294967295]
mul_digits([0xFFFFFFFF], [0xFFFFFFFF])  # [1, 4294967294]
div_rem([0, 1], [3])                    # ([1431655765], [1])
pow_digits([2], 40)                     # [0, 256]
modpow([4], [13], [497])                # [445]
xor_digits([5], [5])                    # []
sub_sign([5], [7])                      # (Sign.MINUS, [2])
cmp_digits([0, 1], [0xFFFFFFFF])        # 1
bit_length([0, 1])                      # 33
```

## Errors

- `sub2`, `sub2rev` and `sub_digits` raise `ValueError` when the result would
  be negative.
- `add2` raises `OverflowError` when the sum does not fit in the first
  operand's length.
- Division by a zero divisor raises `ZeroDivisionError`. So does `modpow`
  or `plain_modpow` with a zero modulus.
- `pow_digits` raises `ValueError` for a negative exponent. It raises
  `MemoryError` when the base is at least 2 and the exponent is above
  2**128 - 1.

`plain_modpow` with a zero exponent returns `[1]` without reducing it by the
modulus. `modpow` always reduces its result.

## What this package does not do

There is no integer object type with operators. There is no conversion
between digit lists and Python `int`, strings or bytes. The package also has
no bit shifting, integer roots, gcd/lcm helpers, parse-error types and no
command-line program. Callers work with the digit-list functions above
directly.