"""Digit-level addition, subtraction, multiplication and exponentiation.

All functions take little-endian digit sequences and return a fresh list;
operands are never modified. Checked entry points return None where the
true result is not representable (negative), leaving the caller to decide
whether that is an error.
"""

from __future__ import annotations

from collections.abc import Sequence

from nonsmallint.compare import significant_length
from nonsmallint.constants import RADIX, U32_MAX
from nonsmallint.digits import DigitWindow


def check_scalar(scalar: int) -> int:
    """Validate a native scalar for the scalar fast paths.

    Raises:
        TypeError: If scalar is not an int
        ValueError: If scalar is outside [0, U32_MAX]
    """
    if isinstance(scalar, bool) or not isinstance(scalar, int):
        raise TypeError(f"Scalar must be int, got {type(scalar).__name__}")
    if scalar < 0 or scalar > U32_MAX:
        raise ValueError(f"Scalar out of range [0, {U32_MAX}]: {scalar}")
    return scalar


def add(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """Sum of two digit sequences. Total; the result has at most one extra digit."""
    out: list[int] = []
    carry = 0
    length = max(significant_length(lhs), significant_length(rhs))
    for l_d, r_d in zip(DigitWindow(lhs, length), DigitWindow(rhs, length)):
        temp = l_d + r_d + carry
        out.append(temp % RADIX)
        carry = temp // RADIX
    if carry != 0:
        out.append(carry % RADIX)
    return out


def checked_sub(lhs: Sequence[int], rhs: Sequence[int]) -> list[int] | None:
    """Difference lhs - rhs, or None if rhs is larger than lhs."""
    out: list[int] = []
    borrow = 0
    length = max(significant_length(lhs), significant_length(rhs))
    for l_d, r_d in zip(DigitWindow(lhs, length), DigitWindow(rhs, length)):
        diff = (RADIX + l_d) - (r_d + borrow)
        out.append(diff % RADIX)
        borrow = 1 - diff // RADIX
    if borrow != 0:
        return None
    return out


def mul_scalar(digits: Sequence[int], scalar: int) -> list[int]:
    """Multiply by a native scalar in [0, U32_MAX] with carry propagation."""
    check_scalar(scalar)
    out: list[int] = []
    carry = 0
    for digit in digits:
        temp = scalar * digit + carry
        out.append(temp % RADIX)
        carry = temp // RADIX
    while carry != 0:
        out.append(carry % RADIX)
        carry //= RADIX
    return out


def times_radix(digits: Sequence[int], n: int) -> list[int]:
    """Multiply by RADIX**n by prepending n zero digits."""
    if n < 0:
        raise ValueError(f"Shift cannot be negative: {n}")
    return [0] * n + list(digits)


def mul(lhs: Sequence[int], rhs: Sequence[int]) -> list[int]:
    """Schoolbook product: one scalar multiply and shifted add per rhs digit.

    O(len(lhs) * len(rhs)) digit operations.
    """
    out: list[int] = []
    for ix, rhs_d in enumerate(rhs):
        out = add(out, times_radix(mul_scalar(lhs, rhs_d), ix))
    return out


def power(digits: Sequence[int], exponent: int) -> list[int]:
    """Raise to a non-negative integer exponent by repeated squaring.

    power(x, 0) is one for every x, zero included.

    Raises:
        ValueError: If exponent is negative
    """
    if exponent < 0:
        raise ValueError(f"Exponent cannot be negative: {exponent}")
    result = [1]
    base = list(digits)
    while exponent > 0:
        if exponent & 1:
            result = mul(result, base)
        exponent >>= 1
        if exponent:
            base = mul(base, base)
    return result
