"""Significant length, equality and ordering over digit sequences."""

from __future__ import annotations

from collections.abc import Sequence

from nonsmallint.constants import RADIX
from nonsmallint.digits import DigitWindow


def significant_length(digits: Sequence[int], radix: int = RADIX) -> int:
    """Number of digits excluding the most-significant run of zeros.

    Args:
        digits: Little-endian digit sequence
        radix: Radix to measure in; only the storage radix is supported

    Returns:
        Significant length (0 for the zero value)

    Raises:
        NotImplementedError: If radix differs from the storage radix
    """
    if radix != RADIX:
        raise NotImplementedError(f"Length in radix {radix} is not supported (storage radix is {RADIX})")
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return end


def is_zero(digits: Sequence[int]) -> bool:
    """True for the empty sequence and for any all-zero sequence."""
    return all(d == 0 for d in digits)


def equals(lhs: Sequence[int], rhs: Sequence[int]) -> bool:
    length = significant_length(lhs)
    if length != significant_length(rhs):
        return False
    return all(l_d == r_d for l_d, r_d in zip(DigitWindow(lhs, length), DigitWindow(rhs, length)))


def less_than(lhs: Sequence[int], rhs: Sequence[int]) -> bool:
    """Strict ordering, comparing from the most-significant digit down."""
    lhs_len = significant_length(lhs)
    rhs_len = significant_length(rhs)
    if lhs_len != rhs_len:
        return lhs_len < rhs_len

    lhs_digits = DigitWindow(lhs, lhs_len)
    rhs_digits = DigitWindow(rhs, rhs_len)
    for l_d, r_d in zip(lhs_digits.rev(), rhs_digits.rev()):
        if l_d < r_d:
            return True
        if l_d > r_d:
            return False
    return False


def compare(lhs: Sequence[int], rhs: Sequence[int]) -> int:
    """Three-way comparison: -1 if lhs < rhs, 0 if equal, 1 if lhs > rhs."""
    if less_than(lhs, rhs):
        return -1
    if equals(lhs, rhs):
        return 0
    return 1
