"""Division with remainder over little-endian digit sequences.

divide() dispatches three ways:
- Single-digit divisor: one high-to-low pass with a native running remainder
- Dividend shorter than divisor: quotient zero, remainder is the dividend
- Otherwise: normalized long division (Knuth's Algorithm D, using a
  3-digit by 2-digit trial quotient as in Syracuse EECS tech report 1162)

Both entry points return None when the divisor is zero.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from nonsmallint.arithmetic import check_scalar, mul_scalar
from nonsmallint.compare import is_zero, significant_length
from nonsmallint.constants import RADIX
from nonsmallint.digits import lookup, put

logger = structlog.get_logger()

DivResult = tuple[list[int], list[int]]


def div_scalar(digits: Sequence[int], scalar: int) -> DivResult | None:
    """Divide by a native scalar in [0, U32_MAX].

    Returns:
        (quotient, remainder) as digit lists, or None if scalar is zero
    """
    check_scalar(scalar)
    if scalar == 0:
        logger.debug("div_scalar_by_zero", dividend_length=len(digits))
        return None

    quotient: list[int] = []
    carry = 0
    for digit in reversed(digits):
        temp = carry * RADIX + digit
        quotient.append(temp // scalar)
        carry = temp % scalar
    # Digits were produced most-significant first
    quotient.reverse()

    remainder: list[int] = []
    while carry > 0:
        remainder.append(carry % RADIX)
        carry //= RADIX
    return quotient, remainder


def divide(lhs: Sequence[int], rhs: Sequence[int]) -> DivResult | None:
    """Divide lhs by rhs.

    Returns:
        (quotient, remainder) as digit lists, or None if rhs is zero
    """
    if is_zero(rhs):
        logger.debug("divide_by_zero", dividend_length=len(lhs))
        return None

    rhs_len = significant_length(rhs)
    if rhs_len == 1:
        logger.debug("divide_scalar_path", dividend_length=len(lhs), divisor=rhs[0])
        return div_scalar(lhs, rhs[0])
    lhs_len = significant_length(lhs)
    if lhs_len < rhs_len:
        logger.debug("divide_trivial_path", dividend_length=lhs_len, divisor_length=rhs_len)
        return [], list(lhs)
    return long_division(lhs, rhs)


def _trial(r: Sequence[int], d: Sequence[int], k: int, m: int) -> int:
    """Estimate quotient digit k from the top three remainder digits."""
    km = k + m
    r3 = (lookup(r, km) * RADIX + lookup(r, km - 1)) * RADIX + lookup(r, km - 2)
    d2 = lookup(d, m - 1) * RADIX + lookup(d, m - 2)
    return min(r3 // d2, RADIX - 1)


def _smaller(r: Sequence[int], dq: Sequence[int], k: int, m: int) -> bool:
    """True if the m+1 digit window of r at offset k is below dq."""
    for i in range(m, -1, -1):
        r_d = lookup(r, i + k)
        dq_d = lookup(dq, i)
        if r_d != dq_d:
            return r_d < dq_d
    return False


def _difference(r: list[int], dq: Sequence[int], k: int, m: int) -> None:
    """Subtract dq from the m+1 digit window of r at offset k, in place."""
    borrow = 0
    for i in range(m + 1):
        diff = (RADIX + lookup(r, i + k)) - (lookup(dq, i) + borrow)
        put(r, i + k, diff % RADIX)
        borrow = 1 - diff // RADIX
    assert borrow == 0, "trial quotient left a negative partial remainder"


def long_division(lhs: Sequence[int], rhs: Sequence[int]) -> DivResult:
    """Normalized long division.

    Requires 2 <= significant_length(rhs) <= significant_length(lhs).
    Scaling both operands by RADIX // (leading divisor digit + 1) keeps
    every trial quotient at most one too large, so a single correction
    per digit suffices.
    """
    n = significant_length(lhs)
    m = significant_length(rhs)

    f = RADIX // (rhs[m - 1] + 1)
    logger.debug("long_division_normalize", dividend_length=n, divisor_length=m, factor=f)

    r = mul_scalar(lhs, f)
    d = mul_scalar(rhs, f)
    q: list[int] = []

    for k in range(n - m, -1, -1):
        qt = _trial(r, d, k, m)
        dq = mul_scalar(d, qt)
        if _smaller(r, dq, k, m):
            logger.debug("long_division_correction", position=k, trial=qt)
            qt -= 1
            dq = mul_scalar(d, qt)
        q.append(qt)
        _difference(r, dq, k, m)

    # Quotient digits were produced most-significant first
    q.reverse()

    unscaled = div_scalar(r, f)
    assert unscaled is not None
    return q, unscaled[0]
