"""Arbitrary-precision unsigned integer stored as decimal digits.

NonSmallInt wraps a little-endian tuple of decimal digits and exposes the
usual numeric operators. Values are immutable: every operation returns a
new instance.

Failures follow two conventions:
- Operators raise (DivisionByZero, Underflow)
- checked_* methods and NonSmallInt.parse() return None instead

Usage pattern:
    from nonsmallint import NonSmallInt

    a = NonSmallInt.of(100)
    b = NonSmallInt.parse("7")

    q, r = divmod(a, b)        # (14, 2)
    a - b                      # 93
    b.checked_sub(a)           # None
    a ** 20                    # 1 followed by 40 zeros
"""

from __future__ import annotations

from collections.abc import Iterable

from nonsmallint import arithmetic, compare, division
from nonsmallint.constants import RADIX, U64_MAX
from nonsmallint.digits import strip
from nonsmallint.errors import DivisionByZero, ParseFailure, Underflow

_DECIMAL_DIGITS = "0123456789"


class NonSmallInt:
    """Unsigned integer of unbounded size, one decimal digit per slot.

    Digits are stored least-significant first. The stored sequence may
    carry most-significant zeros; such values compare, hash and print the
    same as their stripped form. The empty sequence is zero.

    Attributes:
        digits: Stored digits, least-significant first (read-only)
    """

    __slots__ = ("_digits",)
    _digits: tuple[int, ...]

    def __init__(self, digits: Iterable[int] = ()) -> None:
        """Create a value from little-endian digits.

        Args:
            digits: Digits in [0, RADIX), least-significant first

        Raises:
            ValueError: If any digit is outside [0, RADIX)
        """
        stored = tuple(digits)
        for d in stored:
            if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d < RADIX:
                raise ValueError(f"Digit out of range [0, {RADIX}): {d!r}")
        self._digits = stored

    @classmethod
    def _wrap(cls, digits: Iterable[int]) -> NonSmallInt:
        # Skips validation for digits produced by the arithmetic engine
        out = cls.__new__(cls)
        out._digits = tuple(digits)
        return out

    # --- Construction ---

    @classmethod
    def of(cls, n: int) -> NonSmallInt:
        """Construct from a native unsigned 64-bit integer.

        Raises:
            TypeError: If n is not an int
            ValueError: If n is negative or exceeds 2^64-1
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"NonSmallInt.of requires int, got {type(n).__name__}")
        if n < 0 or n > U64_MAX:
            raise ValueError(f"Value out of u64 range: {n}")
        parsed = cls.parse(str(n))
        assert parsed is not None
        return parsed

    @classmethod
    def parse(cls, s: str) -> NonSmallInt | None:
        """Parse a decimal string, ignoring surrounding whitespace.

        Returns:
            The parsed value, or None if any remaining character is not
            a decimal digit. Leading zeros are accepted.
        """
        trimmed = s.strip()
        if any(c not in _DECIMAL_DIGITS for c in trimmed):
            return None
        return cls._wrap(int(c) for c in reversed(trimmed))

    @classmethod
    def from_str(cls, s: str) -> NonSmallInt:
        """Parse a decimal string.

        Raises:
            ParseFailure: If the string is not a plain run of decimal digits
        """
        parsed = cls.parse(s)
        if parsed is None:
            raise ParseFailure(f"Not a decimal integer: {s!r}")
        return parsed

    @classmethod
    def zero(cls) -> NonSmallInt:
        return cls._wrap(())

    @classmethod
    def one(cls) -> NonSmallInt:
        return cls._wrap((1,))

    # --- Inspection ---

    @property
    def digits(self) -> tuple[int, ...]:
        """Stored digits, least-significant first."""
        return self._digits

    def length(self, radix: int = RADIX) -> int:
        """Number of significant digits (0 for zero)."""
        return compare.significant_length(self._digits, radix)

    def is_zero(self) -> bool:
        return compare.is_zero(self._digits)

    def __repr__(self) -> str:
        return f"NonSmallInt({self})"

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        return "".join(str(d) for d in reversed(strip(self._digits)))

    def __hash__(self) -> int:
        return hash(tuple(strip(self._digits)))

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self.is_zero()

    def __int__(self) -> int:
        value = 0
        for d in reversed(self._digits):
            value = value * RADIX + d
        return value

    # --- Arithmetic operations ---

    def __add__(self, other: NonSmallInt | int) -> NonSmallInt:
        other_nsi = _coerce(other)
        if other_nsi is None:
            return NotImplemented
        return NonSmallInt._wrap(arithmetic.add(self._digits, other_nsi._digits))

    def __radd__(self, other: int) -> NonSmallInt:
        # Lets builtin sum() start from 0
        return self.__add__(other)

    def __sub__(self, other: NonSmallInt | int) -> NonSmallInt:
        """Subtract other from self.

        Requires self >= other. Breaking that precondition is a caller bug,
        not a recoverable result; use checked_sub() when it may not hold.

        Raises:
            Underflow: If other is larger than self
        """
        other_nsi = _coerce(other)
        if other_nsi is None:
            return NotImplemented
        result = self.checked_sub(other_nsi)
        if result is None:
            raise Underflow(f"Underflow: {self} - {other_nsi}")
        return result

    def checked_sub(self, other: NonSmallInt | int) -> NonSmallInt | None:
        """Subtract, returning None instead of raising when other > self."""
        other_nsi = _require(other)
        out = arithmetic.checked_sub(self._digits, other_nsi._digits)
        if out is None:
            return None
        return NonSmallInt._wrap(out)

    def __mul__(self, other: NonSmallInt | int) -> NonSmallInt:
        """Multiply by another value, or by a native scalar in [0, 2^32-1]."""
        if isinstance(other, NonSmallInt):
            return NonSmallInt._wrap(arithmetic.mul(self._digits, other._digits))
        if isinstance(other, int) and not isinstance(other, bool):
            return NonSmallInt._wrap(arithmetic.mul_scalar(self._digits, other))
        return NotImplemented

    def __rmul__(self, other: int) -> NonSmallInt:
        return self.__mul__(other)

    def times_radix(self, n: int) -> NonSmallInt:
        """Multiply by RADIX**n (shift left by n digit positions)."""
        return NonSmallInt._wrap(arithmetic.times_radix(self._digits, n))

    def __pow__(self, exponent: int, modulo: None = None) -> NonSmallInt:
        if modulo is not None:
            raise TypeError("NonSmallInt does not support three-argument pow()")
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def pow(self, exponent: int) -> NonSmallInt:
        """Raise to a non-negative integer power; pow(x, 0) is one."""
        return NonSmallInt._wrap(arithmetic.power(self._digits, exponent))

    def checked_divmod(self, other: NonSmallInt | int) -> tuple[NonSmallInt, NonSmallInt] | None:
        """Quotient and remainder, or None if other is zero.

        A native int divisor takes the scalar fast path and must lie in
        [0, 2^32-1].
        """
        if isinstance(other, NonSmallInt):
            result = division.divide(self._digits, other._digits)
        elif isinstance(other, int) and not isinstance(other, bool):
            result = division.div_scalar(self._digits, other)
        else:
            raise TypeError(f"Cannot divide NonSmallInt by {type(other).__name__}")
        if result is None:
            return None
        quotient, remainder = result
        return NonSmallInt._wrap(quotient), NonSmallInt._wrap(remainder)

    def checked_div(self, other: NonSmallInt | int) -> NonSmallInt | None:
        """Floor division, returning None if other is zero."""
        result = self.checked_divmod(other)
        if result is None:
            return None
        return result[0]

    def checked_rem(self, other: NonSmallInt | int) -> NonSmallInt | None:
        """Remainder, returning None if other is zero."""
        result = self.checked_divmod(other)
        if result is None:
            return None
        return result[1]

    def __divmod__(self, other: NonSmallInt | int) -> tuple[NonSmallInt, NonSmallInt]:
        """Quotient and remainder.

        Raises:
            DivisionByZero: If other is zero
        """
        if not isinstance(other, (NonSmallInt, int)) or isinstance(other, bool):
            return NotImplemented
        result = self.checked_divmod(other)
        if result is None:
            raise DivisionByZero(f"Division by zero: divmod({self}, 0)")
        return result

    def __floordiv__(self, other: NonSmallInt | int) -> NonSmallInt:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        if not isinstance(other, (NonSmallInt, int)) or isinstance(other, bool):
            return NotImplemented
        result = self.checked_div(other)
        if result is None:
            raise DivisionByZero(f"Division by zero: {self} // 0")
        return result

    def __mod__(self, other: NonSmallInt | int) -> NonSmallInt:
        """Remainder.

        Raises:
            DivisionByZero: If other is zero
        """
        if not isinstance(other, (NonSmallInt, int)) or isinstance(other, bool):
            return NotImplemented
        result = self.checked_rem(other)
        if result is None:
            raise DivisionByZero(f"Modulo by zero: {self} % 0")
        return result

    def __truediv__(self, other: object) -> NonSmallInt:
        """True division is not supported (would produce a fraction)."""
        raise TypeError("NonSmallInt only supports floor division (//), not true division (/)")

    # --- Comparison operations ---

    def compare(self, other: NonSmallInt) -> int:
        """Three-way comparison: -1, 0 or 1."""
        return compare.compare(self._digits, _require(other)._digits)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, NonSmallInt):
            return compare.equals(self._digits, other._digits)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: NonSmallInt) -> bool:
        if not isinstance(other, NonSmallInt):
            return NotImplemented
        return compare.less_than(self._digits, other._digits)

    def __le__(self, other: NonSmallInt) -> bool:
        if not isinstance(other, NonSmallInt):
            return NotImplemented
        return not compare.less_than(other._digits, self._digits)

    def __gt__(self, other: NonSmallInt) -> bool:
        if not isinstance(other, NonSmallInt):
            return NotImplemented
        return compare.less_than(other._digits, self._digits)

    def __ge__(self, other: NonSmallInt) -> bool:
        if not isinstance(other, NonSmallInt):
            return NotImplemented
        return not compare.less_than(self._digits, other._digits)


def _coerce(x: object) -> NonSmallInt | None:
    """Accept a NonSmallInt or a native u64 int; None for anything else."""
    if isinstance(x, NonSmallInt):
        return x
    if isinstance(x, int) and not isinstance(x, bool):
        return NonSmallInt.of(x)
    return None


def _require(x: object) -> NonSmallInt:
    out = _coerce(x)
    if out is None:
        raise TypeError(f"Expected NonSmallInt or int, got {type(x).__name__}")
    return out


def nsi_sum(values: Iterable[NonSmallInt]) -> NonSmallInt:
    """Sum of values; the empty sum is zero."""
    acc = NonSmallInt.zero()
    for value in values:
        acc = acc + value
    return acc
