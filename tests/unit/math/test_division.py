"""Tests for scalar division, dispatch and normalized long division."""

from unittest.mock import patch

import pytest
from structlog.testing import capture_logs

from nonsmallint import division
from nonsmallint.compare import equals
from nonsmallint.division import _difference, _smaller, _trial, div_scalar, divide, long_division


def digits_of(n: int) -> list[int]:
    """Little-endian digits of a native int (empty for zero)."""
    return [int(c) for c in reversed(str(n))] if n else []


def value_of(digits: list[int]) -> int:
    return int("".join(str(d) for d in reversed(digits)) or "0")


class TestDivScalar:
    """Tests for the single-pass scalar division."""

    def test_simple(self):
        """100 / 7 = 14 remainder 2."""
        result = div_scalar(digits_of(100), 7)
        assert result is not None
        quotient, remainder = result
        assert value_of(quotient) == 14
        assert value_of(remainder) == 2

    def test_quotient_is_least_significant_first(self):
        """Quotient digits are stored in the same order as the dividend."""
        result = div_scalar([6, 4, 2], 2)
        assert result is not None
        assert result[0] == [3, 2, 1]

    def test_zero_remainder_is_empty(self):
        """An exact division leaves an empty remainder."""
        result = div_scalar(digits_of(84), 4)
        assert result is not None
        assert result[1] == []

    def test_multi_digit_scalar(self):
        """Scalars wider than one digit are supported."""
        result = div_scalar(digits_of(10**20 + 12345), 4_000_000_000)
        assert result is not None
        assert value_of(result[0]) == (10**20 + 12345) // 4_000_000_000
        assert value_of(result[1]) == (10**20 + 12345) % 4_000_000_000

    def test_by_zero_returns_none(self):
        """Division by zero gives None."""
        assert div_scalar(digits_of(5), 0) is None

    def test_zero_dividend(self):
        """0 / n is zero remainder zero."""
        result = div_scalar([], 3)
        assert result == ([], [])


class TestDivideDispatch:
    """Tests for the three-way dispatch in divide."""

    def test_zero_divisor_returns_none(self):
        """Both empty and all-zero divisors give None."""
        assert divide(digits_of(10), []) is None
        assert divide(digits_of(10), [0, 0]) is None

    def test_single_digit_divisor_uses_scalar_path(self):
        """A one-digit divisor (even if padded) goes through div_scalar."""
        with patch.object(division, "div_scalar", wraps=division.div_scalar) as spy:
            result = divide(digits_of(100), [7, 0, 0])
        spy.assert_called_once_with(digits_of(100), 7)
        assert result is not None
        assert value_of(result[0]) == 14
        assert value_of(result[1]) == 2

    def test_short_dividend_shortcut(self):
        """A dividend shorter than the divisor is the remainder, unchanged."""
        with patch.object(division, "long_division") as spy:
            result = divide([5, 4], [3, 2, 1])
        spy.assert_not_called()
        assert result == ([], [5, 4])

    def test_general_case_uses_long_division(self):
        """Multi-digit divisors no longer than the dividend use long division."""
        with patch.object(division, "long_division", wraps=division.long_division) as spy:
            result = divide(digits_of(1000), digits_of(25))
        spy.assert_called_once()
        assert result is not None
        assert value_of(result[0]) == 40
        assert equals(result[1], [])

    def test_dispatch_branch_is_logged(self, debug_logging):
        """Each dispatch branch emits its own debug event."""
        with capture_logs() as logs:
            divide(digits_of(100), [7])
            divide([5, 4], [3, 2, 1])
            divide(digits_of(1000), digits_of(25))
        events = [e["event"] for e in logs]
        assert events == ["divide_scalar_path", "divide_trivial_path", "long_division_normalize"]

    def test_equal_lengths_smaller_dividend(self):
        """Same length but smaller dividend: quotient zero, remainder dividend."""
        result = divide(digits_of(12), digits_of(34))
        assert result is not None
        assert value_of(result[0]) == 0
        assert value_of(result[1]) == 12


class TestLongDivision:
    """Tests for normalized long division."""

    @pytest.mark.parametrize(
        "x, y",
        [
            (1000, 25),
            (99, 10),
            (100, 99),
            (12345678901234567890, 12345),
            (18446744073709551615, 4294967296),
            (10**40, 10**20 + 1),
            (2**200, 3**50),
            (999999999999, 100000),
            # Leading divisor digit 1: largest normalization factor
            (987654321987654321, 19),
            # Leading divisor digit 9: no scaling
            (987654321987654321, 91),
        ],
    )
    def test_matches_native(self, x, y):
        """Quotient and remainder match Python's divmod."""
        quotient, remainder = long_division(digits_of(x), digits_of(y))
        assert value_of(quotient) == x // y
        assert value_of(remainder) == x % y

    def test_correction_branch(self, debug_logging):
        """A trial digit that overshoots by one is corrected."""
        # 4100 / 588: the last trial digit is 410 // 58 = 7, but 7 * 588 > 4100
        x, y = 4100, 588
        with capture_logs() as logs:
            quotient, remainder = long_division(digits_of(x), digits_of(y))
        assert [e["trial"] for e in logs if e["event"] == "long_division_correction"] == [7]
        assert value_of(quotient) == x // y
        assert value_of(remainder) == x % y

    def test_padded_operands(self):
        """Stored most-significant zeros on either operand are ignored."""
        quotient, remainder = long_division([0, 0, 0, 1, 0, 0], [5, 2, 0])
        assert value_of(quotient) == 40
        assert value_of(remainder) == 0


class TestLongDivisionHelpers:
    """Tests for the trial / compare / subtract steps."""

    def test_trial_is_capped(self):
        """The trial quotient never exceeds RADIX - 1."""
        # r = 990, d = 10: 990 // 10 = 99, capped to 9
        assert _trial([0, 9, 9], [0, 1], 0, 2) == 9

    def test_trial_reads_past_end_as_zero(self):
        """Positions past the remainder buffer read as zero."""
        assert _trial([5, 4], [0, 9], 0, 2) == 0

    def test_smaller_at_offset(self):
        """Window comparison honours the offset."""
        r = [7, 1, 2, 3]
        assert _smaller(r, [2, 2], 1, 2) is False
        assert _smaller(r, [0, 0, 4], 1, 2) is True

    def test_smaller_equal_is_false(self):
        """An equal window is not smaller."""
        assert _smaller([1, 2, 3], [1, 2, 3], 0, 2) is False

    def test_difference_in_place(self):
        """The window at offset k is reduced in place."""
        r = [7, 1, 2, 3]
        _difference(r, [2, 2], 1, 2)
        assert r == [7, 9, 9, 2]

    def test_difference_grows_buffer(self):
        """Writing past the end of the remainder buffer grows it."""
        r = [5, 5]
        _difference(r, [5], 0, 2)
        assert r == [0, 5, 0]
