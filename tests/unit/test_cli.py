"""Tests for the command-line calculator."""

import pytest

from nonsmallint.cli import evaluate, main
from nonsmallint.core import NonSmallInt

N = NonSmallInt.of


class TestEvaluate:
    """Tests for evaluate()."""

    @pytest.mark.parametrize(
        "op, lhs, rhs, expected",
        [
            ("add", 1, 2, "3"),
            ("sub", 5, 5, "0"),
            ("checked_sub", 5, 6, "none"),
            ("mul", 999, 999, "998001"),
            ("div", 100, 7, "14"),
            ("rem", 100, 7, "2"),
            ("divmod", 100, 7, "14 2"),
            ("pow", 2, 10, "1024"),
            ("cmp", 3, 2, "1"),
        ],
    )
    def test_binary(self, op, lhs, rhs, expected):
        """Each binary operation renders its result."""
        assert evaluate(op, N(lhs), N(rhs)) == expected

    def test_len(self):
        """len is unary and counts significant digits."""
        assert evaluate("len", NonSmallInt.from_str("000123"), None) == "3"


class TestMain:
    """Tests for main()."""

    def test_prints_result(self, capsys):
        """A successful evaluation prints the result and exits 0."""
        assert main(["mul", "123456789123456789", "987654321987654321"]) == 0
        out = capsys.readouterr().out
        assert out.strip() == str(123456789123456789 * 987654321987654321)

    def test_arithmetic_failure_exits_1(self, capsys):
        """Division by zero prints to stderr and exits 1."""
        assert main(["div", "10", "0"]) == 1
        assert "Division by zero" in capsys.readouterr().err

    def test_underflow_exits_1(self, capsys):
        """Unchecked subtraction underflow exits 1."""
        assert main(["sub", "1", "2"]) == 1
        assert "Underflow" in capsys.readouterr().err

    def test_invalid_operand_exits_2(self):
        """Operands that are not decimal integers are argument errors."""
        with pytest.raises(SystemExit) as exc_info:
            main(["add", "12a3", "1"])
        assert exc_info.value.code == 2

    def test_missing_rhs_exits_2(self):
        """Binary operations need two operands."""
        with pytest.raises(SystemExit) as exc_info:
            main(["add", "1"])
        assert exc_info.value.code == 2

    def test_unknown_op_exits_2(self):
        """Unknown operations are rejected by argparse."""
        with pytest.raises(SystemExit) as exc_info:
            main(["sqrt", "4"])
        assert exc_info.value.code == 2
