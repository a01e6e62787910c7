"""Pydantic models for the calculator API.

Operands travel as decimal strings so values of any size survive JSON.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, WithJsonSchema

from nonsmallint.core import NonSmallInt


def validate_decimal(value: Any) -> NonSmallInt:
    """Validate a decimal operand.

    Args:
        value: Decimal string, non-negative int, or NonSmallInt

    Returns:
        Parsed NonSmallInt

    Raises:
        ValueError: If value is not a non-negative decimal integer
    """
    if isinstance(value, NonSmallInt):
        return value

    # Accept int directly
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise ValueError(f"Operand cannot be negative: {value}")
        return NonSmallInt.from_str(str(value))

    if not isinstance(value, str):
        raise ValueError(f"Operand must be string or int, got {type(value).__name__}")

    parsed = NonSmallInt.parse(value)
    if parsed is None:
        raise ValueError(f"Operand must be a decimal integer string: '{value}'")
    return parsed


# Unsigned integer of any size as decimal string (validated)
DecimalOperand = Annotated[
    NonSmallInt,
    BeforeValidator(validate_decimal),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "pattern": r"^\s*[0-9]*\s*$"}),
]


class Operation(str, Enum):
    """Operations accepted by POST /evaluate."""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    REM = "rem"
    DIVMOD = "divmod"
    POW = "pow"
    CMP = "cmp"


class EvaluationError(str, Enum):
    """Arithmetic failures reported in an evaluation response."""

    DIVISION_BY_ZERO = "division_by_zero"
    UNDERFLOW = "underflow"
    EXPONENT_TOO_LARGE = "exponent_too_large"
    OPERAND_TOO_LARGE = "operand_too_large"


class EvaluationRequest(BaseModel):
    """A single binary operation on two decimal operands."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    op: Operation
    lhs: DecimalOperand
    rhs: DecimalOperand


class EvaluationResponse(BaseModel):
    """Result of an evaluation.

    Attributes:
        result: Decimal result; for cmp one of "-1", "0", "1"
        remainder: Remainder for divmod, otherwise None
        error: Failure kind, or None on success
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    result: str | None = None
    remainder: str | None = None
    error: EvaluationError | None = Field(default=None)

    @classmethod
    def failed(cls, error: EvaluationError) -> "EvaluationResponse":
        return cls(error=error)
