"""API endpoints for the NonSmallInt calculator."""

import asyncio

import structlog
from fastapi import APIRouter, Depends

from nonsmallint.config import ApiConfig
from nonsmallint.core import NonSmallInt
from nonsmallint.errors import DivisionByZero, Underflow
from nonsmallint.models import EvaluationError, EvaluationRequest, EvaluationResponse, Operation

logger = structlog.get_logger()

router = APIRouter()

_CONFIG = ApiConfig.from_env()


def get_config() -> ApiConfig:
    """Dependency provider for the API configuration.

    Override this in tests to inject different limits:
        app.dependency_overrides[get_config] = lambda: ApiConfig(max_exponent=3)
    """
    return _CONFIG


def evaluate_request(request: EvaluationRequest, config: ApiConfig) -> EvaluationResponse:
    """Apply the requested operation.

    Raises:
        DivisionByZero: For div, rem and divmod by zero
        Underflow: For sub with rhs > lhs
    """
    lhs, rhs = request.lhs, request.rhs
    if max(lhs.length(), rhs.length()) > config.max_operand_digits:
        return EvaluationResponse.failed(EvaluationError.OPERAND_TOO_LARGE)

    match request.op:
        case Operation.ADD:
            return EvaluationResponse(result=str(lhs + rhs))
        case Operation.SUB:
            return EvaluationResponse(result=str(lhs - rhs))
        case Operation.MUL:
            return EvaluationResponse(result=str(lhs * rhs))
        case Operation.DIV:
            return EvaluationResponse(result=str(lhs // rhs))
        case Operation.REM:
            return EvaluationResponse(result=str(lhs % rhs))
        case Operation.DIVMOD:
            quotient, remainder = divmod(lhs, rhs)
            return EvaluationResponse(result=str(quotient), remainder=str(remainder))
        case Operation.POW:
            if rhs > NonSmallInt.of(config.max_exponent):
                return EvaluationResponse.failed(EvaluationError.EXPONENT_TOO_LARGE)
            exponent = int(rhs)
            # The result has at most lhs.length() * exponent digits
            if lhs.length() * exponent > config.max_result_digits:
                return EvaluationResponse.failed(EvaluationError.EXPONENT_TOO_LARGE)
            return EvaluationResponse(result=str(lhs**exponent))
        case Operation.CMP:
            return EvaluationResponse(result=str(lhs.compare(rhs)))


@router.post("/evaluate", response_model_exclude_none=True)
async def evaluate(
    request: EvaluationRequest,
    config: ApiConfig = Depends(get_config),
) -> EvaluationResponse:
    """Evaluate one binary operation.

    Error Handling:
        - Operand that is not a decimal integer: 422 Validation Error (Pydantic)
        - Division by zero, underflow, oversized operand or result: 200 with ``error`` set

    The arithmetic runs in the default executor so long computations do
    not block the event loop.
    """
    logger.debug(
        "received_evaluation",
        op=request.op.value,
        lhs_length=request.lhs.length(),
        rhs_length=request.rhs.length(),
    )

    try:
        loop = asyncio.get_event_loop()
        response = await loop.run_in_executor(None, evaluate_request, request, config)
    except DivisionByZero:
        logger.warning("evaluation_division_by_zero", op=request.op.value)
        return EvaluationResponse.failed(EvaluationError.DIVISION_BY_ZERO)
    except Underflow:
        logger.warning("evaluation_underflow", op=request.op.value)
        return EvaluationResponse.failed(EvaluationError.UNDERFLOW)

    if response.error is not None:
        logger.warning("evaluation_rejected", op=request.op.value, error=response.error.value)
    return response
