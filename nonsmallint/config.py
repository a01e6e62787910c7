"""Runtime configuration for the calculator API."""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class ApiConfig:
    """Settings for the HTTP calculator.

    Schoolbook multiplication and long division cost O(n*m) digit
    operations, so operand and result sizes are bounded per request.

    Attributes:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to bind to (default: 8000)
        debug: Enable reload mode (default: False)
        max_exponent: Largest exponent accepted by the pow operation
        max_operand_digits: Largest significant length accepted for either
            operand of any operation
        max_result_digits: Largest pow result, bounded by
            lhs.length() * exponent before computing
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    max_exponent: int = 10_000
    max_operand_digits: int = 500
    max_result_digits: int = 1_000

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Read settings from NSI_HOST, NSI_PORT, NSI_DEBUG, NSI_MAX_EXPONENT,
        NSI_MAX_OPERAND_DIGITS and NSI_MAX_RESULT_DIGITS."""
        return cls(
            host=os.environ.get("NSI_HOST", cls.host),
            port=int(os.environ.get("NSI_PORT", str(cls.port))),
            debug=_env_flag("NSI_DEBUG"),
            max_exponent=int(os.environ.get("NSI_MAX_EXPONENT", str(cls.max_exponent))),
            max_operand_digits=int(os.environ.get("NSI_MAX_OPERAND_DIGITS", str(cls.max_operand_digits))),
            max_result_digits=int(os.environ.get("NSI_MAX_RESULT_DIGITS", str(cls.max_result_digits))),
        )


# Default configuration instance
DEFAULT_API_CONFIG = ApiConfig()
