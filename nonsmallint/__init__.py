"""NonSmallInt - arbitrary-precision unsigned integers in decimal digits."""

from nonsmallint.core import NonSmallInt, nsi_sum
from nonsmallint.errors import DivisionByZero, NonSmallIntError, ParseFailure, Underflow

__version__ = "0.1.0"
__all__ = [
    "NonSmallInt",
    "nsi_sum",
    "NonSmallIntError",
    "DivisionByZero",
    "Underflow",
    "ParseFailure",
    "__version__",
]
