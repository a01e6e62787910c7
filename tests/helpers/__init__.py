"""Test helpers module for shared test utilities.

- strategies: hypothesis strategies for native and NonSmallInt operands
"""

from tests.helpers.strategies import exponents, nonzero_u64s, scalars, u32s, u64s

__all__ = [
    "u64s",
    "nonzero_u64s",
    "u32s",
    "scalars",
    "exponents",
]
