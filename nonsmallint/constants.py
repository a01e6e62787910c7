"""Numeric constants shared across the arithmetic engine.

Digits are stored in a fixed radix; scalar fast paths accept operands that
fit in 32 bits, and native construction accepts unsigned 64-bit integers.
"""

# Storage and I/O radix (decimal digits)
RADIX = 10

# Largest scalar accepted by the scalar multiply / divide fast paths
U32_MAX = 2**32 - 1

# Largest native integer accepted by NonSmallInt.of()
U64_MAX = 2**64 - 1
