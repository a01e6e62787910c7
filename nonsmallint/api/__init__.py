"""HTTP calculator for NonSmallInt values."""
