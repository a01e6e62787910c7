"""Error types raised by NonSmallInt arithmetic."""


class NonSmallIntError(ArithmeticError):
    """Base class for NonSmallInt arithmetic errors."""

    pass


class DivisionByZero(NonSmallIntError):
    """Division or remainder by the zero value."""

    pass


class Underflow(NonSmallIntError):
    """Subtraction would produce a negative result."""

    pass


class ParseFailure(NonSmallIntError, ValueError):
    """String is not a plain run of decimal digits."""

    pass
