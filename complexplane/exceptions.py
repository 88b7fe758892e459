"""Exceptions raised by complexplane arithmetic."""


class ComplexArithmeticError(ArithmeticError):
    """Base class for arithmetic that has no defined result."""


class InvalidExponentError(ComplexArithmeticError, ValueError):
    """Exponent outside the domain of the requested power operation.

    Raised by ``Complex.ipow`` for negative exponents; ``ppow`` accepts any
    real exponent.
    """


class ZeroDivisorError(ComplexArithmeticError, ZeroDivisionError):
    """Division by (or inversion of) a value with zero magnitude."""
