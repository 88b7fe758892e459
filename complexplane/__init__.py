"""Complex numbers in rectangular and polar form."""
import logging

from .compare import DEFAULT_PRECISION, almost_equals
from .complex import TAU, Complex, ComplexBase, Polar
from .exceptions import ComplexArithmeticError, InvalidExponentError, ZeroDivisorError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_PRECISION",
    "TAU",
    "Complex",
    "ComplexArithmeticError",
    "ComplexBase",
    "InvalidExponentError",
    "Polar",
    "ZeroDivisorError",
    "almost_equals",
]
