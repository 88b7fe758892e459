"""Tolerance-based comparison for floating-point results.

Trigonometric round trips and chained arithmetic almost never reproduce a
value bit for bit, so results are compared against an absolute tolerance.
"""
import numbers

# Two values closer than this are considered equal.
DEFAULT_PRECISION: float = 1e-5


def _components(value):
    """Project ``value`` onto its (re, im) pair."""
    if hasattr(value, "to_rectangular"):
        rect = value.to_rectangular()
        return rect.re, rect.im
    if isinstance(value, numbers.Real):
        return float(value), 0.0
    if isinstance(value, numbers.Complex):
        return value.real, value.imag
    raise TypeError(f"Cannot compare value of type {type(value).__name__}")


def almost_equals(x, y, precision: float = DEFAULT_PRECISION) -> bool:
    """
    Check whether ``x`` and ``y`` differ by strictly less than ``precision``.

    Plain real numbers are compared directly. Anything exposing
    ``to_rectangular()`` (or a builtin ``complex``) is projected onto its
    rectangular components first and both components must agree, so a
    rectangular value can be compared against a polar one.
    """
    if isinstance(x, numbers.Real) and isinstance(y, numbers.Real):
        return bool(abs(x - y) < precision)
    x_re, x_im = _components(x)
    y_re, y_im = _components(y)
    return (almost_equals(x_re, y_re, precision)
            and almost_equals(x_im, y_im, precision))
