import abc
import logging
import math
import numbers
from dataclasses import dataclass

from .compare import DEFAULT_PRECISION, almost_equals
from .exceptions import InvalidExponentError, ZeroDivisorError

logger = logging.getLogger(__name__)

TAU = 2 * math.pi
# Angles further out than this many turns are fmod-reduced before normalizing.
_MAX_WINDINGS = 1_000_000


def _normalize_angle(theta: float) -> float:
    """Bring ``theta`` into [0, 2π) by stepping whole turns."""
    if not math.isfinite(theta):
        raise ValueError(f"Cannot normalize non-finite angle {theta!r}")
    if abs(theta) > _MAX_WINDINGS * TAU:
        theta = math.fmod(theta, TAU)
    while theta < 0:
        theta += TAU
    while theta >= TAU:
        theta -= TAU
    # -ε + 2π rounds up to 2π
    if theta >= TAU:
        theta = 0.0
    return theta


class ComplexBase(abc.ABC):
    """
    Capabilities shared by both representations.

    Every value can report its magnitude, project itself into either
    representation and tell whether it lies (approximately) on one of the axes.
    """

    __slots__ = ()

    @abc.abstractmethod
    def magnitude(self) -> float: ...

    @abc.abstractmethod
    def to_rectangular(self) -> "Complex": ...

    @abc.abstractmethod
    def to_polar(self) -> "Polar": ...

    @abc.abstractmethod
    def is_real(self, precision: float = DEFAULT_PRECISION) -> bool: ...

    @abc.abstractmethod
    def is_imaginary(self, precision: float = DEFAULT_PRECISION) -> bool: ...

    def __complex__(self) -> complex:
        c = self.to_rectangular()
        return complex(c.re, c.im)


@dataclass(frozen=True)
class Complex(ComplexBase):
    """
    A complex number in rectangular form, re + im·i.

    Constructors
    ------------
    Complex(a, b)                 -> a + b i
    Complex.from_polar(r, theta)  -> r·e^{iθ}
    Complex.unit(theta)           -> e^{iθ}
    Complex.from_complex(5j)      -> 0 + 5 i
    Complex.imaginary(5)          -> 0 + 5 i
    """

    re: float
    im: float

    def __post_init__(self):
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    # ---------- convenience makers ----------
    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        return cls(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def unit(cls, theta: float) -> "Complex":
        """Point on the unit circle at angle ``theta``."""
        return cls(math.cos(theta), math.sin(theta))

    @classmethod
    def from_complex(cls, z: complex) -> "Complex":
        return cls(z.real, z.imag)

    @classmethod
    def imaginary(cls, n: float) -> "Complex":
        return cls(0.0, n)

    # ---------- basic properties ----------
    def magnitude(self) -> float:
        return math.hypot(self.re, self.im)

    def argument(self) -> float:
        return math.atan2(self.im, self.re)

    def is_real(self, precision: float = DEFAULT_PRECISION) -> bool:
        return almost_equals(0.0, self.im, precision)

    def is_imaginary(self, precision: float = DEFAULT_PRECISION) -> bool:
        return almost_equals(0.0, self.re, precision)

    def to_rectangular(self) -> "Complex":
        return self

    def to_polar(self) -> "Polar":
        # atan2 gives ±π for signed zeros; zero's angle is 0 by convention.
        if self.re == 0 and self.im == 0:
            return Polar(0.0, 0.0)
        return Polar(self.magnitude(), math.atan2(self.im, self.re))

    def conjugate(self) -> "Complex":
        return Complex(self.re, -self.im)

    def normalize(self) -> "Complex":
        m = self.magnitude()
        if m == 0:
            logger.debug("normalize() called on zero")
            raise ZeroDivisorError("Cannot normalize the zero value")
        return Complex(self.re / m, self.im / m)

    def inverse(self) -> "Complex":
        return 1 / self

    # ---------- powers ----------
    def ipow(self, n: int) -> "Complex":
        """Raise to a non-negative integer power by repeated multiplication."""
        if not isinstance(n, numbers.Integral):
            raise TypeError(f"ipow() needs an integer exponent, got {n!r}")
        if n < 0:
            logger.debug("ipow(%d) rejected on %r", n, self)
            raise InvalidExponentError(f"Cannot evaluate {self!r}.ipow({n}): use ppow({n}) instead.")
        result = Complex.ONE
        for _ in range(n):
            result = result * self
            if not (math.isfinite(result.re) and math.isfinite(result.im)):
                logger.debug("ipow(%d) of %r overflowed", n, self)
                raise OverflowError(f"{self!r}.ipow({n}) is out of float range")
        return result

    def ppow(self, n: float) -> "Complex":
        # Easier in polar form, then change back.
        return self.to_polar().pow(n).to_rectangular()

    def __pow__(self, n):
        if not isinstance(n, numbers.Real):
            return NotImplemented
        if isinstance(n, numbers.Integral) and n >= 0:
            return self.ipow(n)
        return self.ppow(n)

    # ---------- arithmetic ----------
    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __pos__(self) -> "Complex":
        return self

    def __add__(self, other):
        if isinstance(other, numbers.Real):
            return Complex(self.re + other, self.im)
        other = _as_rectangular(other)
        if other is None:
            return NotImplemented
        return Complex(self.re + other.re, self.im + other.im)

    def __radd__(self, other):
        return self + other

    def __sub__(self, other):
        if isinstance(other, numbers.Real):
            return Complex(self.re - other, self.im)
        other = _as_rectangular(other)
        if other is None:
            return NotImplemented
        return Complex(self.re - other.re, self.im - other.im)

    def __rsub__(self, other):
        if isinstance(other, numbers.Real):
            return Complex(other - self.re, -self.im)
        other = _as_rectangular(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return Complex(self.re * other, self.im * other)
        other = _as_rectangular(other)
        if other is None:
            return NotImplemented
        return Complex(self.re * other.re - self.im * other.im,
                       self.re * other.im + self.im * other.re)

    def __rmul__(self, other):
        return self * other

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            if other == 0:
                logger.debug("division of %r by scalar zero", self)
                raise ZeroDivisorError(f"Cannot divide {self!r} by zero")
            return Complex(self.re / other, self.im / other)
        other = _as_rectangular(other)
        if other is None:
            return NotImplemented
        denom = other.re * other.re + other.im * other.im
        if denom == 0:
            logger.debug("division of %r by %r", self, other)
            raise ZeroDivisorError(f"Cannot divide {self!r} by {other!r}: divisor has zero magnitude")
        return Complex((self.re * other.re + self.im * other.im) / denom,
                       (self.im * other.re - self.re * other.im) / denom)

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Real):
            denom = self.re * self.re + self.im * self.im
            if denom == 0:
                logger.debug("division of %r by %r", other, self)
                raise ZeroDivisorError(f"Cannot divide {other!r} by {self!r}: divisor has zero magnitude")
            return Complex(other * self.re / denom, -other * self.im / denom)
        other = _as_rectangular(other)
        if other is None:
            return NotImplemented
        return other / self

    __abs__ = magnitude

    # readable REPL / print‑outs
    def __str__(self):
        return f"{self.re:g}{self.im:+g}i"


@dataclass(frozen=True)
class Polar(ComplexBase):
    """
    A complex number in polar form, r·e^{iθ}.

    ``theta`` is normalized into [0, 2π) on construction. ``r`` keeps its
    sign: Polar(-r, θ) is the same point as Polar(r, θ + π), and any value
    with r == 0 is zero whatever its angle.
    """

    r: float
    theta: float

    def __post_init__(self):
        object.__setattr__(self, "r", float(self.r))
        object.__setattr__(self, "theta", _normalize_angle(float(self.theta)))

    @classmethod
    def from_complex(cls, z: complex) -> "Polar":
        return Complex.from_complex(z).to_polar()

    @classmethod
    def imaginary(cls, n: float) -> "Polar":
        """n·i, kept with a non-negative magnitude."""
        return cls(abs(n), math.pi / 2 if n >= 0 else 3 * math.pi / 2)

    def magnitude(self) -> float:
        return self.r

    def is_real(self, precision: float = DEFAULT_PRECISION) -> bool:
        return almost_equals(0.0, self.r * math.sin(self.theta), precision)

    def is_imaginary(self, precision: float = DEFAULT_PRECISION) -> bool:
        return almost_equals(0.0, self.r * math.cos(self.theta), precision)

    def to_rectangular(self) -> Complex:
        return Complex(self.r * math.cos(self.theta), self.r * math.sin(self.theta))

    def to_polar(self) -> "Polar":
        return self

    def conjugate(self) -> "Polar":
        return Polar(self.r, -self.theta)

    def inverse(self) -> "Polar":
        return 1 / self

    def pow(self, n: float) -> "Polar":
        """De Moivre: (r·e^{iθ})^n = r^n·e^{inθ}."""
        r, theta = self.r, self.theta
        if r < 0:
            r, theta = -r, theta + math.pi
        if r == 0 and n < 0:
            logger.debug("pow(%r) of zero", n)
            raise ZeroDivisorError(f"Cannot raise zero to the negative power {n!r}")
        try:
            magnitude = r ** n
        except OverflowError:
            logger.debug("pow(%r) of %r overflowed", n, self)
            raise OverflowError(f"{self!r}.pow({n!r}) is out of float range") from None
        return Polar(magnitude, theta * n)

    def __pow__(self, n):
        if not isinstance(n, numbers.Real):
            return NotImplemented
        return self.pow(n)

    def __neg__(self) -> "Polar":
        return Polar(-self.r, self.theta)

    def __pos__(self) -> "Polar":
        return self

    def __mul__(self, other):
        other = _as_polar(other)
        if other is None:
            return NotImplemented
        return Polar(self.r * other.r, self.theta + other.theta)

    def __rmul__(self, other):
        return self * other

    def __truediv__(self, other):
        other = _as_polar(other)
        if other is None:
            return NotImplemented
        if other.r == 0:
            logger.debug("division of %r by %r", self, other)
            raise ZeroDivisorError(f"Cannot divide {self!r} by {other!r}: divisor has zero magnitude")
        return Polar(self.r / other.r, self.theta - other.theta)

    def __rtruediv__(self, other):
        other = _as_polar(other)
        if other is None:
            return NotImplemented
        return other / self

    def __abs__(self) -> float:
        return abs(self.r)

    def __str__(self):
        return f"{self.r:g}∠{self.theta:g}"


def _as_rectangular(other):
    if isinstance(other, ComplexBase):
        return other.to_rectangular()
    if isinstance(other, complex):
        return Complex.from_complex(other)
    return None


def _as_polar(other):
    if isinstance(other, numbers.Real):
        return Polar(other, 0.0)
    if isinstance(other, ComplexBase):
        return other.to_polar()
    if isinstance(other, complex):
        return Polar.from_complex(other)
    return None


Complex.ZERO = Complex(0, 0)
Complex.ONE = Complex(1, 0)
Complex.I = Complex(0, 1)

Polar.ZERO = Polar(0, 0)
Polar.ONE = Polar(1, 0)
Polar.I = Polar(1, math.pi / 2)


if __name__ == "__main__":
    z1 = Complex(3, 4)                   # 3 + 4i
    z2 = Polar(2, math.pi / 4)           # 2·e^{iπ/4}
    print(z1.magnitude())                # 5.0
    print(z1.normalize())                # ≈ 0.6 + 0.8i
    print(z1 + z2)                       # mixed representations
    print(z1 * z2.to_rectangular())
    print(z1.inverse())
    print(z1.to_polar().pow(0.5))        # principal square root
    print(Complex.unit(math.pi / 2))     # e^{iπ/2}  => ≈ 0 + 1i
