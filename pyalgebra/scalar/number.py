"""
Dual-mode scalar: the complex form.

A dual-mode scalar is either a plain real number (Python float, int, or a
numpy real scalar) or a ComplexNumber. ComplexNumber interoperates with
real numbers through Python's numeric operator protocol, so ``2.0 + z``
and ``z * 3`` both produce a ComplexNumber while real-with-real arithmetic
stays real.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Union

from pyalgebra.core.exceptions import DivideByZeroError
from pyalgebra.scalar.polar import PolarCoordinate


@total_ordering
@dataclass(frozen=True, eq=False)
class ComplexNumber:
    """
    Immutable complex number ``a + bi``.

    NaN components are normalized to 0 at construction. Every arithmetic
    operation returns a new ComplexNumber.

    Attributes:
        a: Real part
        b: Imaginary part

    Derived:
        r: Magnitude sqrt(a^2 + b^2)
        theta: Angle atan2(b, a) in radians

    Ordering compares real parts first and breaks ties with the imaginary
    part. Equality is ordering based, exact, and works against plain reals
    (``ComplexNumber(3, 0) == 3.0``).
    """
    a: float
    b: float = 0.0

    def __post_init__(self):
        for part in (self.a, self.b):
            if not isinstance(part, numbers.Real):
                raise TypeError(
                    f"ComplexNumber parts must be real numbers, got {type(part).__name__} {part!r}"
                )
        a = float(self.a)
        b = float(self.b)
        object.__setattr__(self, 'a', 0.0 if math.isnan(a) else a)
        object.__setattr__(self, 'b', 0.0 if math.isnan(b) else b)

    # --- Construction ---

    @classmethod
    def of(cls, n: Any) -> ComplexNumber:
        """
        Build a ComplexNumber from any supported number.

        Accepts ComplexNumber (returned as an equal copy), any real number
        (imaginary part 0), and builtin/numpy complex values.

        Raises:
            TypeError: If n is not a number
        """
        value = _coerce(n)
        if value is None:
            raise TypeError(f"cannot convert {type(n).__name__} to ComplexNumber")
        return value

    @classmethod
    def from_polar(cls, r: float | PolarCoordinate, theta: float | None = None) -> ComplexNumber:
        """Build from a PolarCoordinate or from (r, theta)."""
        if isinstance(r, PolarCoordinate):
            r, theta = r.r, r.theta
        return cls(r * math.cos(theta), r * math.sin(theta))

    # --- Derived values ---

    @property
    def r(self) -> float:
        """Magnitude."""
        return math.hypot(self.a, self.b)

    @property
    def theta(self) -> float:
        """Angle in radians, in (-pi, pi]."""
        return math.atan2(self.b, self.a)

    @property
    def real(self) -> float:
        return self.a

    @property
    def imag(self) -> float:
        return self.b

    @property
    def is_real(self) -> bool:
        """Whether the imaginary part is exactly zero."""
        return self.b == 0.0

    @property
    def is_zero(self) -> bool:
        return self.a == 0.0 and self.b == 0.0

    def to_polar(self) -> PolarCoordinate:
        return PolarCoordinate(self.r, self.theta)

    def conjugate(self) -> ComplexNumber:
        return ComplexNumber(self.a, -self.b)

    # --- Arithmetic ---

    def add(self, n: Any) -> ComplexNumber:
        """Sum of this and another number."""
        other = ComplexNumber.of(n)
        return ComplexNumber(self.a + other.a, self.b + other.b)

    def subtract(self, n: Any) -> ComplexNumber:
        """Difference of this and another number."""
        other = ComplexNumber.of(n)
        return ComplexNumber(self.a - other.a, self.b - other.b)

    def multiply(self, n: Any) -> ComplexNumber:
        """Product of this and another number."""
        other = ComplexNumber.of(n)
        return ComplexNumber(
            self.a * other.a - self.b * other.b,
            self.a * other.b + self.b * other.a,
        )

    def divide(self, n: Any) -> ComplexNumber:
        """
        Quotient of this by another number.

        Raises:
            DivideByZeroError: If the divisor is zero
        """
        other = ComplexNumber.of(n)
        c, d = other.a, other.b
        if c == 0.0 and d == 0.0:
            raise DivideByZeroError(f"divide by 0: {self} / 0", dividend=self)
        denom = c * c + d * d
        return ComplexNumber(
            (self.a * c + self.b * d) / denom,
            (self.b * c - self.a * d) / denom,
        )

    def inverse(self) -> ComplexNumber:
        """
        Multiplicative inverse 1 / (a + bi).

        Raises:
            DivideByZeroError: If this number is zero
        """
        if self.is_zero:
            raise DivideByZeroError("inverse of 0 is undefined", dividend=1.0)
        denom = self.a * self.a + self.b * self.b
        return ComplexNumber(self.a / denom, -self.b / denom)

    def pow(self, power: Any) -> ComplexNumber:
        """
        Raise this number to a real or complex power.

        Integral real exponents use exact repeated squaring; other real
        exponents use the polar form ``r^p (cos(p theta) + i sin(p theta))``.
        Complex exponents ``c + di`` use
        ``|z|^c exp(-d theta) (cos(c theta + d/2 ln r^2) + i sin(...))``.

        Any base to the power 0 is 1, including 0.

        Raises:
            DivideByZeroError: If zero is raised to a power whose real
                part is not positive
            TypeError: If power is not a number
        """
        if isinstance(power, numbers.Real) and not isinstance(power, ComplexNumber):
            return self._pow_real(float(power))
        exponent = ComplexNumber.of(power)
        if exponent.is_real:
            return self._pow_real(exponent.a)
        return self._pow_complex(exponent)

    def _pow_real(self, power: float) -> ComplexNumber:
        if power == 0.0:
            return ComplexNumber(1.0, 0.0)
        if self.is_zero:
            if power > 0:
                return ComplexNumber(0.0, 0.0)
            raise DivideByZeroError(f"0 raised to non-positive power {power}")

        if power.is_integer() and abs(power) <= 1024:
            result = ComplexNumber(1.0, 0.0)
            base = self if power > 0 else self.inverse()
            k = int(abs(power))
            while k:
                if k & 1:
                    result = result.multiply(base)
                base = base.multiply(base)
                k >>= 1
            return result

        rp = self.r ** power
        ang = self.theta * power
        return ComplexNumber(rp * math.cos(ang), rp * math.sin(ang))

    def _pow_complex(self, exponent: ComplexNumber) -> ComplexNumber:
        c, d = exponent.a, exponent.b
        if self.is_zero:
            if c > 0:
                return ComplexNumber(0.0, 0.0)
            raise DivideByZeroError(f"0 raised to power {exponent}")

        r2 = self.a * self.a + self.b * self.b
        theta = self.theta
        out = r2 ** (c / 2) * math.exp(-d * theta)
        ang = c * theta + d / 2 * math.log(r2)
        return ComplexNumber(out * math.cos(ang), out * math.sin(ang))

    # --- Comparison ---

    def compare_to(self, n: Any) -> int:
        """
        Three-way comparison: real parts first, then imaginary parts.

        Returns:
            -1, 0 or 1 if this number is less than, equal to, or greater
            than n
        """
        other = ComplexNumber.of(n)
        # parts compared directly; inf - inf would be NaN
        rc = (self.a > other.a) - (self.a < other.a)
        ic = (self.b > other.b) - (self.b < other.b)
        return ic if rc == 0 else rc

    def __eq__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: Any) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash(complex(self.a, self.b))

    # --- Operator protocol ---

    def __add__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return ComplexNumber.of(other).add(self)

    def __sub__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return ComplexNumber.of(other).subtract(self)

    def __mul__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return ComplexNumber.of(other).multiply(self)

    def __truediv__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return ComplexNumber.of(other).divide(self)

    def __pow__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return self.pow(other)

    def __rpow__(self, other: Any) -> ComplexNumber:
        if _coerce(other) is None:
            return NotImplemented
        return ComplexNumber.of(other).pow(self)

    def __neg__(self) -> ComplexNumber:
        return ComplexNumber(-self.a, -self.b)

    def __pos__(self) -> ComplexNumber:
        return self

    def __abs__(self) -> float:
        return self.r

    def __bool__(self) -> bool:
        return not self.is_zero

    def __complex__(self) -> complex:
        return complex(self.a, self.b)

    # --- Rendering ---

    def __str__(self) -> str:
        real_str = _part_str(self.a)
        imag_str = _part_str(self.b)

        if not real_str and not imag_str:
            return "0"

        if imag_str == "1":
            imag_term = "i"
        elif imag_str == "-1":
            imag_term = "-i"
        else:
            imag_term = imag_str + "i"

        if not imag_str:
            return real_str
        if not real_str:
            return imag_term
        if self.b < 0:
            return real_str + imag_term
        return real_str + "+" + imag_term

    def __repr__(self) -> str:
        return f"ComplexNumber(a={self.a!r}, b={self.b!r})"


numbers.Complex.register(ComplexNumber)

Scalar = Union[float, ComplexNumber]


def _coerce(n: Any) -> ComplexNumber | None:
    """ComplexNumber view of n, or None if n is not a supported number."""
    if isinstance(n, ComplexNumber):
        return n
    if isinstance(n, numbers.Real):
        return ComplexNumber(float(n), 0.0)
    if isinstance(n, numbers.Complex):
        c = complex(n)
        return ComplexNumber(c.real, c.imag)
    return None


def _part_str(x: float) -> str:
    """Render one component: '' for zero, no decimals when integral."""
    if x == 0.0:
        return ""
    if x.is_integer():
        return str(int(x))
    return repr(x)
