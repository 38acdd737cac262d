"""
Elementary functions over dual-mode scalars.

Every function accepts a real number or a complex number (ComplexNumber,
builtin complex or a numpy complex scalar). Real input inside the
function's principal domain goes to the ``math`` module and returns a
float. Complex input, or real input outside the principal domain,
returns a ComplexNumber computed from the closed-form identity of the
analytic continuation.

Design principles:
    - Real in, real out whenever the result is real
    - Dispatch on the argument type with functools.singledispatch
    - Binary arithmetic goes through Python's numeric operator protocol
"""

from __future__ import annotations

import math
import numbers
from functools import singledispatch
from typing import Any, Callable

import numpy as np

from pyalgebra.core.exceptions import DivideByZeroError, ValidationError
from pyalgebra.scalar.number import ComplexNumber, Scalar

_I = ComplexNumber(0.0, 1.0)
_HALF_PI = math.pi / 2
_LN2 = math.log(2.0)
_LN10 = math.log(10.0)


# =====================================================================
# Scalar normalization
# =====================================================================

@singledispatch
def to_scalar(x: Any) -> Scalar:
    """
    Normalize a number to its dual-mode form.

    Reals become float, complex values become ComplexNumber.

    Raises:
        TypeError: If x is not a number
    """
    raise TypeError(f"expected a real or complex number, got {type(x).__name__}")


@to_scalar.register(numbers.Real)
def _(x) -> float:
    return float(x)


@to_scalar.register(numbers.Complex)
def _(x) -> ComplexNumber:
    return ComplexNumber.of(x)


@to_scalar.register(ComplexNumber)
def _(x: ComplexNumber) -> ComplexNumber:
    return x


def is_complex(x: Any) -> bool:
    """Whether x is complex-valued in type (not merely in value)."""
    return isinstance(to_scalar(x), ComplexNumber)


def _elementary(func: Callable) -> Callable:
    """
    Turn func into a single-argument dispatcher over dual-mode scalars.

    func itself is the fallback for unsupported types. Builtin and numpy
    complex values are lifted to ComplexNumber before dispatching.
    """
    dispatcher = singledispatch(func)

    @dispatcher.register(numbers.Complex)
    def _lift(x):
        return dispatcher(ComplexNumber.of(x))

    return dispatcher


def _unsupported(name: str, x: Any):
    raise TypeError(f"{name}: expected a real or complex number, got {type(x).__name__}")


# =====================================================================
# Arithmetic
# =====================================================================

def add(n1: Any, n2: Any) -> Scalar:
    """Sum; real when both operands are real."""
    return to_scalar(n1) + to_scalar(n2)


def subtract(n1: Any, n2: Any) -> Scalar:
    """Difference; real when both operands are real."""
    return to_scalar(n1) - to_scalar(n2)


def multiply(n1: Any, n2: Any) -> Scalar:
    """Product; real when both operands are real."""
    return to_scalar(n1) * to_scalar(n2)


def divide(n1: Any, n2: Any) -> Scalar:
    """
    Quotient; real when both operands are real.

    Raises:
        DivideByZeroError: If n2 is zero, real or complex
    """
    divisor = to_scalar(n2)
    if divisor == 0:
        raise DivideByZeroError(f"divide by 0: {n1} / {n2}", dividend=n1)
    return to_scalar(n1) / divisor


def power(n: Any, p: Any) -> Scalar:
    """
    n raised to p.

    Real when both are real and the result is real (non-negative base or
    integral exponent); otherwise computed by ComplexNumber.pow. A real
    result too large for a float is returned as a signed infinity.

    Raises:
        DivideByZeroError: If n is zero and p has a negative real part
    """
    base = to_scalar(n)
    exponent = to_scalar(p)
    if not isinstance(base, ComplexNumber) and not isinstance(exponent, ComplexNumber):
        if base == 0.0 and exponent < 0:
            raise DivideByZeroError(f"0 raised to negative power {exponent}")
        if base >= 0 or exponent.is_integer():
            try:
                return base ** exponent
            except OverflowError:
                negative = base < 0 and exponent % 2 == 1
                return -math.inf if negative else math.inf
    return ComplexNumber.of(base).pow(exponent)


def invert(n: Any) -> Scalar:
    """
    Multiplicative inverse 1 / n.

    Raises:
        DivideByZeroError: If n is zero
    """
    return divide(1.0, n)


def equals(n1: Any, n2: Any) -> bool:
    """Exact equality across real and complex forms (3.0 equals 3+0i)."""
    return ComplexNumber.of(n1).compare_to(n2) == 0


# =====================================================================
# Magnitude and rounding
# =====================================================================

@_elementary
def absolute(x):
    """|x|: absolute value of a real, magnitude of a complex. Always real."""
    return _unsupported('absolute', x)


@absolute.register(numbers.Real)
def _(x) -> float:
    return abs(float(x))


@absolute.register(ComplexNumber)
def _(z: ComplexNumber) -> float:
    return z.r


@_elementary
def ceil(x):
    """Ceiling; complex values are rounded componentwise."""
    return _unsupported('ceil', x)


@ceil.register(numbers.Real)
def _(x) -> float:
    return float(math.ceil(x))


@ceil.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(math.ceil(z.a), math.ceil(z.b))


@_elementary
def floor(x):
    """Floor; complex values are rounded componentwise."""
    return _unsupported('floor', x)


@floor.register(numbers.Real)
def _(x) -> float:
    return float(math.floor(x))


@floor.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(math.floor(z.a), math.floor(z.b))


@_elementary
def round_(x):
    """
    Round to the nearest integer (ties to even, like builtin round).

    Complex values are rounded componentwise.
    """
    return _unsupported('round_', x)


@round_.register(numbers.Real)
def _(x) -> float:
    return float(round(x))


@round_.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(round(z.a), round(z.b))


# =====================================================================
# Exponentials and logarithms
# =====================================================================

@_elementary
def exp(x):
    """e^x; exp(a+bi) = e^a (cos b + i sin b)."""
    return _unsupported('exp', x)


@exp.register(numbers.Real)
def _(x) -> float:
    return math.exp(x)


@exp.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    scale = math.exp(z.a)
    return ComplexNumber(scale * math.cos(z.b), scale * math.sin(z.b))


@_elementary
def expm1(x):
    """e^x - 1."""
    return _unsupported('expm1', x)


@expm1.register(numbers.Real)
def _(x) -> float:
    return math.expm1(x)


@expm1.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return exp(z) - 1.0


@_elementary
def log(x):
    """
    Natural logarithm; log(x) = ln|x| + i arg(x).

    Real input must be positive to stay real. log(0) is -inf.
    """
    return _unsupported('log', x)


@log.register(numbers.Real)
def _(x):
    x = float(x)
    if x > 0:
        return math.log(x)
    if x == 0:
        return -math.inf
    return ComplexNumber(math.log(-x), math.pi)


@log.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    if z.is_zero:
        return ComplexNumber(-math.inf, 0.0)
    return ComplexNumber(math.log(z.r), z.theta)


def log1p(x: Any) -> Scalar:
    """ln(1 + x)."""
    x = to_scalar(x)
    if not isinstance(x, ComplexNumber) and x > -1:
        return math.log1p(x)
    return log(x + 1.0)


def log2(x: Any) -> Scalar:
    """Base-2 logarithm."""
    x = to_scalar(x)
    if not isinstance(x, ComplexNumber) and x > 0:
        return math.log2(x)
    return log(x) / _LN2


def log10(x: Any) -> Scalar:
    """Base-10 logarithm."""
    x = to_scalar(x)
    if not isinstance(x, ComplexNumber) and x > 0:
        return math.log10(x)
    return log(x) / _LN10


@_elementary
def sqrt(x):
    """
    Principal square root.

    sqrt of a negative real is exactly ComplexNumber(0, sqrt(-x)).
    """
    return _unsupported('sqrt', x)


@sqrt.register(numbers.Real)
def _(x):
    x = float(x)
    if x >= 0:
        return math.sqrt(x)
    return ComplexNumber(0.0, math.sqrt(-x))


@sqrt.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    if z.is_zero:
        return ComplexNumber(0.0, 0.0)
    # t = sqrt((|z| + |a|) / 2) avoids cancellation in either half plane
    t = math.sqrt((z.r + abs(z.a)) / 2)
    if z.a >= 0:
        return ComplexNumber(t, z.b / (2 * t))
    return ComplexNumber(abs(z.b) / (2 * t), math.copysign(t, z.b))


@_elementary
def cbrt(x):
    """Cube root; real input keeps its sign."""
    return _unsupported('cbrt', x)


@cbrt.register(numbers.Real)
def _(x) -> float:
    x = float(x)
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


@cbrt.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return z.pow(1.0 / 3.0)


def hypot(a: Any, b: Any) -> Scalar:
    """sqrt(a^2 + b^2)."""
    a, b = to_scalar(a), to_scalar(b)
    if not isinstance(a, ComplexNumber) and not isinstance(b, ComplexNumber):
        return math.hypot(a, b)
    return sqrt(a * a + b * b)


# =====================================================================
# Trigonometric
# =====================================================================

@_elementary
def cos(x):
    """Cosine; cos(a+bi) = cos a cosh b - i sin a sinh b."""
    return _unsupported('cos', x)


@cos.register(numbers.Real)
def _(x) -> float:
    return math.cos(x)


@cos.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(math.cos(z.a) * math.cosh(z.b), -math.sin(z.a) * math.sinh(z.b))


@_elementary
def sin(x):
    """Sine; sin(a+bi) = sin a cosh b + i cos a sinh b."""
    return _unsupported('sin', x)


@sin.register(numbers.Real)
def _(x) -> float:
    return math.sin(x)


@sin.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(math.sin(z.a) * math.cosh(z.b), math.cos(z.a) * math.sinh(z.b))


@_elementary
def tan(x):
    """Tangent; sin(x) / cos(x) for complex input."""
    return _unsupported('tan', x)


@tan.register(numbers.Real)
def _(x) -> float:
    return math.tan(x)


@tan.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return sin(z) / cos(z)


@_elementary
def acos(x):
    """
    Inverse cosine.

    Real for |x| <= 1, otherwise acos(x) = pi/2 + i ln(ix + sqrt(1 - x^2)).
    """
    return _unsupported('acos', x)


@acos.register(numbers.Real)
def _(x):
    if -1.0 <= x <= 1.0:
        return math.acos(x)
    return acos(ComplexNumber(x, 0.0))


@acos.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return _HALF_PI + _I * log(_I * z + sqrt(1.0 - z * z))


@_elementary
def asin(x):
    """
    Inverse sine.

    Real for |x| <= 1, otherwise asin(x) = -i ln(ix + sqrt(1 - x^2)).
    """
    return _unsupported('asin', x)


@asin.register(numbers.Real)
def _(x):
    if -1.0 <= x <= 1.0:
        return math.asin(x)
    return asin(ComplexNumber(x, 0.0))


@asin.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return -_I * log(_I * z + sqrt(1.0 - z * z))


@_elementary
def atan(x):
    """Inverse tangent; atan(z) = i/2 ln((1 - iz) / (1 + iz)) for complex z."""
    return _unsupported('atan', x)


@atan.register(numbers.Real)
def _(x) -> float:
    return math.atan(x)


@atan.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    iz = _I * z
    return (_I / 2.0) * log((1.0 - iz) / (1.0 + iz))


def atan2(y: Any, x: Any) -> Scalar:
    """
    Angle of the vector (x, y).

    Two reals use math.atan2 (quadrant aware); otherwise atan(y / x).
    """
    y, x = to_scalar(y), to_scalar(x)
    if not isinstance(y, ComplexNumber) and not isinstance(x, ComplexNumber):
        return math.atan2(y, x)
    return atan(divide(y, x))


# =====================================================================
# Hyperbolic
# =====================================================================

@_elementary
def cosh(x):
    """Hyperbolic cosine."""
    return _unsupported('cosh', x)


@cosh.register(numbers.Real)
def _(x) -> float:
    return math.cosh(x)


@cosh.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(math.cosh(z.a) * math.cos(z.b), math.sinh(z.a) * math.sin(z.b))


@_elementary
def sinh(x):
    """Hyperbolic sine."""
    return _unsupported('sinh', x)


@sinh.register(numbers.Real)
def _(x) -> float:
    return math.sinh(x)


@sinh.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(math.sinh(z.a) * math.cos(z.b), math.cosh(z.a) * math.sin(z.b))


@_elementary
def tanh(x):
    """Hyperbolic tangent."""
    return _unsupported('tanh', x)


@tanh.register(numbers.Real)
def _(x) -> float:
    return math.tanh(x)


@tanh.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return sinh(z) / cosh(z)


@_elementary
def acosh(x):
    """
    Inverse hyperbolic cosine.

    Real for x >= 1, otherwise acosh(x) = ln(sqrt(x - 1) sqrt(x + 1) + x).
    """
    return _unsupported('acosh', x)


@acosh.register(numbers.Real)
def _(x):
    if x >= 1.0:
        return math.acosh(x)
    return acosh(ComplexNumber(x, 0.0))


@acosh.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return log(sqrt(z - 1.0) * sqrt(z + 1.0) + z)


@_elementary
def asinh(x):
    """Inverse hyperbolic sine; asinh(z) = ln(z + sqrt(z^2 + 1))."""
    return _unsupported('asinh', x)


@asinh.register(numbers.Real)
def _(x) -> float:
    return math.asinh(x)


@asinh.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return log(z + sqrt(z * z + 1.0))


@_elementary
def atanh(x):
    """
    Inverse hyperbolic tangent.

    Real for |x| < 1, otherwise atanh(x) = 1/2 ln((1 + x) / (1 - x)).

    Raises:
        DivideByZeroError: At x = 1
    """
    return _unsupported('atanh', x)


@atanh.register(numbers.Real)
def _(x):
    if -1.0 < x < 1.0:
        return math.atanh(x)
    return atanh(ComplexNumber(x, 0.0))


@atanh.register(ComplexNumber)
def _(z: ComplexNumber) -> ComplexNumber:
    return log((1.0 + z) / (1.0 - z)) / 2.0


# =====================================================================
# Aggregates
# =====================================================================

def summation(function: Callable[[float], Any], start: float, end: float) -> Scalar:
    """
    Sum function(d) for d = start, start + 1, ... while d <= end.

    Uses Kahan compensated summation, so long ranges of small terms do not
    lose precision. Works for real and complex terms alike.

    Args:
        function: Term generator, called with a float
        start: First evaluation point (inclusive)
        end: Last evaluation point bound (inclusive)

    Returns:
        The compensated sum; 0.0 for an empty range
    """
    total: Scalar = 0.0
    compensation: Scalar = 0.0
    d = float(start)
    while d <= end:
        y = to_scalar(function(d)) - compensation
        t = total + y
        compensation = (t - total) - y
        total = t
        d += 1.0
    return total


def average(*values: Any) -> Scalar:
    """
    Arithmetic mean.

    Raises:
        ValidationError: If no values are given
    """
    if not values:
        raise ValidationError("average: requires at least one value")
    total: Scalar = 0.0
    for v in values:
        total = total + to_scalar(v)
    return total / len(values)


def std_deviation(*values: Any) -> Scalar:
    """
    Population standard deviation, sqrt(sum((x - mu)^2) / n).

    Complex values are squared, not multiplied by their conjugate, so the
    result of a complex sample may itself be complex.

    Raises:
        ValidationError: If no values are given
    """
    if not values:
        raise ValidationError("std_deviation: requires at least one value")
    mu = average(*values)
    spread: Scalar = 0.0
    for v in values:
        diff = to_scalar(v) - mu
        spread = spread + diff * diff
    return sqrt(spread / len(values))


def random(rng: np.random.Generator | None = None) -> Scalar:
    """
    A random dual-mode scalar with both parts uniform in [0, 1).

    Returns a float when the imaginary draw is exactly 0, otherwise a
    ComplexNumber.

    Args:
        rng: numpy Generator; a fresh default_rng() if None
    """
    if rng is None:
        rng = np.random.default_rng()
    a = float(rng.random())
    b = float(rng.random())
    if b == 0.0:
        return a
    return ComplexNumber(a, b)
