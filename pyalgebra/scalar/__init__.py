"""
Dual-mode scalar layer.

A scalar is either a real number (float) or a ComplexNumber. Arithmetic
between two reals stays real; anything involving a complex operand is
complex.
"""

from pyalgebra.scalar.number import ComplexNumber, Scalar
from pyalgebra.scalar.polar import PolarCoordinate
from pyalgebra.scalar import functions
from pyalgebra.scalar.functions import is_complex, to_scalar
from pyalgebra.scalar.integers import (
    factorial,
    gcd,
    lcm,
    divisors,
    coprime_with,
    primes,
)

__all__ = [
    "ComplexNumber",
    "Scalar",
    "PolarCoordinate",
    "functions",
    "is_complex",
    "to_scalar",
    "factorial",
    "gcd",
    "lcm",
    "divisors",
    "coprime_with",
    "primes",
]
