"""
RealMatrix: numeric matrix with real cells.
"""

from __future__ import annotations

import math
import numbers
from fractions import Fraction
from typing import Any

import numpy as np

from pyalgebra.core.exceptions import ValidationError
from pyalgebra.core.tolerances import get_equality_tolerance
from pyalgebra.matrix.complex import ComplexMatrix
from pyalgebra.matrix.numeric import NumberMatrix
from pyalgebra.scalar.number import ComplexNumber


class RealMatrix(NumberMatrix):
    """
    Matrix of real numbers, stored as float64.

    Equality compares cells within the process-wide equality tolerance
    (see pyalgebra.core.tolerances), since determinant and inverse
    accumulate rounding error. Arithmetic with a complex scalar or a
    ComplexMatrix returns a ComplexMatrix.

    Example:
        >>> m = RealMatrix.from_array([[4, 7], [2, 6]])
        >>> m.determinant()
        10.0
        >>> m @ m.inverse() == RealMatrix.identity(2)
        True
    """

    _dtype = np.float64
    _display_fractions = False

    @classmethod
    def _complex_kind(cls) -> type[NumberMatrix]:
        return ComplexMatrix

    def to_complex(self) -> ComplexMatrix:
        """Same cells as a ComplexMatrix with zero imaginary parts."""
        return ComplexMatrix.from_real(self)

    def display_using_fractions(self, state: bool) -> None:
        """Render cells as reduced fractions (True) or decimals (False) in str()."""
        self._display_fractions = bool(state)

    def clone(self) -> RealMatrix:
        copy = super().clone()
        copy._display_fractions = self._display_fractions
        return copy

    def _to_cell(self, value: Any) -> float:
        if not isinstance(value, numbers.Number):
            raise ValidationError(
                f"RealMatrix cells must be real numbers, got {type(value).__name__} {value!r}"
            )
        if not isinstance(value, numbers.Real):
            z = ComplexNumber.of(value)
            if not z.is_real:
                raise ValidationError(
                    f"RealMatrix cells must be real, got complex value {z}"
                )
            return z.a
        return float(value)

    def _from_cell(self, raw: Any) -> float:
        return float(raw)

    def _render_cell(self, value: float) -> str:
        if self._display_fractions and math.isfinite(value):
            return str(Fraction(value).limit_denominator())
        if value.is_integer():
            return str(int(value))
        return repr(value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RealMatrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        tol = get_equality_tolerance()
        a, b = self._data, other._data
        with np.errstate(invalid='ignore'):
            close = (a == b) | (np.abs(a - b) <= tol)
        return bool(np.all(close))
