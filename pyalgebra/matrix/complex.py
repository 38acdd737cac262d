"""
ComplexMatrix: numeric matrix with complex cells.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pyalgebra.core.exceptions import ValidationError
from pyalgebra.matrix.numeric import NumberMatrix
from pyalgebra.scalar.number import ComplexNumber


class ComplexMatrix(NumberMatrix):
    """
    Matrix of complex numbers, stored as complex128.

    Cells are read back as ComplexNumber. NaN real or imaginary parts are
    normalized to 0, as for ComplexNumber itself. Equality is exact on
    both parts of every cell.

    Example:
        >>> m = ComplexMatrix.from_array([[ComplexNumber(1, 2), 3]])
        >>> m.get_value(0, 1)
        ComplexNumber(a=3.0, b=0.0)
    """

    _dtype = np.complex128
    is_complex = True

    @classmethod
    def from_real(cls, matrix: NumberMatrix) -> ComplexMatrix:
        """Lift a real matrix's cells to complex values with zero imaginary part."""
        return cls._from_buffer(matrix.to_numpy())

    @classmethod
    def _complex_kind(cls) -> type[NumberMatrix]:
        return cls

    @classmethod
    def _coerce_buffer(cls, buffer: np.ndarray) -> np.ndarray:
        source = np.asarray(buffer)
        # real and imag assigned separately: inf * 1j would produce NaN
        out = np.empty(source.shape, dtype=np.complex128)
        real = np.real(source).astype(np.float64)
        imag = np.imag(source).astype(np.float64)
        out.real = np.where(np.isnan(real), 0.0, real)
        out.imag = np.where(np.isnan(imag), 0.0, imag)
        return out

    def _to_cell(self, value: Any) -> complex:
        try:
            z = ComplexNumber.of(value)
        except TypeError as e:
            raise ValidationError(
                f"ComplexMatrix cells must be numbers, got {type(value).__name__} {value!r}"
            ) from e
        return complex(z.a, z.b)

    def _from_cell(self, raw: Any) -> ComplexNumber:
        return ComplexNumber(raw.real, raw.imag)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ComplexMatrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))
