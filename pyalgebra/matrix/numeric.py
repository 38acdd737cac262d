"""
Shared implementation of the numeric matrix contract.

NumberMatrix implements every NumericMatrix operation once over the numpy
buffer. The two concrete kinds differ only in buffer dtype, how a cell is
surfaced (float vs ComplexNumber), their zero test, and equality.

Mixed real/complex arithmetic promotes to the complex kind. Every
operation allocates a new matrix; operands are never modified, including
when the operation fails.

Complexity:
    determinant, sub_determinant, matrix_of_minors, matrix_of_cofactors,
    adjugate and inverse use recursive cofactor expansion, O(n!) in the
    matrix size. A ComplexityWarning is emitted above
    tolerances.DETERMINANT_WARN_SIZE.
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any, Optional

import numpy as np

from pyalgebra.core import tolerances
from pyalgebra.core.exceptions import (
    ComplexityWarning,
    DivideByZeroError,
    InvalidDimensionError,
    OutOfRangeError,
    SingularMatrixError,
    ValidationError,
)
from pyalgebra.core.validation import (
    check_dimensions,
    check_integer,
    check_multipliable,
    check_same_shape,
    check_square,
)
from pyalgebra.matrix import _cofactor
from pyalgebra.matrix.base import Matrix
from pyalgebra.scalar.functions import is_complex, to_scalar
from pyalgebra.scalar.number import ComplexNumber, Scalar


class NumberMatrix(Matrix):
    """
    Numeric matrix over a float64 or complex128 buffer.

    Cells are zero-filled on construction from dimensions. Numeric matrices
    never accept null values.
    """

    is_complex: bool = False

    def __init__(self, width: int, height: int, *, allows_null: bool = False):
        if allows_null:
            raise ValidationError(
                f"{type(self).__name__} does not accept null values"
            )
        super().__init__(width, height)

    def _allocate(self, height: int, width: int) -> np.ndarray:
        return np.zeros((height, width), dtype=self._dtype)

    @classmethod
    def identity(cls, size: int) -> NumberMatrix:
        """size x size identity matrix."""
        size, _ = check_dimensions(size, size)
        return cls._from_buffer(np.eye(size, dtype=cls._dtype))

    def get_identity_matrix(self) -> NumberMatrix:
        """Identity matrix of size max(width, height)."""
        return type(self).identity(max(self.width, self.height))

    def to_numpy(self) -> np.ndarray:
        """Copy of the backing buffer."""
        return self._data.copy()

    def clone(self) -> NumberMatrix:
        return type(self)._from_buffer(self._data.copy())

    # --- Kind hooks ---

    @classmethod
    def _complex_kind(cls) -> type[NumberMatrix]:
        """Matrix class results are promoted to when a complex operand is involved."""
        raise NotImplementedError

    def _is_zero(self, value: Scalar) -> bool:
        return value == 0

    def _result_kind(self, other_is_complex: bool) -> type[NumberMatrix]:
        if self.is_complex or other_is_complex:
            return self._complex_kind()
        return type(self)

    @staticmethod
    def _raw_scalar(value: Scalar) -> float | complex:
        if isinstance(value, ComplexNumber):
            return complex(value)
        return value

    # --- Arithmetic ---

    def _elementwise(self, other: Any, ufunc: np.ufunc, operation: str) -> NumberMatrix:
        if isinstance(other, NumberMatrix):
            check_same_shape(self, other, operation)
            kind = self._result_kind(other.is_complex)
            return kind._from_buffer(ufunc(self._data, other._data))
        scalar = to_scalar(other)
        kind = self._result_kind(is_complex(scalar))
        return kind._from_buffer(ufunc(self._data, self._raw_scalar(scalar)))

    def add(self, other: Any) -> NumberMatrix:
        """
        Elementwise sum with a scalar or a same-shape matrix.

        Raises:
            DimensionMismatchError: If other is a matrix of different shape
        """
        return self._elementwise(other, np.add, 'add')

    def subtract(self, other: Any) -> NumberMatrix:
        """
        Elementwise difference with a scalar or a same-shape matrix.

        Raises:
            DimensionMismatchError: If other is a matrix of different shape
        """
        return self._elementwise(other, np.subtract, 'subtract')

    def multiply(self, other: Any) -> NumberMatrix:
        """
        Scale by a scalar, or matrix product with another matrix.

        The product of an m x n and an n x p matrix is m x p.

        Raises:
            DimensionMismatchError: If self.width != other.height
        """
        if isinstance(other, NumberMatrix):
            check_multipliable(self, other)
            kind = self._result_kind(other.is_complex)
            return kind._from_buffer(self._data @ other._data)
        return self._elementwise(other, np.multiply, 'multiply')

    def divide(self, other: Any) -> NumberMatrix:
        """
        Divide by a scalar, or multiply by the inverse of another matrix.

        Raises:
            DivideByZeroError: If other is a zero scalar
            SingularMatrixError: If other is a matrix without an inverse
            NonSquareMatrixError: If other is a non-square matrix
        """
        if isinstance(other, NumberMatrix):
            inverse = other.inverse()
            if inverse is None:
                raise SingularMatrixError(
                    "divide: divisor matrix is singular (determinant is 0)",
                    matrix_name='divisor', determinant=0.0,
                )
            return self.multiply(inverse)
        scalar = to_scalar(other)
        if scalar == 0:
            raise DivideByZeroError("divide: matrix divided by scalar 0", dividend=self)
        return self._elementwise(scalar, np.true_divide, 'divide')

    def pow(self, power: int) -> NumberMatrix:
        """
        Integer matrix power.

        power == 0 gives the identity of size max(width, height) for any
        shape. Positive powers multiply the matrix by itself; negative
        powers multiply its inverse.

        Raises:
            ValidationError: If power is not an integer
            NonSquareMatrixError: If power != 0 and the matrix is not square
            SingularMatrixError: If power < 0 and the matrix has no inverse
        """
        n = check_integer(power, "power")
        if n == 0:
            return self.get_identity_matrix()
        check_square(self, 'pow')
        if n > 0:
            # matrix_power hands back its input unchanged for n == 1
            return type(self)._from_buffer(np.linalg.matrix_power(self._data, n).copy())
        inverse = self.inverse()
        if inverse is None:
            raise SingularMatrixError(
                f"pow: cannot raise a singular matrix to negative power {n}",
                matrix_name='self', determinant=0.0,
            )
        return type(inverse)._from_buffer(np.linalg.matrix_power(inverse._data, -n))

    def transpose(self) -> NumberMatrix:
        """Matrix with rows and columns swapped."""
        return type(self)._from_buffer(self._data.T.copy())

    # --- Cofactor expansion ---

    def _check_expandable(self, operation: str) -> None:
        if self.width == 0 or self.height == 0:
            raise InvalidDimensionError(
                f"{operation}: undefined for an empty matrix, got "
                f"{self.height}x{self.width}",
                width=self.width, height=self.height,
            )
        check_square(self, operation)
        if self.width > tolerances.DETERMINANT_WARN_SIZE:
            warnings.warn(
                f"{operation}: cofactor expansion of a {self.width}x{self.width} "
                f"matrix is O(n!) and may take very long",
                ComplexityWarning,
                stacklevel=3,
            )

    def determinant(self) -> Scalar:
        """
        Determinant by recursive first-row cofactor expansion.

        Raises:
            InvalidDimensionError: If the matrix has zero size
            NonSquareMatrixError: If the matrix is not square
        """
        self._check_expandable('determinant')
        return self._from_cell(_cofactor.determinant(self._data))

    def sub_determinant(
        self,
        start_row: int,
        start_column: int,
        end_row: int,
        end_column: int,
    ) -> Scalar:
        """
        Determinant of the block [start_row:end_row, start_column:end_column].

        Start indices are inclusive, end indices exclusive.

        Raises:
            OutOfRangeError: If the block does not lie within the matrix
            InvalidDimensionError: If the block is empty
            NonSquareMatrixError: If the block is not square
        """
        r0, r1 = _check_span(start_row, end_row, self.height, "row")
        c0, c1 = _check_span(start_column, end_column, self.width, "column")
        block = type(self)._from_buffer(self._data[r0:r1, c0:c1].copy())
        block._check_expandable('sub_determinant')
        return block._from_cell(_cofactor.determinant(block._data))

    def matrix_of_minors(self) -> NumberMatrix:
        """Determinants of every (n-1)x(n-1) submatrix."""
        self._check_expandable('matrix_of_minors')
        return type(self)._from_buffer(_cofactor.minors(self._data))

    def matrix_of_cofactors(self) -> NumberMatrix:
        """Matrix of minors with the sign flipped where row + column is odd."""
        self._check_expandable('matrix_of_cofactors')
        return type(self)._from_buffer(_cofactor.cofactors(self._data))

    def adjugate(self) -> NumberMatrix:
        """Transpose of the matrix of cofactors."""
        self._check_expandable('adjugate')
        return type(self)._from_buffer(_cofactor.cofactors(self._data).T.copy())

    def inverse(self) -> Optional[NumberMatrix]:
        """
        adjugate / determinant, or None if the determinant is zero.

        Raises:
            InvalidDimensionError: If the matrix has zero size
            NonSquareMatrixError: If the matrix is not square
        """
        self._check_expandable('inverse')
        det = _cofactor.determinant(self._data)
        if self._is_zero(self._from_cell(det)):
            return None
        adjugate = _cofactor.cofactors(self._data).T
        return type(self)._from_buffer(adjugate / det)

    # --- Operators ---

    def __add__(self, other: Any) -> NumberMatrix:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> NumberMatrix:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> NumberMatrix:
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> NumberMatrix:
        if not _is_operand(other):
            return NotImplemented
        return (-self).add(other)

    def __mul__(self, other: Any) -> NumberMatrix:
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> NumberMatrix:
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> NumberMatrix:
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __matmul__(self, other: Any) -> NumberMatrix:
        if not isinstance(other, NumberMatrix):
            return NotImplemented
        return self.multiply(other)

    def __pow__(self, power: Any) -> NumberMatrix:
        return self.pow(power)

    def __neg__(self) -> NumberMatrix:
        return type(self)._from_buffer(-self._data)

    # --- Rendering ---

    def _render_cell(self, value: Any) -> str:
        return str(value)

    def __str__(self) -> str:
        if self.width == 0 or self.height == 0:
            return "empty"
        rendered = [[self._render_cell(v) for v in row] for row in self.rows()]
        column_width = max(len(s) for row in rendered for s in row)
        lines = [
            "".join(s.ljust(column_width) + " " for s in row[:-1]) + row[-1]
            for row in rendered
        ]
        return "\n".join(lines).strip()


def _is_operand(other: Any) -> bool:
    return isinstance(other, (NumberMatrix, numbers.Number))


def _check_span(start: Any, end: Any, bound: int, name: str) -> tuple[int, int]:
    start = check_integer(start, f"start_{name}")
    end = check_integer(end, f"end_{name}")
    if not 0 <= start <= end <= bound:
        raise OutOfRangeError(
            f"{name} span [{start}, {end}) must satisfy 0 <= start <= end <= {bound}",
            index=(start, end), bounds=(bound,),
        )
    return start, end
