"""
Core protocols for PyAlgebra.

These define structural interfaces that concrete implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
code consuming matrices (the graph layer, user code) depends on the numeric
contract and not on a class hierarchy.

Design Principles:
    - Minimal contracts: prescribe only the numeric matrix operations
    - Every operation returns a freshly allocated matrix
    - Failures of one operation leave the operands valid and reusable
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class NumericMatrix(Protocol):
    """
    Numeric matrix contract shared by RealMatrix and ComplexMatrix.

    Scalar operands are dual-mode scalars (a real number or a ComplexNumber).
    Matrix operands must be numeric matrices; mixing a real and a complex
    matrix promotes the result to complex.

    Complexity:
        determinant, matrix_of_minors, matrix_of_cofactors and inverse use
        recursive cofactor expansion and cost O(n!) in the matrix size.
        Callers are expected to bound matrix sizes.
    """

    @property
    def width(self) -> int:
        """Number of columns."""
        ...

    @property
    def height(self) -> int:
        """Number of rows."""
        ...

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width)."""
        ...

    def get_value(self, row: int, col: int) -> Any:
        """Cell at (row, col)."""
        ...

    def cells(self) -> Iterator[tuple[int, int, Any]]:
        """Row-major (row, col, value) triples."""
        ...

    def add(self, other: Any) -> 'NumericMatrix':
        """Elementwise sum with a scalar or a same-shape matrix."""
        ...

    def subtract(self, other: Any) -> 'NumericMatrix':
        """Elementwise difference with a scalar or a same-shape matrix."""
        ...

    def multiply(self, other: Any) -> 'NumericMatrix':
        """Scalar scaling, or matrix product (self.width == other.height)."""
        ...

    def divide(self, other: Any) -> 'NumericMatrix':
        """Scalar division, or multiplication by other's inverse."""
        ...

    def pow(self, power: int) -> 'NumericMatrix':
        """Integer power; 0 gives the identity, negative uses the inverse."""
        ...

    def transpose(self) -> 'NumericMatrix':
        """Matrix with rows and columns swapped."""
        ...

    def determinant(self) -> Any:
        """Determinant by first-row cofactor expansion."""
        ...

    def matrix_of_minors(self) -> 'NumericMatrix':
        """Determinants of every (n-1)x(n-1) submatrix."""
        ...

    def matrix_of_cofactors(self) -> 'NumericMatrix':
        """Matrix of minors with checkerboard sign flips."""
        ...

    def inverse(self) -> Optional['NumericMatrix']:
        """Adjugate over determinant, or None when singular."""
        ...

    def clone(self) -> 'NumericMatrix':
        """Deep, independent copy."""
        ...
