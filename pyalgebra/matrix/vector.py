"""
Euclidean vector over dual-mode scalars.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from pyalgebra.core.exceptions import DimensionMismatchError
from pyalgebra.core.validation import check_dimensions, check_index
from pyalgebra.scalar import functions as F
from pyalgebra.scalar.number import ComplexNumber, Scalar


class Vector:
    """
    Immutable vector of real or complex components.

    Parameters
    ----------
    *components : real or complex numbers
        The scalar components, in order.

    Attributes
    ----------
    size : int
        Number of components.
    magnitude : float or ComplexNumber
        sqrt(sum(c_i ** 2)). Components are squared, not multiplied by
        their conjugates, so a complex vector may have a complex magnitude.
    is_complex : bool
        Whether the magnitude is complex.
    """

    __slots__ = ('_components', 'magnitude', 'is_complex')

    def __init__(self, *components: Any):
        self._components = tuple(F.to_scalar(c) for c in components)
        squares: Scalar = 0.0
        for c in self._components:
            squares = squares + c * c
        self.magnitude = F.sqrt(squares)
        self.is_complex = isinstance(self.magnitude, ComplexNumber)

    @classmethod
    def between(cls, start: Sequence[Any], end: Sequence[Any]) -> Vector:
        """
        Vector from point start to point end (end - start, componentwise).

        Raises:
            DimensionMismatchError: If the points have different lengths
        """
        if len(start) != len(end):
            raise DimensionMismatchError(
                f"between: start and end must have the same length, got "
                f"{len(start)} and {len(end)}",
                operation='between', left_shape=(len(start),), right_shape=(len(end),),
            )
        return cls(*(F.subtract(e, s) for s, e in zip(start, end)))

    @classmethod
    def standard(cls, space: int, dimensions: int) -> Vector:
        """
        Standard basis vector: all zeros except a 1 at index ``space``.

        >>> Vector.standard(2, 5)
        Vector(0.0, 0.0, 1.0, 0.0, 0.0)
        """
        dimensions, _ = check_dimensions(dimensions, dimensions)
        space = check_index(space, dimensions, "space")
        return cls(*(1.0 if i == space else 0.0 for i in range(dimensions)))

    @property
    def size(self) -> int:
        return len(self._components)

    @property
    def components(self) -> tuple[Scalar, ...]:
        return self._components

    def get(self, index: int) -> Scalar:
        """
        Component at index.

        Raises:
            OutOfRangeError: If index is outside [0, size)
        """
        return self._components[check_index(index, self.size, "index")]

    def __getitem__(self, index: int) -> Scalar:
        return self.get(index)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._components)

    # --- Arithmetic ---

    def unit(self) -> Vector:
        """
        This vector scaled to magnitude 1.

        Raises:
            DivideByZeroError: For the zero vector
        """
        return self.divide(self.magnitude)

    def multiply(self, n: Any) -> Vector:
        """Scale every component by n."""
        return Vector(*(F.multiply(c, n) for c in self._components))

    def divide(self, n: Any) -> Vector:
        """
        Divide every component by n.

        Raises:
            DivideByZeroError: If n is zero
        """
        return self.multiply(F.invert(n))

    def add(self, other: Vector) -> Vector:
        self._check_same_size(other, 'add')
        return Vector(*(F.add(a, b) for a, b in zip(self._components, other._components)))

    def subtract(self, other: Vector) -> Vector:
        self._check_same_size(other, 'subtract')
        return Vector(*(F.subtract(a, b) for a, b in zip(self._components, other._components)))

    def dot(self, other: Vector) -> Scalar:
        """
        Dot product, accumulated with Kahan summation.

        Raises:
            DimensionMismatchError: If the sizes differ
        """
        self._check_same_size(other, 'dot')
        return F.summation(
            lambda d: F.multiply(self._components[int(d)], other._components[int(d)]),
            0, self.size - 1,
        )

    def cross(self, other: Vector) -> Vector:
        """
        Cross product of two 2D or two 3D vectors.

        2D operands are treated as lying in the xy-plane, so the result is
        the 3D vector (0, 0, x1*y2 - y1*x2).

        Raises:
            DimensionMismatchError: If either vector is not 2D or 3D, or
                the sizes differ
        """
        if self.size not in (2, 3) or other.size not in (2, 3):
            raise DimensionMismatchError(
                f"cross: vectors must be 2D or 3D, got sizes {self.size} and {other.size}",
                operation='cross', left_shape=(self.size,), right_shape=(other.size,),
            )
        self._check_same_size(other, 'cross')
        u, v = self._components, other._components
        z = F.subtract(F.multiply(u[0], v[1]), F.multiply(u[1], v[0]))
        if self.size == 2:
            return Vector(0.0, 0.0, z)
        return Vector(
            F.subtract(F.multiply(u[1], v[2]), F.multiply(u[2], v[1])),
            F.subtract(F.multiply(u[2], v[0]), F.multiply(u[0], v[2])),
            z,
        )

    def angle(self, other: Vector) -> Scalar:
        """Angle in radians, acos(u . v / (|u| |v|))."""
        return F.acos(F.divide(self.dot(other), F.multiply(self.magnitude, other.magnitude)))

    def is_orthogonal(self, other: Vector) -> bool:
        """Whether the dot product is exactly zero."""
        return F.equals(self.dot(other), 0.0)

    def _check_same_size(self, other: Vector, operation: str) -> None:
        if self.size != other.size:
            raise DimensionMismatchError(
                f"{operation}: vectors must be the same size, got {self.size} and {other.size}",
                operation=operation, left_shape=(self.size,), right_shape=(other.size,),
            )

    # --- Operators ---

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, n: Any) -> Vector:
        if isinstance(n, Vector):
            return NotImplemented
        return self.multiply(n)

    __rmul__ = __mul__

    def __truediv__(self, n: Any) -> Vector:
        if isinstance(n, Vector):
            return NotImplemented
        return self.divide(n)

    def __neg__(self) -> Vector:
        return self.multiply(-1.0)

    def __abs__(self) -> Scalar:
        return self.magnitude

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size == other.size and all(
            F.equals(a, b) for a, b in zip(self._components, other._components)
        )

    def __hash__(self) -> int:
        return hash(self._components)

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(c) for c in self._components)})"

    def __str__(self) -> str:
        return f"<{', '.join(str(c) for c in self._components)}>"
