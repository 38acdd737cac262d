"""
Matrix container.

A Matrix is a rectangular ``height x width`` grid of cells backed by a
numpy array. Dimensions are fixed at construction; cells are mutable in
place through set_value. Whether a cell may hold None is decided once,
by the ``allows_null`` flag.

Design principles:
    - set_value / get_value are the only cell-level primitives
    - Row, column and data accessors return copies, never views
    - Indices are bounds-checked; there is no negative wrap-around
    - Equality and cloning are left to subclasses
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, Sequence

import numpy as np

from pyalgebra.core.exceptions import NullValueError
from pyalgebra.core.validation import (
    check_dimensions,
    check_index,
    check_no_nulls,
    check_rectangular,
)


class Matrix(ABC):
    """
    Rectangular grid container.

    Construct with dimensions (cells start unpopulated) or from 2D data:

        >>> m = SomeMatrix(3, 2)                 # width=3, height=2
        >>> m = SomeMatrix.from_array([[1, 2], [3, 4]])

    Attributes:
        width: Number of columns
        height: Number of rows
        shape: (height, width)
        allows_null: Whether cells may hold None
    """

    # numpy never broadcasts over a Matrix; binary operators fall back to ours
    __array_ufunc__ = None

    _dtype: Any = object

    def __init__(self, width: int, height: int, *, allows_null: bool = False):
        width, height = check_dimensions(width, height)
        self._allows_null = bool(allows_null)
        self._data = self._allocate(height, width)

    # --- Construction ---

    @classmethod
    def from_array(cls, data: Sequence[Sequence[Any]] | np.ndarray, **kwargs: Any) -> Matrix:
        """
        Build a matrix holding a copy of 2D data.

        Args:
            data: Rectangular nested sequence or 2D ndarray, indexed [row][col]
            **kwargs: Forwarded to the constructor (e.g. allows_null)

        Raises:
            NonRectangularError: If data is ragged
            NullValueError: If data holds None and the matrix rejects nulls
        """
        height, width = check_rectangular(data, "data")
        matrix = cls(width, height, **kwargs)
        if not matrix.allows_null:
            check_no_nulls(data, "data")
        for r in range(height):
            row = data[r]
            for c in range(width):
                matrix.set_value(r, c, row[c])
        return matrix

    @classmethod
    def from_matrix(cls, other: Matrix) -> Matrix:
        """Build an independent matrix of this class with other's cells."""
        return cls.from_array(other.get_data(), allows_null=other.allows_null)

    @classmethod
    def _from_buffer(cls, buffer: np.ndarray) -> Matrix:
        """Wrap an already-validated buffer without copying or checking cells."""
        matrix = cls.__new__(cls)
        matrix._allows_null = False
        matrix._data = cls._coerce_buffer(buffer)
        return matrix

    @classmethod
    def _coerce_buffer(cls, buffer: np.ndarray) -> np.ndarray:
        return np.asarray(buffer, dtype=cls._dtype)

    def _allocate(self, height: int, width: int) -> np.ndarray:
        return np.full((height, width), None, dtype=object)

    # --- Cell hooks ---

    def _to_cell(self, value: Any) -> Any:
        """Convert a non-None value for storage. Subclasses validate here."""
        return value

    def _from_cell(self, raw: Any) -> Any:
        """Convert a stored value for reading."""
        return raw

    # --- Dimensions ---

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def allows_null(self) -> bool:
        return self._allows_null

    def is_square(self) -> bool:
        return self.width == self.height

    def same_dimensions(self, other: Matrix) -> bool:
        return self.shape == other.shape

    # --- Cell access ---

    def get_value(self, row: int, col: int) -> Any:
        """
        Value at (row, col).

        Raises:
            OutOfRangeError: If row or col is out of bounds
            NullValueError: If the cell is unpopulated and nulls are rejected
        """
        r = check_index(row, self.height, "row")
        c = check_index(col, self.width, "col")
        raw = self._data[r, c]
        if raw is None:
            if not self._allows_null:
                raise NullValueError(
                    f"cell ({r}, {c}) is unpopulated and the matrix does not "
                    f"accept null values",
                    row=r, col=c,
                )
            return None
        return self._from_cell(raw)

    def set_value(self, row: int, col: int, value: Any) -> None:
        """
        Overwrite the value at (row, col).

        Raises:
            OutOfRangeError: If row or col is out of bounds
            NullValueError: If value is None and nulls are rejected
        """
        r = check_index(row, self.height, "row")
        c = check_index(col, self.width, "col")
        if value is None:
            if not self._allows_null:
                raise NullValueError(
                    f"cannot write None to ({r}, {c}): the matrix does not "
                    f"accept null values",
                    row=r, col=c,
                )
            self._data[r, c] = None
            return
        self._data[r, c] = self._to_cell(value)

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = key
        return self.get_value(row, col)

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        self.set_value(row, col, value)

    # --- Traversal ---

    def cells(self) -> Iterator[tuple[int, int, Any]]:
        """Yield (row, col, value) for every cell in row-major order."""
        for r in range(self.height):
            for c in range(self.width):
                yield r, c, self.get_value(r, c)

    def get_row(self, row: int) -> list[Any]:
        """Copy of one row."""
        r = check_index(row, self.height, "row")
        return [self.get_value(r, c) for c in range(self.width)]

    def get_column(self, col: int) -> list[Any]:
        """Copy of one column."""
        c = check_index(col, self.width, "col")
        return [self.get_value(r, c) for r in range(self.height)]

    def rows(self) -> Iterator[list[Any]]:
        for r in range(self.height):
            yield self.get_row(r)

    def columns(self) -> Iterator[list[Any]]:
        for c in range(self.width):
            yield self.get_column(c)

    def get_data(self) -> list[list[Any]]:
        """Copy of every cell as a list of rows."""
        return list(self.rows())

    # --- Identity ---

    @abstractmethod
    def clone(self) -> Matrix:
        """Deep, independent copy."""

    @abstractmethod
    def __eq__(self, other: Any) -> bool:
        ...

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"
