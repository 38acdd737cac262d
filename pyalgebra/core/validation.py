"""
Input validation utilities for PyAlgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any, Sequence

import numpy as np

from pyalgebra.core.exceptions import (
    DimensionMismatchError,
    InvalidDimensionError,
    NonRectangularError,
    NonSquareMatrixError,
    NullValueError,
    OutOfRangeError,
    ValidationError,
)


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (Python int or numpy integer, not bool).

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_dimensions(width: Any, height: Any) -> tuple[int, int]:
    """
    Verify width and height are non-negative integers.

    Raises:
        InvalidDimensionError: If either dimension is negative or not an integer
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidDimensionError(
                f"{name}: expected an integer, got {type(value).__name__} {value!r}",
            )
    if width < 0 or height < 0:
        raise InvalidDimensionError(
            f"dimensions must be non-negative, got width={width}, height={height}",
            width=int(width), height=int(height),
        )
    return int(width), int(height)


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify a 2D sequence is rectangular (every row has the same length).

    Args:
        rows: Sequence of row sequences
        name: Parameter name for error messages

    Returns:
        (height, width) of the data

    Raises:
        NonRectangularError: If a row is missing or differs in length from row 0
    """
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise NonRectangularError(
                f"{name}: expected 2D array, got {rows.ndim}D with shape {rows.shape}"
            )
        return rows.shape[0], rows.shape[1]

    height = len(rows)
    if height == 0:
        return 0, 0

    lengths = []
    for r, row in enumerate(rows):
        if row is None or isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
            raise NonRectangularError(
                f"{name}: row {r} is not a sequence ({type(row).__name__})",
                row=r,
            )
        lengths.append(len(row))

    width = lengths[0]
    for r, length in enumerate(lengths):
        if length != width:
            raise NonRectangularError(
                f"{name}: must be a rectangular array; row {r} has length "
                f"{length}, expected {width}",
                row=r, expected_length=width, actual_length=length,
            )
    return height, width


def check_no_nulls(rows: Sequence[Sequence[Any]], name: str) -> None:
    """
    Verify a rectangular 2D sequence contains no None cells.

    Raises:
        NullValueError: At the first None cell found (row-major order)
    """
    if isinstance(rows, np.ndarray) and rows.dtype != object:
        return
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value is None:
                raise NullValueError(
                    f"{name}: contains a null value at ({r}, {c}) and the "
                    f"matrix does not accept null values",
                    row=r, col=c,
                )


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify 0 <= index < bound.

    Negative indices are rejected; there is no wrap-around.

    Raises:
        OutOfRangeError: If index is outside [0, bound)
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise OutOfRangeError(
            f"{name}: expected an integer index, got {type(index).__name__} {index!r}",
            index=index, bounds=(bound,),
        )
    if index < 0 or index >= bound:
        raise OutOfRangeError(
            f"{name}: index {index} out of range [0, {bound})",
            index=int(index), bounds=(bound,),
        )
    return int(index)


def check_same_shape(left: Any, right: Any, operation: str) -> None:
    """
    Verify two matrices have identical (height, width).

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left.shape != right.shape:
        raise DimensionMismatchError(
            f"{operation}: matrices must have same dimensions, got "
            f"{_fmt_shape(left.shape)} and {_fmt_shape(right.shape)}",
            operation=operation, left_shape=left.shape, right_shape=right.shape,
        )


def check_multipliable(left: Any, right: Any) -> None:
    """
    Verify left.width == right.height.

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left.width != right.height:
        raise DimensionMismatchError(
            f"multiply: number of columns in first matrix ({left.width}) must "
            f"equal number of rows in second matrix ({right.height})",
            operation='multiply', left_shape=left.shape, right_shape=right.shape,
        )


def check_square(matrix: Any, operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        NonSquareMatrixError: If height != width
    """
    if matrix.height != matrix.width:
        raise NonSquareMatrixError(
            f"{operation}: matrix must be square, got {_fmt_shape(matrix.shape)}",
            operation=operation, shape=matrix.shape,
        )


def _fmt_shape(shape: tuple[int, ...]) -> str:
    return "x".join(str(s) for s in shape)
