"""
Exception hierarchy for PyAlgebra.

All exceptions inherit from PyAlgebraError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyAlgebraError(Exception):
    """Base exception for all PyAlgebra errors."""
    pass


class ValidationError(PyAlgebraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix or vector dimensions are incorrect or inconsistent.

    Base class for every shape-related failure.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    A requested dimension is not usable.

    Raised for negative widths/heights, and for operations (determinant)
    that are undefined on a zero-size matrix.

    Attributes:
        width: The offending width, if applicable
        height: The offending height, if applicable
    """

    def __init__(
        self,
        message: str,
        width: int | None = None,
        height: int | None = None,
    ):
        super().__init__(message)
        self.width = width
        self.height = height


class NonRectangularError(DimensionError):
    """
    Initial data is ragged.

    Attributes:
        row: Index of the first row whose length differs from row 0
        expected_length: Length of row 0
        actual_length: Length of the offending row
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected_length: int | None = None,
        actual_length: int | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.expected_length = expected_length
        self.actual_length = actual_length


class DimensionMismatchError(DimensionError):
    """
    Two operands have incompatible shapes for an operation.

    Attributes:
        operation: Name of the operation that failed
        left_shape: (height, width) of the left operand
        right_shape: (height, width) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NonSquareMatrixError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        operation: Name of the operation that failed
        shape: (height, width) of the offending matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class NullValueError(ValidationError):
    """
    A null (None) cell was written to, read from, or supplied to a matrix
    that does not accept null values.

    Attributes:
        row: Row index of the null cell, if known
        col: Column index of the null cell, if known
    """

    def __init__(self, message: str, row: int | None = None, col: int | None = None):
        super().__init__(message)
        self.row = row
        self.col = col


class NumericalError(PyAlgebraError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility (matrix division,
    negative integer power) but the matrix has a zero determinant.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was found to be zero, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: object | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class DivideByZeroError(NumericalError, ZeroDivisionError):
    """
    Division by a zero-valued scalar.

    Also a ZeroDivisionError so callers using the builtin idiom keep working.

    Attributes:
        dividend: The value being divided, if available
    """

    def __init__(self, message: str, dividend: object | None = None):
        super().__init__(message)
        self.dividend = dividend


class OutOfRangeError(PyAlgebraError, IndexError):
    """
    Index outside the valid range of a matrix, vector or block.

    Attributes:
        index: The offending index (int or tuple)
        bounds: The valid bounds (exclusive upper limits)
    """

    def __init__(
        self,
        message: str,
        index: object | None = None,
        bounds: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class ComplexityWarning(UserWarning):
    """
    Requested computation is combinatorially expensive.

    Emitted when recursive cofactor expansion (O(n!)) is asked for a
    matrix larger than the configured ceiling. The computation proceeds.
    """
    pass
