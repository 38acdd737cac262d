"""
Core infrastructure for PyAlgebra.

This module provides shared abstractions and utilities used by the
scalar, matrix and graph subpackages.

Key components:
    protocols: NumericMatrix protocol
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Process-wide equality tolerance and complexity ceiling
"""

from pyalgebra.core.protocols import NumericMatrix
from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    NonRectangularError,
    DimensionMismatchError,
    NonSquareMatrixError,
    NullValueError,
    NumericalError,
    SingularMatrixError,
    DivideByZeroError,
    OutOfRangeError,
    ComplexityWarning,
)
from pyalgebra.core.tolerances import (
    DEFAULT_EQUALITY_TOLERANCE,
    get_equality_tolerance,
    set_equality_tolerance,
    equality_tolerance,
)

__all__ = [
    # Protocols
    "NumericMatrix",
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionError",
    "NonRectangularError",
    "DimensionMismatchError",
    "NonSquareMatrixError",
    "NullValueError",
    "NumericalError",
    "SingularMatrixError",
    "DivideByZeroError",
    "OutOfRangeError",
    "ComplexityWarning",
    # Configuration
    "DEFAULT_EQUALITY_TOLERANCE",
    "get_equality_tolerance",
    "set_equality_tolerance",
    "equality_tolerance",
]
