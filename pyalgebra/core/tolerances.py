"""
Process-wide numeric configuration.

RealMatrix equality compares cells within an absolute tolerance because
determinant and inverse accumulate floating error. The tolerance is shared
by every RealMatrix in the process and can be changed globally or for the
duration of a ``with`` block.

Not thread-safe: the tolerance is a single module-level value.
"""

import math
from contextlib import contextmanager
from typing import Iterator

from pyalgebra.core.exceptions import ValidationError


# Default absolute tolerance for RealMatrix cell comparison
DEFAULT_EQUALITY_TOLERANCE: float = 1e-10

# Cofactor expansion is O(n!); larger matrices emit a ComplexityWarning
DETERMINANT_WARN_SIZE: int = 9

_equality_tolerance: float = DEFAULT_EQUALITY_TOLERANCE


def get_equality_tolerance() -> float:
    """Current absolute tolerance used by RealMatrix equality."""
    return _equality_tolerance


def set_equality_tolerance(value: float) -> None:
    """
    Set the absolute tolerance used by RealMatrix equality.

    Args:
        value: New tolerance, finite and non-negative

    Raises:
        ValidationError: If value is negative, NaN or infinite
    """
    global _equality_tolerance
    _equality_tolerance = _check_tolerance(value)


@contextmanager
def equality_tolerance(value: float) -> Iterator[float]:
    """
    Temporarily override the RealMatrix equality tolerance.

    Usage:
        with equality_tolerance(1e-6):
            assert computed == expected

    Yields:
        The tolerance in effect inside the block
    """
    global _equality_tolerance
    previous = _equality_tolerance
    _equality_tolerance = _check_tolerance(value)
    try:
        yield _equality_tolerance
    finally:
        _equality_tolerance = previous


def _check_tolerance(value: float) -> float:
    try:
        tol = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"tolerance: cannot convert {value!r} to float") from e
    if not math.isfinite(tol) or tol < 0:
        raise ValidationError(
            f"tolerance: must be finite and non-negative, got {tol}"
        )
    return tol
