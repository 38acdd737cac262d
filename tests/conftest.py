"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pyalgebra.matrix.base import Matrix
from pyalgebra.matrix.real import RealMatrix


class GridMatrix(Matrix):
    """Minimal concrete container for exercising Matrix directly."""

    def clone(self):
        return GridMatrix.from_matrix(self)

    def __eq__(self, other):
        if not isinstance(other, GridMatrix):
            return NotImplemented
        return self.get_data() == other.get_data()


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def grid_class():
    return GridMatrix


@pytest.fixture
def invertible_3x3():
    """Well-conditioned 3x3 with determinant 1 (integer inverse)."""
    return RealMatrix.from_array([
        [1, 2, 3],
        [0, 1, 4],
        [5, 6, 0],
    ])


@pytest.fixture
def singular_3x3():
    """Rows are linearly dependent (row 3 = row 1 + row 2)."""
    return RealMatrix.from_array([
        [1, 2, 3],
        [4, 5, 6],
        [5, 7, 9],
    ])


@pytest.fixture
def random_square(rng):
    """Random 5x5 real matrix as a (RealMatrix, ndarray) pair."""
    data = rng.standard_normal((5, 5))
    return RealMatrix.from_array(data), data
