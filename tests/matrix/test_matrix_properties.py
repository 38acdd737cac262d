"""
Algebraic identities that must hold for every numeric matrix.

Each property is checked over a handful of seeded random matrices, plus
the small fixed cases with known exact answers.
"""

import numpy as np
import pytest

from pyalgebra.matrix.complex import ComplexMatrix
from pyalgebra.matrix.real import RealMatrix
from pyalgebra.scalar.number import ComplexNumber


SEEDS = [0, 1, 2, 3, 4]


def random_real(seed, n=4, m=None):
    rng = np.random.default_rng(seed)
    return RealMatrix.from_array(rng.uniform(-5, 5, size=(n, m or n)))


class TestKnownValues:

    def test_determinant_of_one_by_one(self):
        assert RealMatrix.from_array([[5]]).determinant() == 5.0

    def test_determinant_of_two_by_two(self):
        assert RealMatrix.from_array([[1, 2], [3, 4]]).determinant() == -2.0

    def test_complex_zero_to_the_zero(self):
        assert ComplexNumber(0, 0).pow(0) == ComplexNumber(1, 0)


class TestRoundTrips:

    @pytest.mark.parametrize("seed", SEEDS)
    def test_product_with_inverse_is_identity(self, seed):
        m = random_real(seed) + RealMatrix.identity(4) * 20
        assert m.multiply(m.inverse()) == RealMatrix.identity(4)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_double_transpose_is_exact(self, seed):
        m = random_real(seed, 3, 5)
        result = m.transpose().transpose()
        np.testing.assert_array_equal(result.to_numpy(), m.to_numpy())

    def test_double_transpose_complex(self, rng):
        data = rng.standard_normal((2, 3)) + 1j * rng.standard_normal((2, 3))
        m = ComplexMatrix.from_array(data)
        assert m.transpose().transpose() == m

    @pytest.mark.parametrize("seed", SEEDS)
    def test_add_then_subtract(self, seed):
        m1 = random_real(seed, 3, 2)
        m2 = random_real(seed + 100, 3, 2)
        assert m1.add(m2).subtract(m2) == m1


class TestPowers:

    @pytest.mark.parametrize("i, j", [(0, 0), (0, 3), (1, 1), (2, 3)])
    def test_exponents_add(self, i, j):
        m = RealMatrix.from_array([[0.5, 0.25, 0], [0.1, 0.2, 0.3], [0, 0.4, 0.6]])
        assert m.pow(i).multiply(m.pow(j)) == m.pow(i + j)

    def test_negative_power_inverts_positive(self):
        m = random_real(7, 3) + RealMatrix.identity(3) * 20
        assert m.pow(3).multiply(m.pow(-3)) == RealMatrix.identity(3)
