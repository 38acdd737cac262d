"""
Tests for ComplexMatrix and real/complex promotion.
"""

import math

import numpy as np
import pytest

from pyalgebra.core.exceptions import ValidationError
from pyalgebra.core.protocols import NumericMatrix
from pyalgebra.matrix.complex import ComplexMatrix
from pyalgebra.matrix.real import RealMatrix
from pyalgebra.scalar.number import ComplexNumber


J = ComplexNumber(0, 1)


class TestConstruction:

    def test_zero_filled(self):
        m = ComplexMatrix(2, 1)
        assert m.get_row(0) == [ComplexNumber(0, 0), ComplexNumber(0, 0)]

    def test_cells_read_as_complex_number(self):
        m = ComplexMatrix.from_array([[ComplexNumber(1, 2), 3]])
        assert m.get_value(0, 0) == ComplexNumber(1, 2)
        assert isinstance(m.get_value(0, 1), ComplexNumber)

    def test_accepts_builtin_complex(self):
        m = ComplexMatrix.from_array(np.array([[1 + 2j, 3 - 1j]]))
        assert m.get_row(0) == [ComplexNumber(1, 2), ComplexNumber(3, -1)]

    def test_nan_parts_normalized(self):
        m = ComplexMatrix.from_array([[complex(math.nan, 1.0), complex(2.0, math.nan)]])
        assert m.get_row(0) == [ComplexNumber(0, 1), ComplexNumber(2, 0)]

    def test_rejects_non_number(self):
        with pytest.raises(ValidationError, match="must be numbers"):
            ComplexMatrix.from_array([["1+i"]])

    def test_from_real(self):
        c = ComplexMatrix.from_real(RealMatrix.from_array([[1.5]]))
        assert c.get_value(0, 0) == ComplexNumber(1.5, 0)

    def test_identity(self):
        m = ComplexMatrix.identity(2)
        assert isinstance(m, ComplexMatrix)
        assert m.get_value(1, 1) == ComplexNumber(1, 0)


class TestPromotion:

    def test_real_plus_complex_scalar(self):
        result = RealMatrix.from_array([[1, 2]]) + J
        assert isinstance(result, ComplexMatrix)
        assert result.get_row(0) == [ComplexNumber(1, 1), ComplexNumber(2, 1)]

    def test_real_times_builtin_complex(self):
        result = RealMatrix.from_array([[2]]) * 1j
        assert isinstance(result, ComplexMatrix)
        assert result.get_value(0, 0) == ComplexNumber(0, 2)

    def test_real_matrix_with_complex_matrix(self):
        real = RealMatrix.from_array([[1, 0], [0, 1]])
        cplx = ComplexMatrix.from_array([[J, 0], [0, J]])
        assert isinstance(real + cplx, ComplexMatrix)
        assert isinstance(cplx - real, ComplexMatrix)
        assert (real @ cplx) == cplx

    def test_real_scalar_keeps_complex(self):
        result = ComplexMatrix.from_array([[J]]) * 2
        assert isinstance(result, ComplexMatrix)
        assert result.get_value(0, 0) == ComplexNumber(0, 2)

    def test_real_divided_by_complex_matrix(self):
        real = RealMatrix.from_array([[2]])
        result = real / ComplexMatrix.from_array([[ComplexNumber(0, 2)]])
        assert isinstance(result, ComplexMatrix)
        assert result.get_value(0, 0) == ComplexNumber(0, -1)

    def test_real_operand_unchanged(self):
        real = RealMatrix.from_array([[1]])
        real + J
        assert isinstance(real, RealMatrix)
        assert real.get_value(0, 0) == 1.0


class TestArithmetic:

    def test_transpose_does_not_conjugate(self):
        m = ComplexMatrix.from_array([[ComplexNumber(1, 1), 2]])
        assert m.transpose().get_column(0) == [ComplexNumber(1, 1), ComplexNumber(2, 0)]

    def test_pow(self):
        assert (ComplexMatrix.from_array([[J]]) ** 2).get_value(0, 0) == ComplexNumber(-1, 0)

    def test_determinant(self):
        m = ComplexMatrix.from_array([
            [ComplexNumber(1, 1), 2],
            [3, ComplexNumber(4, -1)],
        ])
        assert m.determinant() == ComplexNumber(-1, 3)

    def test_determinant_matches_numpy(self, rng):
        data = rng.standard_normal((4, 4)) + 1j * rng.standard_normal((4, 4))
        det = complex(ComplexMatrix.from_array(data).determinant())
        expected = np.linalg.det(data)
        assert abs(det - expected) <= 1e-9 * abs(expected)

    def test_inverse(self):
        m = ComplexMatrix.from_array([[0, J], [J, 0]])
        np.testing.assert_allclose(m.inverse().to_numpy(), [[0, -1j], [-1j, 0]])

    def test_inverse_times_self(self, rng):
        data = rng.standard_normal((3, 3)) + 1j * rng.standard_normal((3, 3))
        m = ComplexMatrix.from_array(data)
        np.testing.assert_allclose((m @ m.inverse()).to_numpy(), np.eye(3), atol=1e-10)

    def test_singular_inverse(self):
        m = ComplexMatrix.from_array([[1, J], [J, -1]])
        assert m.inverse() is None


class TestEqualityAndStr:

    def test_exact_equality(self):
        a = ComplexMatrix.from_array([[ComplexNumber(1, 0)]])
        b = ComplexMatrix.from_array([[ComplexNumber(1, 1e-15)]])
        assert a == ComplexMatrix.from_array([[1]])
        assert a != b

    def test_shape_must_match(self):
        assert ComplexMatrix(1, 2) != ComplexMatrix(2, 1)

    def test_str(self):
        m = ComplexMatrix.from_array([[ComplexNumber(1, 2), 3], [J, ComplexNumber(0, -1)]])
        assert str(m) == "1+2i 3\ni    -i"


class TestNumericMatrixProtocol:

    @pytest.mark.parametrize("kind", [RealMatrix, ComplexMatrix])
    def test_numeric_kinds_conform(self, kind):
        assert isinstance(kind(2, 2), NumericMatrix)

    def test_plain_container_does_not_conform(self, grid_class):
        assert not isinstance(grid_class(1, 1), NumericMatrix)
