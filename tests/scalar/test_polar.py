"""
Tests for PolarCoordinate.
"""

import math

import pytest

from pyalgebra.scalar.number import ComplexNumber
from pyalgebra.scalar.polar import PolarCoordinate


class TestPolarCoordinate:

    def test_cartesian_projection(self):
        p = PolarCoordinate(2.0, math.pi / 3)
        assert p.x == pytest.approx(1.0)
        assert p.y == pytest.approx(math.sqrt(3))

    def test_to_complex(self):
        z = PolarCoordinate(1.0, math.pi).to_complex()
        assert isinstance(z, ComplexNumber)
        assert z.a == pytest.approx(-1.0)
        assert z.b == pytest.approx(0.0, abs=1e-15)

    def test_ordered_by_radius_then_angle(self):
        points = [PolarCoordinate(2, 0), PolarCoordinate(1, 3), PolarCoordinate(1, 1)]
        assert sorted(points) == [
            PolarCoordinate(1, 1),
            PolarCoordinate(1, 3),
            PolarCoordinate(2, 0),
        ]

    def test_str(self):
        assert str(PolarCoordinate(1.5, 0.25)) == "(1.500000,0.250000)"

    def test_equality_and_hash(self):
        assert PolarCoordinate(1, 2) == PolarCoordinate(1, 2)
        assert hash(PolarCoordinate(1, 2)) == hash(PolarCoordinate(1, 2))
