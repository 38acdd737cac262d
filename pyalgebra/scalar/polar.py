"""
PolarCoordinate: a point given by radius and angle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyalgebra.scalar.number import ComplexNumber


@dataclass(frozen=True, order=True)
class PolarCoordinate:
    """
    Immutable polar coordinate, ordered by (r, theta).

    Attributes:
        r: Radius
        theta: Angle in radians
    """
    r: float
    theta: float

    @property
    def x(self) -> float:
        """Cartesian x = r cos(theta)."""
        return self.r * math.cos(self.theta)

    @property
    def y(self) -> float:
        """Cartesian y = r sin(theta)."""
        return self.r * math.sin(self.theta)

    def to_complex(self) -> 'ComplexNumber':
        """The complex number x + yi at this coordinate."""
        from pyalgebra.scalar.number import ComplexNumber
        return ComplexNumber(self.x, self.y)

    def __str__(self) -> str:
        return "(%f,%f)" % (self.r, self.theta)
