"""
Matrix layer: container, numeric matrices and vectors.

Design principles:
    - Matrix owns a numpy buffer and the bounds-checked cell primitives
    - NumberMatrix implements the numeric contract once over that buffer
    - RealMatrix and ComplexMatrix differ only in dtype, cell type and equality
"""

from pyalgebra.matrix.base import Matrix
from pyalgebra.matrix.numeric import NumberMatrix
from pyalgebra.matrix.complex import ComplexMatrix
from pyalgebra.matrix.real import RealMatrix
from pyalgebra.matrix.vector import Vector

__all__ = [
    "Matrix",
    "NumberMatrix",
    "RealMatrix",
    "ComplexMatrix",
    "Vector",
]
