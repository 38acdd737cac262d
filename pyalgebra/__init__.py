"""
PyAlgebra: dense real/complex matrix algebra with graph adjacency analysis.

Scalars are dual-mode: a float or a ComplexNumber, with real arithmetic
staying real. Matrices come in a real and a complex kind sharing one
numeric contract. Graphs answer walk-count queries through powers of
their adjacency matrix.

Submodules:
    core: Exceptions, validators, tolerances and protocols
    scalar: ComplexNumber, PolarCoordinate and elementary functions
    matrix: Matrix container, RealMatrix, ComplexMatrix and Vector
    graph: DirectedGraph and UndirectedGraph
"""

__version__ = "0.1.0"

from pyalgebra import core
from pyalgebra import scalar
from pyalgebra import matrix
from pyalgebra import graph
from pyalgebra.scalar import ComplexNumber, PolarCoordinate
from pyalgebra.matrix import RealMatrix, ComplexMatrix, Vector
from pyalgebra.graph import DirectedGraph, UndirectedGraph

__all__ = [
    "__version__",
    "core",
    "scalar",
    "matrix",
    "graph",
    "ComplexNumber",
    "PolarCoordinate",
    "RealMatrix",
    "ComplexMatrix",
    "Vector",
    "DirectedGraph",
    "UndirectedGraph",
]
