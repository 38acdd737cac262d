"""
Graph layer: adjacency analysis over RealMatrix.
"""

from pyalgebra.graph.base import Graph
from pyalgebra.graph.directed import DirectedGraph
from pyalgebra.graph.undirected import UndirectedGraph

__all__ = [
    "Graph",
    "DirectedGraph",
    "UndirectedGraph",
]
