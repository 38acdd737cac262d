"""
UndirectedGraph: reciprocal links.
"""

from __future__ import annotations

from pyalgebra.graph.base import Graph


class UndirectedGraph(Graph):
    """
    Graph whose links always run both ways.

    Linking A to B also links B to A, so the adjacency matrix is
    symmetric. set() and remove() keep every neighbor's links in step.
    """

    def _connect(self, origin: int, target: int) -> None:
        if target not in self._links[origin]:
            self._links[origin].append(target)
        if origin not in self._links[target]:
            self._links[target].append(origin)

    def _replace_links(self, origin: int, targets: list[int]) -> None:
        for old in self._links[origin]:
            if old not in targets and old != origin:
                self._links[old].remove(origin)
        self._links[origin] = []
        for target in targets:
            self._connect(origin, target)
