"""
Graph storage and adjacency-matrix walk queries.

Vertices live in an index arena: ``_values[i]`` is the value of vertex i
and ``_links[i]`` the ordered indices it links to. Vertex values are
unique by equality. Indices are assigned in insertion order and are also
the row/column order of the adjacency matrix.

The adjacency matrix is cached and rebuilt lazily after any mutation.
The cache makes graphs unsafe to share between threads, even for
concurrent reads.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

import numpy as np

from pyalgebra.matrix.real import RealMatrix


class Graph(ABC):
    """
    Base class for DirectedGraph and UndirectedGraph.

    Walk queries read the adjacency matrix M, where M[r][c] == 1 iff
    vertex r links to vertex c. The number of walks of length n from r
    to c is (M^n)[r][c].

    Queries never raise for an absent vertex or a negative length; they
    return the sentinel documented on each method instead.
    """

    def __init__(self):
        self._values: list[Any] = []
        self._links: list[list[int]] = []
        self._adjacency: Optional[RealMatrix] = None

    # --- Arena ---

    def _index_of(self, vertex: Any) -> int:
        if vertex is None:
            return -1
        for i, value in enumerate(self._values):
            if value == vertex:
                return i
        return -1

    def _ensure(self, vertex: Any) -> int:
        """Index of vertex, plotting it with no links if absent."""
        index = self._index_of(vertex)
        if index < 0:
            self._values.append(vertex)
            self._links.append([])
            index = len(self._values) - 1
        return index

    def _targets(self, links: tuple[Any, ...]) -> list[int]:
        """Indices for link values, plotting new ones; None is skipped."""
        targets = []
        for link in links:
            if link is None:
                continue
            t = self._ensure(link)
            if t not in targets:
                targets.append(t)
        return targets

    def _invalidate(self) -> None:
        self._adjacency = None

    @abstractmethod
    def _connect(self, origin: int, target: int) -> None:
        """Add the link origin -> target (and its reverse, if undirected)."""

    @abstractmethod
    def _replace_links(self, origin: int, targets: list[int]) -> None:
        """Make targets the exact link set of origin."""

    # --- Mutation ---

    def add(self, vertex: Any, *links: Any) -> bool:
        """
        Plot vertex with links, or merge links into an existing vertex.

        Link targets that are not yet plotted are created without links of
        their own. A link equal to vertex is a self-loop.

        Returns:
            False if vertex is None, True otherwise
        """
        if vertex is None:
            return False
        origin = self._ensure(vertex)
        for target in self._targets(links):
            self._connect(origin, target)
        self._invalidate()
        return True

    def set(self, vertex: Any, *links: Any) -> bool:
        """
        Replace the link set of an existing vertex.

        Returns:
            False if vertex is not plotted, True otherwise
        """
        origin = self._index_of(vertex)
        if origin < 0:
            return False
        self._replace_links(origin, self._targets(links))
        self._invalidate()
        return True

    def remove(self, vertex: Any) -> bool:
        """
        Delete vertex and every link pointing at it.

        Returns:
            False if vertex is not plotted, True otherwise
        """
        index = self._index_of(vertex)
        if index < 0:
            return False
        del self._values[index]
        del self._links[index]
        self._links = [
            [t - 1 if t > index else t for t in links if t != index]
            for links in self._links
        ]
        self._invalidate()
        return True

    # --- Inspection ---

    @property
    def vertex_count(self) -> int:
        return len(self._values)

    @property
    def vertices(self) -> list[Any]:
        """Vertex values in adjacency-matrix order."""
        return list(self._values)

    def is_plotted(self, vertex: Any) -> bool:
        return self._index_of(vertex) >= 0

    def links(self, vertex: Any) -> Optional[list[Any]]:
        """Values vertex links to, or None if vertex is not plotted."""
        index = self._index_of(vertex)
        if index < 0:
            return None
        return [self._values[t] for t in self._links[index]]

    def _matrix(self) -> RealMatrix:
        if self._adjacency is None:
            n = len(self._values)
            buffer = np.zeros((n, n))
            for r, targets in enumerate(self._links):
                buffer[r, targets] = 1.0
            self._adjacency = RealMatrix.from_array(buffer)
        return self._adjacency

    @property
    def adjacency_matrix(self) -> RealMatrix:
        """Copy of the 0/1 adjacency matrix, rows and columns in vertex order."""
        return self._matrix().clone()

    # --- Walk queries ---

    def path_length(self, n: int) -> int:
        """
        Total number of walks of length n in the graph (sum of M^n).

        Returns:
            The walk count, or -1 if n is not a non-negative integer
        """
        if not _is_length(n):
            return -1
        return int(self._matrix().pow(n).to_numpy().sum())

    def path_length_from(self, vertex: Any, n: int) -> bool:
        """
        Whether some entry in vertex's row of M^n equals n exactly.

        For n <= 1 the row of M itself is inspected. This is a boundary
        check on walk counts, not a reachability test.

        Returns:
            False if vertex is not plotted or n is not a non-negative integer
        """
        index = self._index_of(vertex)
        if index < 0 or not _is_length(n):
            return False
        matrix = self._matrix().pow(n) if n > 1 else self._matrix()
        return any(int(count) == n for count in matrix.get_row(index))

    def path_length_between(self, origin: Any, target: Any, n: int) -> bool:
        """
        Whether a walk of exactly n edges leads from origin to target.

        A walk of length 0 exists only from a vertex to itself.

        Returns:
            False if either vertex is not plotted or n is not a
            non-negative integer
        """
        o = self._index_of(origin)
        t = self._index_of(target)
        if o < 0 or t < 0 or not _is_length(n):
            return False
        if n == 0:
            return o == t
        return self._matrix().pow(n).get_value(o, t) > 0

    # --- Protocol ---

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, vertex: Any) -> bool:
        return self.is_plotted(vertex)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._values))

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        if len(self) != len(other):
            return False
        for i, value in enumerate(self._values):
            j = other._index_of(value)
            if j < 0:
                return False
            mine = [self._values[t] for t in self._links[i]]
            theirs = [other._values[t] for t in other._links[j]]
            if len(mine) != len(theirs) or any(m not in theirs for m in mine):
                return False
        return True

    __hash__ = None

    def __str__(self) -> str:
        lines = []
        for value, targets in zip(self._values, self._links):
            linked = ", ".join(str(self._values[t]) for t in targets)
            lines.append(f"{value} -> [{linked}]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self)})"


def _is_length(n: Any) -> bool:
    return isinstance(n, numbers.Integral) and not isinstance(n, bool) and n >= 0
