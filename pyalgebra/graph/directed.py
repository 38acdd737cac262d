"""
DirectedGraph: one-way links and cycle enumeration.
"""

from __future__ import annotations

from typing import Any, Optional

from pyalgebra.graph.base import Graph


class DirectedGraph(Graph):
    """
    Graph whose links run one way.

    Example:
        >>> g = DirectedGraph()
        >>> for vertex, link in [("A", "B"), ("B", "C"), ("C", "A")]:
        ...     _ = g.add(vertex, link)
        >>> g.path_length(3)
        3
        >>> g.cycle("A")
        [['A', 'B', 'C', 'A']]
    """

    def _connect(self, origin: int, target: int) -> None:
        if target not in self._links[origin]:
            self._links[origin].append(target)

    def _replace_links(self, origin: int, targets: list[int]) -> None:
        self._links[origin] = list(targets)

    def cycle(self, vertex: Any) -> Optional[list[list[Any]]]:
        """
        Every cycle through vertex, found by depth-first search.

        A cycle is a walk that starts and ends at vertex and visits no
        other vertex twice. Each is returned as the list of vertex values
        from vertex back to vertex; a self-loop is [vertex, vertex].

        Returns:
            The cycles in DFS order (empty if none), or None if vertex is
            not plotted
        """
        start = self._index_of(vertex)
        if start < 0:
            return None

        cycles: list[list[Any]] = []
        path = [start]

        def walk(current: int) -> None:
            for nxt in self._links[current]:
                if nxt == start:
                    cycles.append([self._values[i] for i in path] + [self._values[start]])
                elif nxt not in path:
                    path.append(nxt)
                    walk(nxt)
                    path.pop()

        walk(start)
        return cycles
