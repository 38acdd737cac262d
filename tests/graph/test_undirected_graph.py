"""
Tests for UndirectedGraph reciprocity.
"""

import numpy as np

from pyalgebra.graph import UndirectedGraph


def edge(a, b):
    g = UndirectedGraph()
    g.add(a, b)
    return g


class TestReciprocalLinks:

    def test_single_add_links_both_ways(self):
        g = edge("A", "B")
        assert g.links("A") == ["B"]
        assert g.links("B") == ["A"]

    def test_adjacency_is_symmetric(self):
        g = UndirectedGraph()
        g.add("A", "B", "C")
        g.add("C", "D")
        m = g.adjacency_matrix.to_numpy()
        np.testing.assert_array_equal(m, m.T)

    def test_merge_into_existing_vertex(self):
        g = edge("A", "B")
        g.add("A", "C")
        assert g.links("A") == ["B", "C"]
        assert g.links("C") == ["A"]

    def test_adding_reverse_edge_is_idempotent(self):
        g = edge("A", "B")
        g.add("B", "A")
        assert g.links("A") == ["B"]
        assert g.links("B") == ["A"]

    def test_self_loop_recorded_once(self):
        g = UndirectedGraph()
        g.add("A", "A")
        assert g.links("A") == ["A"]


class TestSet:

    def test_drops_stale_reciprocal_links(self):
        g = edge("A", "B")
        assert g.set("A", "C") is True
        assert g.links("A") == ["C"]
        assert g.links("B") == []
        assert g.links("C") == ["A"]

    def test_keeps_retained_neighbors(self):
        g = UndirectedGraph()
        g.add("A", "B", "C")
        g.set("A", "B")
        assert g.links("B") == ["A"]
        assert g.links("C") == []

    def test_replaces_self_loop(self):
        g = UndirectedGraph()
        g.add("A", "A", "B")
        g.set("A", "B")
        assert g.links("A") == ["B"]
        assert g.links("B") == ["A"]

    def test_absent_vertex(self):
        assert UndirectedGraph().set("A", "B") is False


class TestRemove:

    def test_scrubs_neighbors(self):
        g = UndirectedGraph()
        g.add("A", "B", "C")
        g.add("B", "C")
        assert g.remove("A") is True
        assert g.links("B") == ["C"]
        assert g.links("C") == ["B"]


class TestWalks:

    def test_single_edge_walk_counts(self):
        g = edge("A", "B")
        assert g.path_length(1) == 2
        assert g.path_length(2) == 2

    def test_between_either_direction(self):
        g = edge("A", "B")
        assert g.path_length_between("A", "B", 1)
        assert g.path_length_between("B", "A", 1)
        assert not g.path_length_between("A", "B", 2)

    def test_str(self):
        assert str(edge("A", "B")) == "A -> [B]\nB -> [A]"

    def test_repr(self):
        assert repr(edge("A", "B")) == "UndirectedGraph(vertices=2)"
