"""
End-to-end graph scenarios built on the matrix engine.
"""

import pytest

from pyalgebra.graph import DirectedGraph, UndirectedGraph


class TestThreeCycle:

    @pytest.fixture
    def graph(self):
        g = DirectedGraph()
        for vertex, link in [("A", "B"), ("B", "C"), ("C", "A")]:
            g.add(vertex, link)
        return g

    def test_walks_of_length_three(self, graph):
        # one closed walk starting at each vertex
        assert graph.path_length(3) == 3
        for v in "ABC":
            assert graph.path_length_between(v, v, 3)

    def test_single_cycle(self, graph):
        assert graph.cycle("A") == [["A", "B", "C", "A"]]

    def test_remove_breaks_every_walk(self, graph):
        graph.remove("A")
        assert "A" not in graph.links("B")
        assert "A" not in graph.links("C")
        assert graph.path_length(2) == 0
        assert graph.cycle("B") == []

    def test_walk_powers_repeat(self, graph):
        assert graph.adjacency_matrix.pow(3) == graph.adjacency_matrix.pow(0)


class TestUndirectedEdge:

    def test_one_call_links_both_ends(self):
        g = UndirectedGraph()
        g.add("A", "B")
        assert "A" in g.links("B")
        assert "B" in g.links("A")


@pytest.mark.parametrize("graph_class", [DirectedGraph, UndirectedGraph])
class TestQuerySentinels:

    def test_absent_vertex(self, graph_class):
        g = graph_class()
        g.add("A", "B")
        assert g.links("Z") is None
        assert g.path_length_from("Z", 1) is False
        assert g.path_length_between("A", "Z", 1) is False
        assert g.set("Z") is False
        assert g.remove("Z") is False

    def test_negative_length(self, graph_class):
        g = graph_class()
        g.add("A", "B")
        assert g.path_length(-2) == -1
        assert g.path_length_from("A", -2) is False
        assert g.path_length_between("A", "B", -2) is False

    @pytest.mark.parametrize("n", [2.0, 2.5, "2", None, True])
    def test_non_integer_length(self, graph_class, n):
        g = graph_class()
        g.add("A", "B")
        assert g.path_length(n) == -1
        assert g.path_length_from("A", n) is False
        assert g.path_length_between("A", "B", n) is False

    def test_empty_graph(self, graph_class):
        g = graph_class()
        assert g.path_length(2) == 0
        assert str(g) == ""
