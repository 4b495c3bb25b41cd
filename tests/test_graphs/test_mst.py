"""Tests for the greedy minimum spanning tree."""

import logging
from io import StringIO

import pytest

from algokit.graphs import DisconnectedGraphError, Edge, Graph, SpanningTree, Vertex
from algokit.logging import configure_logging


def _graph(num_vertices, records, directed=False):
    factory = Edge.directed if directed else Edge.undirected
    g = Graph(num_vertices)
    for a, b, w in records:
        g.add_edge(factory(Vertex(a), Vertex(b), w))
    return g


class TestGraph:
    """Graph construction."""

    @pytest.mark.parametrize("n", [0, -3])
    def test_non_positive_vertex_count_rejected(self, n):
        with pytest.raises(ValueError):
            Graph(n)

    def test_add_edge(self):
        g = Graph(2)
        edge = Edge.undirected(Vertex(1), Vertex(2))
        g.add_edge(edge)
        assert g.num_edges == 1
        assert g.edges == (edge,)

    def test_add_none_rejected(self):
        with pytest.raises(TypeError):
            Graph(2).add_edge(None)

    def test_str(self):
        g = _graph(2, [(1, 2, 4.0)])
        assert str(g) == "Vertices: 2\n[1]-[2] 4.0"
        assert repr(g) == "Graph(num_vertices=2, edges=1)"


class TestMinSpanningTree:
    """Graph.min_spanning_tree."""

    def test_star_selects_every_edge(self):
        """Test that a star is its own spanning tree."""
        g = _graph(4, [(1, 2, 2.3), (1, 3, 3.677), (1, 4, 7.213)])
        tree = g.min_spanning_tree()
        assert len(tree) == 3
        assert set(tree.edges) == set(g.edges)
        assert tree.truncated_cost == 12
        assert tree.total_cost == pytest.approx(13.19)

    def test_triangle(self):
        """Test that the heaviest triangle edge is left out."""
        g = _graph(3, [(1, 2, 1.0), (2, 3, 2.0), (1, 3, 3.0)])
        tree = g.min_spanning_tree()
        assert tree.total_cost == 3.0
        assert Edge.undirected(Vertex(1), Vertex(3)) not in tree.edges

    def test_selection_order(self):
        """Test that edges are returned in the order they were chosen."""
        g = _graph(4, [(3, 4, 1.0), (1, 2, 5.0), (2, 3, 2.0), (1, 4, 9.0)])
        tree = g.min_spanning_tree()
        assert [e.weight for e in tree.edges] == [5.0, 2.0, 1.0]

    def test_classic_example(self):
        """Test the six-vertex example against a hand-computed tree."""
        records = [
            (1, 2, 7), (1, 3, 9), (1, 6, 14), (2, 3, 10), (2, 4, 15),
            (3, 4, 11), (3, 6, 2), (4, 5, 6), (5, 6, 9),
        ]
        tree = _graph(6, records).min_spanning_tree()
        assert len(tree) == 5
        assert tree.total_cost == 33.0
        assert tree.truncated_cost == 33

    def test_ties_go_to_first_edge(self):
        """Test that equal-weight candidates resolve in edge-list order."""
        first = Edge.undirected(Vertex(1), Vertex(2), 1.0)
        second = Edge.undirected(Vertex(1), Vertex(3), 1.0)
        g = Graph(3)
        g.add_edge(first)
        g.add_edge(second)
        g.add_edge(Edge.undirected(Vertex(2), Vertex(3), 1.0))
        tree = g.min_spanning_tree()
        assert tree.edges[0] == first
        assert tree.edges[1] == second

    def test_repeatable(self):
        g = _graph(4, [(1, 2, 1.0), (2, 3, 1.0), (3, 4, 1.0), (4, 1, 1.0), (1, 3, 1.0)])
        assert g.min_spanning_tree() == g.min_spanning_tree()

    def test_directed_edges_used_either_way(self):
        """Test that edge direction is ignored when growing the tree."""
        g = _graph(3, [(2, 1, 1.0), (3, 2, 1.0)], directed=True)
        assert len(g.min_spanning_tree()) == 2

    def test_single_vertex(self):
        tree = Graph(1).min_spanning_tree()
        assert tree.edges == ()
        assert tree.total_cost == 0
        assert tree.truncated_cost == 0

    def test_seed(self):
        """Test growing the tree from another vertex."""
        g = _graph(3, [(1, 2, 4.0), (2, 3, 1.0), (1, 3, 2.0)])
        tree = g.min_spanning_tree(seed=2)
        assert tree.edges[0] == Edge.undirected(Vertex(2), Vertex(3))
        assert tree.total_cost == 3.0

    def test_zero_based_ids(self):
        g = _graph(2, [(0, 1, 3.0)])
        assert g.min_spanning_tree(seed=0).total_cost == 3.0

    def test_negative_seed_rejected(self):
        """Test that a negative seed raises ValueError."""
        g = _graph(2, [(1, 2, 1.0)])
        with pytest.raises(ValueError):
            g.min_spanning_tree(seed=-1)

    def test_isolated_seed_disconnected(self):
        """Test that a seed with no incident edge is an isolated vertex."""
        g = _graph(3, [(2, 3, 1.0)])
        with pytest.raises(DisconnectedGraphError):
            g.min_spanning_tree()

    def test_seed_outside_edges_disconnected(self):
        """Test that a seed id absent from every edge fails as disconnected."""
        g = _graph(2, [(1, 2, 1.0)])
        with pytest.raises(DisconnectedGraphError):
            g.min_spanning_tree(seed=7)

    def test_single_vertex_ignores_unrelated_edges(self):
        """Test that a one-vertex graph is already spanned by its seed."""
        g = _graph(1, [(2, 3, 1.0)])
        tree = g.min_spanning_tree()
        assert tree.edges == ()
        assert tree.total_cost == 0

    def test_no_edges_disconnected(self):
        """Test that three vertices and no edges fail on the first round."""
        with pytest.raises(DisconnectedGraphError):
            Graph(3).min_spanning_tree()

    def test_disconnected_component(self):
        g = _graph(4, [(1, 2, 1.0), (3, 4, 1.0)])
        with pytest.raises(DisconnectedGraphError):
            g.min_spanning_tree()

    def test_disconnected_is_runtime_error(self):
        assert issubclass(DisconnectedGraphError, RuntimeError)

    def test_logs_rounds(self):
        """Test that each round is logged at DEBUG level."""
        stream = StringIO()
        try:
            configure_logging(level=logging.DEBUG, stream=stream)
            _graph(3, [(1, 2, 1.0), (2, 3, 2.0)]).min_spanning_tree()
        finally:
            configure_logging(level=logging.WARNING)
        output = stream.getvalue()
        assert "round 1" in output
        assert "round 2" in output


class TestSpanningTree:
    """Cost accounting."""

    def test_truncation_per_addition(self):
        """Test that fractional parts are dropped edge by edge."""
        edges = tuple(Edge.undirected(Vertex(1), Vertex(i), 0.9) for i in range(2, 5))
        tree = SpanningTree(edges=edges)
        assert tree.truncated_cost == 0
        assert tree.total_cost == pytest.approx(2.7)

    def test_empty(self):
        assert SpanningTree(edges=()).total_cost == 0
        assert len(SpanningTree(edges=())) == 0
