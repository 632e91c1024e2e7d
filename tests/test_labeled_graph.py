"""
Unit tests for LabeledGraph.
"""

import pytest

from bacon.errors import GraphError, NoSuchEdgeError, UnknownVertexError
from bacon.graph import LabeledGraph


@pytest.fixture
def graph() -> LabeledGraph:
    graph = LabeledGraph()
    graph.insert_vertex("u")
    graph.insert_vertex("v")
    return graph


class TestVertices:
    """Test vertex insertion and membership."""

    def test_empty_graph(self):
        """A new graph has no vertices."""
        graph = LabeledGraph()
        assert graph.num_vertices() == 0
        assert graph.vertices() == set()
        assert len(graph) == 0

    def test_insert_vertex_idempotent(self, graph):
        """Inserting an existing vertex is a no-op."""
        graph.insert_undirected("u", "v", {"M"})
        graph.insert_vertex("u")
        assert graph.num_vertices() == 2
        assert graph.has_edge("u", "v")

    def test_vertex_with_no_edges(self, graph):
        """A vertex may exist with zero degree."""
        assert graph.has_vertex("u")
        assert graph.out_degree("u") == 0
        assert graph.in_degree("u") == 0

    def test_has_vertex_false(self, graph):
        """Unknown vertices are not members."""
        assert graph.has_vertex("w") is False
        assert "w" not in graph

    def test_iteration_yields_vertices(self, graph):
        """Iterating a graph yields its vertices."""
        assert set(graph) == {"u", "v"}


class TestEdges:
    """Test directed and undirected edges."""

    def test_insert_directed(self, graph):
        """A directed edge exists in one direction only."""
        graph.insert_directed("u", "v", "label")
        assert graph.has_edge("u", "v")
        assert not graph.has_edge("v", "u")
        assert graph.get_label("u", "v") == "label"

    def test_insert_directed_overwrites_label(self, graph):
        """Re-inserting an edge replaces its label."""
        graph.insert_directed("u", "v", "old")
        graph.insert_directed("u", "v", "new")
        assert graph.get_label("u", "v") == "new"
        assert graph.num_edges() == 1

    def test_insert_directed_unknown_vertex(self, graph):
        """Edges require both endpoints to exist."""
        with pytest.raises(UnknownVertexError):
            graph.insert_directed("u", "w", "label")
        with pytest.raises(UnknownVertexError):
            graph.insert_directed("w", "u", "label")

    def test_undirected_shares_label(self, graph):
        """Both directions of an undirected edge hold the same label object."""
        graph.insert_undirected("u", "v", set())
        graph.get_label("v", "u").add("Footloose")
        assert graph.get_label("u", "v") == {"Footloose"}
        assert graph.get_label("u", "v") is graph.get_label("v", "u")

    def test_get_label_missing_edge(self, graph):
        """Missing edges raise rather than returning a default."""
        with pytest.raises(NoSuchEdgeError) as exc_info:
            graph.get_label("u", "v")
        assert exc_info.value.source == "u"
        assert exc_info.value.target == "v"

    def test_errors_are_graph_errors(self, graph):
        """Lookup errors are GraphErrors and KeyErrors."""
        with pytest.raises(GraphError):
            graph.get_label("u", "v")
        with pytest.raises(KeyError):
            graph.out_neighbors("w")


class TestNeighborhoods:
    """Test neighbor sets and degrees."""

    def test_out_and_in_neighbors(self, graph):
        """Directed edges show up as out- and in-neighbors."""
        graph.insert_vertex("w")
        graph.insert_directed("u", "v", 1)
        graph.insert_directed("w", "v", 2)
        assert graph.out_neighbors("u") == {"v"}
        assert graph.in_neighbors("v") == {"u", "w"}
        assert graph.out_degree("v") == 0
        assert graph.in_degree("v") == 2

    def test_neighbors_unknown_vertex(self, graph):
        """Neighborhood queries on unknown vertices raise."""
        with pytest.raises(UnknownVertexError):
            graph.out_neighbors("w")
        with pytest.raises(UnknownVertexError):
            graph.in_degree("w")

    def test_neighbor_set_is_a_copy(self, graph):
        """Mutating a returned neighbor set leaves the graph untouched."""
        graph.insert_undirected("u", "v", set())
        graph.out_neighbors("u").clear()
        assert graph.has_edge("u", "v")

    def test_num_edges_counts_directions(self, graph):
        """An undirected edge counts as two directed edges."""
        graph.insert_undirected("u", "v", set())
        assert graph.num_edges() == 2

    def test_repr(self, graph):
        """Repr shows vertex and edge counts."""
        assert repr(graph) == "LabeledGraph(vertices=2, edges=0)"
