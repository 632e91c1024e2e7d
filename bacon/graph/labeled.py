"""
Generic labeled graph backed by adjacency maps.

Edges are stored directed. An undirected edge is two directed edges that
hold the same label object, so a label mutated through one direction is
seen through the other:

    graph = LabeledGraph[str, set[str]]()
    graph.insert_vertex("Alice")
    graph.insert_vertex("Bob")
    graph.insert_undirected("Alice", "Bob", set())
    graph.get_label("Bob", "Alice").add("Footloose")
    graph.get_label("Alice", "Bob")  # {"Footloose"}
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

from bacon.errors import NoSuchEdgeError, UnknownVertexError

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")


class LabeledGraph(Generic[V, E]):
    """
    Mutable graph of hashable vertices joined by labeled directed edges.

    Attributes:
        _out: Maps each vertex to {target: label} for its outgoing edges
        _in: Maps each vertex to {source: label} for its incoming edges
    """

    def __init__(self) -> None:
        self._out: dict[V, dict[V, E]] = {}
        self._in: dict[V, dict[V, E]] = {}

    # =========================================================================
    # Mutation
    # =========================================================================

    def insert_vertex(self, v: V) -> None:
        """Add a vertex with no edges. No-op if already present."""
        if v in self._out:
            return
        self._out[v] = {}
        self._in[v] = {}

    def insert_directed(self, u: V, v: V, label: E) -> None:
        """
        Add the edge u -> v, replacing any label it already had.

        Raises:
            UnknownVertexError: If u or v is not in the graph
        """
        self._require(u)
        self._require(v)
        self._out[u][v] = label
        self._in[v][u] = label

    def insert_undirected(self, u: V, v: V, label: E) -> None:
        """Add u -> v and v -> u, both holding the same label object."""
        self.insert_directed(u, v, label)
        self.insert_directed(v, u, label)

    # =========================================================================
    # Membership
    # =========================================================================

    def has_vertex(self, v: V) -> bool:
        return v in self._out

    def has_edge(self, u: V, v: V) -> bool:
        return u in self._out and v in self._out[u]

    def get_label(self, u: V, v: V) -> E:
        """
        Get the label of edge u -> v.

        Raises:
            NoSuchEdgeError: If there is no such edge
        """
        if not self.has_edge(u, v):
            raise NoSuchEdgeError(u, v)
        return self._out[u][v]

    # =========================================================================
    # Neighborhoods
    # =========================================================================

    def out_neighbors(self, v: V) -> set[V]:
        """Vertices reachable from v by one outgoing edge."""
        self._require(v)
        return set(self._out[v])

    def in_neighbors(self, v: V) -> set[V]:
        """Vertices with an edge pointing at v."""
        self._require(v)
        return set(self._in[v])

    def out_degree(self, v: V) -> int:
        self._require(v)
        return len(self._out[v])

    def in_degree(self, v: V) -> int:
        self._require(v)
        return len(self._in[v])

    # =========================================================================
    # Whole-graph accessors
    # =========================================================================

    def vertices(self) -> set[V]:
        return set(self._out)

    def num_vertices(self) -> int:
        return len(self._out)

    def num_edges(self) -> int:
        """Number of directed edges (an undirected edge counts twice)."""
        return sum(len(targets) for targets in self._out.values())

    def _require(self, v: V) -> None:
        if v not in self._out:
            raise UnknownVertexError(v)

    def __len__(self) -> int:
        return len(self._out)

    def __contains__(self, v: object) -> bool:
        return v in self._out

    def __iter__(self) -> Iterator[V]:
        return iter(self._out)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"(vertices={self.num_vertices()}, edges={self.num_edges()})"
        )
