"""
Exceptions raised by the graph and its query functions.

Every error is deterministic for a given graph state. A vertex that is
merely unreachable from the center is not an error; queries report it
as an empty path or leave it out of their results.
"""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for all graph errors."""


class UnknownVertexError(GraphError, KeyError):
    """A referenced vertex is not in the graph."""

    def __init__(self, vertex: Any) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} not in graph")

    def __str__(self) -> str:
        return self.args[0]


class NoSuchEdgeError(GraphError, KeyError):
    """A label was requested for an edge that does not exist."""

    def __init__(self, source: Any, target: Any) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No edge {source!r} -> {target!r}")

    def __str__(self) -> str:
        return self.args[0]


class EmptyGraphError(GraphError):
    """A path tree was requested from a graph with no vertices."""

    def __init__(self) -> None:
        super().__init__("Cannot build a path tree from an empty graph")


class UnknownCenterError(GraphError):
    """The requested center of the universe is not in the graph."""

    def __init__(self, center: Any) -> None:
        self.center = center
        super().__init__(f"Invalid universe center: {center!r}")


class InsufficientVerticesError(GraphError):
    """A ranking asked for more results than can be ranked."""

    def __init__(self, requested: int, available: int, rankable: int | None = None) -> None:
        self.requested = requested
        self.available = available
        self.rankable = available - 1 if rankable is None else rankable
        super().__init__(
            f"Requested {requested} vertices but at most {self.rankable} "
            f"can be ranked in a graph of {available}"
        )


class SingleVertexTreeError(GraphError):
    """Average separation is undefined for a tree holding only its root."""

    def __init__(self, root: Any) -> None:
        self.root = root
        super().__init__(f"Average separation undefined: {root!r} reaches no other vertex")
