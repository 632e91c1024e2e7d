"""
The universe: a collaboration graph seen from its current center.

Holds the original graph, the current center and its path tree, and
answers every query against that (graph, tree) pair.
"""

from __future__ import annotations

import logging
from typing import Generic

import numpy as np

from bacon.config import DEFAULT_CENTER, DEFAULT_RANK_COUNT
from bacon.errors import SingleVertexTreeError
from bacon.graph import (
    LabeledGraph,
    PathStep,
    average_separation,
    build_path_tree,
    list_by_degree_range,
    list_by_separation_range,
    missing_vertices,
    path_steps,
    path_to_root,
    rank_by_separation,
    separations,
)
from bacon.graph.labeled import E, V
from bacon.session.state import CenterState

logger = logging.getLogger(__name__)


class Universe(Generic[V, E]):
    """
    A fully built graph plus the path tree of its current center.

    The graph must not be mutated once a Universe wraps it. Changing the
    center rebuilds the tree before anything else sees it; the previous
    tree is dropped.
    """

    def __init__(self, graph: LabeledGraph[V, E], center: V = DEFAULT_CENTER) -> None:
        """
        Initialize the universe around a center.

        Args:
            graph: Fully built collaboration graph
            center: Initial center of the universe

        Raises:
            EmptyGraphError: If graph has no vertices
            UnknownCenterError: If center is not in graph
        """
        self._graph = graph
        self._center = center
        self._tree = build_path_tree(graph, center)
        logger.info(f"Center of the universe is {center!r}")

    @property
    def graph(self) -> LabeledGraph[V, E]:
        return self._graph

    @property
    def center(self) -> V:
        return self._center

    @property
    def tree(self) -> LabeledGraph[V, E]:
        return self._tree

    @property
    def state(self) -> CenterState:
        """Summary of the current center."""
        try:
            average = average_separation(self._tree, self._center)
        except SingleVertexTreeError:
            average = None
        return CenterState(
            center=self._center,
            reachable=self._tree.num_vertices(),
            unreachable=self._graph.num_vertices() - self._tree.num_vertices(),
            average_separation=average,
        )

    def change_center(self, center: V) -> CenterState:
        """
        Make center the new center of the universe.

        The current center and tree are kept if the new tree cannot be built.

        Raises:
            UnknownCenterError: If center is not in the graph
        """
        tree = build_path_tree(self._graph, center)
        self._center = center
        self._tree = tree

        state = self.state
        logger.info(
            f"Center of the universe is now {center!r} "
            f"({state.reachable:,} reachable, average separation "
            f"{state.average_separation})"
        )
        return state

    # =========================================================================
    # Queries
    # =========================================================================

    def find_path(self, vertex: V) -> list[V]:
        """Path from vertex to the center, empty if unreachable."""
        return path_to_root(self._tree, vertex)

    def path_steps(self, vertex: V) -> list[PathStep[V, E]]:
        """Path from vertex to the center with the label of each hop."""
        return path_steps(self._graph, self._tree, vertex)

    def separation(self, vertex: V) -> int | None:
        """Hop count from vertex to the center, None if unreachable."""
        path = self.find_path(vertex)
        return len(path) - 1 if path else None

    def infinite_separation(self) -> list[V]:
        """Vertices with no path to the center."""
        return list(missing_vertices(self._graph, self._tree))

    def list_by_degree(self, low: int, high: int) -> list[V]:
        return list_by_degree_range(self._graph, low, high)

    def list_by_separation(self, low: int, high: int) -> list[V]:
        return list_by_separation_range(self._tree, low, high)

    def best_centers(self, count: int = DEFAULT_RANK_COUNT, best: bool = False) -> list[V]:
        """
        Rank centers of the universe by average separation.

        Args:
            count: Number of centers to return
            best: If True, most central first; otherwise least central first
        """
        return rank_by_separation(self._graph, self._tree, count, best=best)

    def separation_histogram(self) -> np.ndarray:
        """
        Number of reachable vertices at each separation from the center.

        Index i holds the count at separation i; index 0 is the center.
        """
        depths = separations(self._tree, self._center)
        return np.bincount(np.fromiter(depths.values(), dtype=np.int64))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(center={self._center!r}, graph={self._graph!r})"
