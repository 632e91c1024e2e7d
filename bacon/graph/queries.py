"""
Vertex queries over an original graph and its current path tree.

Every function takes the graphs it reads explicitly; none of them keep
state between calls.
"""

from __future__ import annotations

import logging

import numpy as np

from bacon.errors import InsufficientVerticesError, SingleVertexTreeError
from bacon.graph.bfs import build_path_tree
from bacon.graph.labeled import E, LabeledGraph, V
from bacon.graph.paths import tree_root
from bacon.graph.separation import average_separation, separations

logger = logging.getLogger(__name__)


def _check_range(low: int, high: int) -> None:
    if low > high:
        raise ValueError(f"Empty range: low={low} > high={high}")


def missing_vertices(graph: LabeledGraph[V, E], tree: LabeledGraph[V, E]) -> set[V]:
    """Vertices of graph with no path to the center (infinite separation)."""
    return graph.vertices() - tree.vertices()


def list_by_degree_range(graph: LabeledGraph[V, E], low: int, high: int) -> list[V]:
    """
    Vertices whose out-degree lies in [low, high], most in-edges first.

    Ties keep graph iteration order.
    """
    _check_range(low, high)
    matches = [v for v in graph if low <= graph.out_degree(v) <= high]
    matches.sort(key=graph.in_degree, reverse=True)
    return matches


def list_by_separation_range(tree: LabeledGraph[V, E], low: int, high: int) -> list[V]:
    """
    Reachable vertices whose separation from the center lies in [low, high].

    Separation is the hop count to the tree root (0 for the root itself).
    Results are ordered by ascending separation.
    """
    _check_range(low, high)
    root = tree_root(tree)
    if root is None:
        return []

    depths = separations(tree, root)
    matches = [v for v, depth in depths.items() if low <= depth <= high]
    matches.sort(key=depths.__getitem__)
    return matches


def rank_by_separation(
    graph: LabeledGraph[V, E],
    tree: LabeledGraph[V, E],
    count: int,
    best: bool = False,
) -> list[V]:
    """
    Rank vertices by their average separation as center of the universe.

    Each vertex is scored by the average separation of its own path tree;
    the current tree is reused for its root. Vertices that reach nobody
    have no score and cannot be ranked.

    Runs one BFS per vertex, so the cost is O(V * (V + E)) regardless of
    count. On a full cast this is the slowest query by far.

    Args:
        graph: Original graph
        tree: Current path tree
        count: Number of vertices to return
        best: If True, lowest average first; otherwise highest first

    Returns:
        Exactly count vertices, ordered by average separation

    Raises:
        ValueError: If count is negative
        InsufficientVerticesError: If count >= number of vertices, or
            count exceeds the number of vertices that reach someone
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count >= graph.num_vertices():
        raise InsufficientVerticesError(count, graph.num_vertices())

    current_root = tree_root(tree)
    candidates: list[V] = []
    scores: list[float] = []

    for v in graph:
        vertex_tree = tree if v == current_root else build_path_tree(graph, v)
        try:
            score = average_separation(vertex_tree, v)
        except SingleVertexTreeError:
            logger.debug(f"Skipping isolated vertex {v!r}")
            continue
        candidates.append(v)
        scores.append(score)

    if count > len(candidates):
        raise InsufficientVerticesError(count, graph.num_vertices(), rankable=len(candidates))

    values = np.asarray(scores, dtype=np.float64)
    order = np.argsort(values if best else -values, kind="stable")
    return [candidates[i] for i in order[:count]]
