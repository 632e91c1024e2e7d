"""
Breadth-first construction of shortest-path trees.

The tree's edges point from child to parent, so walking out-edges from
any vertex leads back to the center of the universe.
"""

from __future__ import annotations

import logging
from collections import deque

from bacon.errors import EmptyGraphError, UnknownCenterError
from bacon.graph.labeled import E, LabeledGraph, V

logger = logging.getLogger(__name__)


def build_path_tree(graph: LabeledGraph[V, E], source: V) -> LabeledGraph[V, E]:
    """
    Build the BFS shortest-path tree of graph rooted at source.

    Each tree edge child -> parent carries the same label object as the
    original edge child -> parent. Vertices unreachable from source are
    left out of the tree.

    Args:
        graph: Graph to search (read only)
        source: Root of the tree

    Returns:
        A new LabeledGraph holding exactly the vertices reachable from source

    Raises:
        EmptyGraphError: If graph has no vertices
        UnknownCenterError: If source is not in graph
    """
    if graph.num_vertices() == 0:
        raise EmptyGraphError()
    if not graph.has_vertex(source):
        raise UnknownCenterError(source)

    logger.debug(f"Building path tree from {source!r}")

    tree: LabeledGraph[V, E] = LabeledGraph()
    tree.insert_vertex(source)

    visited = {source}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        for v in graph.out_neighbors(u):
            if v in visited:
                continue
            visited.add(v)
            queue.append(v)
            tree.insert_vertex(v)
            # Directed graphs may only hold u -> v
            if graph.has_edge(v, u):
                label = graph.get_label(v, u)
            else:
                label = graph.get_label(u, v)
            tree.insert_directed(v, u, label)

    logger.debug(
        f"Path tree from {source!r} reaches "
        f"{tree.num_vertices():,}/{graph.num_vertices():,} vertices"
    )
    return tree
