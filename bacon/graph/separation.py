"""
Separation metrics over a path tree.

Tree edges point from child to parent, so the children of a vertex are its
in-neighbors. Depths are accumulated level by level rather than by
recursion, so arbitrarily deep trees cannot exhaust the call stack.
"""

from __future__ import annotations

from collections import deque

from bacon.errors import SingleVertexTreeError, UnknownVertexError
from bacon.graph.labeled import E, LabeledGraph, V


def separations(tree: LabeledGraph[V, E], root: V) -> dict[V, int]:
    """
    Hop count from root to every vertex of the subtree below it.

    Raises:
        UnknownVertexError: If root is not in tree
    """
    if not tree.has_vertex(root):
        raise UnknownVertexError(root)

    depths = {root: 0}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for child in tree.in_neighbors(node):
            if child in depths:
                continue
            depths[child] = depths[node] + 1
            queue.append(child)
    return depths


def total_separation(tree: LabeledGraph[V, E], root: V) -> int:
    """Sum of the hop counts of every vertex below root."""
    return sum(separations(tree, root).values())


def average_separation(tree: LabeledGraph[V, E], root: V) -> float:
    """
    Mean hop count from root to the other vertices of tree.

    Args:
        tree: Path tree (edges child -> parent)
        root: Vertex whose separation is measured, normally the tree root

    Raises:
        UnknownVertexError: If root is not in tree
        SingleVertexTreeError: If tree holds a single vertex
    """
    if not tree.has_vertex(root):
        raise UnknownVertexError(root)
    if tree.num_vertices() <= 1:
        raise SingleVertexTreeError(root)

    return total_separation(tree, root) / (tree.num_vertices() - 1)
