"""
Path reconstruction from a vertex up to the root of a path tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from bacon.graph.labeled import E, LabeledGraph, V


@dataclass(frozen=True)
class PathStep(Generic[V, E]):
    """
    One hop on a path toward the center.

    Attributes:
        vertex: Vertex the hop starts from
        next_vertex: Parent of vertex in the path tree
        label: Label of the original edge (e.g. the shared movies)
    """

    vertex: V
    next_vertex: V
    label: E


def tree_root(tree: LabeledGraph[V, E]) -> V | None:
    """The vertex with no parent edge, or None for an empty tree."""
    for v in tree:
        if tree.out_degree(v) == 0:
            return v
    return None


def path_to_root(tree: LabeledGraph[V, E], v: V) -> list[V]:
    """
    Walk parent edges from v to the root of tree.

    Returns:
        [v, parent(v), ..., root], or an empty list if v is not in the
        tree (unreachable from the center)
    """
    if not tree.has_vertex(v):
        return []

    path = [v]
    current = v
    while tree.out_degree(current) != 0:
        (current,) = tree.out_neighbors(current)
        path.append(current)
    return path


def path_steps(
    graph: LabeledGraph[V, E], tree: LabeledGraph[V, E], v: V
) -> list[PathStep[V, E]]:
    """
    Path from v to the root as hops labeled from the original graph.

    Empty if v is unreachable or is the root itself.
    """
    path = path_to_root(tree, v)
    return [
        PathStep(vertex=a, next_vertex=b, label=graph.get_label(a, b))
        for a, b in zip(path, path[1:])
    ]
