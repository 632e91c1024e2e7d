"""
Graph module.

Provides the labeled graph and the algorithms run against it:
- LabeledGraph: Generic adjacency-map graph with edge labels
- build_path_tree: BFS shortest-path tree rooted at a center
- path_to_root / path_steps: Paths from a vertex to the center
- average_separation: Mean hop count to a root
- Vertex queries: missing vertices, degree and separation ranges, ranking
"""

from bacon.graph.bfs import build_path_tree
from bacon.graph.labeled import LabeledGraph
from bacon.graph.paths import PathStep, path_steps, path_to_root, tree_root
from bacon.graph.queries import (
    list_by_degree_range,
    list_by_separation_range,
    missing_vertices,
    rank_by_separation,
)
from bacon.graph.separation import (
    average_separation,
    separations,
    total_separation,
)

__all__ = [
    "LabeledGraph",
    "PathStep",
    "build_path_tree",
    "path_to_root",
    "path_steps",
    "tree_root",
    "average_separation",
    "separations",
    "total_separation",
    "missing_vertices",
    "list_by_degree_range",
    "list_by_separation_range",
    "rank_by_separation",
]
