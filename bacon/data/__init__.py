"""
Data module.

Turns loaded actor, movie and credit tables into the collaboration graph.

Usage:
    from bacon.data import build_collaboration_graph

    graph = build_collaboration_graph([("Kevin Bacon", "Footloose")])
"""

from bacon.data.builder import (
    CollaborationGraph,
    build_collaboration_graph,
    build_from_tables,
    resolve_credits,
)

__all__ = [
    "CollaborationGraph",
    "build_collaboration_graph",
    "build_from_tables",
    "resolve_credits",
]
