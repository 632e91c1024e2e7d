"""
Dataclass describing the current center of the universe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CenterState:
    """
    Summary of the current center of the universe.

    Attributes:
        center: Root of the current path tree
        reachable: Number of vertices in the path tree (center included)
        unreachable: Number of graph vertices missing from the tree
        average_separation: Mean hop count to the center, or None when
            the center reaches no other vertex
    """

    center: Any
    reachable: int
    unreachable: int
    average_separation: float | None

    @property
    def is_isolated(self) -> bool:
        """Whether the center reaches nobody else."""
        return self.reachable <= 1
