"""
Session module.

Provides the coordinating object for separation queries:
- Universe: Graph plus the path tree of its current center
- CenterState: Summary of the current center
"""

from bacon.session.state import CenterState
from bacon.session.universe import Universe

__all__ = [
    "Universe",
    "CenterState",
]
