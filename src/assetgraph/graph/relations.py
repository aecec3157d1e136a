"""Relations - Edge direction semantics.

Edges are always stored as a pair: the source records the target in its
outgoing set and the target records the source in its incoming set. A
traversal picks which half of the pair to follow.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Which side of the dependency relationship to follow.

    - DEPENDENCIES: what this asset depends on (outgoing edges)
    - DEPENDENTS: what depends on this asset (incoming edges)
    """

    DEPENDENCIES = "dependencies"
    DEPENDENTS = "dependents"

    @property
    def heading(self) -> str:
        """Display heading for a traversal in this direction."""
        if self is Direction.DEPENDENCIES:
            return "This asset depends on:"
        return "Assets that depend on this:"
