"""GraphNode - Asset vertex in the dependency graph.

Nodes never hold references to other nodes. Neighbors are recorded by
identifier only and resolved through the owning AssetGraph, so the logical
graph may contain cycles without any ownership cycle between objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from assetgraph.graph.relations import Direction


@dataclass
class GraphNode:
    """A node in the asset dependency graph.

    Attributes:
        id: The asset identifier (guid) naming this node.
    """

    id: str

    # Insertion-ordered identifier sets (dict keys)
    _outgoing: dict[str, None] = field(default_factory=dict, repr=False)
    _incoming: dict[str, None] = field(default_factory=dict, repr=False)

    @property
    def outgoing(self) -> tuple[str, ...]:
        """Identifiers this asset depends on, in insertion order."""
        return tuple(self._outgoing)

    @property
    def incoming(self) -> tuple[str, ...]:
        """Identifiers of assets that depend on this one, in insertion order."""
        return tuple(self._incoming)

    def iter_outgoing(self) -> Iterator[str]:
        """Iterate identifiers this asset depends on."""
        yield from self._outgoing

    def iter_incoming(self) -> Iterator[str]:
        """Iterate identifiers that depend on this asset."""
        yield from self._incoming

    def iter_neighbors(self, direction: Direction) -> Iterator[str]:
        """Iterate neighbor identifiers in the given direction."""
        if direction is Direction.DEPENDENCIES:
            yield from self._outgoing
        else:
            yield from self._incoming

    def outgoing_count(self) -> int:
        """Return number of dependencies."""
        return len(self._outgoing)

    @property
    def is_unreferenced(self) -> bool:
        """True if nothing depends on this asset."""
        return len(self._incoming) == 0
