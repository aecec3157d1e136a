"""AssetGraph - Owning store of all nodes in a dependency graph.

The graph is built by a single writer (GraphBuilder) and then frozen.
Readers only run after the build finishes, so no locking is needed; once
frozen any attempt to mutate raises RuntimeError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from assetgraph.graph.GraphNode import GraphNode
from assetgraph.parsers.references import is_guid_valid


@dataclass
class AssetGraph:
    """Mapping from asset identifier to GraphNode."""

    _index: dict[str, GraphNode] = field(default_factory=dict, init=False, repr=False)
    _frozen: bool = field(default=False, init=False)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, guid: object) -> bool:
        return guid in self._index

    def node_count(self) -> int:
        """Return total number of nodes in the graph."""
        return len(self._index)

    def find_by_id(self, guid: str) -> GraphNode | None:
        """Find node by identifier.

        Args:
            guid: The identifier to look up.

        Returns:
            The matching GraphNode, or None if not found.
        """
        return self._index.get(guid)

    def all_nodes(self) -> Iterator[GraphNode]:
        """Iterate all nodes in insertion order."""
        yield from self._index.values()

    def edge_count(self) -> int:
        """Return number of dependency edges (each pair counted once)."""
        return sum(node.outgoing_count() for node in self._index.values())

    @property
    def frozen(self) -> bool:
        """True once the graph has been handed to readers."""
        return self._frozen

    def freeze(self) -> None:
        """Mark the graph read-only."""
        self._frozen = True

    def get_or_create(self, guid: str) -> GraphNode:
        """Return the node for guid, creating it if absent.

        Raises:
            ValueError: If guid is empty, malformed, or the null guid.
            RuntimeError: If the graph is frozen.
        """
        node = self._index.get(guid)
        if node is not None:
            return node

        self._check_mutable()
        if not is_guid_valid(guid):
            raise ValueError(f"Invalid asset guid: {guid!r}")

        node = GraphNode(id=guid)
        self._index[guid] = node
        return node

    def link(self, source: str, target: str) -> None:
        """Record that source depends on target.

        Both halves of the edge are written together, creating either node
        if needed. Linking an existing pair again is a no-op.

        Args:
            source: Identifier of the referencing asset.
            target: Identifier of the referenced asset.
        """
        self._check_mutable()
        source_node = self.get_or_create(source)
        target_node = self.get_or_create(target)
        source_node._outgoing[target] = None
        target_node._incoming[source] = None

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("Dependency graph is read-only after build")
