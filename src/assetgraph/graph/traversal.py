"""Traversal - Depth-bounded walks over the dependency graph.

Walks are depth-first and pre-order. There is no visited set: the depth
bound alone guarantees termination, so on graphs with shared or cyclic
references the same asset can be emitted several times along different
paths. Each time the bound cuts off a branch a depth-limit marker is
emitted in place of the node that would have been visited.

Example, for the cycle A -> B -> C -> A with max_depth=5, walking
dependencies from A yields::

    B@0, C@1, A@2, B@3, C@4, <depth limit>@5
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from assetgraph.graph.GraphNode import GraphNode
from assetgraph.graph.relations import Direction
from assetgraph.graph.store import AssetGraph


class TraversalEntry(NamedTuple):
    """One step of a traversal.

    Attributes:
        node: The visited node, or None for a depth-limit marker.
        depth: Distance from the start node (immediate neighbors are 0).
    """

    node: GraphNode | None
    depth: int

    @property
    def is_depth_limit(self) -> bool:
        """True if this entry marks a branch cut off by max_depth."""
        return self.node is None

    @property
    def id(self) -> str | None:
        """Identifier of the visited node (None for markers)."""
        return self.node.id if self.node is not None else None


def iter_traversal(
    graph: AssetGraph,
    start: GraphNode | str,
    direction: Direction,
    max_depth: int,
) -> Iterator[TraversalEntry]:
    """Walk the graph from start, following one edge direction.

    The start node itself is never emitted. A max_depth of 0 yields nothing.

    Args:
        graph: The graph to walk.
        start: Start node or its identifier.
        direction: Which edges to follow.
        max_depth: Depth at which branches are cut off with a marker.

    Yields:
        TraversalEntry instances in depth-first pre-order.

    Raises:
        KeyError: If start is an identifier not present in graph.
        ValueError: If max_depth is negative.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    if isinstance(start, str):
        start_node = graph.find_by_id(start)
        if start_node is None:
            raise KeyError(start)
    else:
        start_node = start

    if max_depth == 0:
        return

    # One neighbor iterator per level; the stack height is the current depth
    stack: list[Iterator[str]] = [start_node.iter_neighbors(direction)]
    while stack:
        depth = len(stack) - 1
        guid = next(stack[-1], None)
        if guid is None:
            stack.pop()
            continue

        if depth == max_depth:
            yield TraversalEntry(None, depth)
            continue

        node = graph.find_by_id(guid)
        if node is None:
            continue
        yield TraversalEntry(node, depth)
        stack.append(node.iter_neighbors(direction))


def traverse(
    graph: AssetGraph,
    start: GraphNode | str,
    direction: Direction,
    max_depth: int,
) -> list[TraversalEntry]:
    """Return the full traversal from start as a list.

    See iter_traversal() for semantics.
    """
    return list(iter_traversal(graph, start, direction, max_depth))
