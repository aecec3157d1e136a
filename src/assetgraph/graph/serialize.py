"""Graph Serialization - Export scan results and traversals.

Produces JSON-compatible dicts for machine output and indented text lines
for terminal display. Nothing here is read back; graphs are rebuilt on
every scan.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from assetgraph.graph.builder import ScanResult
    from assetgraph.graph.GraphNode import GraphNode
    from assetgraph.graph.traversal import TraversalEntry
    from assetgraph.index import AssetIndex

DEPTH_LIMIT_TEXT = "Max display depth was exceeded..."


def serialize_node(node: GraphNode, index: AssetIndex | None = None) -> dict[str, Any]:
    """Serialize a GraphNode to a JSON-compatible dict.

    Args:
        node: The node to serialize.
        index: Optional index used to attach the asset path.

    Returns:
        Dict suitable for JSON serialization.
    """
    result: dict[str, Any] = {"id": node.id}
    if index is not None:
        result["path"] = index.path_for(node.id)
    result["depends_on"] = list(node.iter_outgoing())
    result["dependents"] = list(node.iter_incoming())
    return result


def serialize_scan(scan: ScanResult) -> dict[str, Any]:
    """Summarize a ScanResult as a JSON-compatible dict."""
    return {
        "root": str(scan.index.root),
        "assets": scan.node_count,
        "edges": scan.graph.edge_count(),
        "duration": round(scan.duration, 3),
        "completed": scan.completed,
        "files_scanned": scan.files_scanned,
        "orphaned_meta": scan.orphaned_meta,
        "errors": list(scan.errors),
        "binary_files": list(scan.binary_files),
    }


def serialize_traversal(
    entries: Iterable[TraversalEntry],
    index: AssetIndex | None = None,
) -> list[dict[str, Any]]:
    """Serialize traversal entries to a list of dicts.

    Depth-limit markers become ``{"depth": N, "depth_limit": True}``.
    """
    result: list[dict[str, Any]] = []
    for entry in entries:
        if entry.node is None:
            result.append({"depth": entry.depth, "depth_limit": True})
            continue
        item: dict[str, Any] = {"id": entry.node.id, "depth": entry.depth}
        if index is not None:
            item["path"] = index.path_for(entry.node.id)
        result.append(item)
    return result


def render_traversal(
    entries: Iterable[TraversalEntry],
    index: AssetIndex | None = None,
    indent: int = 2,
) -> list[str]:
    """Render traversal entries as indented text lines.

    Each entry is indented by its depth. Nodes are labelled by asset path
    when an index is given (``Missing Asset: <guid>`` if the guid was never
    declared), otherwise by guid.
    """
    lines: list[str] = []
    for entry in entries:
        pad = " " * (indent * entry.depth)
        if entry.node is None:
            lines.append(f"{pad}{DEPTH_LIMIT_TEXT}")
        elif index is not None:
            lines.append(f"{pad}{index.label(entry.node.id)}")
        else:
            lines.append(f"{pad}{entry.node.id}")
    return lines


__all__ = [
    "DEPTH_LIMIT_TEXT",
    "serialize_node",
    "serialize_scan",
    "serialize_traversal",
    "render_traversal",
]
