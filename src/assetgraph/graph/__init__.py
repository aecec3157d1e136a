"""Graph module - Core dependency graph structures.

Exports:
- Direction: Which side of an edge a traversal follows
- GraphNode: Asset vertex holding neighbor identifiers
- AssetGraph: Owning store of all nodes
- TraversalEntry: One (node, depth) step of a traversal
- traverse / iter_traversal: Depth-bounded depth-first walks

Note: GraphBuilder and ScanResult are in assetgraph.graph.builder
"""

from assetgraph.graph.GraphNode import GraphNode
from assetgraph.graph.relations import Direction
from assetgraph.graph.store import AssetGraph
from assetgraph.graph.traversal import TraversalEntry, iter_traversal, traverse

__all__ = [
    "Direction",
    "GraphNode",
    "AssetGraph",
    "TraversalEntry",
    "iter_traversal",
    "traverse",
]
