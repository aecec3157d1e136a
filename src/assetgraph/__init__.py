"""
assetgraph - Asset dependency graphs for text-serialized projects

assetgraph scans a project tree, pairs every asset with its sidecar
metadata file, follows the guid references embedded in scenes, prefabs,
materials and other text assets, and answers "what does this depend on?"
and "what depends on this?" with depth-bounded walks.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("assetgraph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from assetgraph.graph import AssetGraph, Direction, GraphNode, TraversalEntry, traverse
from assetgraph.graph.builder import GraphBuilder, ScanResult, build_graph
from assetgraph.index import AssetIndex

__all__ = [
    "__version__",
    "AssetGraph",
    "AssetIndex",
    "Direction",
    "GraphBuilder",
    "GraphNode",
    "ScanResult",
    "TraversalEntry",
    "build_graph",
    "traverse",
]
