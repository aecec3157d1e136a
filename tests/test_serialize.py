"""Tests for graph/serialize.py."""

from pathlib import Path

from assetgraph.graph import Direction, traverse
from assetgraph.graph.serialize import (
    DEPTH_LIMIT_TEXT,
    render_traversal,
    serialize_node,
    serialize_traversal,
)
from assetgraph.index import AssetIndex

A = "a" * 32
B = "b" * 32
C = "c" * 32


def make_index():
    index = AssetIndex(root=Path("/project/Assets"))
    index.add(A, Path("/project/Assets/Main.unity"))
    index.add(B, Path("/project/Assets/Hero.prefab"))
    return index


class TestRenderTraversal:
    """Tests for render_traversal()."""

    def test_indents_by_depth_and_labels_paths(self, make_graph):
        graph = make_graph([(A, B), (B, C)])
        lines = render_traversal(traverse(graph, A, Direction.DEPENDENCIES, 2), make_index())
        assert lines == ["Hero.prefab", f"  Missing Asset: {C}"]

    def test_depth_limit_marker_text(self, make_graph):
        graph = make_graph([(A, B), (B, A)])
        lines = render_traversal(traverse(graph, A, Direction.DEPENDENCIES, 1))
        assert lines == [B, f"  {DEPTH_LIMIT_TEXT}"]


class TestSerializeTraversal:
    """Tests for serialize_traversal()."""

    def test_marker_entries(self, make_graph):
        graph = make_graph([(A, B), (B, A)])
        data = serialize_traversal(traverse(graph, A, Direction.DEPENDENCIES, 1), make_index())
        assert data == [
            {"id": B, "depth": 0, "path": "Hero.prefab"},
            {"depth": 1, "depth_limit": True},
        ]


class TestSerializeNode:
    """Tests for serialize_node()."""

    def test_includes_both_directions(self, make_graph):
        graph = make_graph([(A, B)])
        data = serialize_node(graph.find_by_id(B), make_index())
        assert data == {"id": B, "path": "Hero.prefab", "depends_on": [], "dependents": [A]}


class TestAssetIndex:
    """Tests for AssetIndex path resolution."""

    def test_round_trip_lookup(self):
        index = make_index()
        assert index.guid_for("Hero.prefab") == B
        assert index.guid_for(Path("/project/Assets/Hero.prefab")) == B
        assert index.path_for(A) == "Main.unity"
        assert len(index) == 2

    def test_duplicate_guid_keeps_first_path(self):
        index = make_index()
        index.add(B, Path("/project/Assets/Copy.prefab"))
        assert index.path_for(B) == "Hero.prefab"
        assert index.guid_for("Copy.prefab") == B
