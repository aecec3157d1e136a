"""Shared fixtures: on-disk asset trees and in-memory graphs."""

from pathlib import Path

import pytest

GUID_A = "a" * 32
GUID_B = "b" * 32
GUID_C = "c" * 32
GUID_D = "d" * 32


def meta_text(guid):
    """Sidecar content in the layout the editor writes."""
    return f"fileFormatVersion: 2\nguid: {guid}\nNativeFormatImporter:\n  mainObjectFileID: 0\n"


def asset_text(refs):
    """Text-serialized asset content referencing each guid in refs."""
    lines = ["%YAML 1.1", "%TAG !u! tag:unity3d.com,2011:", "--- !u!1 &100000", "GameObject:"]
    for ref in refs:
        lines.append(f"  m_Script: {{fileID: 11500000, guid: {ref}, type: 3}}")
    return "\n".join(lines) + "\n"


@pytest.fixture
def asset_root(tmp_path):
    """Empty project asset directory."""
    root = tmp_path / "Assets"
    root.mkdir()
    return root


@pytest.fixture
def write_asset(asset_root):
    """Factory that writes an asset and its sidecar under asset_root.

    Args (of the returned callable):
        rel_path: Asset path relative to the root.
        guid: Guid declared by the sidecar (None: no sidecar written).
        refs: Guids the asset content references.
        content: Raw asset content (str or bytes), overrides refs.
    """

    def write(rel_path, guid=None, refs=(), content=None):
        path = asset_root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if content is None:
            content = asset_text(refs)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        if guid is not None:
            Path(str(path) + ".meta").write_text(meta_text(guid), encoding="utf-8")
        return path

    return write


@pytest.fixture
def make_graph():
    """Factory building a frozen AssetGraph from (source, target) pairs."""
    from assetgraph.graph import AssetGraph

    def make(edges, nodes=()):
        graph = AssetGraph()
        for guid in nodes:
            graph.get_or_create(guid)
        for source, target in edges:
            graph.link(source, target)
        graph.freeze()
        return graph

    return make
