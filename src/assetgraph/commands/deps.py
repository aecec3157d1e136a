"""
assetgraph.commands.deps - Show the dependency tree around one asset.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from assetgraph.commands.scan import (
    exit_code_for,
    load_configuration,
    report_problems,
    scan_for_args,
)
from assetgraph.config import ConfigLoader
from assetgraph.config.defaults import DEFAULT_CONFIG, MAX_DEPTH, MIN_DEPTH
from assetgraph.graph.builder import ScanResult
from assetgraph.graph.relations import Direction
from assetgraph.graph.serialize import render_traversal, serialize_node, serialize_traversal
from assetgraph.graph.traversal import traverse
from assetgraph.parsers.meta import read_guid_from_meta
from assetgraph.parsers.references import is_guid_valid

NO_DEPENDENCIES = "Nothing."
NO_DEPENDENTS = (
    "Nothing, you could consider deleting this asset "
    "if it isn't referenced programmatically."
)


def resolve_asset_path(asset: str, root: Path) -> Path:
    """Resolve a user-supplied asset path against the scan root, then cwd."""
    path = Path(asset)
    if path.is_absolute():
        return path
    under_root = root / path
    if under_root.exists():
        return under_root
    return Path.cwd() / path


def resolve_guid(asset: str, result: ScanResult, meta_extension: str = ".meta") -> Optional[str]:
    """Find the guid for an asset given as a guid or a path.

    Paths are looked up in the scan's index first, then by reading the
    asset's sidecar file directly.
    """
    if is_guid_valid(asset) and asset in result.graph:
        return asset

    path = resolve_asset_path(asset, result.index.root)
    guid = result.index.guid_for(path.resolve())
    if guid is None and path.is_file():
        guid = read_guid_from_meta(path.with_name(path.name + meta_extension))
    return guid


def configured_depth(config: ConfigLoader) -> int:
    """Read traversal.max_depth, clamped to the range --depth accepts.

    Raises:
        ValueError: If the configured value is not an integer.
    """
    value = config.get("traversal.max_depth", DEFAULT_CONFIG["traversal"]["max_depth"])
    if isinstance(value, bool):
        raise ValueError(f"traversal.max_depth must be an integer, got {value!r}")
    try:
        depth = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"traversal.max_depth must be an integer, got {value!r}") from None
    return min(max(depth, MIN_DEPTH), MAX_DEPTH)


def run(args: argparse.Namespace) -> int:
    """Run the deps command."""
    config = load_configuration(args)
    max_depth = args.depth if args.depth is not None else configured_depth(config)
    result = scan_for_args(args, args.root, config)
    report_problems(result)

    guid = resolve_guid(args.asset, result, config.get("scan.meta_extension", ".meta"))
    node = result.graph.find_by_id(guid) if guid else None

    if node is None:
        if resolve_asset_path(args.asset, result.index.root).is_file():
            print(
                f"Failed to find data for {args.asset} try refreshing the dependency graph.",
                file=sys.stderr,
            )
        else:
            print(f"Error: asset not found: {args.asset}", file=sys.stderr)
        return 1

    if args.direction == "both":
        directions = [Direction.DEPENDENCIES, Direction.DEPENDENTS]
    else:
        directions = [Direction(args.direction)]

    walks = {d: traverse(result.graph, node, d, max_depth) for d in directions}

    if args.json:
        output = {"asset": serialize_node(node, result.index), "max_depth": max_depth}
        for direction, entries in walks.items():
            output[direction.value] = serialize_traversal(entries, result.index)
        print(json.dumps(output, indent=2))
        return exit_code_for(result)

    print(result.index.label(node.id))
    for direction, entries in walks.items():
        print()
        print(direction.heading)
        if entries:
            for line in render_traversal(entries, result.index):
                print(f"  {line}")
        elif direction is Direction.DEPENDENCIES:
            print(f"  {NO_DEPENDENCIES}")
        else:
            print(f"  {NO_DEPENDENTS}")

    return exit_code_for(result)
