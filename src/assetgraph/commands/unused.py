"""
assetgraph.commands.unused - Report assets that nothing depends on.
"""

import argparse
import json
from pathlib import PurePosixPath
from typing import List

from assetgraph.commands.scan import exit_code_for, report_problems, scan_for_args
from assetgraph.graph.builder import ScanResult


def find_unused(result: ScanResult, ignore_ext: List[str]) -> List[str]:
    """Return sorted paths of declared assets with no dependents."""
    ignored = {ext.lower() for ext in ignore_ext}
    paths = []
    for node in result.graph.all_nodes():
        if not node.is_unreferenced:
            continue
        path = result.index.path_for(node.id)
        if path is None or PurePosixPath(path).suffix.lower() in ignored:
            continue
        paths.append(path)
    return sorted(paths)


def run(args: argparse.Namespace) -> int:
    """Run the unused command."""
    result = scan_for_args(args, args.root)
    report_problems(result)
    unused = find_unused(result, args.ignore_ext)

    if args.json:
        print(json.dumps({"unused": unused, "completed": result.completed}, indent=2))
    elif unused:
        for path in unused:
            print(path)
        if not args.quiet:
            print(f"\n{len(unused)} of {result.node_count} assets are not referenced by any asset.")
    elif not args.quiet:
        print("Every asset is referenced by at least one other asset.")

    return exit_code_for(result)
