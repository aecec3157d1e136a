"""
assetgraph.commands.scan - Build the dependency graph and report on it.

Also provides the shared scan helpers used by the other commands.
"""

import argparse
import json
import signal
import sys
from pathlib import Path
from typing import Optional
from assetgraph.config import ConfigLoader, get_config
from assetgraph.graph.builder import ScanResult, build_graph
from assetgraph.graph.serialize import serialize_scan

EXIT_CANCELLED = 130


class InterruptFlag:
    """Cancellation predicate set by Ctrl-C while a build is running."""

    def __init__(self) -> None:
        self.interrupted = False

    def __call__(self) -> bool:
        return self.interrupted

    def handle(self, signum, frame) -> None:
        self.interrupted = True


def load_configuration(args: argparse.Namespace) -> ConfigLoader:
    """Load configuration from --config or by discovery."""
    return get_config(getattr(args, "config", None), Path.cwd())


def run_scan(root: Path, config: ConfigLoader, show_progress: bool = False) -> ScanResult:
    """Build the graph for root, turning Ctrl-C into a cooperative cancel.

    The build checks the flag once per file, so an interrupt yields a
    partial result rather than an exception.
    """
    flag = InterruptFlag()
    try:
        previous = signal.signal(signal.SIGINT, flag.handle)
        installed = True
    except ValueError:
        # Not on the main thread; builds run uninterruptible
        previous, installed = None, False

    def progress(done: int, total: int) -> None:
        if total:
            print(
                f"\rBuilding dependency graph... {done * 100 // total:3d}%",
                end="",
                file=sys.stderr,
            )

    try:
        return build_graph(
            root,
            config,
            should_cancel=flag,
            on_progress=progress if show_progress else None,
        )
    finally:
        if installed:
            # None means the previous handler was not installed from Python
            signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)
        if show_progress:
            print("\r" + " " * 40 + "\r", end="", file=sys.stderr)


def scan_for_args(
    args: argparse.Namespace, root: Path, config: Optional[ConfigLoader] = None
) -> ScanResult:
    """Scan root for a command invocation, loading config unless given."""
    if config is None:
        config = load_configuration(args)
    show_progress = not args.quiet and sys.stderr.isatty()
    return run_scan(root, config, show_progress=show_progress)


def summary_line(result: ScanResult) -> str:
    """One-line description of the graph size and build time."""
    if result.node_count == 0:
        return "The dependency graph contains 0 assets, check the scan root and refresh."
    return (
        f"The dependency graph contains {result.node_count:,} assets "
        f"and took {result.duration:.2f} seconds to build."
    )


def report_problems(result: ScanResult) -> None:
    """Print per-file problems and partial-build notices to stderr."""
    if not result.completed:
        print(
            f"Build cancelled: the graph is partial ({result.files_scanned} files scanned).",
            file=sys.stderr,
        )
    if result.binary_files:
        print(
            f"Warning: {len(result.binary_files)} files are not text-serialized. "
            "Dependencies can only be tracked with text assets; "
            'set the asset serialization mode to "Force Text".',
            file=sys.stderr,
        )
    for error in result.errors:
        print(f"Warning: {error}", file=sys.stderr)


def run(args: argparse.Namespace) -> int:
    """Run the scan command."""
    result = scan_for_args(args, args.root)

    if args.json:
        print(json.dumps(serialize_scan(result), indent=2))
    else:
        report_problems(result)
        if not args.quiet:
            print(summary_line(result))

    return exit_code_for(result)


def exit_code_for(result: ScanResult) -> int:
    """Exit code for a command that finished its report."""
    return 0 if result.completed else EXIT_CANCELLED
