"""
assetgraph.cli - Command-line interface.

Main entry point for the assetgraph CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from assetgraph import __version__
from assetgraph.commands import deps, scan, unused
from assetgraph.config.defaults import MAX_DEPTH, MIN_DEPTH


def _depth(value: str) -> int:
    """argparse type for --depth (clamped range like the original slider)."""
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}")
    if not MIN_DEPTH <= depth <= MAX_DEPTH:
        raise argparse.ArgumentTypeError(f"depth must be between {MIN_DEPTH} and {MAX_DEPTH}")
    return depth


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="assetgraph",
        description="Asset dependency graphs built from guid references",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  assetgraph scan Assets                         # Build the graph and show stats
  assetgraph deps Assets/Hero.prefab --root Assets
  assetgraph deps 9e3d1a3b4c5d6e7f8a9b0c1d2e3f4a5b --direction dependents
  assetgraph unused --root Assets --ignore-ext .unity

Dependencies are calculated by parsing guids within text-serialized asset
files; code dependencies are not considered.

For detailed command help: assetgraph <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"assetgraph {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # scan command
    scan_parser = subparsers.add_parser(
        "scan",
        help="Build the dependency graph and report statistics",
    )
    scan_parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Directory to scan (default: current directory)",
    )
    scan_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output scan summary as JSON",
    )

    # deps command
    deps_parser = subparsers.add_parser(
        "deps",
        help="Show what an asset depends on and what depends on it",
    )
    deps_parser.add_argument(
        "asset",
        help="Asset path (relative to --root) or guid",
    )
    deps_parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Directory to scan (default: current directory)",
        metavar="PATH",
    )
    deps_parser.add_argument(
        "--depth",
        type=_depth,
        help=f"Max display depth, {MIN_DEPTH}-{MAX_DEPTH} (default: traversal.max_depth)",
        metavar="N",
    )
    deps_parser.add_argument(
        "--direction",
        choices=["dependencies", "dependents", "both"],
        default="both",
        help="Which relationships to show (default: both)",
    )
    deps_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # unused command
    unused_parser = subparsers.add_parser(
        "unused",
        help="List assets that nothing depends on",
    )
    unused_parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Directory to scan (default: current directory)",
        metavar="PATH",
    )
    unused_parser.add_argument(
        "--ignore-ext",
        action="append",
        default=[],
        help="Asset extension to leave out of the report (can be repeated, e.g. .unity)",
        metavar="EXT",
    )
    unused_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # completion command
    completion_parser = subparsers.add_parser(
        "completion",
        help="Shell tab-completion setup",
    )
    completion_parser.add_argument(
        "--shell",
        choices=["bash", "zsh", "fish", "tcsh"],
        help="Generate the completion script for a specific shell",
    )

    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route library log records to stderr."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install assetgraph[completion]
    # Then activate: eval "$(register-python-argcomplete assetgraph)"
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        # Dispatch to command handlers
        if args.command == "scan":
            return scan.run(args)
        elif args.command == "deps":
            return deps.run(args)
        elif args.command == "unused":
            return unused.run(args)
        elif args.command == "completion":
            return completion_command(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


COMPLETION_HELP = """\
Enable tab-completion by adding one line to your shell startup file:

  bash  (~/.bashrc)                  eval "$(assetgraph completion --shell bash)"
  zsh   (~/.zshrc)                   eval "$(assetgraph completion --shell zsh)"
  fish  (~/.config/fish/config.fish) assetgraph completion --shell fish | source
  tcsh  (~/.tcshrc)                  eval `assetgraph completion --shell tcsh`

Then restart the shell or source the file."""


def completion_command(args: argparse.Namespace) -> int:
    """Handle completion command - print setup help or a shell script."""
    try:
        import argcomplete
    except ImportError:
        print("Error: argcomplete not installed.", file=sys.stderr)
        print("Install with: pip install assetgraph[completion]", file=sys.stderr)
        return 1

    if not args.shell:
        print(COMPLETION_HELP)
        return 0

    print(argcomplete.shellcode(["assetgraph"], shell=args.shell))
    return 0


if __name__ == "__main__":
    sys.exit(main())
