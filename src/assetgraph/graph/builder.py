"""Graph Builder - Constructs an AssetGraph from a directory tree.

Every sidecar metadata file under the root is paired with the asset it
describes. The asset's own guid becomes a node; assets whose type can hold
references contribute an edge to every guid found in their text.

Per-file problems never abort a build. Unreadable files are logged and
recorded in ScanResult.errors, undecodable (binary-serialized) assets are
recorded in ScanResult.binary_files, and invalid guids are dropped.
Cancellation is cooperative: the caller's predicate is polled once per
metadata file and a cancelled build returns the partial graph with
``completed=False``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Iterator

from assetgraph.config import ConfigLoader
from assetgraph.config.defaults import DEFAULT_CONFIG
from assetgraph.graph.store import AssetGraph
from assetgraph.index import AssetIndex
from assetgraph.parsers.meta import read_own_guid
from assetgraph.parsers.references import read_references

logger = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]
ProgressCallback = Callable[[int, int], None]


@dataclass
class ScanResult:
    """Outcome of a single graph build.

    Attributes:
        graph: The built (frozen) dependency graph.
        index: guid <-> path mapping for assets seen during the build.
        duration: Wall-clock build time in seconds.
        completed: False if the build was cancelled before the end.
        files_scanned: Number of metadata files processed.
        orphaned_meta: Metadata files with no asset next to them.
        errors: Messages for files that could not be read.
        binary_files: Files that could not be decoded as text.
    """

    graph: AssetGraph
    index: AssetIndex
    duration: float = 0.0
    completed: bool = True
    files_scanned: int = 0
    orphaned_meta: int = 0
    errors: list[str] = field(default_factory=list)
    binary_files: list[str] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        """Number of assets in the graph."""
        return self.graph.node_count()


class GraphBuilder:
    """Builds dependency graphs from asset trees.

    A builder holds only scan settings; each build() creates a fresh graph.
    """

    def __init__(
        self,
        meta_extension: str | None = None,
        reference_extensions: Iterable[str] | None = None,
        skip_dirs: Iterable[str] | None = None,
    ) -> None:
        """Initialize builder.

        Args:
            meta_extension: Sidecar suffix (default: ".meta").
            reference_extensions: Asset suffixes whose content is scanned
                for references (matched case-insensitively).
            skip_dirs: Directory names not to descend into.
        """
        defaults = DEFAULT_CONFIG["scan"]
        self.meta_extension = meta_extension or defaults["meta_extension"]
        if reference_extensions is None:
            reference_extensions = defaults["reference_extensions"]
        self.reference_extensions = frozenset(ext.lower() for ext in reference_extensions)
        self.skip_dirs = frozenset(skip_dirs or ())

    @classmethod
    def from_config(cls, config: ConfigLoader) -> GraphBuilder:
        """Create a builder from the ``scan`` config section."""
        return cls(
            meta_extension=config.get("scan.meta_extension"),
            reference_extensions=config.get("scan.reference_extensions"),
            skip_dirs=config.get("scan.skip_dirs"),
        )

    def can_have_references(self, file_path: Path) -> bool:
        """Check if an asset's type is allowed to reference other assets."""
        return file_path.suffix.lower() in self.reference_extensions

    def iter_meta_files(self, root: Path) -> Iterator[Path]:
        """Iterate sidecar files under root in sorted order."""
        for meta_path in sorted(root.rglob("*" + self.meta_extension)):
            rel_parts = meta_path.relative_to(root).parts[:-1]
            if any(part in self.skip_dirs for part in rel_parts):
                continue
            if meta_path.is_file():
                yield meta_path

    def build(
        self,
        root: Path | str,
        should_cancel: CancelCheck | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> ScanResult:
        """Build the dependency graph for everything under root.

        Args:
            root: Directory to scan recursively.
            should_cancel: Polled once per metadata file; returning True
                stops the build early.
            on_progress: Called with (files_done, files_total) before each file.

        Returns:
            ScanResult with the (possibly partial) frozen graph.

        Raises:
            FileNotFoundError: If root does not exist.
            NotADirectoryError: If root is not a directory.
        """
        root = Path(root)
        if not root.exists():
            raise FileNotFoundError(f"Scan root not found: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Scan root is not a directory: {root}")
        root = root.resolve()

        begin = time.perf_counter()
        result = ScanResult(graph=AssetGraph(), index=AssetIndex(root=root))

        meta_files = list(self.iter_meta_files(root))
        total = len(meta_files)

        for i, meta_path in enumerate(meta_files):
            if on_progress is not None:
                on_progress(i, total)
            if should_cancel is not None and should_cancel():
                result.completed = False
                logger.info("Build cancelled after %d of %d files", i, total)
                break

            self._add_asset(meta_path, result)
            result.files_scanned += 1

        result.graph.freeze()
        result.duration = time.perf_counter() - begin

        if result.completed:
            logger.info(
                "Built dependency graph: %d assets in %.2fs",
                result.node_count,
                result.duration,
            )
        return result

    def _add_asset(self, meta_path: Path, result: ScanResult) -> None:
        """Add one metadata/asset pair to the graph."""
        # A bare ".meta" names no asset
        if len(meta_path.name) <= len(self.meta_extension):
            result.orphaned_meta += 1
            return

        asset_path = meta_path.with_name(meta_path.name[: -len(self.meta_extension)])
        if not asset_path.is_file():
            # Folder sidecars describe directories, not assets
            if not asset_path.is_dir():
                result.orphaned_meta += 1
            return

        try:
            meta_text = meta_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self._record_failure(meta_path, e, result)
            return
        guid = read_own_guid(meta_text)
        if guid is None:
            logger.debug("No valid guid in %s", meta_path)
            return

        result.graph.get_or_create(guid)
        result.index.add(guid, asset_path)

        if not self.can_have_references(asset_path):
            return

        try:
            dependencies = read_references(asset_path)
        except (OSError, UnicodeDecodeError) as e:
            self._record_failure(asset_path, e, result)
            return
        for dependency in dependencies:
            result.graph.link(guid, dependency)

    def _record_failure(self, file_path: Path, error: Exception, result: ScanResult) -> None:
        """Log a per-file failure and note it on the result."""
        rel = result.index.normalize(file_path)
        if isinstance(error, UnicodeDecodeError):
            logger.warning("Skipping non-text file %s", file_path)
            result.binary_files.append(rel)
        else:
            logger.warning("Could not read %s: %s", file_path, error)
            result.errors.append(f"{rel}: {error}")


def build_graph(
    root: Path | str,
    config: ConfigLoader | None = None,
    should_cancel: CancelCheck | None = None,
    on_progress: ProgressCallback | None = None,
) -> ScanResult:
    """Build a dependency graph for root using config (or defaults)."""
    builder = GraphBuilder.from_config(config) if config is not None else GraphBuilder()
    return builder.build(root, should_cancel=should_cancel, on_progress=on_progress)


__all__ = ["GraphBuilder", "ScanResult", "build_graph"]
