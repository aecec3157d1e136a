"""Asset index - Resolve identifiers to file paths and back.

The builder fills the index as it pairs sidecar files with the assets they
describe. Paths are stored relative to the scan root using forward slashes.
Graph algorithms never consult the index; it serves the front-end for
selecting a start node by path and labelling output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath

logger = logging.getLogger(__name__)


@dataclass
class AssetIndex:
    """Bidirectional guid <-> path mapping for a scanned tree.

    Attributes:
        root: The scanned root directory.
    """

    root: Path
    _paths: dict[str, str] = field(default_factory=dict, init=False, repr=False)
    _guids: dict[str, str] = field(default_factory=dict, init=False, repr=False)

    def __len__(self) -> int:
        return len(self._paths)

    def add(self, guid: str, path: Path) -> None:
        """Register the asset at path as declaring guid.

        When two assets declare the same guid the first one wins; the
        duplicate is logged.
        """
        rel = self.normalize(path)
        existing = self._paths.get(guid)
        if existing is not None and existing != rel:
            logger.warning("Duplicate guid %s declared by %s and %s", guid, existing, rel)
        else:
            self._paths[guid] = rel
        self._guids[rel] = guid

    def path_for(self, guid: str) -> str | None:
        """Return the relative path declaring guid, if known."""
        return self._paths.get(guid)

    def guid_for(self, path: Path | str) -> str | None:
        """Return the guid declared for path, if known."""
        return self._guids.get(self.normalize(path))

    def normalize(self, path: Path | str) -> str:
        """Express path relative to the root with forward slashes."""
        p = PurePath(path)
        if p.is_absolute():
            try:
                p = p.relative_to(self.root)
            except ValueError:
                pass
        return p.as_posix()

    def label(self, guid: str) -> str:
        """Display label: the asset path, or a missing-asset notice."""
        path = self._paths.get(guid)
        if path is None:
            return f"Missing Asset: {guid}"
        return path
