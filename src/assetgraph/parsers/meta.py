"""Sidecar metadata - Read the identifier a ``.meta`` file declares."""

from __future__ import annotations

import logging
from pathlib import Path

from assetgraph.parsers.references import GUID_LENGTH, GUID_PREFIX, is_guid_valid

logger = logging.getLogger(__name__)


def read_own_guid(text: str) -> str | None:
    """Return the identifier declared by metadata text.

    The first line starting with the marker is authoritative. The identifier
    is the fixed-length token right after the marker; anything trailing it
    on the same line is ignored.

    Args:
        text: Content of a sidecar metadata file.

    Returns:
        The declared identifier, or None if absent, truncated, or null.
    """
    for line in text.splitlines():
        if line.startswith(GUID_PREFIX):
            guid = line[len(GUID_PREFIX) : len(GUID_PREFIX) + GUID_LENGTH]
            return guid if is_guid_valid(guid) else None
    return None


def read_guid_from_meta(meta_path: Path) -> str | None:
    """Read a sidecar file and return its declared identifier.

    I/O and decoding failures are logged and reported as no identifier.
    """
    try:
        text = meta_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read metadata %s: %s", meta_path, e)
        return None
    return read_own_guid(text)
