"""Reference extraction - Find the identifiers an asset file points at.

Serialized assets embed references to other assets as ``guid: <token>``
fragments inside YAML flow mappings, e.g.::

    m_Script: {fileID: 11500000, guid: 9e3d1a3b..., type: 3}

The search is strictly line-oriented. Only the first marker on a line is
considered, and a marker at column 0 is a self declaration (the layout used
by sidecar ``.meta`` files), never a reference.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

GUID_PREFIX = "guid: "
GUID_LENGTH = 32
NULL_GUID = "0" * GUID_LENGTH


def is_guid_valid(guid: str | None) -> bool:
    """Check whether a token can name a real asset.

    Args:
        guid: Candidate identifier.

    Returns:
        True if the token is non-empty, full length, and not the null guid.
    """
    return bool(guid) and len(guid) == GUID_LENGTH and guid != NULL_GUID


def extract_references(text: str) -> list[str]:
    """Extract referenced identifiers from file content.

    Args:
        text: Full text of an asset file.

    Returns:
        Valid identifiers in first-occurrence order, without duplicates.
    """
    guids: list[str] = []
    seen: set[str] = set()

    for line_number, line in enumerate(text.splitlines(), start=1):
        index = line.find(GUID_PREFIX)
        if index <= 0:
            continue

        start = index + len(GUID_PREFIX)
        guid = line[start : start + GUID_LENGTH]
        if len(guid) < GUID_LENGTH:
            logger.debug("Truncated guid on line %d: %r", line_number, line)
            continue

        if is_guid_valid(guid) and guid not in seen:
            seen.add(guid)
            guids.append(guid)

    return guids


def read_references(file_path: Path) -> list[str]:
    """Read an asset file and extract its references.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not text-serialized.
    """
    return extract_references(file_path.read_text(encoding="utf-8"))
