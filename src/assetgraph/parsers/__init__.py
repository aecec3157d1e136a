"""Parsers - Locate identifier tokens in asset and metadata text.

Exports:
- GUID_PREFIX, GUID_LENGTH, NULL_GUID: Identifier format constants
- is_guid_valid: Identifier validity check
- extract_references: Ordered, deduplicated references in a file
- read_own_guid / read_guid_from_meta: Identifier declared by a sidecar file
"""

from assetgraph.parsers.meta import read_guid_from_meta, read_own_guid
from assetgraph.parsers.references import (
    GUID_LENGTH,
    GUID_PREFIX,
    NULL_GUID,
    extract_references,
    is_guid_valid,
    read_references,
)

__all__ = [
    "GUID_PREFIX",
    "GUID_LENGTH",
    "NULL_GUID",
    "is_guid_valid",
    "extract_references",
    "read_references",
    "read_own_guid",
    "read_guid_from_meta",
]
