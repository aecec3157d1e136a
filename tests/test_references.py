"""Tests for parsers/references.py - guid reference extraction."""

import pytest

from assetgraph.parsers.references import (
    GUID_LENGTH,
    NULL_GUID,
    extract_references,
    is_guid_valid,
    read_references,
)

GUID_A = "a" * 32
GUID_B = "b" * 32
GUID_C = "0123456789abcdef0123456789abcdef"


class TestIsGuidValid:
    """Tests for is_guid_valid()."""

    def test_real_guid_is_valid(self):
        assert is_guid_valid(GUID_C)

    @pytest.mark.parametrize("value", [None, "", NULL_GUID, "abc", GUID_A + "a"])
    def test_rejected_values(self, value):
        assert not is_guid_valid(value)

    def test_null_guid_is_all_zero(self):
        assert NULL_GUID == "0" * GUID_LENGTH


class TestExtractReferences:
    """Tests for extract_references()."""

    def test_single_reference(self):
        text = f"  m_Material: {{fileID: 2100000, guid: {GUID_A}, type: 2}}\n"
        assert extract_references(text) == [GUID_A]

    def test_preserves_first_occurrence_order(self):
        text = "\n".join(
            [
                f"  a: {{guid: {GUID_B}, type: 2}}",
                f"  b: {{guid: {GUID_A}, type: 2}}",
                f"  c: {{guid: {GUID_B}, type: 2}}",
            ]
        )
        assert extract_references(text) == [GUID_B, GUID_A]

    def test_marker_at_column_zero_is_not_a_reference(self):
        text = f"guid: {GUID_A}\n  ref: {{guid: {GUID_B}}}\n"
        assert extract_references(text) == [GUID_B]

    def test_null_guid_filtered(self):
        text = f"  m_Script: {{fileID: 0, guid: {NULL_GUID}, type: 0}}\n"
        assert extract_references(text) == []

    def test_truncated_token_skipped(self):
        text = f"  ref: {{guid: abc123}}\n  ok: {{guid: {GUID_A}}}\n"
        assert extract_references(text) == [GUID_A]

    def test_only_first_marker_on_a_line(self):
        text = f"  pair: {{guid: {GUID_A}}}, {{guid: {GUID_B}}}\n"
        assert extract_references(text) == [GUID_A]

    def test_column_zero_hides_later_marker_on_same_line(self):
        text = f"guid: {GUID_A} guid: {GUID_B}\n"
        assert extract_references(text) == []

    def test_crlf_line_endings(self):
        text = f"--- !u!1 &1\r\n  ref: {{guid: {GUID_A}, type: 3}}\r\n"
        assert extract_references(text) == [GUID_A]

    def test_token_taken_at_fixed_length(self):
        text = f"  ref: {{guid: {GUID_A}ffff}}\n"
        assert extract_references(text) == [GUID_A]

    def test_empty_text(self):
        assert extract_references("") == []

    def test_no_markers(self):
        assert extract_references("%YAML 1.1\nGameObject:\n  m_Name: Hero\n") == []


class TestReadReferences:
    """Tests for read_references()."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "Hero.prefab"
        path.write_text(f"  ref: {{guid: {GUID_A}}}\n", encoding="utf-8")
        assert read_references(path) == [GUID_A]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            read_references(tmp_path / "missing.prefab")
