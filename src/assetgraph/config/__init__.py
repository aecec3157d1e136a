"""
assetgraph.config - Configuration loading and defaults

Configuration is read from ``.assetgraph.toml`` (found by walking up from
the working directory, stopping at the git root), merged over
DEFAULT_CONFIG, then overridden by ``ASSETGRAPH_<SECTION>_<KEY>``
environment variables.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from assetgraph.config.defaults import DEFAULT_CONFIG

CONFIG_FILENAME = ".assetgraph.toml"
ENV_PREFIX = "ASSETGRAPH_"


class ConfigLoader:
    """Dict-backed configuration with dotted-key access."""

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConfigLoader:
        """Create a loader from a plain dict."""
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted key, e.g. ``scan.skip_dirs``."""
        value: Any = self._data
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML content, preserving formatting for round-trips."""
    return tomlkit.parse(content)


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML content into plain Python types."""
    return parse_toml_document(content).unwrap()


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base.

    Nested dicts are merged; every other value in override replaces the
    value in base.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value into a typed Python value.

    JSON arrays and objects become lists and dicts, ``true``/``false``
    (any case) become booleans, signed integers become ints. Anything
    else, including malformed JSON, is returned unchanged.
    """
    stripped = value.strip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if stripped.removeprefix("-").isdigit():
        return int(stripped)
    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply ASSETGRAPH_<SECTION>_<KEY> environment overrides.

    The first underscore-separated part after the prefix names the section;
    the remainder, lowercased, names the key (``ASSETGRAPH_SCAN_SKIP_DIRS``
    sets ``scan.skip_dirs``).
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        parts = name[len(ENV_PREFIX) :].lower().split("_", 1)
        if len(parts) != 2 or not all(parts):
            continue
        section, key = parts
        section_data = config.setdefault(section, {})
        if isinstance(section_data, dict):
            section_data[key] = _try_parse_env_value(raw)
    return config


def find_git_root(start: Path) -> Path | None:
    """Find the nearest ancestor (or start itself) containing .git."""
    current = start.resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def find_config_file(start: Path) -> Path | None:
    """Find .assetgraph.toml by walking up from start.

    The search stops at the git root if there is one, otherwise at the
    filesystem root.
    """
    current = start.resolve()
    git_root = find_git_root(current)
    for candidate in (current, *current.parents):
        config_path = candidate / CONFIG_FILENAME
        if config_path.is_file():
            return config_path
        if git_root is not None and candidate == git_root:
            break
    return None


def load_config(config_path: Path) -> ConfigLoader:
    """Load a config file merged over defaults, with env overrides.

    Raises:
        ValueError: If the file is not valid TOML.
    """
    content = config_path.read_text(encoding="utf-8")
    try:
        data = parse_toml(content)
    except TOMLKitError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    merged = merge_configs(DEFAULT_CONFIG, data)
    return ConfigLoader.from_dict(_apply_env_overrides(merged))


def get_config(config_path: Path | None = None, start_dir: Path | None = None) -> ConfigLoader:
    """Resolve configuration for a command.

    Uses config_path if given, else searches upward from start_dir (default
    cwd). Falls back to defaults (plus env overrides) if no file exists.
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())
    if config_path is not None and config_path.exists():
        return load_config(config_path)
    return ConfigLoader.from_dict(_apply_env_overrides(copy.deepcopy(DEFAULT_CONFIG)))


__all__ = [
    "CONFIG_FILENAME",
    "ConfigLoader",
    "DEFAULT_CONFIG",
    "find_config_file",
    "find_git_root",
    "get_config",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
]
