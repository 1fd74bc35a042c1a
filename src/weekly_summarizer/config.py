"""
Settings management for weekly-summarizer.

Settings live in a YAML file (config/config.yaml by default). The file is
optional - every key has a built-in default, and values from the file are
merged on top of those defaults.

Unlike a read-only config, these settings are also *edited* from the CLI
(--set-api-key, --add-ignore, ...). Every edit is saved to disk right away.

Example config.yaml:

    api_key: "sk-ant-..."
    vault_path: "~/Notes"
    ignore_patterns:
      - "**/*.tmp"
      - "Archive/**"
    daily_notes:
      folder: "Daily"
      format: "YYYY-MM-DD"
    weekly_notes:
      folder: "Weekly"
      format: "YYYY-[W]WW"
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # PyYAML

from .errors import ConfigurationError

# ---------------------------------------------------------------------------
# Config File Paths
# ---------------------------------------------------------------------------


def get_project_root() -> Path:
    """
    Get the project root directory.

    This file is at: src/weekly_summarizer/config.py
    Project root is: ../../ from here
    """
    return Path(__file__).resolve().parent.parent.parent


def get_config_path() -> Path:
    """Path to config/config.yaml in the project root."""
    return get_project_root() / "config" / "config.yaml"


# ---------------------------------------------------------------------------
# Default Configuration
# ---------------------------------------------------------------------------

# Structure mirrors the YAML file for easy mental mapping.

DEFAULT_CONFIG = {
    "api_key": "",
    "vault_path": ".",
    "ignore_patterns": [],
    "daily_notes": {
        "folder": "",
        "format": "YYYY-MM-DD",
    },
    "weekly_notes": {
        "folder": "Weekly",
        # Empty means the built-in "2025-W05" style name
        "format": "",
    },
    "output": {
        # Refuse to replace an existing weekly note unless this is true
        "overwrite": False,
        "include_updated_files": True,
    },
    "anthropic": {
        "model": "claude-sonnet-4-5",
        "max_tokens": 1000,
        "temperature": 0.7,
    },
}

FOLDER_KINDS = {
    "daily": "daily_notes",
    "weekly": "weekly_notes",
}


# ---------------------------------------------------------------------------
# Loading and Saving
# ---------------------------------------------------------------------------

def load_settings(path: Path | None = None) -> dict:
    """
    Load settings from file, falling back to defaults.

    Merge strategy:
    - Start with DEFAULT_CONFIG
    - If the file exists, overlay its values
    - Missing keys use defaults, extra keys are preserved

    Args:
        path: Settings file. Defaults to get_config_path().

    Returns:
        Settings dictionary with all keys present.

    Raises:
        ConfigurationError: If the file exists but isn't valid YAML.
    """
    settings = _deep_copy(DEFAULT_CONFIG)
    path = path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                user_settings = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing {path}: {e}") from e

        if user_settings:
            if not isinstance(user_settings, dict):
                raise ConfigurationError(f"{path} must contain a mapping at the top level")
            settings = _deep_merge(settings, user_settings)

    return settings


def save_settings(settings: dict, path: Path | None = None) -> Path:
    """
    Write settings back to the YAML file, creating its folder if needed.

    Syntax notes:
    - yaml.safe_dump() is the write-side twin of safe_load()
    - sort_keys=False keeps keys in the order we defined them

    Returns:
        The path that was written.
    """
    path = path or get_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(settings, f, sort_keys=False, allow_unicode=True)
    except OSError as e:
        raise ConfigurationError(f"Could not save settings to {path}: {e}") from e
    return path


def _deep_copy(d: dict) -> dict:
    """
    Copy a nested dict, including nested dicts and lists.

    d.copy() would be shallow: the default ignore_patterns list would be
    shared, and appending to it would change DEFAULT_CONFIG.
    """
    result = {}
    for key, value in d.items():
        if isinstance(value, dict):
            result[key] = _deep_copy(value)
        elif isinstance(value, list):
            result[key] = list(value)
        else:
            result[key] = value
    return result


def _deep_merge(base: dict, overlay: dict) -> dict:
    """
    Deep merge overlay into base, returning a new dict.

    - Keys in overlay overwrite keys in base
    - Nested dicts are merged recursively
    - Lists and other values are replaced entirely
    """
    result = _deep_copy(base)

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# ---------------------------------------------------------------------------
# Access Helpers
# ---------------------------------------------------------------------------

def get(settings: dict, key_path: str, default: Any = None) -> Any:
    """
    Get a settings value using dot-notation path.

    Examples:
        get(settings, "daily_notes.format")         # "YYYY-MM-DD"
        get(settings, "anthropic.model")            # "claude-sonnet-4-5"
        get(settings, "nonexistent.key", "x")       # "x"
    """
    value = settings
    for key in key_path.split("."):
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


@dataclass(frozen=True)
class FolderConfig:
    """Where a kind of periodic note lives and how its file is named."""

    folder: str
    format: str


def get_folder_config(kind: str, settings: dict) -> FolderConfig | None:
    """
    Folder and name format for "daily" or "weekly" notes.

    Some note apps call the folder field "path" instead of "folder". When
    both are present, "folder" wins; "path" is only read when "folder" is
    missing.

    Returns:
        FolderConfig, or None if the section is missing or not a mapping.
    """
    section = settings.get(FOLDER_KINDS[kind])
    if not isinstance(section, dict):
        return None

    folder = section.get("folder")
    if folder is None:
        folder = section.get("path")

    return FolderConfig(
        folder=str(folder or "").strip().strip("/"),
        format=str(section.get("format") or "").strip(),
    )


def get_vault_path(settings: dict) -> Path:
    """The configured vault directory, with ~ expanded."""
    return Path(str(settings.get("vault_path") or ".")).expanduser().resolve()


# ---------------------------------------------------------------------------
# Editing (each edit saves immediately)
# ---------------------------------------------------------------------------

def set_value(key_path: str, value: Any, path: Path | None = None) -> dict:
    """
    Set one dot-path value and save.

    Example:
        set_value("api_key", "sk-ant-...")
        set_value("weekly_notes.folder", "Reviews")

    Returns:
        The updated settings dict.
    """
    settings = load_settings(path)
    keys = key_path.split(".")

    target = settings
    for key in keys[:-1]:
        if not isinstance(target.get(key), dict):
            target[key] = {}
        target = target[key]
    target[keys[-1]] = value

    save_settings(settings, path)
    return settings


def add_ignore_pattern(pattern: str, path: Path | None = None) -> dict:
    """Append an ignore pattern (if it isn't already there) and save."""
    settings = load_settings(path)
    patterns = list(settings.get("ignore_patterns") or [])
    if pattern not in patterns:
        patterns.append(pattern)
    settings["ignore_patterns"] = patterns
    save_settings(settings, path)
    return settings


def remove_ignore_pattern(pattern: str, path: Path | None = None) -> dict:
    """Remove every copy of an ignore pattern and save."""
    settings = load_settings(path)
    settings["ignore_patterns"] = [p for p in settings.get("ignore_patterns") or [] if p != pattern]
    save_settings(settings, path)
    return settings
