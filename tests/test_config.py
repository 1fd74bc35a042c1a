from __future__ import annotations

from pathlib import Path

import pytest

from weekly_summarizer import config
from weekly_summarizer.errors import ConfigurationError


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    settings = config.load_settings(tmp_path / "missing.yaml")
    assert settings["api_key"] == ""
    assert settings["ignore_patterns"] == []
    assert config.get(settings, "weekly_notes.folder") == "Weekly"
    assert config.get(settings, "nope.nothing", "fallback") == "fallback"


def test_file_values_merge_over_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("api_key: abc\ndaily_notes:\n  folder: Daily\n", encoding="utf-8")
    settings = config.load_settings(path)
    assert settings["api_key"] == "abc"
    assert settings["daily_notes"] == {"folder": "Daily", "format": "YYYY-MM-DD"}
    assert settings["output"]["overwrite"] is False


def test_defaults_are_not_shared_between_loads(tmp_path: Path) -> None:
    first = config.load_settings(tmp_path / "missing.yaml")
    first["ignore_patterns"].append("x")
    assert config.DEFAULT_CONFIG["ignore_patterns"] == []


def test_invalid_yaml_is_a_configuration_error(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("api_key: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        config.load_settings(path)


def test_edits_are_saved_immediately(tmp_path: Path) -> None:
    path = tmp_path / "sub" / "config.yaml"
    config.set_value("api_key", "sk-ant-1", path)
    config.add_ignore_pattern("**/*.tmp", path)
    config.add_ignore_pattern("Archive/**", path)
    config.add_ignore_pattern("**/*.tmp", path)

    settings = config.load_settings(path)
    assert settings["api_key"] == "sk-ant-1"
    assert settings["ignore_patterns"] == ["**/*.tmp", "Archive/**"]

    config.remove_ignore_pattern("**/*.tmp", path)
    assert config.load_settings(path)["ignore_patterns"] == ["Archive/**"]


def test_set_value_nested(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    config.set_value("weekly_notes.format", "YYYY-[W]WW", path)
    assert config.load_settings(path)["weekly_notes"] == {"folder": "Weekly", "format": "YYYY-[W]WW"}


def test_folder_config_prefers_folder_over_path() -> None:
    settings = {"weekly_notes": {"folder": "Weekly/", "path": "Other", "format": " YYYY "}}
    assert config.get_folder_config("weekly", settings) == config.FolderConfig("Weekly", "YYYY")

    settings = {"weekly_notes": {"path": "Reviews"}}
    assert config.get_folder_config("weekly", settings) == config.FolderConfig("Reviews", "")


def test_folder_config_missing_section() -> None:
    assert config.get_folder_config("daily", {}) is None
