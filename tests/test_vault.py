from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import pytest

from weekly_summarizer.errors import FolderExistsError, NotFoundError, StoreError
from weekly_summarizer.vault import FileVault


def test_read_write_exists(tmp_path: Path) -> None:
    vault = FileVault(tmp_path)
    assert not vault.exists("a.md")
    vault.write("a.md", "hello")
    assert vault.exists("a.md")
    assert vault.read("a.md") == "hello"


def test_read_missing(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        FileVault(tmp_path).read("nope.md")


def test_create_folder_twice(tmp_path: Path) -> None:
    vault = FileVault(tmp_path)
    vault.create_folder("Weekly/2025")
    assert (tmp_path / "Weekly" / "2025").is_dir()
    with pytest.raises(FolderExistsError):
        vault.create_folder("Weekly/2025")


def test_paths_outside_vault_are_rejected(tmp_path: Path) -> None:
    with pytest.raises(StoreError):
        FileVault(tmp_path / "vault").read("../secret.md")


def test_list_all_skips_hidden_and_non_markdown(tmp_path: Path) -> None:
    (tmp_path / "Projects").mkdir()
    (tmp_path / ".obsidian").mkdir()
    (tmp_path / "Projects" / "b.md").write_text("b")
    (tmp_path / "a.md").write_text("a")
    (tmp_path / ".obsidian" / "workspace.md").write_text("x")
    (tmp_path / "image.png").write_bytes(b"")

    entries = FileVault(tmp_path).list_all()
    assert [(e.path, e.name) for e in entries] == [("Projects/b.md", "b"), ("a.md", "a")]


def test_stat_returns_modification_time(tmp_path: Path) -> None:
    note = tmp_path / "a.md"
    note.write_text("a")
    stamp = datetime(2025, 5, 27, 14, 3).timestamp()
    os.utime(note, (stamp, stamp))
    assert FileVault(tmp_path).stat("a.md") == datetime(2025, 5, 27, 14, 3)


def test_stat_missing(tmp_path: Path) -> None:
    with pytest.raises(NotFoundError):
        FileVault(tmp_path).stat("nope.md")


def test_list_all_skips_symlinks_leading_outside(tmp_path: Path) -> None:
    vault_dir = tmp_path / "vault"
    vault_dir.mkdir()
    (vault_dir / "a.md").write_text("a")
    (tmp_path / "outside.md").write_text("secret")
    (vault_dir / "linked.md").symlink_to(tmp_path / "outside.md")

    vault = FileVault(vault_dir)
    entries = vault.list_all()
    assert [e.path for e in entries] == ["a.md"]
    # Every listed entry can be stat'ed, so a scan never trips over the link
    for entry in entries:
        vault.stat(entry.path)
