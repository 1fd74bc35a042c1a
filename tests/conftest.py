from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest

from weekly_summarizer.errors import FolderExistsError, NotFoundError
from weekly_summarizer.vault import VaultEntry


class MemoryVault:
    """In-memory Vault: {path: (text, modified_at)} plus a set of folders."""

    def __init__(self, files: dict[str, str] | None = None, modified: dict[str, datetime] | None = None):
        self.files: dict[str, str] = dict(files or {})
        self.modified: dict[str, datetime] = dict(modified or {})
        self.folders: set[str] = set()
        self.writes: list[str] = []

    def exists(self, path: str) -> bool:
        return path in self.files

    def read(self, path: str) -> str:
        if path not in self.files:
            raise NotFoundError(path)
        return self.files[path]

    def write(self, path: str, text: str) -> None:
        self.files[path] = text
        self.writes.append(path)

    def create_folder(self, path: str) -> None:
        if path in self.folders:
            raise FolderExistsError(path)
        self.folders.add(path)

    def list_all(self) -> list[VaultEntry]:
        return [VaultEntry(path=p, name=p.rsplit("/", 1)[-1][:-3]) for p in self.files]

    def stat(self, path: str) -> datetime:
        if path not in self.files:
            raise NotFoundError(path)
        return self.modified.get(path, datetime(2000, 1, 1))


class FakeMessages:
    def __init__(self, text: str | None = "## Major events this week\n\nShipped it.", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        content = [] if self.text is None else [SimpleNamespace(type="text", text=self.text)]
        return SimpleNamespace(content=content)


class FakeClient:
    def __init__(self, **kwargs):
        self.messages = FakeMessages(**kwargs)


@pytest.fixture
def vault() -> MemoryVault:
    return MemoryVault()


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()
