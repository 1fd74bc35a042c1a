"""
Access to the notes vault (the folder holding all Markdown notes).

The rest of the package talks to the vault through the small Vault
interface below, using forward-slash paths relative to the vault root
("Daily/2025-05-26.md"). FileVault implements it on a real directory;
tests can swap in an in-memory implementation.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Protocol

from .errors import FolderExistsError, NotFoundError, StoreError


@dataclass(frozen=True)
class VaultEntry:
    """One document as listed by Vault.list_all()."""

    path: str  # "Projects/launch.md"
    name: str  # "launch"


class Vault(Protocol):
    """
    The operations the summarizer needs from a document store.

    Syntax notes:
    - typing.Protocol describes an interface by shape: any class with these
      methods counts as a Vault, no inheritance required
    - The `...` bodies are placeholders; Protocols are never instantiated
    """

    def exists(self, path: str) -> bool: ...

    def read(self, path: str) -> str: ...

    def write(self, path: str, text: str) -> None: ...

    def create_folder(self, path: str) -> None: ...

    def list_all(self) -> list[VaultEntry]: ...

    def stat(self, path: str) -> datetime: ...


class FileVault:
    """A vault backed by a directory on disk."""

    def __init__(self, root: Path | str):
        self.root = Path(root).expanduser().resolve()

    def _resolve(self, path: str) -> Path:
        full = (self.root / path).resolve()
        # Refuse "../" tricks that would escape the vault
        if full != self.root and self.root not in full.parents:
            raise StoreError(f"Path is outside the vault: {path}")
        return full

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def read(self, path: str) -> str:
        full = self._resolve(path)
        if not full.is_file():
            raise NotFoundError(f"Note not found: {path}")
        try:
            return full.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Could not read {path}: {e}") from e

    def write(self, path: str, text: str) -> None:
        """Create or overwrite a note. Parent folders must already exist."""
        full = self._resolve(path)
        try:
            full.write_text(text, encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Could not write {path}: {e}") from e

    def create_folder(self, path: str) -> None:
        full = self._resolve(path)
        if full.is_dir():
            raise FolderExistsError(f"Folder already exists: {path}")
        try:
            full.mkdir(parents=True)
        except FileExistsError as e:
            raise FolderExistsError(f"Folder already exists: {path}") from e
        except OSError as e:
            raise StoreError(f"Could not create folder {path}: {e}") from e

    def list_all(self) -> list[VaultEntry]:
        """
        Every Markdown note in the vault, in a stable (sorted) order.

        Hidden folders such as .obsidian/ and .git/ are skipped, and so are
        hidden files like our own lock file and symlinks leading out of the
        vault.
        """
        entries = []
        try:
            for file in sorted(self.root.rglob("*.md")):
                relative = file.relative_to(self.root)
                if any(part.startswith(".") for part in relative.parts):
                    continue
                # Symlinks pointing outside the vault can't be read or stat'ed
                if self.root not in file.resolve().parents:
                    continue
                if file.is_file():
                    entries.append(VaultEntry(path=relative.as_posix(), name=file.stem))
        except OSError as e:
            raise StoreError(f"Could not list vault {self.root}: {e}") from e
        return entries

    def stat(self, path: str) -> datetime:
        """Last modification time of a note (local time)."""
        full = self._resolve(path)
        try:
            return datetime.fromtimestamp(full.stat().st_mtime)
        except FileNotFoundError as e:
            raise NotFoundError(f"Note not found: {path}") from e
        except OSError as e:
            raise StoreError(f"Could not stat {path}: {e}") from e
