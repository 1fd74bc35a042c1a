"""
Gather the notes a weekly summary is built from.

This module handles the two reads a run makes from the vault:
- Daily notes for the last 7 days (looked up by computed path)
- Other notes modified in the same window (for the "Updated files" list)
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from .dates import daily_note_path, date_window, extract_date_label
from .patterns import matches_any
from .vault import Vault


@dataclass(frozen=True)
class DailyNote:
    """A non-empty daily note found in the window."""

    date: str  # display label, usually "YYYY-MM-DD"
    content: str
    path: str


@dataclass(frozen=True)
class UpdatedFile:
    """A note (outside the daily/weekly folders) modified during the window."""

    path: str
    name: str
    modified_at: datetime


# ---------------------------------------------------------------------------
# Daily Notes
# ---------------------------------------------------------------------------

def collect_window_notes(vault: Vault, today: date, folder: str, fmt: str) -> list[DailyNote]:
    """
    Read the daily notes for the 7 days ending at `today`.

    Days are checked newest first (today, yesterday, ...). A day counts only
    if its note exists and has something besides whitespace. The result is
    reversed before returning so the summary reads in chronological order.

    Syntax notes:
    - date_window() returns oldest-first, so reversed() gives newest-first
    - list.reverse() flips the list in place (no copy)

    Args:
        vault: Where the notes live
        today: Last day of the window (inclusive)
        folder: Daily notes folder ("" for the vault root)
        fmt: Daily note format, e.g. "YYYY-MM-DD"

    Returns:
        DailyNote records, oldest first. Empty if there were none; the
        caller decides what "no notes" means.

    Raises:
        StoreError: If a note exists but can't be read.
    """
    notes = []

    for day in reversed(date_window(today)):
        path = daily_note_path(folder, fmt, day)
        if not vault.exists(path):
            continue

        content = vault.read(path)
        if not content.strip():
            continue

        label = extract_date_label(fmt, path) or day.isoformat()
        notes.append(DailyNote(date=label, content=content, path=path))

    notes.reverse()
    return notes


# ---------------------------------------------------------------------------
# Updated Files
# ---------------------------------------------------------------------------

def _in_folder(path: str, folder: str) -> bool:
    folder = folder.strip().strip("/")
    return bool(folder) and path.startswith(folder + "/")


def scan_updated_files(
    vault: Vault,
    cutoff: datetime,
    excluded_folders: Iterable[str],
    ignore_patterns: Iterable[str],
) -> list[UpdatedFile]:
    """
    Find notes modified after `cutoff`, newest first.

    A note is kept when all of these hold:
    - its modification time is strictly after the cutoff
    - it is not inside any excluded folder (daily notes, weekly notes)
    - it matches none of the ignore patterns

    Syntax notes:
    - list.sort() is stable, also with reverse=True: notes with the same
      modification time stay in the order the vault listed them

    Args:
        vault: Where the notes live
        cutoff: Usually "now minus 7 days"
        excluded_folders: Folders whose contents are never listed
        ignore_patterns: Glob-lite patterns (see patterns.py)

    Returns:
        UpdatedFile records sorted by modified_at, newest first.
    """
    excluded_folders = list(excluded_folders)
    ignore_patterns = list(ignore_patterns)
    updated = []

    for entry in vault.list_all():
        if any(_in_folder(entry.path, folder) for folder in excluded_folders):
            continue
        if matches_any(ignore_patterns, entry.path):
            continue

        modified_at = vault.stat(entry.path)
        if modified_at > cutoff:
            updated.append(UpdatedFile(path=entry.path, name=entry.name, modified_at=modified_at))

    updated.sort(key=lambda f: f.modified_at, reverse=True)
    return updated
