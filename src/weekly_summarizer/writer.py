"""
Write the weekly note (or insert the summary into an existing note).

Two output sinks:
- write_weekly_note(): create Weekly/2025-W22.md (the usual mode)
- insert_into_note(): put the summary into a note at a given line,
  the CLI equivalent of "insert at cursor"
"""

from datetime import date

from .config import FolderConfig
from .dates import iso_week
from .errors import FolderExistsError, NoteExistsError, NotFoundError
from .journal import UpdatedFile
from .naming import format_file_name
from .vault import Vault

DEFAULT_WEEKLY_FOLDER = "Weekly"


def weekly_note_path(today: date, folder_config: FolderConfig | None = None) -> str:
    """
    Vault-relative path of the weekly note for the week containing `today`.

    The ISO year is used, not the calendar year, so 2024-12-30 resolves to
    "Weekly/2025-W01.md".

    Args:
        today: Any date in the target week
        folder_config: Weekly folder/format settings. None means defaults.

    Returns:
        e.g. "Weekly/2025-W22.md"
    """
    week, year = iso_week(today)
    folder = folder_config.folder if folder_config and folder_config.folder else DEFAULT_WEEKLY_FOLDER
    fmt = folder_config.format if folder_config else ""
    name = format_file_name(fmt, today, week, year)
    return f"{folder}/{name}.md"


def render_weekly_note(summary: str, updated_files: list[UpdatedFile] | None = None) -> str:
    """
    The weekly note body: the summary, then an "Updated files" section.

    Each updated file becomes a wiki link so it's clickable in the vault:
        - [[Projects/launch]] (2025-05-27 14:03)
    """
    body = summary.rstrip() + "\n"
    if updated_files:
        lines = ["", "## Updated files", ""]
        for f in updated_files:
            target = f.path[:-3] if f.path.endswith(".md") else f.path
            lines.append(f"- [[{target}]] ({f.modified_at:%Y-%m-%d %H:%M})")
        body += "\n".join(lines) + "\n"
    return body


def write_weekly_note(vault: Vault, path: str, body: str, overwrite: bool = False) -> str:
    """
    Create the weekly note, creating its folder first.

    Args:
        vault: Where to write
        path: From weekly_note_path()
        body: From render_weekly_note()
        overwrite: Replace an existing note instead of refusing

    Returns:
        The path written.

    Raises:
        NoteExistsError: If the note exists and overwrite is False.
        StoreError: If the folder or file can't be written.
    """
    folder, _, _ = path.rpartition("/")
    if folder:
        try:
            vault.create_folder(folder)
        except FolderExistsError:
            pass  # already there is fine

    if vault.exists(path) and not overwrite:
        raise NoteExistsError(f"{path} already exists. Use --overwrite to replace it.")

    vault.write(path, body)
    return path


def insert_into_note(vault: Vault, path: str, text: str, line: int | None = None) -> str:
    """
    Insert `text` into an existing note.

    Args:
        vault: Where the note lives
        path: Vault-relative path of the note
        text: What to insert (usually the summary)
        line: 1-based line to insert before. None (or past the end) appends.

    Returns:
        The path written.

    Raises:
        NotFoundError: If the note doesn't exist.
    """
    if not vault.exists(path):
        raise NotFoundError(f"Note not found: {path}")

    lines = vault.read(path).splitlines(keepends=True)
    insert_lines = text.rstrip("\n").splitlines(keepends=False)
    insert_block = [ln + "\n" for ln in insert_lines]

    if line is None or line > len(lines):
        # Make sure the existing last line ends before we append
        if lines and not lines[-1].endswith("\n"):
            lines[-1] += "\n"
        lines.extend(insert_block)
    else:
        index = max(line, 1) - 1
        lines[index:index] = insert_block

    vault.write(path, "".join(lines))
    return path
