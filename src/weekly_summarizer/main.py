"""
Main entry point for the weekly summarizer.

This module orchestrates the full flow:
1. Check that an API key is configured
2. Gather the last 7 days of daily notes
3. Generate a summary via Claude API
4. List other notes updated this week (optional)
5. Write the weekly note (or insert the summary into a given note)

Run with: uv run python -m weekly_summarizer
"""

import argparse
import sys
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from pathlib import Path

import yaml

from . import config
from .errors import ConfigurationError, NoDataError, NotFoundError, WeeklySummarizerError
from .journal import DailyNote, UpdatedFile, collect_window_notes, scan_updated_files
from .locks import LOCK_FILE_NAME, run_lock
from .summarize import build_user_content, derive_client, generate_summary
from .vault import FileVault, Vault
from .writer import (
    DEFAULT_WEEKLY_FOLDER,
    insert_into_note,
    render_weekly_note,
    weekly_note_path,
    write_weekly_note,
)

WINDOW = timedelta(days=7)


@dataclass
class RunResult:
    """What a run did. `path` is None for dry runs."""

    path: str | None
    notes: list[DailyNote]
    updated_files: list[UpdatedFile] = field(default_factory=list)
    summary: str = ""


def run_weekly_note(
    vault: Vault,
    settings: dict,
    today: date,
    now: datetime | None = None,
    client=None,
    overwrite: bool | None = None,
    include_updated_files: bool | None = None,
    insert_into: str | None = None,
    at_line: int | None = None,
    dry_run: bool = False,
    lock_path: Path | None = None,
) -> RunResult:
    """
    Generate this week's summary note.

    Nothing is written until the summary is in hand, so a failure at any
    step leaves the vault untouched.

    Args:
        vault: Where the notes live
        settings: From config.load_settings()
        today: Last day of the 7-day window
        now: Reference time for "updated files". Defaults to `today` at the
             current clock time.
        client: Claude client. Defaults to derive_client(settings).
        overwrite: Replace an existing weekly note. Defaults to settings.
        include_updated_files: Add the "Updated files" list. Defaults to settings.
        insert_into: Insert into this note instead of creating a weekly note
        at_line: 1-based line for insert_into (None appends)
        dry_run: Stop after gathering notes (no API call, no writes)
        lock_path: File lock guarding against concurrent runs

    Returns:
        RunResult describing what was written.

    Raises:
        ConfigurationError: No API key configured.
        NoDataError: No daily notes in the window.
        StoreError: Reading or writing the vault failed.
        ServiceError: The Claude API call failed.
        RunInProgressError: Another run is in progress.
    """
    # Checked before the lock so a missing key touches nothing on disk
    if client is None and not dry_run:
        client = derive_client(settings)
        if client is None:
            raise ConfigurationError(
                "No Anthropic API key set. Run: weekly-summarizer --set-api-key <key>"
            )

    with run_lock(lock_path):
        daily = config.get_folder_config("daily", settings) or config.FolderConfig("", "")
        weekly = config.get_folder_config("weekly", settings)

        print(f"Gathering daily notes for the 7 days ending {today.isoformat()}...")
        notes = collect_window_notes(vault, today, daily.folder, daily.format)

        if not notes:
            raise NoDataError(
                "No daily notes found in the last 7 days. "
                "Check daily_notes.folder and daily_notes.format in your settings."
            )

        print(f"Found {len(notes)} notes:")
        for note in notes:
            print(f"  - {note.date}: {len(note.content):,} chars")

        if dry_run:
            print("\n[Dry run] Would generate summary from these notes.")
            print("[Dry run] No API call made, no files written.")
            return RunResult(path=None, notes=notes)

        if insert_into and not vault.exists(insert_into):
            raise NotFoundError(f"Note not found: {insert_into}")

        print("\nGenerating summary via Claude API...")
        summary = generate_summary(
            client,
            build_user_content(notes),
            model=config.get(settings, "anthropic.model"),
            max_tokens=config.get(settings, "anthropic.max_tokens"),
            temperature=config.get(settings, "anthropic.temperature"),
        )

        if insert_into:
            path = insert_into_note(vault, insert_into, summary, at_line)
            print(f"Summary inserted into: {path}")
            return RunResult(path=path, notes=notes, summary=summary)

        if include_updated_files is None:
            include_updated_files = bool(config.get(settings, "output.include_updated_files", True))
        if overwrite is None:
            overwrite = bool(config.get(settings, "output.overwrite", False))

        updated_files = []
        if include_updated_files:
            now = now or datetime.combine(today, datetime.now().time())
            weekly_folder = weekly.folder if weekly and weekly.folder else DEFAULT_WEEKLY_FOLDER
            updated_files = scan_updated_files(
                vault,
                cutoff=now - WINDOW,
                excluded_folders=[daily.folder, weekly_folder],
                ignore_patterns=settings.get("ignore_patterns") or [],
            )
            print(f"Found {len(updated_files)} other notes updated this week.")

        path = weekly_note_path(today, weekly)
        write_weekly_note(vault, path, render_weekly_note(summary, updated_files), overwrite=overwrite)
        print(f"Weekly note saved to: {path}")

        return RunResult(path=path, notes=notes, updated_files=updated_files, summary=summary)


# ---------------------------------------------------------------------------
# Command Line
# ---------------------------------------------------------------------------

def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Summarize the last 7 days of daily notes into a weekly note."
    )

    parser.add_argument("--config", type=Path, default=None, help="Settings file (default: config/config.yaml).")
    parser.add_argument("--vault", type=Path, default=None, help="Vault directory (default: vault_path setting).")
    parser.add_argument("--date", type=_parse_date, default=None, help="Treat this day as today (YYYY-MM-DD).")
    parser.add_argument("--dry-run", action="store_true", help="Show which notes would be summarized without calling the API.")
    parser.add_argument("--overwrite", action="store_true", default=None, help="Replace this week's note if it already exists.")
    parser.add_argument(
        "--no-updated-files",
        dest="include_updated_files",
        action="store_false",
        default=None,
        help="Leave out the list of other notes updated this week.",
    )
    parser.add_argument("--insert-into", metavar="NOTE", help="Insert the summary into this note instead of creating a weekly note.")
    parser.add_argument("--at-line", type=int, default=None, help="1-based line for --insert-into (default: append).")

    # Settings edits - each one is saved immediately and no summary is run
    settings_group = parser.add_argument_group("settings")
    settings_group.add_argument("--set-api-key", metavar="KEY", help="Save the Anthropic API key.")
    settings_group.add_argument("--add-ignore", metavar="PATTERN", help="Add an ignore pattern, e.g. '**/*.tmp'.")
    settings_group.add_argument("--remove-ignore", metavar="PATTERN", help="Remove an ignore pattern.")
    settings_group.add_argument("--show-config", action="store_true", help="Print the current settings.")

    args = parser.parse_args(argv)
    if args.at_line is not None and not args.insert_into:
        parser.error("--at-line requires --insert-into")
    return args


def _run_settings_command(args: argparse.Namespace) -> bool:
    """Handle --set-api-key and friends. Returns True if one ran."""
    if args.set_api_key is not None:
        config.set_value("api_key", args.set_api_key.strip(), args.config)
        print("API key saved.")
        return True
    if args.add_ignore:
        settings = config.add_ignore_pattern(args.add_ignore, args.config)
        print(f"Ignore patterns: {settings['ignore_patterns']}")
        return True
    if args.remove_ignore:
        settings = config.remove_ignore_pattern(args.remove_ignore, args.config)
        print(f"Ignore patterns: {settings['ignore_patterns']}")
        return True
    if args.show_config:
        settings = config.load_settings(args.config)
        if settings.get("api_key"):
            settings["api_key"] = "****" + settings["api_key"][-4:]
        print(yaml.safe_dump(settings, sort_keys=False), end="")
        return True
    return False


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    args = parse_args(argv)

    try:
        if _run_settings_command(args):
            return 0

        settings = config.load_settings(args.config)
        vault_root = args.vault.expanduser().resolve() if args.vault else config.get_vault_path(settings)
        if not vault_root.is_dir():
            raise ConfigurationError(f"Vault folder not found: {vault_root}")

        run_weekly_note(
            FileVault(vault_root),
            settings,
            today=args.date or date.today(),
            overwrite=args.overwrite,
            include_updated_files=args.include_updated_files,
            insert_into=args.insert_into,
            at_line=args.at_line,
            dry_run=args.dry_run,
            lock_path=vault_root / LOCK_FILE_NAME,
        )
    except WeeklySummarizerError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
