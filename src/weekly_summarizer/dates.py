"""
Date helpers: ISO week numbers, the 7-day window, and daily note paths.

Daily notes are found by *computing* their path for each day rather than
by listing the folder. That mirrors how note apps store them: a folder
plus a date format like "YYYY-MM-DD" gives "Daily/2025-05-26.md".
"""

import re
from datetime import date, timedelta
from pathlib import PurePosixPath

from .naming import render_template

WINDOW_DAYS = 7
DEFAULT_DAILY_FORMAT = "YYYY-MM-DD"

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


# ---------------------------------------------------------------------------
# ISO Week Numbers
# ---------------------------------------------------------------------------

def iso_week(day: date) -> tuple[int, int]:
    """
    Return (week_number, iso_year) for a date, per ISO-8601.

    The rule: a week belongs to the year that contains its Thursday, and
    week 1 is the week holding the year's first Thursday. So the last days
    of December can be week 1 of the next year, and the first days of
    January can be week 52/53 of the previous one.

    Syntax notes:
    - date.isocalendar() implements exactly this rule and returns
      (iso_year, iso_week, iso_weekday)

    Examples:
        iso_week(date(2025, 5, 26))  -> (22, 2025)
        iso_week(date(2024, 12, 30)) -> (1, 2025)
        iso_week(date(2021, 1, 3))   -> (53, 2020)
    """
    iso_year, week, _weekday = day.isocalendar()
    return week, iso_year


def iso_week_number(day: date) -> int:
    """Just the ISO week number (1-53)."""
    return iso_week(day)[0]


# ---------------------------------------------------------------------------
# The Trailing Window
# ---------------------------------------------------------------------------

def date_window(today: date, days: int = WINDOW_DAYS) -> tuple[date, ...]:
    """
    The last `days` calendar days ending at `today` inclusive, oldest first.

    `today` is always passed in (never date.today() here) so tests can pin it.
    """
    newest_first = [today - timedelta(days=offset) for offset in range(days)]
    return tuple(reversed(newest_first))


# ---------------------------------------------------------------------------
# Daily Note Paths
# ---------------------------------------------------------------------------

def date_tokens(day: date) -> dict[str, str]:
    """Token values for daily note formats."""
    return {
        "YYYY": f"{day.year:04d}",
        "YY": f"{day.year % 100:02d}",
        "MMMM": MONTH_NAMES[day.month - 1],
        "MMM": MONTH_NAMES[day.month - 1][:3],
        "MM": f"{day.month:02d}",
        "DD": f"{day.day:02d}",
    }


def translate_date_format(fmt: str, day: date) -> str:
    """
    Render a daily note format for a specific date.

    Examples:
        translate_date_format("YYYY-MM-DD", date(2025, 5, 26))      -> "2025-05-26"
        translate_date_format("YYYY/MMMM/DD", date(2025, 5, 26))    -> "2025/May/26"
        translate_date_format("DD MMM YYYY", date(2025, 5, 26))     -> "26 May 2025"
    """
    return render_template(fmt or DEFAULT_DAILY_FORMAT, date_tokens(day))


def daily_note_path(folder: str, fmt: str, day: date) -> str:
    """
    Vault-relative path of the daily note for `day`.

    Args:
        folder: Daily notes folder ("" means the vault root)
        fmt: Daily note format, e.g. "YYYY-MM-DD"
        day: The date to resolve

    Returns:
        e.g. "Daily/2025-05-26.md", or "2025-05-26.md" with no folder.
    """
    name = translate_date_format(fmt, day)
    folder = folder.strip().strip("/")
    if folder:
        return f"{folder}/{name}.md"
    return f"{name}.md"


_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def extract_date_label(fmt: str, file_name: str) -> str | None:
    """
    Recover a display date from a daily note's file name.

    Only the default "YYYY-MM-DD" format is parsed; the first date-looking
    substring of the base name is returned (or None when there is none).
    For any other format the bare file stem comes back unchanged, since the
    stem is already the user's own rendering of that date.

    Args:
        fmt: The daily note format the file was resolved with
        file_name: File name or path, e.g. "Daily/2025-05-26.md"

    Returns:
        A label such as "2025-05-26", the stem, or None.
    """
    stem = PurePosixPath(file_name).stem
    if (fmt or DEFAULT_DAILY_FORMAT) == DEFAULT_DAILY_FORMAT:
        match = _ISO_DATE_RE.search(stem)
        return match.group(0) if match else None
    return stem
