"""
Resolve file names from small token templates.

Templates use Moment.js-style tokens, the same ones note-taking apps use
for their "daily note format" and "weekly note format" settings:

    YYYY  -> 2025        WW  -> 05 (zero-padded ISO week)
    YY    -> 25          W   -> 5
    [...] -> literal text, copied verbatim

Examples:
    "YYYY-[W]WW"   -> "2025-W22"
    "[Week ]WW"    -> "Week 05"

Tokens are matched in a single left-to-right regex pass. The alternation
lists longer tokens first, so "YYYY" is never read as "YY" + "YY" and
"WW" is never read as "W" + "W". Bracketed spans are matched by the same
pass, which means a literal is emitted exactly once, in its original
position, and token substitution can never reach inside it.
"""

import re
from datetime import date
from typing import Mapping

TokenValues = Mapping[str, str]


def render_template(template: str, values: TokenValues) -> str:
    """
    Replace tokens in `template` using `values`, keeping [bracketed] text literal.

    Syntax notes:
    - sorted(..., key=len, reverse=True) puts the longest tokens first,
      which is what makes the regex alternation prefer "YYYY" over "YY"
    - re.escape() protects tokens in case they ever contain regex characters
    - re.sub() with a function calls it once per match and uses its return value

    Args:
        template: Template string such as "YYYY-[W]WW"
        values: Mapping of token -> replacement text

    Returns:
        The rendered string.
    """
    tokens = sorted(values, key=len, reverse=True)
    alternation = "|".join(re.escape(token) for token in tokens)
    # Group 1 captures the inside of a [literal]; otherwise a token matched
    pattern = re.compile(r"\[([^\]]*)\]" + (f"|{alternation}" if alternation else ""))

    def substitute(match: re.Match) -> str:
        if match.group(1) is not None:
            return match.group(1)
        return values[match.group(0)]

    return pattern.sub(substitute, template)


def name_tokens(year: int, week: int) -> dict[str, str]:
    """Token values for weekly note names."""
    return {
        "YYYY": f"{year:04d}",
        "YY": f"{year % 100:02d}",
        "WW": f"{week:02d}",
        "W": str(week),
    }


def default_weekly_name(year: int, week: int) -> str:
    """The name used when no weekly format is configured, e.g. 2025-W05."""
    return f"{year}-W{week:02d}"


def format_file_name(template: str | None, reference_date: date, week: int, year: int) -> str:
    """
    Build a weekly note file name (without extension).

    `year` is the ISO year of the week, which differs from reference_date.year
    around New Year (2024-12-30 belongs to 2025-W01). The reference date is
    accepted so callers pass everything the name could depend on; only the
    week-based tokens are supported today.

    Args:
        template: Name format such as "YYYY-[W]WW". Empty/None uses the default.
        reference_date: The date the note is generated for
        week: ISO week number (1-53)
        year: ISO year that owns the week

    Returns:
        The resolved file name, e.g. "2025-W22".
    """
    if not template or not template.strip():
        return default_weekly_name(year, week)
    return render_template(template, name_tokens(year, week))
