from __future__ import annotations

from datetime import date

from weekly_summarizer.naming import default_weekly_name, format_file_name, render_template


def test_default_name_when_no_template() -> None:
    assert format_file_name(None, date(2025, 1, 29), 5, 2025) == "2025-W05"
    assert format_file_name("", date(2025, 5, 26), 22, 2025) == "2025-W22"
    assert default_weekly_name(2025, 22) == "2025-W22"


def test_bracket_literal_is_kept_verbatim() -> None:
    assert format_file_name("[Week ]WW", date(2025, 1, 29), 5, 2025) == "Week 05"


def test_literal_w_is_not_treated_as_a_week_token() -> None:
    assert format_file_name("YYYY-[W]WW", date(2025, 6, 2), 23, 2025) == "2025-W23"


def test_longer_tokens_win() -> None:
    assert format_file_name("YYYY YY WW W", date(2025, 1, 29), 5, 2025) == "2025 25 05 5"
    assert format_file_name("gggg-W", date(2025, 6, 2), 23, 2025) == "gggg-23"


def test_literals_restored_in_order_with_no_leftovers() -> None:
    name = format_file_name("[YYYY]-YYYY-[WW]-WW-[x]", date(2025, 6, 2), 23, 2025)
    assert name == "YYYY-2025-WW-23-x"
    assert "[" not in name and "]" not in name


def test_iso_year_is_used_for_year_tokens() -> None:
    assert format_file_name("YYYY-[W]WW", date(2024, 12, 30), 1, 2025) == "2025-W01"


def test_render_template_leaves_unmatched_bracket_alone() -> None:
    assert render_template("A [B", {"A": "1"}) == "1 [B"
