from __future__ import annotations

import pytest

from weekly_summarizer.patterns import compile_pattern, matches, matches_any


@pytest.mark.parametrize(
    "pattern, path, expected",
    [
        ("**/*.tmp", "a/b/c.tmp", True),
        ("*.tmp", "a/b/c.tmp", False),
        ("*.tmp", "c.tmp", True),
        ("Archive/**", "Archive/2024/note.md", True),
        ("Archive/**", "Archives/2024/note.md", False),
        ("Archive/*", "Archive/2024/note.md", False),
        ("Templates/*.md", "Templates/daily.md", True),
        ("notes.md", "notes.md", True),
        ("notes.md", "my-notes.md", False),
        ("notes.md", "notes.md.bak", False),
        ("notes.md", "notesXmd", False),
    ],
)
def test_matches(pattern: str, path: str, expected: bool) -> None:
    assert matches(pattern, path) is expected


def test_regex_characters_in_pattern_are_literal() -> None:
    assert matches("Inbox (old)/*.md", "Inbox (old)/a.md")
    assert not matches("a+b.md", "aab.md")


def test_compiled_pattern_is_anchored() -> None:
    regex = compile_pattern("*.md")
    assert regex.pattern.startswith(r"\A")
    assert regex.pattern.endswith(r"\Z")


def test_matches_any_is_or_across_patterns() -> None:
    patterns = ["Archive/**", "**/*.tmp"]
    assert matches_any(patterns, "x/y.tmp")
    assert matches_any(patterns, "Archive/a.md")
    assert not matches_any(patterns, "Projects/a.md")
    assert not matches_any([], "Projects/a.md")


def test_matches_any_skips_blank_patterns() -> None:
    assert not matches_any(["", "   "], "a.md")
