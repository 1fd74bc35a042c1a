"""
Glob-lite ignore patterns for the "updated files" list.

Only two wildcards exist:
    *   any run of characters except "/"
    **  any run of characters, "/" included

Patterns always match the whole vault-relative path, never a prefix:
    "**/*.tmp"   matches "a/b/c.tmp"
    "*.tmp"      does NOT match "a/b/c.tmp"
    "Archive/**" matches "Archive/2024/note.md"
"""

import re
from functools import lru_cache
from typing import Iterable

# "**" comes first so the single-star branch can't split a double star
_WILDCARD_RE = re.compile(r"(\*\*|\*)")


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile a glob-lite pattern to an anchored regex.

    Syntax notes:
    - re.split() with a capture group keeps the separators in the result,
      so "a/**/b*" becomes ["a/", "**", "/b", "*", ""]
    - re.escape() turns "." into "\\." and so on for literal parts
    - \\A and \\Z anchor the start and the very end of the string
    - @lru_cache means each distinct pattern is compiled only once
    """
    parts = []
    for piece in _WILDCARD_RE.split(pattern):
        if piece == "**":
            parts.append(".*")
        elif piece == "*":
            parts.append("[^/]*")
        else:
            parts.append(re.escape(piece))
    return re.compile(r"\A" + "".join(parts) + r"\Z")


def matches(pattern: str, path: str) -> bool:
    """True if `path` matches `pattern` in full."""
    return compile_pattern(pattern).match(path) is not None


def matches_any(patterns: Iterable[str], path: str) -> bool:
    """
    True if any pattern matches. Stops at the first hit.

    Blank entries (easy to leave behind in a YAML list) are ignored.
    """
    return any(matches(p.strip(), path) for p in patterns if p and p.strip())
