"""Change counts and the one-line title shown above a formatted diff"""

from typing import Sequence

from hunkfmt.core.models import Hunk


def count_changes(hunks: Sequence[Hunk]) -> tuple[int, int]:
    """Return (additions, removals) across all hunks."""
    additions = sum(1 for h in hunks for line in h.lines if line.startswith("+"))
    removals = sum(1 for h in hunks for line in h.lines if line.startswith("-"))
    return additions, removals


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def summary_title(path: str, hunks: Sequence[Hunk]) -> str:
    """e.g. 'Updated src/app.py with 2 additions and 1 removal'."""
    additions, removals = count_changes(hunks)
    parts = []
    if additions:
        parts.append(_plural(additions, "addition"))
    if removals:
        parts.append(_plural(removals, "removal"))
    if not parts:
        return f"Updated {path}"
    return f"Updated {path} with " + " and ".join(parts)
