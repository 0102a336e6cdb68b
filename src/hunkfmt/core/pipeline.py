"""Pipeline step functions: produce or parse hunks, then format them"""

from hunkfmt.config import Settings
from hunkfmt.core.format import format_hunks
from hunkfmt.core.models import DisplayRow, Hunk
from hunkfmt.core.utils.hunks import parse_unified_diff, structured_patch


def _format(hunks: list[Hunk], settings: Settings) -> list[DisplayRow]:
    return format_hunks(hunks, origin=settings.line_number_origin, separator=settings.separator)


def run_preview(old: str, new: str, settings: Settings) -> tuple[list[Hunk], list[DisplayRow]]:
    """Diff two texts and format the resulting hunks. Returns (hunks, rows)."""
    hunks = structured_patch(
        old, new,
        context=settings.context_lines,
        ignore_whitespace=settings.ignore_whitespace,
        strip_trailing_cr=settings.strip_trailing_cr,
    )
    return hunks, _format(hunks, settings)


def run_patch(diff_text: str, settings: Settings) -> tuple[list[Hunk], list[DisplayRow]]:
    """Parse unified diff text and format its hunks. Returns (hunks, rows).

    Raises ValueError when the diff text is malformed.
    """
    hunks = parse_unified_diff(diff_text)
    return hunks, _format(hunks, settings)
