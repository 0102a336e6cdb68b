"""Terminal rendering of display rows with rich"""

from typing import Sequence

from rich.style import Style
from rich.text import Text

from hunkfmt.core.models import DisplayRow, RowKind, StyleTag


STYLE_MAP: dict[StyleTag, Style] = {
    StyleTag.plain:            Style(),
    StyleTag.context:          Style(),
    StyleTag.added_line:       Style(bgcolor="#1e3a1e"),
    StyleTag.removed_line:     Style(bgcolor="#3a1e1e"),
    StyleTag.added_emphasis:   Style(bgcolor="#2d5a2d", color="#98c379"),
    StyleTag.removed_emphasis: Style(bgcolor="#5a2d2d", color="#e06c75"),
    StyleTag.separator:        Style(dim=True),
}
LINE_NUMBER_STYLE = Style(dim=True)


def _gutter(row: DisplayRow) -> str:
    """Line number column; context rows get a blank marker column."""
    if row.kind == RowKind.separator:
        return ""
    marker = " " if row.kind == RowKind.context else ""
    return f"{row.line_number} {marker}"


def render_row(row: DisplayRow, padding_left: int = 0, color: bool = True) -> Text:
    text = Text(" " * padding_left)
    text.append(_gutter(row), style=LINE_NUMBER_STYLE if color else None)
    for segment in row.segments:
        text.append(segment.text, style=STYLE_MAP[segment.style] if color else None)
    return text


def render_rows(rows: Sequence[DisplayRow], padding_left: int = 0, color: bool = True) -> list[Text]:
    return [render_row(row, padding_left, color) for row in rows]


def render_plain(rows: Sequence[DisplayRow], padding_left: int = 0) -> str:
    """Render rows as unstyled text, one line per row."""
    return "\n".join(render_row(row, padding_left, color=False).plain for row in rows)
