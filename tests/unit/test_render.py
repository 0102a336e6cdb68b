"""Unit tests for render.py"""

from hunkfmt.core.format import format_hunk, format_hunks
from hunkfmt.core.models import Hunk, StyleTag
from hunkfmt.render import STYLE_MAP, render_plain, render_row, render_rows


RUN_HUNK = Hunk(old_start=1, new_start=1, lines=(" context", "-a", "-b", "+c"))


def test_render_plain_aligns_content():
    """Context text lines up with the text after the +/- marker."""
    lines = render_plain(format_hunk(RUN_HUNK)).splitlines()
    assert lines == ["1   context", "2 - a", "2 - b", "2 + c"]


def test_render_plain_separator():
    """Separator rows render as the separator text alone."""
    hunks = [Hunk(old_start=1, new_start=1, lines=(" a",)), Hunk(old_start=9, new_start=9, lines=(" b",))]
    assert render_plain(format_hunks(hunks)).splitlines() == ["1   a", "...", "9   b"]


def test_render_plain_padding_left():
    """padding_left indents every row."""
    lines = render_plain(format_hunk(RUN_HUNK), padding_left=2).splitlines()
    assert all(line.startswith("  ") for line in lines)
    assert lines[1] == "  2 - a"


def test_render_row_emphasis_style():
    """Emphasized parts carry the mapped emphasis style."""
    row = format_hunk(Hunk(old_start=1, new_start=1, lines=("-old line", "+new line")))[0]
    text = render_row(row)
    styled = {text.plain[s.start:s.end] for s in text.spans if s.style == STYLE_MAP[StyleTag.removed_emphasis]}
    assert styled == {"old"}


def test_render_rows_without_color():
    """color=False produces unstyled text."""
    texts = render_rows(format_hunk(RUN_HUNK), color=False)
    assert len(texts) == 4
    assert all(not t.spans for t in texts)


def test_style_map_covers_all_tags():
    """Every style tag has a rich style."""
    assert set(STYLE_MAP) == set(StyleTag)
