"""Row formatting: hunk lines to numbered, style-tagged display rows"""

import logging
from typing import Literal, Optional, Sequence

from hunkfmt.core.classify import classify_lines
from hunkfmt.core.models import (
    ClassifiedLine,
    DisplayRow,
    Hunk,
    LineKind,
    PairingRelation,
    RowKind,
    Segment,
    StyleTag,
)
from hunkfmt.core.pairing import find_pair, pair_lines
from hunkfmt.core.utils.words import WordDiff, word_diff


logger = logging.getLogger(__name__)

LineOrigin = Literal["old", "new"]

ROW_KINDS: dict[LineKind, RowKind] = {
    LineKind.context: RowKind.context,
    LineKind.added:   RowKind.added,
    LineKind.removed: RowKind.removed,
}


def _resolves(pair: PairingRelation, lines: Sequence[ClassifiedLine]) -> bool:
    """True when pair points at a removed line and a later added line of this hunk."""
    i, j = pair.removed_index, pair.added_index
    return (
        0 <= i < j < len(lines)
        and lines[i].kind == LineKind.removed
        and lines[j].kind == LineKind.added
    )


def _whole_line(line: ClassifiedLine) -> tuple[Segment, ...]:
    if line.kind == LineKind.added:
        return (Segment(text="+" + line.text, style=StyleTag.added_line),)
    if line.kind == LineKind.removed:
        return (Segment(text="-" + line.text, style=StyleTag.removed_line),)
    return (Segment(text=line.text, style=StyleTag.context),)


def _removed_segments(old: str, new: str, diff: WordDiff) -> tuple[Segment, ...]:
    """Marker plus every non-added part; removed parts are emphasized."""
    segments = [Segment(text="-", style=StyleTag.removed_line)]
    for part in diff(old, new):
        if part.added:
            continue
        style = StyleTag.removed_emphasis if part.removed else StyleTag.removed_line
        segments.append(Segment(text=part.value, style=style))
    return tuple(segments)


def _added_segments(old: str, new: str, diff: WordDiff) -> tuple[Segment, ...]:
    """Marker plus every non-removed part; added parts are emphasized."""
    segments = [Segment(text="+", style=StyleTag.added_line)]
    for part in diff(old, new):
        if part.removed:
            continue
        style = StyleTag.added_emphasis if part.added else StyleTag.added_line
        segments.append(Segment(text=part.value, style=style))
    return tuple(segments)


def _segments_for(
    index: int,
    lines: Sequence[ClassifiedLine],
    pairs: Sequence[PairingRelation],
    diff: WordDiff,
    ) -> tuple[Segment, ...]:
    """Pick word-level or whole-line segments for the line at index."""
    line = lines[index]
    if line.kind == LineKind.context:
        return _whole_line(line)

    pair = find_pair(index, pairs)
    if pair is None:
        return _whole_line(line)
    if not _resolves(pair, lines):
        logger.warning(
            "Pairing (%d, %d) does not resolve to a removed/added line; rendering line %d whole",
            pair.removed_index, pair.added_index, index,
        )
        return _whole_line(line)

    removed, added = lines[pair.removed_index], lines[pair.added_index]
    if line.kind == LineKind.removed and pair.removed_index == index:
        return _removed_segments(removed.text, added.text, diff)
    if line.kind == LineKind.added and pair.added_index == index:
        return _added_segments(removed.text, added.text, diff)
    return _whole_line(line)


def pad_line_numbers(numbers: Sequence[int]) -> list[str]:
    """Right-align numbers to the width of the largest one."""
    if not numbers:
        return []
    width = len(str(max(numbers)))
    return [str(n).rjust(width) for n in numbers]


def format_hunk(
    hunk: Hunk,
    *,
    diff: WordDiff = word_diff,
    origin: LineOrigin = "old",
    pairs: Optional[Sequence[PairingRelation]] = None,
    ) -> list[DisplayRow]:
    """Format one hunk into display rows, one row per line.

    The line counter starts at hunk.old_start (or hunk.new_start when origin
    is "new") and advances after context and added lines only, so a removed
    row shows the number of the row that follows it.
    pairs overrides the computed pairing relations; relations that do not
    resolve degrade to whole-line rows.
    """
    lines = classify_lines(hunk.lines)
    if pairs is None:
        pairs = pair_lines(lines)

    counter = first = hunk.old_start if origin == "old" else hunk.new_start
    numbers: list[int] = []
    bodies: list[tuple[tuple[Segment, ...], RowKind]] = []

    for i, line in enumerate(lines):
        bodies.append((_segments_for(i, lines, pairs, diff), ROW_KINDS[line.kind]))
        numbers.append(counter)
        if line.kind != LineKind.removed:
            counter += 1

    logger.debug(
        "Formatted hunk -%d,%d +%d,%d from line %d: %d rows, %d pairs",
        hunk.old_start, hunk.old_lines, hunk.new_start, hunk.new_lines, first, len(bodies), len(pairs),
    )
    return [
        DisplayRow(line_number=number, segments=segments, kind=kind)
        for number, (segments, kind) in zip(pad_line_numbers(numbers), bodies)
    ]


def separator_row(text: str = "...") -> DisplayRow:
    """Synthetic row marking skipped content between two hunks."""
    return DisplayRow(
        line_number="",
        segments=(Segment(text=text, style=StyleTag.separator),),
        kind=RowKind.separator,
    )


def format_hunks(
    hunks: Sequence[Hunk],
    *,
    diff: WordDiff = word_diff,
    origin: LineOrigin = "old",
    separator: str = "...",
    ) -> list[DisplayRow]:
    """Format all hunks, with exactly one separator row between consecutive hunks."""
    rows: list[DisplayRow] = []
    for i, hunk in enumerate(hunks):
        if i > 0:
            rows.append(separator_row(separator))
        rows.extend(format_hunk(hunk, diff=diff, origin=origin))
    return rows
