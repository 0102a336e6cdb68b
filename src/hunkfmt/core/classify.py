"""Raw hunk line classification by leading marker"""

from typing import Iterable

from hunkfmt.core.models import ClassifiedLine, LineKind


MARKER_KINDS: dict[str, LineKind] = {
    '+': LineKind.added,
    '-': LineKind.removed,
}


def classify_line(raw: str) -> ClassifiedLine:
    """Classify one raw line. The +/- marker is replaced by a space to keep columns aligned."""
    kind = MARKER_KINDS.get(raw[:1])
    if kind is None:
        return ClassifiedLine(text=raw, kind=LineKind.context)
    return ClassifiedLine(text=" " + raw[1:], kind=kind)


def classify_lines(lines: Iterable[str]) -> list[ClassifiedLine]:
    return [classify_line(line) for line in lines]
