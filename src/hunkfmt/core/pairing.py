"""Heuristic pairing of removed lines with the added line that replaces them

Every removed line of a contiguous run is paired with the first added line
after the run. Block replacements (N removed lines followed by M added lines)
therefore word-diff each removed line against that single added line, and
only the first removed line of the run feeds the added row's word diff. This
is a known limitation for multi-line replacements.
"""

from typing import Optional, Sequence

from hunkfmt.core.models import ClassifiedLine, LineKind, PairingRelation


def pair_lines(lines: Sequence[ClassifiedLine]) -> list[PairingRelation]:
    """Return pairing relations for one hunk, ordered by removed_index."""
    pairs: list[PairingRelation] = []
    for i, line in enumerate(lines):
        if line.kind != LineKind.removed:
            continue
        j = i + 1
        while j < len(lines) and lines[j].kind == LineKind.removed:
            j += 1
        if j < len(lines) and lines[j].kind == LineKind.added:
            pairs.append(PairingRelation(removed_index=i, added_index=j))
    return pairs


def find_pair(index: int, pairs: Sequence[PairingRelation]) -> Optional[PairingRelation]:
    """Return the first relation that references index on either side, else None."""
    for pair in pairs:
        if pair.removed_index == index or pair.added_index == index:
            return pair
    return None
