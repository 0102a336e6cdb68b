"""Hunk production from two texts, and parsing of unified diff text"""

import difflib
import re

from hunkfmt.core.models import Hunk


HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")


def _split(text: str, strip_trailing_cr: bool) -> list[str]:
    """Split on '\\n' only, so a kept '\\r' stays part of its line."""
    if strip_trailing_cr:
        text = text.replace("\r\n", "\n")
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def structured_patch(
    old: str,
    new: str,
    *,
    context: int = 3,
    ignore_whitespace: bool = True,
    strip_trailing_cr: bool = True,
    ) -> list[Hunk]:
    """Return hunks for old -> new. Empty list if the texts do not differ.

    With ignore_whitespace, lines are compared with leading/trailing whitespace
    stripped; context lines keep the old text.
    """
    old_lines = _split(old, strip_trailing_cr)
    new_lines = _split(new, strip_trailing_cr)
    if ignore_whitespace:
        old_keys = [line.strip() for line in old_lines]
        new_keys = [line.strip() for line in new_lines]
    else:
        old_keys, new_keys = old_lines, new_lines

    matcher = difflib.SequenceMatcher(None, old_keys, new_keys, autojunk=False)
    hunks: list[Hunk] = []

    for group in matcher.get_grouped_opcodes(context):
        lines: list[str] = []
        for tag, i1, i2, j1, j2 in group:
            if tag == "equal":
                lines.extend(" " + line for line in old_lines[i1:i2])
                continue
            if tag in ("replace", "delete"):
                lines.extend("-" + line for line in old_lines[i1:i2])
            if tag in ("replace", "insert"):
                lines.extend("+" + line for line in new_lines[j1:j2])

        # identical inputs still yield a single all-equal group
        if not any(line.startswith(("+", "-")) for line in lines):
            continue
        _, i1, _, j1, _ = group[0]
        hunks.append(Hunk(old_start=i1 + 1, new_start=j1 + 1, lines=tuple(lines)))

    return hunks


def parse_unified_diff(text: str) -> list[Hunk]:
    """Parse unified diff text (one or more files) into hunks.

    Hunk bodies are read using the line counts of their '@@' header, so file
    headers and other text between hunks are skipped. '\\ No newline at end of
    file' markers are ignored and a start of 0 (empty range) is clamped to 1.
    """
    hunks: list[Hunk] = []
    old_start = new_start = 0
    old_left = new_left = 0
    lines: list[str] = []
    raw_lines = text.split("\n")
    if raw_lines and raw_lines[-1] == "":
        raw_lines.pop()

    for n, raw in enumerate(raw_lines, start=1):
        line = raw.rstrip("\r")

        if old_left > 0 or new_left > 0:
            if line.startswith("\\"):
                continue
            marker = line[:1]
            if marker == "+":
                new_left -= 1
            elif marker == "-":
                old_left -= 1
            elif marker in (" ", ""):
                old_left -= 1
                new_left -= 1
            else:
                raise ValueError(f"Unexpected line {n} inside hunk: {line!r}")
            lines.append(line if marker else " ")
            if old_left <= 0 and new_left <= 0:
                hunks.append(Hunk(old_start=old_start, new_start=new_start, lines=tuple(lines)))
            continue

        if line.startswith("@@"):
            match = HUNK_HEADER_RE.match(line)
            if not match:
                raise ValueError(f"Malformed hunk header on line {n}: {line!r}")
            old_start = max(int(match.group(1)), 1)
            new_start = max(int(match.group(3)), 1)
            old_left = int(match.group(2)) if match.group(2) is not None else 1
            new_left = int(match.group(4)) if match.group(4) is not None else 1
            lines = []
            if old_left == 0 and new_left == 0:
                hunks.append(Hunk(old_start=old_start, new_start=new_start))
        elif line.startswith("\\"):
            continue

    if old_left > 0 or new_left > 0:
        raise ValueError(f"Diff ends inside a hunk starting at old line {old_start}")
    return hunks
