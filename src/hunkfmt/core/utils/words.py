"""Word-level diff between two lines, keeping whitespace runs as tokens"""

import difflib
import re
from typing import Callable, Sequence

from hunkfmt.core.models import WordDiffPart


# Whitespace runs, single brackets/quotes, word runs, other punctuation runs
TOKEN_RE = re.compile(r"""\s+|[()\[\]{}'"]|\w+|[^\w\s()\[\]{}'"]+""")

WordDiff = Callable[[str, str], Sequence[WordDiffPart]]


def tokenize(text: str) -> list[str]:
    """Split text into tokens that concatenate back to text."""
    return TOKEN_RE.findall(text)


def _merge(parts: list[WordDiffPart]) -> list[WordDiffPart]:
    """Join neighbouring parts with the same flags."""
    merged: list[WordDiffPart] = []
    for part in parts:
        if not part.value:
            continue
        prev = merged[-1] if merged else None
        if prev and prev.added == part.added and prev.removed == part.removed:
            merged[-1] = WordDiffPart(value=prev.value + part.value, added=part.added, removed=part.removed)
        else:
            merged.append(part)
    return merged


def word_diff(old: str, new: str) -> list[WordDiffPart]:
    """Return ordered word diff parts for old -> new.

    Parts not marked added concatenate to old; parts not marked removed
    concatenate to new. In a replacement the removed part precedes the
    added one.
    """
    if not old and not new:
        return []
    if not old:
        return [WordDiffPart(value=new, added=True)]
    if not new:
        return [WordDiffPart(value=old, removed=True)]

    old_tokens, new_tokens = tokenize(old), tokenize(new)
    # autojunk=False: popular tokens such as single spaces must still match
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)
    parts: list[WordDiffPart] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            parts.append(WordDiffPart(value="".join(old_tokens[i1:i2])))
        elif tag == "replace":
            parts.append(WordDiffPart(value="".join(old_tokens[i1:i2]), removed=True))
            parts.append(WordDiffPart(value="".join(new_tokens[j1:j2]), added=True))
        elif tag == "delete":
            parts.append(WordDiffPart(value="".join(old_tokens[i1:i2]), removed=True))
        elif tag == "insert":
            parts.append(WordDiffPart(value="".join(new_tokens[j1:j2]), added=True))

    return _merge(parts)


def old_text(parts: Sequence[WordDiffPart]) -> str:
    return "".join(p.value for p in parts if not p.added)


def new_text(parts: Sequence[WordDiffPart]) -> str:
    return "".join(p.value for p in parts if not p.removed)
