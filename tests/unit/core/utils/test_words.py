"""Unit tests for core/utils/words.py"""

import pytest
from pydantic import ValidationError

from hunkfmt.core.models import WordDiffPart
from hunkfmt.core.utils.words import new_text, old_text, tokenize, word_diff


@pytest.mark.parametrize("text,expected", [
    ("old line",       ["old", " ", "line"]),
    ("  two  spaces",  ["  ", "two", "  ", "spaces"]),
    ("a => b",         ["a", " ", "=>", " ", "b"]),
    ("foo(bar, 'x')",  ["foo", "(", "bar", ",", " ", "'", "x", "'", ")"]),
    ("",               []),
])
def test_tokenize(text, expected):
    """Words, whitespace runs, brackets/quotes and punctuation runs are separate tokens."""
    assert tokenize(text) == expected
    assert "".join(tokenize(text)) == text


def test_word_diff_single_word_change():
    """A changed word shows as removed then added between unchanged parts."""
    assert word_diff(" old line", " new line") == [
        WordDiffPart(value=" "),
        WordDiffPart(value="old", removed=True),
        WordDiffPart(value="new", added=True),
        WordDiffPart(value=" line"),
    ]


def test_word_diff_appended_words():
    """Words appended at the end form a single added part."""
    parts = word_diff('"bg-blue-500 text-white"', '"bg-blue-500 text-white hover:bg-blue-600"')
    assert parts == [
        WordDiffPart(value='"bg-blue-500 text-white'),
        WordDiffPart(value=" hover:bg-blue-600", added=True),
        WordDiffPart(value='"'),
    ]


def test_word_diff_identical():
    """Identical texts produce one unchanged part."""
    assert word_diff("same text", "same text") == [WordDiffPart(value="same text")]


@pytest.mark.parametrize("old,new,expected", [
    ("",    "",    []),
    ("",    "abc", [WordDiffPart(value="abc", added=True)]),
    ("abc", "",    [WordDiffPart(value="abc", removed=True)]),
    ("x",   "y",   [WordDiffPart(value="x", removed=True), WordDiffPart(value="y", added=True)]),
])
def test_word_diff_edge_cases(old, new, expected):
    """Empty sides and full replacements."""
    assert word_diff(old, new) == expected


@pytest.mark.parametrize("old,new", [
    ('        "px-4 py-2 rounded",', '        "px-4 py-2 rounded-lg transition-colors",'),
    ('  variant: PropTypes.oneOf(["primary"]),', '  variant: PropTypes.oneOf(["primary", "secondary"]),'),
    ("return a + b", "return  a - c"),
])
def test_word_diff_reconstructs_both_sides(old, new):
    """Non-added parts rebuild old; non-removed parts rebuild new."""
    parts = word_diff(old, new)
    assert old_text(parts) == old
    assert new_text(parts) == new


def test_word_diff_part_rejects_both_flags():
    """A part cannot be marked both added and removed."""
    with pytest.raises(ValidationError):
        WordDiffPart(value="x", added=True, removed=True)
