"""Unit tests for core/summary.py"""

import pytest

from hunkfmt.core.models import Hunk
from hunkfmt.core.summary import count_changes, summary_title


def _hunk(*lines: str) -> Hunk:
    return Hunk(old_start=1, new_start=1, lines=lines)


def test_count_changes_across_hunks():
    """count_changes sums +/- lines over every hunk."""
    hunks = [_hunk(" a", "-b", "+c", "+d"), _hunk("-e", " f")]
    assert count_changes(hunks) == (2, 2)


@pytest.mark.parametrize("hunks,expected", [
    ([_hunk("-a", "+b", "+c")],  "Updated src/app.py with 2 additions and 1 removal"),
    ([_hunk(" a", "+b")],        "Updated src/app.py with 1 addition"),
    ([_hunk("-a", "-b")],        "Updated src/app.py with 2 removals"),
    ([_hunk(" a")],              "Updated src/app.py"),
    ([],                         "Updated src/app.py"),
])
def test_summary_title(hunks, expected):
    """summary_title pluralizes counts and omits zero counts."""
    assert summary_title("src/app.py", hunks) == expected
