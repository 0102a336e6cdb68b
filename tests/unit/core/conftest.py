"""Shared fixtures for core unit tests"""

import pytest

from hunkfmt.core.models import Hunk, WordDiffPart


@pytest.fixture(name="replacement_hunk")
def replacement_hunk_fixture():
    """Single-line replacement starting at line 5."""
    return Hunk(old_start=5, new_start=5, lines=("-old line", "+new line"))


@pytest.fixture(name="run_hunk")
def run_hunk_fixture():
    """Context line, a run of two removed lines, then one added line."""
    return Hunk(old_start=1, new_start=1, lines=(" context", "-a", "-b", "+c"))


@pytest.fixture(name="recording_diff")
def recording_diff_fixture():
    """A word diff that records its (old, new) arguments and reports whole-text changes."""
    calls: list[tuple[str, str]] = []

    def _diff(old: str, new: str):
        calls.append((old, new))
        return [WordDiffPart(value=old, removed=True), WordDiffPart(value=new, added=True)]

    _diff.calls = calls
    return _diff
