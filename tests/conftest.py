"""Root test configuration: isolate each test from local config and env"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no HUNKFMT_* env vars set."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("HUNKFMT_"):
            monkeypatch.delenv(name)
