"""Root test configuration - isolate tests from the developer's config and env"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty directory with no DOCSTORE_* env vars set."""
    for name in list(os.environ):
        if name.startswith("DOCSTORE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
