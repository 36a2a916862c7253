"""Shared fixtures for fastql tests."""

import os

import pytest

from fastql.metadata import clear_descriptor_cache
from fastql.settings import main as settings_main


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch, tmp_path):
    """Run every test with default settings and an empty descriptor cache."""
    for key in list(os.environ):
        if key.upper().startswith("FASTQL_"):
            monkeypatch.delenv(key, raising=False)
    # Keep a developer's .env out of the settings under test
    monkeypatch.chdir(tmp_path)

    settings_main._settings = None
    clear_descriptor_cache()
    yield
    settings_main._settings = None
    clear_descriptor_cache()
