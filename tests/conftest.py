"""Shared pytest fixtures."""

import pytest
from rich.console import Console

from keychoice.utils.config import reload_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from KEYCHOICE_* variables in the real environment."""
    import os

    for key in list(os.environ):
        if key.startswith("KEYCHOICE_"):
            monkeypatch.delenv(key)
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def debug_enabled(monkeypatch):
    """Turn on debug logging for one test."""
    monkeypatch.setenv("KEYCHOICE_DEBUG", "1")
    reload_settings()


@pytest.fixture
def record_console():
    """A non-terminal console that records what is printed."""
    return Console(record=True, force_terminal=False, color_system=None, width=80)
