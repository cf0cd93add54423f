"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from todo_txt.config import Config  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config lookups at a temporary directory and reset the cached config."""
    monkeypatch.setenv("TODO_TXT_CONFIG", str(tmp_path / "config" / "config.yaml"))
    monkeypatch.delenv("TODO_FILE", raising=False)
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def todo_path(tmp_path):
    """Path to a todo.txt file inside the test's temporary directory."""
    return tmp_path / "todo.txt"
