"""Pytest configuration and shared fixtures."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from project_hub.config import Config, ConfigModel  # noqa: E402


@pytest.fixture
def now():
    """A fixed Monday morning: 2026-10-19 10:30 local time."""
    return datetime(2026, 10, 19, 10, 30)


@pytest.fixture
def config(tmp_path):
    """Configuration pointing at a temporary data directory."""
    return ConfigModel(data_dir=str(tmp_path))


@pytest.fixture
def hub_home(tmp_path, monkeypatch):
    """Run CLI commands against a throwaway data directory."""
    monkeypatch.setenv("PROJECT_HUB_HOME", str(tmp_path))
    Config.reset()
    yield tmp_path
    Config.reset()
