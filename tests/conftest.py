"""Shared pytest fixtures for medialink tests."""

import sys
from pathlib import Path

import pytest

# Add the package to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a per-test temporary path."""
    config_path = tmp_path / "medialink" / "config.json"
    monkeypatch.setenv("MEDIALINK_CONFIG", str(config_path))
    return config_path
