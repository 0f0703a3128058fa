"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def workspace_dir(tmp_path: Path) -> Path:
    """Temporary Playdeck workspace directory (config and catalog live here)."""
    workspace = tmp_path / ".playdeck"
    workspace.mkdir()
    return workspace
