"""Unit tests for Playdeck CLI command entrypoints."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from playdeck.cli.cli import app

_RUNNER = CliRunner()

_CATALOG = {
    "user_id": "me",
    "items": [
        {"kind": "track", "uri": "track:1", "name": "Hello", "artists": ["Adele"]},
        {"kind": "album", "uri": "album:1", "name": "Abbey Road", "artists": ["B"]},
    ],
    "devices": [{"id": "d1", "name": "Desk", "is_active": True}],
    "now_playing": "track:1",
    "is_playing": True,
    "volume": 20,
}


def _workspace(workspace: Path, *, catalog: dict[str, object] | None = None) -> Path:
    """Write fast debounce config and a catalog fixture into a workspace.

    Args:
        workspace: Workspace directory.
        catalog: Optional catalog payload override.

    Returns:
        Workspace directory path.
    """
    (workspace / "config.yaml").write_text(
        yaml.safe_dump({"debounce": {"enabled": False}}), encoding="utf-8"
    )
    (workspace / "catalog.yaml").write_text(
        yaml.safe_dump(catalog or _CATALOG), encoding="utf-8"
    )
    return workspace


@pytest.mark.unit
def test_init_creates_workspace_and_config(tmp_path: Path) -> None:
    """`playdeck init` writes a default config file."""
    workspace = tmp_path / "ws"

    result = _RUNNER.invoke(app, ["init", "--workspace-dir", str(workspace)])

    assert result.exit_code == 0
    payload = yaml.safe_load((workspace / "config.yaml").read_text(encoding="utf-8"))
    assert payload["debounce"]["quiet_interval_ms"] == 500
    assert "created" in result.stdout


@pytest.mark.unit
def test_query_renders_search_results(workspace_dir: Path) -> None:
    """`playdeck query` renders one row per result."""
    workspace = _workspace(workspace_dir)

    result = _RUNNER.invoke(
        app, ["query", "track hello", "--workspace-dir", str(workspace)]
    )

    assert result.exit_code == 0
    assert "Hello" in result.stdout
    assert "Artist: Adele" in result.stdout


@pytest.mark.unit
def test_query_without_text_renders_status_view(workspace_dir: Path) -> None:
    """Empty query renders the now-playing view."""
    workspace = _workspace(workspace_dir)

    result = _RUNNER.invoke(app, ["query", "--workspace-dir", str(workspace)])

    assert result.exit_code == 0
    assert "Now Playing" in result.stdout
    assert "Toggle Shuffle" in result.stdout


@pytest.mark.unit
def test_query_select_runs_action(workspace_dir: Path) -> None:
    """`--select` invokes the chosen result's action."""
    workspace = _workspace(workspace_dir)

    result = _RUNNER.invoke(
        app,
        ["query", "vol 40", "--select", "1", "--workspace-dir", str(workspace)],
    )

    assert result.exit_code == 0
    assert "Selected: Set Volume to 40" in result.stdout


@pytest.mark.unit
def test_query_select_failure_exits_nonzero(workspace_dir: Path) -> None:
    """A failing action is reported and exits with status 1."""
    catalog = dict(_CATALOG, devices=[])
    workspace = _workspace(workspace_dir, catalog=catalog)

    result = _RUNNER.invoke(
        app, ["query", "play", "--select", "1", "--workspace-dir", str(workspace)]
    )

    assert result.exit_code == 1
    assert "Selection failed: Play" in result.stdout


@pytest.mark.unit
def test_query_invalid_config_falls_back_to_defaults(workspace_dir: Path) -> None:
    """Invalid config is reported and defaults are used."""
    workspace = _workspace(workspace_dir)
    (workspace / "config.yaml").write_text("unknown: 1\n", encoding="utf-8")

    result = _RUNNER.invoke(app, ["query", "diag", "--workspace-dir", str(workspace)])

    assert result.exit_code == 0
    assert "Reason:" in result.stdout
    assert "Query Count: 0" in result.stdout


@pytest.mark.unit
def test_shell_dispatches_lines_and_selects(workspace_dir: Path) -> None:
    """The shell loop dispatches input lines and supports `!N`."""
    workspace = _workspace(workspace_dir)

    result = _RUNNER.invoke(
        app,
        ["shell", "--workspace-dir", str(workspace)],
        input="album abbey\n!1\ndiag\nexit\n",
    )

    assert result.exit_code == 0
    assert "Abbey Road" in result.stdout
    assert "Selected: Abbey Road" in result.stdout
    assert "Query Count: 1" in result.stdout
