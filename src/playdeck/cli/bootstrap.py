"""CLI bootstrap/runtime lifecycle helpers."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from rich.console import Console
from rich.logging import RichHandler

from playdeck.client import CatalogError, InMemoryPlaybackClient, load_catalog
from playdeck.config import ConfigError, PlaydeckConfig, load_config
from playdeck.runtime.dispatcher import QueryDispatcher
from playdeck.runtime.host import LocalHost

_LOGGING_CONFIGURED = False


def configure_logging(*, verbose: bool = False) -> None:
    """Configure Rich-backed logging once for CLI commands."""
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def default_workspace_dir() -> Path:
    """Return default workspace directory.

    Returns:
        Workspace path under the current directory.
    """
    return Path.cwd() / ".playdeck"


def default_config_file(workspace_dir: Path) -> Path:
    """Return default config path for a workspace.

    Args:
        workspace_dir: Workspace directory path.

    Returns:
        Existing YAML or JSON config, else the YAML location.
    """
    yaml_path = workspace_dir / "config.yaml"
    json_path = workspace_dir / "config.json"
    if yaml_path.exists():
        return yaml_path
    if json_path.exists():
        return json_path
    return yaml_path


def default_catalog_file(workspace_dir: Path) -> Path:
    """Return default offline catalog path for a workspace."""
    return workspace_dir / "catalog.yaml"


def bootstrap_workspace(
    *,
    workspace_dir: Path,
    config_file: Path | None = None,
    overwrite_config: bool = False,
) -> tuple[Path, tuple[tuple[str, str], ...]]:
    """Bootstrap local Playdeck workspace artifacts.

    Args:
        workspace_dir: Workspace directory path.
        config_file: Optional config path override.
        overwrite_config: Whether to overwrite existing config payload.

    Returns:
        Effective config path and action rows.
    """
    existed = workspace_dir.exists()
    workspace_dir.mkdir(parents=True, exist_ok=True)
    actions: list[tuple[str, str]] = [
        ("workspace_dir", "exists" if existed else "created")
    ]
    effective_config_file = config_file or default_config_file(workspace_dir)
    config_existed = effective_config_file.exists()
    if not config_existed or overwrite_config:
        effective_config_file.parent.mkdir(parents=True, exist_ok=True)
        payload = PlaydeckConfig().model_dump(mode="json")
        effective_config_file.write_text(
            yaml.safe_dump(payload, sort_keys=False),
            encoding="utf-8",
        )
        actions.append(
            (
                "config_file",
                "overwritten" if config_existed and overwrite_config else "created",
            )
        )
    else:
        actions.append(("config_file", "exists"))
    return effective_config_file, tuple(actions)


def load_config_or_default(config_file: Path, *, console: Console) -> PlaydeckConfig:
    """Load config, falling back to defaults with a visible warning.

    Args:
        config_file: Config file path.
        console: Rich console for config warnings.

    Returns:
        Effective config.
    """
    try:
        return load_config(config_file)
    except ConfigError as exc:
        console.print(
            f"[yellow]Config at {config_file} is invalid; "
            "falling back to defaults.[/yellow]"
        )
        console.print(f"[yellow]Reason: {exc}[/yellow]")
        return PlaydeckConfig()


def build_runtime(
    *,
    workspace_dir: Path,
    config_file: Path | None,
    catalog_file: Path | None,
    console: Console,
) -> tuple[QueryDispatcher, LocalHost]:
    """Build dispatcher and host over the offline catalog client.

    Args:
        workspace_dir: Workspace directory path.
        config_file: Optional config path override.
        catalog_file: Optional catalog path override.
        console: Rich console for warnings.

    Returns:
        Wired dispatcher and its host context.
    """
    config = load_config_or_default(
        config_file or default_config_file(workspace_dir), console=console
    )
    effective_catalog = catalog_file or default_catalog_file(workspace_dir)
    try:
        fixture = load_catalog(effective_catalog)
    except CatalogError as exc:
        console.print(
            f"[yellow]Catalog at {effective_catalog} is invalid; "
            "starting with an empty catalog.[/yellow]"
        )
        console.print(f"[yellow]Reason: {exc}[/yellow]")
        fixture = None
    client = InMemoryPlaybackClient(fixture, default_icon=config.icon_path)
    host = LocalHost(workspace_dir)
    dispatcher = QueryDispatcher.build(client, host=host, config=config)
    return dispatcher, host
