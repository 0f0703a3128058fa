"""Typer CLI entrypoint for Playdeck."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from playdeck.cli.bootstrap import (
    bootstrap_workspace,
    build_runtime,
    configure_logging,
    default_workspace_dir,
)
from playdeck.cli.rendering import ResultRenderer
from playdeck.commands.types import Result

app = typer.Typer(help="Playdeck CLI")
_CONSOLE = Console()

_WorkspaceOption = Annotated[
    Path | None,
    typer.Option("--workspace-dir", help="Workspace directory (default ./.playdeck)."),
]
_ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Config file (YAML or JSON)."),
]
_CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", help="Offline catalog file (YAML or JSON)."),
]
_VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
]


def _select(results: list[Result] | None, index: int, renderer: ResultRenderer) -> bool:
    """Select one 1-based result and render the outcome.

    Args:
        results: Last rendered results.
        index: 1-based result index.
        renderer: Renderer for the outcome.

    Returns:
        Whether the selection succeeded.
    """
    if not results or not 1 <= index <= len(results):
        _CONSOLE.print(f"[bold red]No result #{index} to select.[/bold red]")
        return False
    result = results[index - 1]
    ok = result.select()
    renderer.render_selection(result, ok=ok)
    return ok


@app.command("init")
def init_command(
    workspace_dir: _WorkspaceOption = None,
    config: _ConfigOption = None,
    overwrite_config: Annotated[
        bool, typer.Option("--overwrite-config", help="Rewrite default config.")
    ] = False,
) -> None:
    """Create the workspace directory and a default config file."""
    effective_workspace = workspace_dir or default_workspace_dir()
    config_file, actions = bootstrap_workspace(
        workspace_dir=effective_workspace,
        config_file=config,
        overwrite_config=overwrite_config,
    )
    table = Table(title="Playdeck Init", show_header=True, header_style="bold cyan")
    table.add_column("Artifact", style="bold")
    table.add_column("Action")
    for name, action in actions:
        table.add_row(name, action)
    _CONSOLE.print(table)
    _CONSOLE.print(f"Config: {config_file}")


@app.command("query")
def query_command(  # noqa: PLR0913
    text: Annotated[str, typer.Argument(help="Query text, e.g. 'track hello'.")] = "",
    select: Annotated[
        int | None, typer.Option("--select", "-s", help="Select result N (1-based).")
    ] = None,
    workspace_dir: _WorkspaceOption = None,
    config: _ConfigOption = None,
    catalog: _CatalogOption = None,
    verbose: _VerboseOption = False,
) -> None:
    """Dispatch one query and render its results."""
    configure_logging(verbose=verbose)
    dispatcher, host = build_runtime(
        workspace_dir=workspace_dir or default_workspace_dir(),
        config_file=config,
        catalog_file=catalog,
        console=_CONSOLE,
    )
    renderer = ResultRenderer(console=_CONSOLE)
    try:
        results = host.run_query(dispatcher, text)
        renderer.render(results)
        if select is not None and not _select(results, select, renderer):
            raise typer.Exit(code=1)
    finally:
        dispatcher.close()


@app.command("shell")
def shell_command(
    workspace_dir: _WorkspaceOption = None,
    config: _ConfigOption = None,
    catalog: _CatalogOption = None,
    verbose: _VerboseOption = False,
) -> None:
    """Run an interactive prompt; `!N` selects result N, `exit` quits."""
    configure_logging(verbose=verbose)
    dispatcher, host = build_runtime(
        workspace_dir=workspace_dir or default_workspace_dir(),
        config_file=config,
        catalog_file=catalog,
        console=_CONSOLE,
    )
    renderer = ResultRenderer(console=_CONSOLE)
    results: list[Result] | None = None
    try:
        while True:
            try:
                line = typer.prompt("playdeck", default="", show_default=False)
            except (EOFError, typer.Abort):
                break
            stripped = line.strip()
            if stripped in {"exit", "quit"}:
                break
            if stripped.startswith("!") and stripped[1:].isdigit():
                _select(results, int(stripped[1:]), renderer)
                continue
            results = host.run_query(dispatcher, line)
            renderer.render(results)
    finally:
        dispatcher.close()


def main() -> None:
    """Run Playdeck CLI."""
    app()
