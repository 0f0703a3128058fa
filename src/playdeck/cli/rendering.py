"""CLI result rendering with Rich views."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from playdeck.commands.types import Result


class ResultRenderer:
    """Render result lists as numbered Rich tables."""

    def __init__(self, *, console: Console) -> None:
        """Store console used for rendering.

        Args:
            console: Rich console used for output rendering.
        """
        self._console = console

    def render(self, results: list[Result] | None) -> None:
        """Render one dispatch outcome.

        Args:
            results: Result list, or ``None`` for a superseded query.
        """
        if results is None:
            self._console.print("[dim]Query superseded; waiting for input.[/dim]")
            return
        if not results:
            self._console.print("[dim]No suggestions yet.[/dim]")
            return
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("#", justify="right", style="bold")
        table.add_column("Title", style="green")
        table.add_column("Subtitle")
        table.add_column("Icon", style="dim")
        for index, result in enumerate(results, start=1):
            table.add_row(str(index), result.title, result.subtitle, result.icon)
        self._console.print(table)

    def render_selection(self, result: Result, *, ok: bool) -> None:
        """Render outcome of selecting one result.

        Args:
            result: Selected result.
            ok: Whether the selection callback succeeded.
        """
        if ok:
            self._console.print(f"[green]Selected:[/green] {result.title}")
        else:
            self._console.print(
                f"[bold red]Selection failed:[/bold red] {result.title}"
            )
