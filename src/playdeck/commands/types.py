"""Shared command-domain types."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


def _no_action() -> bool:
    return True


class Result(BaseModel):
    """One displayable, selectable entry in a result list."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str
    subtitle: str = ""
    icon: str
    action: Callable[[], bool] = Field(default=_no_action, exclude=True, repr=False)

    def select(self) -> bool:
        """Run the selection callback.

        Returns:
            Whether the selection succeeded.
        """
        return self.action()


class CommandHandler(Protocol):
    """Protocol implemented by command handlers."""

    def handle(self, argument: str) -> list[Result]:
        """Produce results for the text following the command keyword.

        Args:
            argument: Remainder of the query after the command keyword.
        """


class HostContext(Protocol):
    """Facts the hosting launcher exposes to commands."""

    @property
    def plugin_directory(self) -> Path:
        """Directory holding plugin-local files."""

    @property
    def query_count(self) -> int:
        """Number of queries dispatched so far."""

    @property
    def average_query_time_ms(self) -> int:
        """Mean dispatch duration in milliseconds."""
