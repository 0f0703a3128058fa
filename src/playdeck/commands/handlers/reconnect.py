"""Handler for `reconnect`."""

from __future__ import annotations

from playdeck.commands.results import ResultBuilder
from playdeck.commands.types import Result


class ReconnectCommand:
    """Offer a forced reconnection that discards the refresh token."""

    def __init__(self, builder: ResultBuilder) -> None:
        self._builder = builder

    def handle(self, argument: str) -> list[Result]:
        del argument
        return self._builder.single(
            "Reconnect",
            "Force a reconnection and remove the refresh token",
            self._builder.reconnect_action(keep_token=False),
        )
