"""Command registry keyed by exact command keyword."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from playdeck.commands.handlers.devices import DeviceCommand
from playdeck.commands.handlers.diag import DiagCommand
from playdeck.commands.handlers.playback import (
    LastCommand,
    MuteCommand,
    NextCommand,
    PauseCommand,
    PlayCommand,
    ShuffleCommand,
)
from playdeck.commands.handlers.reconnect import ReconnectCommand
from playdeck.commands.handlers.search import SearchCommand
from playdeck.commands.handlers.volume import VolumeCommand
from playdeck.commands.results import ResultBuilder
from playdeck.commands.types import CommandHandler, HostContext
from playdeck.runtime.search import SearchAggregator, SearchKind
from playdeck.session.context import SessionContext

EXPENSIVE_COMMANDS: frozenset[str] = frozenset(
    {"artist", "album", "track", "playlist"}
)


class CommandRegistry:
    """Immutable command table built once at startup."""

    def __init__(
        self,
        *,
        session: SessionContext,
        builder: ResultBuilder,
        aggregator: SearchAggregator,
        host: HostContext,
        service_name: str = "Spotify",
    ) -> None:
        """Construct registry with the built-in handlers.

        Args:
            session: Shared playback session.
            builder: Result builder shared by handlers.
            aggregator: Search aggregator for catalog commands.
            host: Host context for diagnostics.
            service_name: Remote service name shown in messages.
        """
        volume = VolumeCommand(session, builder)
        table: dict[str, CommandHandler] = {
            "artist": SearchCommand(aggregator, SearchKind.ARTIST),
            "album": SearchCommand(aggregator, SearchKind.ALBUM),
            "playlist": SearchCommand(aggregator, SearchKind.PLAYLIST),
            "track": SearchCommand(aggregator, SearchKind.TRACK),
            "next": NextCommand(session, builder),
            "last": LastCommand(session, builder),
            "pause": PauseCommand(session, builder),
            "play": PlayCommand(session, builder),
            "mute": MuteCommand(session, builder),
            "vol": volume,
            "volume": volume,
            "device": DeviceCommand(session, builder, service_name=service_name),
            "shuffle": ShuffleCommand(session, builder),
            "diag": DiagCommand(host, builder),
            "reconnect": ReconnectCommand(builder),
        }
        self._handlers: Mapping[str, CommandHandler] = MappingProxyType(table)

    @property
    def commands(self) -> tuple[str, ...]:
        """Registered command keywords in registration order."""
        return tuple(self._handlers)

    def resolve(self, command: str) -> CommandHandler | None:
        """Return the handler registered for an exact keyword.

        Args:
            command: Case-normalized command keyword.

        Returns:
            Matching handler, or ``None``.
        """
        return self._handlers.get(command)

    @staticmethod
    def is_expensive(command: str) -> bool:
        """Return whether the command performs a remote catalog search."""
        return command in EXPENSIVE_COMMANDS
