"""Handlers for direct playback controls."""

from __future__ import annotations

from playdeck.commands.results import ResultBuilder
from playdeck.commands.types import Result
from playdeck.session.context import SessionContext


def current_item_name(session: SessionContext) -> str:
    """Return the name of the loaded item, or ``nothing`` when idle.

    Args:
        session: Active playback session.

    Returns:
        Display name for subtitles.
    """
    playback = session.client.current_playback()
    if playback is None or playback.item is None:
        return "nothing"
    return playback.item.name


class _PlaybackCommand:
    """Base for handlers that only need the session and result builder."""

    def __init__(self, session: SessionContext, builder: ResultBuilder) -> None:
        self._session = session
        self._builder = builder


class PlayCommand(_PlaybackCommand):
    """`play` handler."""

    def handle(self, argument: str) -> list[Result]:
        del argument
        name = current_item_name(self._session)
        return self._builder.single(
            "Play", f"Resume: {name}", self._session.client.play
        )


class PauseCommand(_PlaybackCommand):
    """`pause` handler."""

    def handle(self, argument: str) -> list[Result]:
        del argument
        name = current_item_name(self._session)
        return self._builder.single(
            "Pause", f"Pause: {name}", self._session.client.pause
        )


class NextCommand(_PlaybackCommand):
    """`next` handler."""

    def handle(self, argument: str) -> list[Result]:
        del argument
        name = current_item_name(self._session)
        return self._builder.single(
            "Next", f"Skip: {name}", self._session.client.skip_next
        )


class LastCommand(_PlaybackCommand):
    """`last` handler."""

    def handle(self, argument: str) -> list[Result]:
        del argument
        return self._builder.single(
            "Last", "Skip Backwards", self._session.client.skip_previous
        )


class MuteCommand(_PlaybackCommand):
    """`mute` handler toggling output mute."""

    def handle(self, argument: str) -> list[Result]:
        del argument
        client = self._session.client
        verb = "Unmute" if client.is_muted() else "Mute"
        name = current_item_name(self._session)
        return self._builder.single(
            "Toggle Mute", f"{verb}: {name}", client.toggle_mute
        )


class ShuffleCommand(_PlaybackCommand):
    """`shuffle` handler toggling shuffle mode."""

    def handle(self, argument: str) -> list[Result]:
        del argument
        client = self._session.client
        target = "Off" if client.is_shuffled() else "On"
        return self._builder.single(
            "Toggle Shuffle", f"Turn Shuffle {target}", client.toggle_shuffle
        )
