"""Now-playing status view shown for an empty query."""

from __future__ import annotations

from playdeck.commands.handlers.playback import MuteCommand, ShuffleCommand
from playdeck.commands.handlers.volume import VolumeCommand
from playdeck.commands.results import ResultBuilder
from playdeck.commands.types import Result
from playdeck.session.context import SessionContext


class StatusCommand:
    """Compose the current track with the common playback controls."""

    def __init__(
        self,
        session: SessionContext,
        builder: ResultBuilder,
        *,
        action_keyword: str = "sp",
    ) -> None:
        """Store dependencies and the sibling control handlers.

        Args:
            session: Active playback session.
            builder: Result builder.
            action_keyword: Launcher keyword shown in the device hint.
        """
        self._session = session
        self._builder = builder
        self._action_keyword = action_keyword
        self._mute = MuteCommand(session, builder)
        self._shuffle = ShuffleCommand(session, builder)
        self._volume = VolumeCommand(session, builder)

    def handle(self, argument: str) -> list[Result]:
        """Build the status view.

        Args:
            argument: Ignored.

        Returns:
            A single explanatory result when there is no active device or no
            loaded item, otherwise the seven-entry status view.
        """
        del argument
        client = self._session.client
        playback = client.current_playback()
        device = playback.active_device_name if playback is not None else None
        if device is None:
            return self._builder.single(
                "No active device",
                f"Select device with `{self._action_keyword} device`",
            )
        item = playback.item
        if item is None:
            return self._builder.single("No track playing", f"Active Device: {device}")

        status = "Now Playing" if playback.is_playing else "Paused"
        toggle = "Pause" if playback.is_playing else "Resume"
        artists = ", ".join(item.artists)
        return [
            self._builder.result(
                item.name,
                f"{status} | by {artists}",
                icon=client.resolve_artwork(item),
            ),
            self._builder.result(
                "Pause / Resume", f"{toggle}: {item.name}", self._toggle_playback
            ),
            self._builder.result("Next", f"Skip: {item.name}", client.skip_next),
            self._builder.result("Last", "Skip backwards", client.skip_previous),
            self._mute.handle("")[0],
            self._shuffle.handle("")[0],
            self._volume.handle("")[0],
        ]

    def _toggle_playback(self) -> None:
        client = self._session.client
        playback = client.current_playback()
        if playback is not None and playback.is_playing:
            client.pause()
        else:
            client.play()
