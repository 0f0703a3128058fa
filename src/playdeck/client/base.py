"""Remote playback client protocol consumed by the command router."""

from __future__ import annotations

from typing import Protocol

from playdeck.client.models import CatalogItem, Device, PlaybackState


class PlaybackClient(Protocol):
    """Narrow surface of the remote music service used by command handlers.

    Authentication, token refresh and the wire protocol live behind this
    interface. Every method may block on network I/O.
    """

    def is_connected(self) -> bool:
        """Return whether an authorized API connection exists."""

    def is_token_valid(self) -> bool:
        """Return whether the access token is still usable."""

    def reconnect(self, *, keep_token: bool) -> None:
        """Re-establish the API connection.

        Args:
            keep_token: Whether the stored refresh token may be reused.
        """

    def current_user_id(self) -> str:
        """Return the authorized account identifier."""

    def current_playback(self) -> PlaybackState | None:
        """Return current playback snapshot, or ``None`` when idle."""

    def play(self) -> None:
        """Resume playback on the active device."""

    def pause(self) -> None:
        """Pause playback on the active device."""

    def skip_next(self) -> None:
        """Skip to the next item in the queue."""

    def skip_previous(self) -> None:
        """Skip back to the previous item."""

    def is_muted(self) -> bool:
        """Return whether output is muted."""

    def toggle_mute(self) -> None:
        """Toggle mute on the active device."""

    def is_shuffled(self) -> bool:
        """Return whether shuffle is enabled."""

    def toggle_shuffle(self) -> None:
        """Toggle shuffle on the active device."""

    def get_volume(self) -> int:
        """Return current volume percentage."""

    def set_volume(self, percent: int) -> None:
        """Set volume percentage in range 0..100."""

    def list_devices(self) -> list[Device]:
        """Return available playback devices in provider order."""

    def select_device(self, device_id: str) -> None:
        """Transfer playback to one device."""

    def search_artists(self, query: str, *, limit: int) -> list[CatalogItem]:
        """Search artists by free text."""

    def search_albums(self, query: str, *, limit: int) -> list[CatalogItem]:
        """Search albums by free text."""

    def search_tracks(self, query: str, *, limit: int) -> list[CatalogItem]:
        """Search tracks by free text."""

    def search_playlists(
        self, query: str, *, limit: int, user_id: str | None = None
    ) -> list[CatalogItem]:
        """Search playlists; an empty query matches every playlist."""

    def search_all(self, query: str, *, limit: int) -> list[CatalogItem]:
        """Search across every catalog category."""

    def resolve_artwork(self, item: CatalogItem) -> str:
        """Return an icon reference for one catalog item."""

    def play_item(self, uri: str) -> None:
        """Start playback of one catalog item."""
