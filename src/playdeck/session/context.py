"""Shared playback session state."""

from __future__ import annotations

import logging
from threading import RLock

from pydantic import BaseModel, ConfigDict

from playdeck.client.base import PlaybackClient
from playdeck.client.errors import PlaybackClientError

_LOGGER = logging.getLogger(__name__)

UNKNOWN_VOLUME = -1


class ReconnectOutcome(BaseModel):
    """Completion of one reconnect attempt."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ok: bool
    user_id: str | None = None
    error: str | None = None


class SessionContext:
    """Client handle plus cached account facts shared by all handlers.

    Cached values are guarded so concurrent dispatches observe whole updates.
    """

    def __init__(self, client: PlaybackClient, *, user_id: str | None = None) -> None:
        """Create session around one playback client.

        Args:
            client: Remote playback client.
            user_id: Optional already-known account identifier.
        """
        self.client = client
        self._lock = RLock()
        self._user_id = user_id
        self._cached_volume = UNKNOWN_VOLUME

    @property
    def user_id(self) -> str | None:
        """Cached account identifier used to scope playlist searches."""
        with self._lock:
            return self._user_id

    @property
    def cached_volume(self) -> int:
        """Last volume read from or written to the client."""
        with self._lock:
            return self._cached_volume

    def refresh_volume(self) -> int:
        """Read volume from the client and cache it.

        Returns:
            Current volume percentage.
        """
        volume = self.client.get_volume()
        with self._lock:
            self._cached_volume = volume
        return volume

    def set_volume(self, percent: int) -> None:
        """Write volume through the client and cache it.

        Args:
            percent: Target volume percentage.
        """
        self.client.set_volume(percent)
        with self._lock:
            self._cached_volume = percent

    def reconnect(self, *, keep_token: bool = True) -> ReconnectOutcome:
        """Reconnect the client and refresh the cached account identifier.

        Args:
            keep_token: Whether the stored refresh token may be reused.

        Returns:
            Outcome describing success or the failure reason.
        """
        try:
            self.client.reconnect(keep_token=keep_token)
            user_id = self.client.current_user_id()
        except PlaybackClientError as exc:
            _LOGGER.warning("Reconnect failed (%s): %s", exc.code.value, exc)
            return ReconnectOutcome(ok=False, error=str(exc))
        with self._lock:
            self._user_id = user_id
        return ReconnectOutcome(ok=True, user_id=user_id)
