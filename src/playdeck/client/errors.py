"""Playback client error contracts."""

from __future__ import annotations

from enum import StrEnum


class PlaybackErrorCode(StrEnum):
    """Stable playback client error codes."""

    NOT_CONNECTED = "not_connected"
    TOKEN_INVALID = "token_invalid"  # nosec B105
    DEVICE_NOT_FOUND = "device_not_found"
    INVALID_VOLUME = "invalid_volume"
    NO_PLAYBACK = "no_playback"
    REQUEST_FAILED = "request_failed"


class PlaybackClientError(RuntimeError):
    """Remote playback failure with stable code."""

    def __init__(
        self,
        code: PlaybackErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create playback failure.

        Args:
            code: Stable playback error code.
            message: Human-readable error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.data = data or {}
