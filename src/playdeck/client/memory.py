"""Offline playback client backed by a static catalog."""

from __future__ import annotations

import json
from pathlib import Path
from threading import Lock

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from playdeck.client.errors import PlaybackClientError, PlaybackErrorCode
from playdeck.client.models import CatalogItem, Device, ItemKind, PlaybackState


class CatalogError(RuntimeError):
    """Raised when a catalog file cannot be decoded or validated."""


class CatalogFixture(BaseModel):
    """Declarative catalog and player state for the offline client."""

    model_config = ConfigDict(extra="forbid")

    user_id: str = "local-user"
    items: list[CatalogItem] = Field(default_factory=list)
    devices: list[Device] = Field(default_factory=list)
    now_playing: str | None = None
    is_playing: bool = False
    volume: int = Field(default=50, ge=0, le=100)
    muted: bool = False
    shuffled: bool = False
    connected: bool = True
    token_valid: bool = True


def load_catalog(path: Path) -> CatalogFixture:
    """Load a catalog fixture from YAML or JSON.

    Args:
        path: Catalog file path.

    Returns:
        Parsed catalog, or an empty catalog when the file does not exist.

    Raises:
        CatalogError: If decode or validation fails.
    """
    if not path.exists():
        return CatalogFixture()
    raw = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            payload = json.loads(raw)
        else:
            payload = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CatalogError(f"Invalid catalog payload: {exc}") from exc
    if payload is None:
        return CatalogFixture()
    if not isinstance(payload, dict):
        raise CatalogError("Invalid catalog payload: root must be an object")
    try:
        return CatalogFixture.model_validate(payload)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog payload: {exc}") from exc


class InMemoryPlaybackClient:
    """Playback client that simulates the remote service in-process.

    Searches are case-insensitive substring matches over item names and
    artists. Player state changes are applied immediately.
    """

    def __init__(
        self,
        fixture: CatalogFixture | None = None,
        *,
        default_icon: str = "icon.png",
    ) -> None:
        """Create client over a catalog fixture.

        Args:
            fixture: Catalog and initial player state.
            default_icon: Icon reference for items without artwork.
        """
        state = fixture or CatalogFixture()
        self._lock = Lock()
        self._default_icon = default_icon
        self._user_id = state.user_id
        self._items = list(state.items)
        self._devices = list(state.devices)
        self._now_playing = state.now_playing
        self._is_playing = state.is_playing
        self._volume = state.volume
        self._muted = state.muted
        self._shuffled = state.shuffled
        self._connected = state.connected
        self._token_valid = state.token_valid

    def is_connected(self) -> bool:
        return self._connected

    def is_token_valid(self) -> bool:
        return self._token_valid

    def reconnect(self, *, keep_token: bool) -> None:
        del keep_token
        with self._lock:
            self._connected = True
            self._token_valid = True

    def current_user_id(self) -> str:
        self._require_connection()
        return self._user_id

    def current_playback(self) -> PlaybackState | None:
        with self._lock:
            active = self._active_device()
            if active is None and self._now_playing is None:
                return None
            return PlaybackState(
                is_playing=self._is_playing,
                item=self._find_item(self._now_playing),
                active_device_name=active.name if active is not None else None,
            )

    def play(self) -> None:
        with self._lock:
            self._require_device()
            self._is_playing = True

    def pause(self) -> None:
        with self._lock:
            self._require_device()
            self._is_playing = False

    def skip_next(self) -> None:
        self._skip(step=1)

    def skip_previous(self) -> None:
        self._skip(step=-1)

    def is_muted(self) -> bool:
        return self._muted

    def toggle_mute(self) -> None:
        with self._lock:
            self._muted = not self._muted

    def is_shuffled(self) -> bool:
        return self._shuffled

    def toggle_shuffle(self) -> None:
        with self._lock:
            self._shuffled = not self._shuffled

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, percent: int) -> None:
        if not 0 <= percent <= 100:
            raise PlaybackClientError(
                PlaybackErrorCode.INVALID_VOLUME,
                f"Volume must be within 0..100, got {percent}.",
                data={"volume": percent},
            )
        with self._lock:
            self._volume = percent

    def list_devices(self) -> list[Device]:
        return list(self._devices)

    def select_device(self, device_id: str) -> None:
        with self._lock:
            if not any(device.id == device_id for device in self._devices):
                raise PlaybackClientError(
                    PlaybackErrorCode.DEVICE_NOT_FOUND,
                    f"Unknown device '{device_id}'.",
                    data={"device_id": device_id},
                )
            self._devices = [
                device.model_copy(update={"is_active": device.id == device_id})
                for device in self._devices
            ]

    def search_artists(self, query: str, *, limit: int) -> list[CatalogItem]:
        return self._search(query, kinds={ItemKind.ARTIST}, limit=limit)

    def search_albums(self, query: str, *, limit: int) -> list[CatalogItem]:
        return self._search(query, kinds={ItemKind.ALBUM}, limit=limit)

    def search_tracks(self, query: str, *, limit: int) -> list[CatalogItem]:
        return self._search(query, kinds={ItemKind.TRACK}, limit=limit)

    def search_playlists(
        self, query: str, *, limit: int, user_id: str | None = None
    ) -> list[CatalogItem]:
        matches = self._search(query, kinds={ItemKind.PLAYLIST}, limit=None)
        if user_id is not None:
            matches = [item for item in matches if item.owner in {None, user_id}]
        return matches[:limit]

    def search_all(self, query: str, *, limit: int) -> list[CatalogItem]:
        return self._search(query, kinds=set(ItemKind), limit=limit)

    def resolve_artwork(self, item: CatalogItem) -> str:
        return item.image_url or self._default_icon

    def play_item(self, uri: str) -> None:
        with self._lock:
            if self._find_item(uri) is None:
                raise PlaybackClientError(
                    PlaybackErrorCode.REQUEST_FAILED,
                    f"Unknown catalog item '{uri}'.",
                    data={"uri": uri},
                )
            self._require_device()
            self._now_playing = uri
            self._is_playing = True

    def _search(
        self, query: str, *, kinds: set[ItemKind], limit: int | None
    ) -> list[CatalogItem]:
        self._require_connection()
        needle = query.strip().casefold()
        matches = [
            item
            for item in self._items
            if item.kind in kinds and _matches(item, needle)
        ]
        return matches if limit is None else matches[:limit]

    def _skip(self, *, step: int) -> None:
        with self._lock:
            self._require_device()
            tracks = [item for item in self._items if item.kind == ItemKind.TRACK]
            if not tracks:
                raise PlaybackClientError(
                    PlaybackErrorCode.NO_PLAYBACK, "Nothing to skip to."
                )
            uris = [item.uri for item in tracks]
            index = uris.index(self._now_playing) if self._now_playing in uris else -1
            self._now_playing = uris[(index + step) % len(uris)]

    def _require_connection(self) -> None:
        if not self._connected:
            raise PlaybackClientError(
                PlaybackErrorCode.NOT_CONNECTED, "Playback API is not connected."
            )

    def _require_device(self) -> None:
        if self._active_device() is None:
            raise PlaybackClientError(
                PlaybackErrorCode.DEVICE_NOT_FOUND, "No active playback device."
            )

    def _active_device(self) -> Device | None:
        return next((device for device in self._devices if device.is_active), None)

    def _find_item(self, uri: str | None) -> CatalogItem | None:
        if uri is None:
            return None
        return next((item for item in self._items if item.uri == uri), None)


def _matches(item: CatalogItem, needle: str) -> bool:
    """Return whether item name or artists contain the search needle."""
    if not needle:
        return True
    haystack = (item.name, *item.artists)
    return any(needle in value.casefold() for value in haystack)
