"""Test-only helpers for unit tests. Not part of the playdeck API."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock

from playdeck.client import CatalogFixture, CatalogItem, Device, InMemoryPlaybackClient
from playdeck.client.models import ItemKind
from playdeck.config import DebounceSettings, PlaydeckConfig
from playdeck.runtime.dispatcher import QueryDispatcher


def sample_fixture(**overrides: object) -> CatalogFixture:
    """Build a small catalog with one active device and a playing track."""
    payload: dict[str, object] = {
        "user_id": "user-1",
        "items": [
            CatalogItem(
                kind=ItemKind.TRACK,
                uri="track:hello",
                name="Hello",
                artists=("Adele",),
                image_url="art/hello.png",
            ),
            CatalogItem(
                kind=ItemKind.TRACK,
                uri="track:hello-world",
                name="Hello World",
                artists=("Lady Antebellum", "Guest"),
            ),
            CatalogItem(
                kind=ItemKind.TRACK,
                uri="track:yesterday",
                name="Yesterday",
                artists=("The Beatles",),
            ),
            CatalogItem(
                kind=ItemKind.ALBUM,
                uri="album:25",
                name="25",
                artists=("Adele",),
            ),
            CatalogItem(
                kind=ItemKind.ALBUM,
                uri="album:abbey-road",
                name="Abbey Road",
                artists=("The Beatles",),
            ),
            CatalogItem(
                kind=ItemKind.ARTIST,
                uri="artist:adele",
                name="Adele",
                popularity=90,
            ),
            CatalogItem(
                kind=ItemKind.ARTIST,
                uri="artist:beatles",
                name="The Beatles",
                popularity=95,
            ),
            CatalogItem(
                kind=ItemKind.PLAYLIST,
                uri="playlist:chill",
                name="Chill Mix",
                owner="user-1",
            ),
            CatalogItem(
                kind=ItemKind.PLAYLIST,
                uri="playlist:road-trip",
                name="Road Trip",
                owner="user-1",
            ),
            CatalogItem(
                kind=ItemKind.PLAYLIST,
                uri="playlist:foreign",
                name="Someone Else's Hits",
                owner="user-2",
            ),
        ],
        "devices": [
            Device(id="dev-laptop", name="Laptop", type="Computer", is_active=True),
            Device(id="dev-phone", name="Phone", type="Smartphone"),
            Device(id="dev-kiosk", name="Kiosk", type="Speaker", is_restricted=True),
        ],
        "now_playing": "track:hello",
        "is_playing": True,
        "volume": 35,
    }
    payload.update(overrides)
    return CatalogFixture.model_validate(payload)


class RecordingClient(InMemoryPlaybackClient):
    """In-memory client that records remote search and artwork calls."""

    def __init__(self, fixture: CatalogFixture | None = None) -> None:
        super().__init__(fixture or sample_fixture())
        self._record_lock = Lock()
        self.search_calls: list[tuple[str, str, int]] = []
        self.artwork_calls: list[str] = []
        self.played: list[str] = []

    def _record(self, kind: str, query: str, limit: int) -> None:
        with self._record_lock:
            self.search_calls.append((kind, query, limit))

    def search_artists(self, query: str, *, limit: int) -> list[CatalogItem]:
        self._record("artist", query, limit)
        return super().search_artists(query, limit=limit)

    def search_albums(self, query: str, *, limit: int) -> list[CatalogItem]:
        self._record("album", query, limit)
        return super().search_albums(query, limit=limit)

    def search_tracks(self, query: str, *, limit: int) -> list[CatalogItem]:
        self._record("track", query, limit)
        return super().search_tracks(query, limit=limit)

    def search_playlists(
        self, query: str, *, limit: int, user_id: str | None = None
    ) -> list[CatalogItem]:
        self._record("playlist", query, limit)
        return super().search_playlists(query, limit=limit, user_id=user_id)

    def search_all(self, query: str, *, limit: int) -> list[CatalogItem]:
        self._record("global", query, limit)
        return super().search_all(query, limit=limit)

    def resolve_artwork(self, item: CatalogItem) -> str:
        with self._record_lock:
            self.artwork_calls.append(item.uri)
        return super().resolve_artwork(item)

    def play_item(self, uri: str) -> None:
        self.played.append(uri)
        super().play_item(uri)


@dataclass
class StubHost:
    """Host context with fixed counters."""

    plugin_directory: Path = field(default_factory=lambda: Path("/tmp/playdeck"))
    query_count: int = 0
    average_query_time_ms: int = 0


def build_dispatcher(
    client: InMemoryPlaybackClient,
    *,
    debounce_enabled: bool = True,
    quiet_interval_ms: int = 500,
    sleep: Callable[[float], None] | None = None,
    host: StubHost | None = None,
) -> QueryDispatcher:
    """Wire a dispatcher with a non-blocking sleeper by default."""
    config = PlaydeckConfig(
        debounce=DebounceSettings(
            enabled=debounce_enabled, quiet_interval_ms=quiet_interval_ms
        )
    )
    return QueryDispatcher.build(
        client,
        host=host or StubHost(),
        config=config,
        sleep=sleep or (lambda _seconds: None),
    )
