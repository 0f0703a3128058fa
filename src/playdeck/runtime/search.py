"""Search fan-out with concurrent artwork resolution."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import StrEnum

from playdeck.client.base import PlaybackClient
from playdeck.client.models import CatalogItem, ItemKind
from playdeck.commands.results import ResultBuilder
from playdeck.commands.types import Result
from playdeck.session.context import SessionContext


class SearchKind(StrEnum):
    """Search categories routed through the aggregator."""

    ARTIST = "artist"
    ALBUM = "album"
    TRACK = "track"
    PLAYLIST = "playlist"
    GLOBAL = "global"


_Fetch = Callable[[PlaybackClient, str, int, str | None], list[CatalogItem]]
_Project = Callable[[CatalogItem], str]


@dataclass(frozen=True)
class _SearchSpec:
    """Fixed per-category search behavior."""

    limit: int
    fetch: _Fetch
    subtitle: _Project
    blank_matches_all: bool = False


def _joined_artists(item: CatalogItem) -> str:
    return ", ".join(item.artists)


def _artist_subtitle(item: CatalogItem) -> str:
    return f"Popularity: {item.popularity or 0}%"


def _album_subtitle(item: CatalogItem) -> str:
    return f"by {_joined_artists(item)}"


def _track_subtitle(item: CatalogItem) -> str:
    return f"Artist: {_joined_artists(item)}"


def _playlist_subtitle(item: CatalogItem) -> str:
    return item.kind.value


_KIND_SUBTITLES: dict[ItemKind, _Project] = {
    ItemKind.ARTIST: _artist_subtitle,
    ItemKind.ALBUM: _album_subtitle,
    ItemKind.TRACK: _track_subtitle,
    ItemKind.PLAYLIST: _playlist_subtitle,
}


def _global_subtitle(item: CatalogItem) -> str:
    return f"{item.kind.value.title()} | {_KIND_SUBTITLES[item.kind](item)}"


SEARCH_SPECS: dict[SearchKind, _SearchSpec] = {
    SearchKind.ARTIST: _SearchSpec(
        limit=10,
        fetch=lambda client, query, limit, _: client.search_artists(
            query, limit=limit
        ),
        subtitle=_artist_subtitle,
    ),
    SearchKind.ALBUM: _SearchSpec(
        limit=10,
        fetch=lambda client, query, limit, _: client.search_albums(query, limit=limit),
        subtitle=_album_subtitle,
    ),
    SearchKind.TRACK: _SearchSpec(
        limit=20,
        fetch=lambda client, query, limit, _: client.search_tracks(query, limit=limit),
        subtitle=_track_subtitle,
    ),
    SearchKind.PLAYLIST: _SearchSpec(
        limit=500,
        fetch=lambda client, query, limit, user_id: client.search_playlists(
            query, limit=limit, user_id=user_id
        ),
        subtitle=_playlist_subtitle,
        blank_matches_all=True,
    ),
    SearchKind.GLOBAL: _SearchSpec(
        limit=20,
        fetch=lambda client, query, limit, _: client.search_all(query, limit=limit),
        subtitle=_global_subtitle,
    ),
}


class SearchAggregator:
    """Run one remote search and enrich every hit with artwork concurrently."""

    def __init__(
        self,
        session: SessionContext,
        builder: ResultBuilder,
        *,
        max_workers: int = 8,
    ) -> None:
        """Create aggregator with its artwork worker pool.

        Args:
            session: Shared playback session.
            builder: Result builder for canonical results.
            max_workers: Artwork resolution pool size.
        """
        self._session = session
        self._builder = builder
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="playdeck-artwork"
        )

    def search(self, kind: SearchKind, argument: str) -> list[Result]:
        """Search one category and return results in provider order.

        Args:
            kind: Search category.
            argument: Free-text search terms.

        Returns:
            Enriched results, an empty list for blank input, or the canonical
            "nothing found" result when the provider returns no hits.
        """
        client = self._session.client
        if not client.is_connected():
            return self._builder.auth_required()

        spec = SEARCH_SPECS[kind]
        query = argument.strip()
        if not query and not spec.blank_matches_all:
            return []

        items = spec.fetch(client, query, spec.limit, self._session.user_id)
        if not items:
            return self._builder.nothing_found()

        icons = list(self._pool.map(client.resolve_artwork, items))
        return [
            self._builder.result(
                item.name,
                spec.subtitle(item),
                _play_action(client, item.uri),
                icon=icon,
            )
            for item, icon in zip(items, icons, strict=True)
        ]

    def close(self) -> None:
        """Shut down the artwork worker pool."""
        self._pool.shutdown(wait=True)


def _play_action(client: PlaybackClient, uri: str) -> Callable[[], None]:
    """Bind playback of one already-resolved identifier."""
    return lambda: client.play_item(uri)
