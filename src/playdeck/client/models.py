"""Catalog and playback models exchanged with the remote playback client."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ItemKind(StrEnum):
    """Catalog item categories returned by remote searches."""

    ARTIST = "artist"
    ALBUM = "album"
    TRACK = "track"
    PLAYLIST = "playlist"


class CatalogItem(BaseModel):
    """One playable catalog entry.

    Only the fields relevant to ``kind`` are populated: artists for albums and
    tracks, popularity for artists, owner for playlists.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ItemKind
    uri: str
    name: str
    artists: tuple[str, ...] = ()
    popularity: int | None = Field(default=None, ge=0, le=100)
    owner: str | None = None
    image_url: str | None = None


class Device(BaseModel):
    """Playback device visible to the account."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    type: str = "Computer"
    is_active: bool = False
    is_restricted: bool = False


class PlaybackState(BaseModel):
    """Snapshot of current playback."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    is_playing: bool = False
    item: CatalogItem | None = None
    active_device_name: str | None = None
