"""Remote playback client contracts and offline implementation."""

from playdeck.client.base import PlaybackClient
from playdeck.client.errors import PlaybackClientError, PlaybackErrorCode
from playdeck.client.memory import (
    CatalogError,
    CatalogFixture,
    InMemoryPlaybackClient,
    load_catalog,
)
from playdeck.client.models import CatalogItem, Device, ItemKind, PlaybackState

__all__ = [
    "CatalogError",
    "CatalogFixture",
    "CatalogItem",
    "Device",
    "InMemoryPlaybackClient",
    "ItemKind",
    "PlaybackClient",
    "PlaybackClientError",
    "PlaybackErrorCode",
    "PlaybackState",
    "load_catalog",
]
