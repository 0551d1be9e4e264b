# 🎵 groovia/domain/music/__init__.py
from .entities import (
    Album,
    Artist,
    AudioEncoding,
    AudioQuality,
    CatalogItem,
    EntityKind,
    HistoryEntry,
    ImageRef,
    ListedItem,
    PaginationDescriptor,
    Playlist,
    SearchPage,
    Song,
)
from .interfaces import IAudioDelivery, ICatalogClient
from .quality import resolve_audio_url

__all__ = [
    "Album",
    "Artist",
    "AudioEncoding",
    "AudioQuality",
    "CatalogItem",
    "EntityKind",
    "HistoryEntry",
    "ImageRef",
    "ListedItem",
    "PaginationDescriptor",
    "Playlist",
    "SearchPage",
    "Song",
    "IAudioDelivery",
    "ICatalogClient",
    "resolve_audio_url",
]
