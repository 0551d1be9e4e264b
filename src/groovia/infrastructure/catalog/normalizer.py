# 🧹 groovia/infrastructure/catalog/normalizer.py
"""
🧹 Перетворення сирого JSON каталогу на доменні сутності.

🔹 Толерантний до різних версій API: `artists.primary` / `primaryArtists`,
   `downloadUrl` / `download_urls`, `url` / `link`, `songCount` / `numberOfSongs`.
🔹 `unwrap_entity` — одиночний обʼєкт або перший елемент колекції.
🔹 `extract_results` — список результатів і загальна кількість для пагінації.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import html
import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

# 🧩 Внутрішні модулі проєкту
from groovia.domain.music.entities import (
    Album,
    Artist,
    AudioEncoding,
    CatalogItem,
    EntityKind,
    ImageRef,
    Playlist,
    Song,
)
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.catalog")


# ================================
# 🧰 ПРИМІТИВИ
# ================================
def _text(value: Any) -> str:
    """Рядок без HTML-сутностей (`&quot;` → `"`), None → ''."""
    if value is None:
        return ""
    return html.unescape(str(value)).strip()


def _first_text(raw: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = raw.get(key)
        if isinstance(value, (str, int)) and str(value).strip():
            return _text(value)
    return ""


def _optional_text(raw: Mapping[str, Any], *keys: str) -> Optional[str]:
    return _first_text(raw, *keys) or None


def _int_or_none(value: Any) -> Optional[int]:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def _names(entries: Any) -> str:
    if not isinstance(entries, list):
        return ""
    return ", ".join(_text(e.get("name")) for e in entries if isinstance(e, Mapping) and e.get("name"))


def _artists(raw: Mapping[str, Any]) -> str:
    artists = raw.get("artists")
    if isinstance(artists, Mapping):
        names = _names(artists.get("primary")) or _names(artists.get("all"))
        if names:
            return names
    return _first_text(raw, "primaryArtists", "artist", "singers", "subtitle")


def _links(raw: Any, key_name: str) -> Tuple[Tuple[str, str], ...]:
    """[{quality, url|link}] → ((quality, url), ...); рядок → (("", url),)."""
    if isinstance(raw, str) and raw:
        return (("", raw),)
    if not isinstance(raw, list):
        return ()
    pairs = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            continue
        url = entry.get("url") or entry.get("link")
        if url:
            pairs.append((str(entry.get(key_name) or ""), str(url)))
    return tuple(pairs)


def _images(raw: Mapping[str, Any]) -> Tuple[ImageRef, ...]:
    return tuple(ImageRef(quality=q, url=u) for q, u in _links(raw.get("image"), "quality"))


def _encodings(raw: Mapping[str, Any]) -> Tuple[AudioEncoding, ...]:
    source = raw.get("downloadUrl") or raw.get("download_urls") or []
    return tuple(AudioEncoding(quality_label=q, url=u) for q, u in _links(source, "quality"))


def _song_count(raw: Mapping[str, Any], songs: Sequence[Song]) -> Optional[int]:
    count = _int_or_none(raw.get("songCount")) or _int_or_none(raw.get("numberOfSongs"))
    if count is None and songs:
        return len(songs)
    return count


# ================================
# 🎼 СУТНОСТІ
# ================================
def to_song(raw: Mapping[str, Any]) -> Song:
    album = raw.get("album")
    album_name = _text(album.get("name")) if isinstance(album, Mapping) else _text(album)
    return Song(
        id=str(raw.get("id") or ""),
        name=_first_text(raw, "name", "title") or "Unknown",
        artists=_artists(raw) or "Unknown",
        album=album_name or None,
        duration=_int_or_none(raw.get("duration")),
        year=_optional_text(raw, "year"),
        language=_optional_text(raw, "language"),
        url=_optional_text(raw, "url", "perma_url"),
        images=_images(raw),
        encodings=_encodings(raw),
    )


def _songs(raw: Mapping[str, Any]) -> Tuple[Song, ...]:
    entries = raw.get("songs")
    if not isinstance(entries, list):
        return ()
    return tuple(to_song(entry) for entry in entries if isinstance(entry, Mapping) and entry.get("id"))


def to_album(raw: Mapping[str, Any]) -> Album:
    songs = _songs(raw)
    return Album(
        id=str(raw.get("id") or ""),
        name=_first_text(raw, "name", "title") or "Unknown",
        artists=_artists(raw),
        year=_optional_text(raw, "year"),
        song_count=_song_count(raw, songs),
        url=_optional_text(raw, "url"),
        images=_images(raw),
        songs=songs,
    )


def to_playlist(raw: Mapping[str, Any]) -> Playlist:
    songs = _songs(raw)
    return Playlist(
        id=str(raw.get("id") or ""),
        name=_first_text(raw, "name", "title") or "Unknown playlist",
        subtitle=_first_text(raw, "subtitle", "description", "artist"),
        song_count=_song_count(raw, songs),
        url=_optional_text(raw, "url"),
        images=_images(raw),
        songs=songs,
    )


def to_artist(raw: Mapping[str, Any]) -> Artist:
    return Artist(
        id=str(raw.get("id") or ""),
        name=_first_text(raw, "name", "title") or "Unknown",
        role=_first_text(raw, "role", "dominantType", "subtitle", "type") or "Artist",
        url=_optional_text(raw, "url"),
        images=_images(raw),
    )


_CONVERTERS = {
    EntityKind.SONG: to_song,
    EntityKind.ALBUM: to_album,
    EntityKind.PLAYLIST: to_playlist,
    EntityKind.ARTIST: to_artist,
}


def to_item(kind: EntityKind, raw: Mapping[str, Any]) -> CatalogItem:
    return _CONVERTERS[kind](raw)


def to_items(kind: EntityKind, entries: Iterable[Any]) -> List[CatalogItem]:
    """Конвертує список, пропускаючи елементи без id."""
    items: List[CatalogItem] = []
    for entry in entries:
        if isinstance(entry, Mapping) and entry.get("id"):
            items.append(to_item(kind, entry))
        else:
            logger.debug("🧹 Пропущено запис без id: %r", entry)
    return items


# ================================
# 📦 ОБГОРТКИ ВІДПОВІДЕЙ
# ================================
def unwrap_entity(data: Any) -> Optional[Mapping[str, Any]]:
    """
    Одиночна сутність з відповіді деталізації.

    Обʼєкт з `id` повертається як є; інакше береться перший елемент списку
    (сам `data` або `data.results`). Нічого не знайдено → None.
    """
    if isinstance(data, Mapping):
        if data.get("id"):
            return data
        data = data.get("results")
    if isinstance(data, list) and data and isinstance(data[0], Mapping):
        return data[0]
    return None


def extract_results(data: Any, *list_keys: str) -> Tuple[List[Any], int]:
    """
    (результати, total) з пошукової відповіді.

    `list_keys` — альтернативні назви списку (за замовчуванням 'results').
    total = total | count | довжина списку.
    """
    if isinstance(data, list):
        return data, len(data)
    if not isinstance(data, Mapping):
        return [], 0
    results: List[Any] = []
    for key in list_keys or ("results",):
        value = data.get(key)
        if isinstance(value, list) and value:
            results = value
            break
    total = _int_or_none(data.get("total")) or _int_or_none(data.get("count")) or len(results)
    return results, total


__all__ = [
    "to_song",
    "to_album",
    "to_playlist",
    "to_artist",
    "to_item",
    "to_items",
    "unwrap_entity",
    "extract_results",
]
