# 🎵 groovia/domain/music/entities.py
"""
🎵 Сутності музичного каталогу.

🔹 `Song` / `Album` / `Playlist` / `Artist` — незмінні DTO, нормалізовані з JSON каталогу.
🔹 `AudioQuality` — рівні бітрейту (96/160/320 kbps) та правило співставлення з мітками API.
🔹 `PaginationDescriptor` / `SearchPage` — сторінка результатів пошуку з наскрізною нумерацією.
🔹 `HistoryEntry` — запис історії переглядів користувача.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

# 🧩 Внутрішні модулі проєкту
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.music")


# ================================
# 🏷️ ПЕРЕЛІКИ
# ================================
class EntityKind(str, Enum):
    """Тип сутності каталогу; значення збігаються з сегментами API та callback-ів."""

    SONG = "song"
    ALBUM = "album"
    PLAYLIST = "playlist"
    ARTIST = "artist"


class AudioQuality(str, Enum):
    """Бітрейт аудіо. Значення — число kbps у вигляді рядка."""

    LOW = "96"
    MEDIUM = "160"
    HIGH = "320"

    @property
    def label(self) -> str:
        return f"{self.value}kbps"

    def matches(self, quality_label: str) -> bool:
        """Мітка API ('320kbps', '320') відповідає цьому рівню."""
        text = (quality_label or "").strip().lower()
        return text == self.label or text.startswith(self.value)

    @classmethod
    def parse(cls, raw: Union[str, int, "AudioQuality"]) -> "AudioQuality":
        """'320', 320, '320kbps' → HIGH; невідоме значення → ValueError."""
        if isinstance(raw, AudioQuality):
            return raw
        text = str(raw).strip().lower()
        if text.endswith("kbps"):
            text = text[: -len("kbps")]
        return cls(text)


DEFAULT_QUALITY = AudioQuality.HIGH


# ================================
# 🧱 ДОПОМІЖНІ DTO
# ================================
@dataclass(frozen=True, slots=True)
class AudioEncoding:
    """Одна доступна аудіо-версія треку. Мітки в межах треку можуть повторюватись."""

    quality_label: str
    url: str


@dataclass(frozen=True, slots=True)
class ImageRef:
    quality: str                                    # 🖼️ '50x50' | '150x150' | '500x500'
    url: str


def pick_cover(images: Tuple[ImageRef, ...], preferred: str = "500x500") -> Optional[str]:
    """Повертає URL обкладинки потрібного розміру або останню доступну."""
    if not images:
        return None
    for image in images:
        if image.quality == preferred:
            return image.url
    return images[-1].url


# ================================
# 🎼 СУТНОСТІ КАТАЛОГУ
# ================================
@dataclass(frozen=True, slots=True)
class Song:
    kind: ClassVar[EntityKind] = EntityKind.SONG

    id: str
    name: str
    artists: str = ""
    album: Optional[str] = None
    duration: Optional[int] = None                  # ⏱️ секунди
    year: Optional[str] = None
    language: Optional[str] = None
    url: Optional[str] = None
    images: Tuple[ImageRef, ...] = ()
    encodings: Tuple[AudioEncoding, ...] = ()

    @property
    def cover_url(self) -> Optional[str]:
        return pick_cover(self.images)


@dataclass(frozen=True, slots=True)
class Album:
    kind: ClassVar[EntityKind] = EntityKind.ALBUM

    id: str
    name: str
    artists: str = ""
    year: Optional[str] = None
    song_count: Optional[int] = None
    url: Optional[str] = None
    images: Tuple[ImageRef, ...] = ()
    songs: Tuple[Song, ...] = ()

    @property
    def cover_url(self) -> Optional[str]:
        return pick_cover(self.images)


@dataclass(frozen=True, slots=True)
class Playlist:
    kind: ClassVar[EntityKind] = EntityKind.PLAYLIST

    id: str
    name: str
    subtitle: str = ""
    song_count: Optional[int] = None
    url: Optional[str] = None
    images: Tuple[ImageRef, ...] = ()
    songs: Tuple[Song, ...] = ()

    @property
    def cover_url(self) -> Optional[str]:
        return pick_cover(self.images)


@dataclass(frozen=True, slots=True)
class Artist:
    kind: ClassVar[EntityKind] = EntityKind.ARTIST

    id: str
    name: str
    role: str = ""
    url: Optional[str] = None
    images: Tuple[ImageRef, ...] = ()

    @property
    def cover_url(self) -> Optional[str]:
        return pick_cover(self.images)


CatalogItem = Union[Song, Album, Playlist, Artist]


# ================================
# 📄 ПАГІНАЦІЯ
# ================================
def total_pages_for(total: int, page_size: int) -> int:
    """Кількість сторінок; навіть порожній результат має одну сторінку."""
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return max(1, math.ceil(max(total, 0) / page_size))


@dataclass(frozen=True, slots=True)
class PaginationDescriptor:
    """Сторінка `page` (з нуля) із `total_pages` для запиту `query` по типу `kind`."""

    kind: EntityKind
    query: str
    page: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages - 1

    @property
    def number(self) -> int:
        """Номер сторінки для людини (з одиниці)."""
        return self.page + 1


@dataclass(frozen=True, slots=True)
class ListedItem:
    """Елемент списку з наскрізним номером (`offset + i + 1`)."""

    index: int
    item: CatalogItem


@dataclass(frozen=True, slots=True)
class SearchPage:
    items: Tuple[ListedItem, ...]
    pagination: PaginationDescriptor


# ================================
# 🕘 ІСТОРІЯ
# ================================
@dataclass(frozen=True, slots=True)
class HistoryEntry:
    kind: EntityKind
    item_id: str
    name: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


__all__ = [
    "EntityKind",
    "AudioQuality",
    "DEFAULT_QUALITY",
    "AudioEncoding",
    "ImageRef",
    "pick_cover",
    "Song",
    "Album",
    "Playlist",
    "Artist",
    "CatalogItem",
    "total_pages_for",
    "PaginationDescriptor",
    "ListedItem",
    "SearchPage",
    "HistoryEntry",
]
