# 🏷️ groovia/bot/services/callback_data_factory.py
"""
🏷️ Типізовані payload-и inline-кнопок та їх (де)серіалізація.

🔹 `EntityRef`     ↔ `{action}:{id}`        (song/album/playlist/artist/dl/pldl/abdl/similar/artsongs/artalbums)
🔹 `PageRequest`   ↔ `page:{kind}|{query}|{page}` (query — URL-encoded, page — з нуля)
🔹 `QualityChoice` ↔ `q:{96|160|320}`
🔹 `Noop`          ↔ `noop`
🔹 `decode` ніколи не падає: невідомий чи битий рядок → None.
🔹 Telegram обмежує callback_data 64 байтами: запит у `PageRequest` обрізається, доки рядок не влізе.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Final, Optional, Union
from urllib.parse import quote, unquote

# 🧩 Внутрішні модулі проєкту
from groovia.domain.music.entities import AudioQuality, EntityKind
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.callbacks")

MAX_CALLBACK_BYTES: Final[int] = 64


class CallbackAction(str, Enum):
    SONG = "song"
    ALBUM = "album"
    PLAYLIST = "playlist"
    ARTIST = "artist"
    DOWNLOAD = "dl"
    PLAYLIST_DOWNLOAD = "pldl"
    ALBUM_DOWNLOAD = "abdl"
    SIMILAR = "similar"
    ARTIST_SONGS = "artsongs"
    ARTIST_ALBUMS = "artalbums"
    PAGE = "page"
    QUALITY = "q"
    NOOP = "noop"


ENTITY_ACTIONS: Final = frozenset(
    {
        CallbackAction.SONG,
        CallbackAction.ALBUM,
        CallbackAction.PLAYLIST,
        CallbackAction.ARTIST,
        CallbackAction.DOWNLOAD,
        CallbackAction.PLAYLIST_DOWNLOAD,
        CallbackAction.ALBUM_DOWNLOAD,
        CallbackAction.SIMILAR,
        CallbackAction.ARTIST_SONGS,
        CallbackAction.ARTIST_ALBUMS,
    }
)

DETAIL_ACTIONS: Final = {
    EntityKind.SONG: CallbackAction.SONG,
    EntityKind.ALBUM: CallbackAction.ALBUM,
    EntityKind.PLAYLIST: CallbackAction.PLAYLIST,
    EntityKind.ARTIST: CallbackAction.ARTIST,
}


# ================================
# 📦 PAYLOAD-И
# ================================
@dataclass(frozen=True, slots=True)
class EntityRef:
    """Дія над конкретною сутністю каталогу."""

    action: CallbackAction
    item_id: str

    @classmethod
    def detail(cls, kind: EntityKind, item_id: str) -> "EntityRef":
        return cls(DETAIL_ACTIONS[kind], item_id)

    @property
    def kind(self) -> Optional[EntityKind]:
        """Тип сутності для дій деталізації (song/album/playlist/artist), інакше None."""
        try:
            return EntityKind(self.action.value)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class PageRequest:
    """Перехід на сторінку пошуку; запит вшитий у кнопку."""

    kind: EntityKind
    query: str
    page: int
    action: ClassVar[CallbackAction] = CallbackAction.PAGE


@dataclass(frozen=True, slots=True)
class QualityChoice:
    quality: AudioQuality
    action: ClassVar[CallbackAction] = CallbackAction.QUALITY


@dataclass(frozen=True, slots=True)
class Noop:
    action: ClassVar[CallbackAction] = CallbackAction.NOOP


CallbackPayload = Union[EntityRef, PageRequest, QualityChoice, Noop]


# ================================
# 🔐 КОДУВАННЯ
# ================================
def _fits(raw: str) -> bool:
    return len(raw.encode("utf-8")) <= MAX_CALLBACK_BYTES


def _encode_page(payload: PageRequest) -> str:
    query = payload.query
    raw = f"page:{payload.kind.value}|{quote(query, safe='')}|{payload.page}"
    while not _fits(raw) and query:
        query = query[:-1]
        raw = f"page:{payload.kind.value}|{quote(query, safe='')}|{payload.page}"
    if query != payload.query:
        logger.warning("✂️ Page query truncated to fit callback_data: %r → %r", payload.query, query)
    return raw


def encode(payload: CallbackPayload) -> str:
    """Серіалізує payload у рядок callback_data."""
    if isinstance(payload, PageRequest):
        return _encode_page(payload)
    if isinstance(payload, QualityChoice):
        return f"q:{payload.quality.value}"
    if isinstance(payload, Noop):
        return CallbackAction.NOOP.value
    raw = f"{payload.action.value}:{payload.item_id}"
    if not _fits(raw):
        logger.warning("⚠️ callback_data exceeds %d bytes: %s", MAX_CALLBACK_BYTES, raw)
    return raw


def decode(raw: Optional[str]) -> Optional[CallbackPayload]:
    """
    Розбирає callback_data. Будь-який невідомий або пошкоджений рядок → None.
    """
    if not raw:
        return None
    if raw == CallbackAction.NOOP.value:
        return Noop()

    verb, sep, body = raw.partition(":")
    if not sep or not body:
        return None
    try:
        action = CallbackAction(verb)
    except ValueError:
        return None

    if action in ENTITY_ACTIONS:
        return EntityRef(action, body)

    if action is CallbackAction.QUALITY:
        try:
            return QualityChoice(AudioQuality(body))
        except ValueError:
            return None

    if action is CallbackAction.PAGE:
        parts = body.split("|")
        if len(parts) != 3:
            return None
        kind_raw, query_raw, page_raw = parts
        try:
            kind = EntityKind(kind_raw)
            page = int(page_raw)
        except ValueError:
            return None
        query = unquote(query_raw).strip()
        if page < 0 or not query:
            return None
        return PageRequest(kind=kind, query=query, page=page)

    return None


__all__ = [
    "MAX_CALLBACK_BYTES",
    "CallbackAction",
    "EntityRef",
    "PageRequest",
    "QualityChoice",
    "Noop",
    "CallbackPayload",
    "encode",
    "decode",
]
