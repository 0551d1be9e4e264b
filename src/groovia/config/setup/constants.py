# 📖 groovia/config/setup/constants.py
"""
📖 Типобезпечні константи Telegram-бота.

🔹 Централізує UI- та LOGIC-набори значень для інших модулів
🔹 Гарантує імутабельність через `dataclass(slots=True, frozen=True)`
🔹 Описує розпізнавання посилань JioSaavn
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import re
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import ClassVar, Final, List, Mapping, Pattern

# 🧩 Внутрішні модулі проєкту
from groovia.domain.music.entities import AudioQuality, EntityKind
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config.constants")


# ================================
# 🏛️ СТРУКТУРА КОНСТАНТ (UI)
# ================================
@dataclass(frozen=True, slots=True)
class _ReplyButtons:
    """Кнопки для ReplyKeyboardMarkup (головне меню)."""

    SEARCH_SONGS: Final[str] = "🎵 Search songs"
    SEARCH_ALBUMS: Final[str] = "📀 Search albums"
    SEARCH_PLAYLISTS: Final[str] = "📂 Search playlists"
    SEARCH_ARTISTS: Final[str] = "👤 Search artists"
    TRENDING: Final[str] = "🔥 Trending"
    HISTORY: Final[str] = "🕘 History"
    SETTINGS: Final[str] = "⚙️ Settings"


@dataclass(frozen=True, slots=True)
class _InlineButtons:
    """Тексти для InlineKeyboardButton."""

    DOWNLOAD: Final[str] = "⬇️ Download"
    DOWNLOAD_ALL: Final[str] = "⬇️ Download all"
    SIMILAR: Final[str] = "✨ Similar"
    ARTIST_SONGS: Final[str] = "🎵 Songs"
    ARTIST_ALBUMS: Final[str] = "📀 Albums"
    PREV: Final[str] = "⬅️ Prev"
    NEXT: Final[str] = "Next ➡️"
    PAGE_LABEL: Final[str] = "Page {page}/{total_pages}"
    SELECTED_PREFIX: Final[str] = "✅ "

    QUALITY_LABELS: ClassVar[Mapping[AudioQuality, str]] = MappingProxyType(
        {
            AudioQuality.LOW: "🚀 Fast (96kbps)",
            AudioQuality.MEDIUM: "⚖️ Balanced (160kbps)",
            AudioQuality.HIGH: "🎧 High (320kbps)",
        }
    )

    ITEM_PREFIXES: ClassVar[Mapping[EntityKind, str]] = MappingProxyType(
        {
            EntityKind.SONG: "▶",
            EntityKind.ALBUM: "📀",
            EntityKind.PLAYLIST: "📂",
            EntityKind.ARTIST: "👤",
        }
    )


@dataclass(frozen=True, slots=True)
class _UIConstants:
    """Константи UI (тексти кнопок та parse mode)."""

    DEFAULT_PARSE_MODE: Final[str] = "HTML"
    REPLY_PLACEHOLDER: Final[str] = "Song, album ya JioSaavn link…"
    REPLY_BUTTONS: Final[_ReplyButtons] = _ReplyButtons()
    INLINE_BUTTONS: Final[_InlineButtons] = _InlineButtons()


# ================================
# ⚙️ СТРУКТУРА КОНСТАНТ (LOGIC)
# ================================
@dataclass(frozen=True, slots=True)
class _Commands:
    """Ідентифікатори команд Telegram-бота (без префікса '/')."""

    START: Final[str] = "start"
    HELP: Final[str] = "help"
    STATS: Final[str] = "stats"
    BROADCAST: Final[str] = "broadcast"


@dataclass(frozen=True, slots=True)
class _Limits:
    """Ліміти відображення."""

    BUTTON_NAME_CHARS: Final[int] = 16        # ✂️ Довжина назви на кнопці результату
    ITEMS_PER_ROW: Final[int] = 2             # 🧱 Кнопок результатів у рядку
    HISTORY_SHOWN: Final[int] = 10            # 🕘 Скільки записів історії показуємо


@dataclass(frozen=True, slots=True)
class _LogicConstants:
    """Константи, що визначають логіку (команди, ліміти, розпізнавання посилань)."""

    COMMANDS: Final[_Commands] = _Commands()
    LIMITS: Final[_Limits] = _Limits()

    LINK_PATTERN: ClassVar[Pattern[str]] = re.compile(r"https?://(?:www\.)?jiosaavn\.com/([^ ?]+)", re.IGNORECASE)

    # 🔗 Перший сегмент шляху посилання → тип сутності
    LINK_PREFIXES: ClassVar[Mapping[str, EntityKind]] = MappingProxyType(
        {
            "song": EntityKind.SONG,
            "album": EntityKind.ALBUM,
            "featured": EntityKind.PLAYLIST,
            "s/playlist": EntityKind.PLAYLIST,
            "playlist": EntityKind.PLAYLIST,
            "artist": EntityKind.ARTIST,
        }
    )


# ================================
# 🌍 ГОЛОВНИЙ ОБʼЄКТ КОНСТАНТ
# ================================
@dataclass(frozen=True, slots=True)
class AppConstants:
    """Єдина точка доступу до всіх констант проєкту (UI, LOGIC)."""

    UI: Final[_UIConstants] = _UIConstants()
    LOGIC: Final[_LogicConstants] = _LogicConstants()

    def get_all_reply_buttons(self) -> List[str]:
        """Повертає тексти всіх кнопок головного меню (Reply)."""
        buttons = self.UI.REPLY_BUTTONS
        return [getattr(buttons, field.name) for field in fields(buttons)]

    def search_menu_kinds(self) -> Mapping[str, EntityKind]:
        """Кнопки меню, що вмикають очікування пошукового запиту."""
        buttons = self.UI.REPLY_BUTTONS
        return {
            buttons.SEARCH_SONGS: EntityKind.SONG,
            buttons.SEARCH_ALBUMS: EntityKind.ALBUM,
            buttons.SEARCH_PLAYLISTS: EntityKind.PLAYLIST,
            buttons.SEARCH_ARTISTS: EntityKind.ARTIST,
        }

    def link_kind(self, path: str) -> EntityKind | None:
        """Тип сутності за шляхом посилання JioSaavn (без домену) або None."""
        lowered = path.lower()
        for prefix, kind in self.LOGIC.LINK_PREFIXES.items():
            if lowered.startswith(prefix):
                return kind
        return None


CONST = AppConstants()
logger.debug("📖 AppConstants initialised")

__all__ = ["AppConstants", "CONST"]
