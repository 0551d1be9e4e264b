# ⌨️ groovia/bot/ui/keyboards/keyboards.py
"""
⌨️ Формує всі клавіатури Telegram-бота.

🔹 Головне меню (`ReplyKeyboardMarkup`) з режимами пошуку
🔹 Інлайн-клавіатури: результати + пагінація, картки сутностей, вибір якості
🔹 Callback-дані кодуються лише через `callback_data_factory.encode`
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import InlineKeyboardButton, InlineKeyboardMarkup, ReplyKeyboardMarkup

# 🔠 Системні імпорти
import logging
from typing import Iterable, List, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from groovia.bot.services.callback_data_factory import (
    CallbackAction,
    CallbackPayload,
    EntityRef,
    Noop,
    PageRequest,
    QualityChoice,
    encode,
)
from groovia.config.setup.constants import AppConstants
from groovia.domain.music.entities import (
    Album,
    Artist,
    AudioQuality,
    CatalogItem,
    ListedItem,
    PaginationDescriptor,
    Playlist,
    Song,
)
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.ui.keyboards")

Rows = List[List[InlineKeyboardButton]]


class Keyboard:
    """
    🎛️ Інкапсулює побудову всіх клавіатур бота.

    Головне меню не залежить від користувача, тому кешується.
    """

    def __init__(self, constants: AppConstants) -> None:
        self.const = constants
        self._cache_main: Optional[ReplyKeyboardMarkup] = None

    @staticmethod
    def _button(text: str, payload: CallbackPayload) -> InlineKeyboardButton:
        return InlineKeyboardButton(text=text, callback_data=encode(payload))

    # ================================
    # 🧭 ГОЛОВНЕ МЕНЮ
    # ================================
    def build_main_menu(self) -> ReplyKeyboardMarkup:
        if self._cache_main is not None:
            return self._cache_main

        buttons = self.const.UI.REPLY_BUTTONS
        keyboard_rows = [
            [buttons.SEARCH_SONGS, buttons.SEARCH_ALBUMS],
            [buttons.SEARCH_PLAYLISTS, buttons.SEARCH_ARTISTS],
            [buttons.TRENDING, buttons.HISTORY],
            [buttons.SETTINGS],
        ]
        self._cache_main = ReplyKeyboardMarkup(
            keyboard=keyboard_rows,
            resize_keyboard=True,
            one_time_keyboard=False,
            input_field_placeholder=self.const.UI.REPLY_PLACEHOLDER,
        )
        logger.debug("⌨️ Згенеровано головне меню")
        return self._cache_main

    # ================================
    # ⚙️ ЯКІСТЬ
    # ================================
    def build_settings(self, current: AudioQuality) -> InlineKeyboardMarkup:
        """По кнопці на рядок; поточна якість позначена «✅»."""
        ui = self.const.UI.INLINE_BUTTONS
        rows: Rows = []
        for quality in (AudioQuality.LOW, AudioQuality.MEDIUM, AudioQuality.HIGH):
            label = ui.QUALITY_LABELS[quality]
            if quality is current:
                label = ui.SELECTED_PREFIX + label
            rows.append([self._button(label, QualityChoice(quality))])
        return InlineKeyboardMarkup(rows)

    # ================================
    # 📋 СПИСКИ ТА ПАГІНАЦІЯ
    # ================================
    def item_rows(self, items: Iterable[CatalogItem]) -> Rows:
        """Кнопки переходу до деталей, по `ITEMS_PER_ROW` у рядку."""
        ui = self.const.UI.INLINE_BUTTONS
        limits = self.const.LOGIC.LIMITS
        buttons = [
            self._button(
                f"{ui.ITEM_PREFIXES[item.kind]} {item.name[: limits.BUTTON_NAME_CHARS]}",
                EntityRef.detail(item.kind, item.id),
            )
            for item in items
        ]
        step = limits.ITEMS_PER_ROW
        return [buttons[i : i + step] for i in range(0, len(buttons), step)]

    def pagination_rows(self, pagination: PaginationDescriptor) -> Rows:
        """
        Prev/Next лише там, де сторінка існує.

        Обидві → [[prev, next], [page]]; одна → [[btn, page]]; жодної → [[page]].
        """
        ui = self.const.UI.INLINE_BUTTONS
        nav: List[InlineKeyboardButton] = []
        if pagination.has_previous:
            nav.append(
                self._button(ui.PREV, PageRequest(pagination.kind, pagination.query, pagination.page - 1))
            )
        if pagination.has_next:
            nav.append(
                self._button(ui.NEXT, PageRequest(pagination.kind, pagination.query, pagination.page + 1))
            )
        middle = self._button(
            ui.PAGE_LABEL.format(page=pagination.number, total_pages=pagination.total_pages),
            Noop(),
        )
        if len(nav) == 2:
            return [nav, [middle]]
        if nav:
            return [[*nav, middle]]
        return [[middle]]

    def build_results(self, items: Sequence[ListedItem], pagination: PaginationDescriptor) -> InlineKeyboardMarkup:
        rows = self.item_rows(listed.item for listed in items)
        return InlineKeyboardMarkup(rows + self.pagination_rows(pagination))

    def build_listing(self, items: Sequence[ListedItem]) -> InlineKeyboardMarkup:
        return InlineKeyboardMarkup(self.item_rows(listed.item for listed in items))

    # ================================
    # 📄 КАРТКИ
    # ================================
    def build_card(self, item: CatalogItem) -> InlineKeyboardMarkup:
        ui = self.const.UI.INLINE_BUTTONS
        if isinstance(item, Song):
            rows: Rows = [
                [
                    self._button(ui.DOWNLOAD, EntityRef(CallbackAction.DOWNLOAD, item.id)),
                    self._button(ui.SIMILAR, EntityRef(CallbackAction.SIMILAR, item.id)),
                ]
            ]
        elif isinstance(item, Album):
            rows = [[self._button(ui.DOWNLOAD_ALL, EntityRef(CallbackAction.ALBUM_DOWNLOAD, item.id))]]
        elif isinstance(item, Playlist):
            rows = [[self._button(ui.DOWNLOAD_ALL, EntityRef(CallbackAction.PLAYLIST_DOWNLOAD, item.id))]]
        elif isinstance(item, Artist):
            rows = [
                [
                    self._button(ui.ARTIST_SONGS, EntityRef(CallbackAction.ARTIST_SONGS, item.id)),
                    self._button(ui.ARTIST_ALBUMS, EntityRef(CallbackAction.ARTIST_ALBUMS, item.id)),
                ]
            ]
        else:  # pragma: no cover
            raise TypeError(f"Unsupported catalog item: {type(item)!r}")
        return InlineKeyboardMarkup(rows)


__all__ = ["Keyboard"]
