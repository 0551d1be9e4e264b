# 📬 groovia/bot/ui/messengers/music_messenger.py
"""
📬 Відправляє результати пошуку, картки та списки у Telegram.

🔹 Перетворює `SearchOutcome` / `DetailOutcome` / `ListingOutcome` на повідомлення
🔹 Картка з обкладинкою → фото з підписом, без обкладинки (або якщо фото не пройшло) → текст
🔹 Для альбому/плейлиста після картки йде список перших треків з кнопками
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import InlineKeyboardMarkup, Message, Update
from telegram.constants import ParseMode
from telegram.error import RetryAfter, TelegramError

# 🔠 Системні імпорти
import logging
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from groovia.bot.ui import static_messages as msg
from groovia.bot.ui.formatters.message_formatter import MessageFormatter
from groovia.bot.ui.keyboards.keyboards import Keyboard
from groovia.domain.music.entities import Album, CatalogItem, ListedItem, Playlist
from groovia.domain.music.outcomes import DetailOutcome, ListingOutcome, OutcomeStatus, SearchOutcome
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.ui.music")


class MusicMessenger:
    """
    🧭 Оркеструє відправку музичних блоків.

    Args:
        formatter: HTML-форматування сутностей.
        keyboard: Фабрика клавіатур.
        detail_list_size: Скільки треків колекції показувати кнопками.
    """

    def __init__(self, formatter: MessageFormatter, keyboard: Keyboard, *, detail_list_size: int = 10) -> None:
        self.formatter = formatter
        self.keyboard = keyboard
        self.detail_list_size = detail_list_size

    # ================================
    # 📤 БАЗОВА ВІДПРАВКА
    # ================================
    @staticmethod
    async def send_text(
        update: Update,
        text: str,
        reply_markup: Optional[InlineKeyboardMarkup] = None,
    ) -> Optional[Message]:
        message = update.effective_message
        if message is None:
            logger.debug("📭 Skip send: update without message")
            return None
        return await message.reply_text(text, parse_mode=ParseMode.HTML, reply_markup=reply_markup)

    # ================================
    # 🔎 ПОШУК
    # ================================
    async def send_search(self, update: Update, outcome: SearchOutcome) -> None:
        if outcome.status is OutcomeStatus.EMPTY_QUERY:
            await self.send_text(update, msg.SEARCH_EMPTY_QUERY)
            return
        if not outcome.ok or outcome.page is None:
            await self.send_text(update, msg.SEARCH_NO_RESULTS)
            return

        page = outcome.page
        await self.send_text(
            update,
            self.formatter.search_page(page),
            self.keyboard.build_results(page.items, page.pagination),
        )

    # ================================
    # 📄 ДЕТАЛІ
    # ================================
    async def _send_card(self, update: Update, item: CatalogItem) -> None:
        message = update.effective_message
        if message is None:
            return
        caption = self.formatter.caption(item)
        markup = self.keyboard.build_card(item)
        cover = item.cover_url
        if cover:
            try:
                await message.reply_photo(photo=cover, caption=caption, parse_mode=ParseMode.HTML, reply_markup=markup)
                return
            except RetryAfter:
                raise
            except TelegramError as exc:
                logger.warning("🖼️ Cover not sent, falling back to text | item=%s cover=%s | %s", item.id, cover, exc)
        await message.reply_text(caption, parse_mode=ParseMode.HTML, reply_markup=markup)

    async def send_detail(self, update: Update, outcome: DetailOutcome) -> None:
        if not outcome.ok or outcome.item is None:
            await self.send_text(update, msg.NOT_FOUND[outcome.kind.value])
            return

        item = outcome.item
        await self._send_card(update, item)

        if isinstance(item, (Album, Playlist)):
            songs = item.songs[: self.detail_list_size]
            listed = tuple(ListedItem(index=i + 1, item=song) for i, song in enumerate(songs))
            await self.send_text(update, self.formatter.numbered_lines(listed), self.keyboard.build_listing(listed))

    # ================================
    # 📋 СПИСКИ
    # ================================
    async def send_listing(
        self,
        update: Update,
        outcome: ListingOutcome,
        *,
        empty_text: str,
        header: Optional[str] = None,
    ) -> None:
        if not outcome.ok:
            await self.send_text(update, empty_text)
            return
        body = self.formatter.numbered_lines(outcome.items)
        text = f"{header}\n{body}" if header else body
        await self.send_text(update, text, self.keyboard.build_listing(outcome.items))


__all__ = ["MusicMessenger"]
