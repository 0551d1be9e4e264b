# 🎧 groovia/bot/ui/messengers/audio_delivery.py
"""
🎧 Telegram-реалізація порту доставки аудіо.

🔹 `deliver` — лоадер → `send_audio` за URL (з очікуванням на flood control) → видалення лоадера
🔹 `report` — текст про пропущений трек; ніколи не піднімає виняток
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Bot
from telegram.constants import ParseMode
from telegram.error import RetryAfter, TelegramError

# 🔠 Системні імпорти
import asyncio
from datetime import timedelta
from html import escape
import logging
from typing import Union

# 🧩 Внутрішні модулі проєкту
from groovia.bot.ui import static_messages as msg
from groovia.bot.ui.formatters.message_formatter import MessageFormatter
from groovia.domain.music.entities import EntityKind, Song
from groovia.domain.music.outcomes import DownloadOutcome, DownloadStatus
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.ui.audio")


def _retry_seconds(retry_after: Union[int, float, timedelta]) -> float:
    if isinstance(retry_after, timedelta):
        return retry_after.total_seconds()
    return float(retry_after)


class TelegramAudioDelivery:
    """
    Доставляє аудіо в один чат.

    На flood control (`RetryAfter`) чекає вказаний Telegram час і повторює
    `send_audio`, але не більше `max_retries` разів; далі виняток летить вище.
    """

    def __init__(self, bot: Bot, chat_id: int, formatter: MessageFormatter, *, max_retries: int = 3) -> None:
        self.bot = bot
        self.chat_id = chat_id
        self.formatter = formatter
        self.max_retries = max(int(max_retries), 0)

    async def _send_audio(self, song: Song, url: str) -> None:
        attempt = 0
        while True:
            try:
                await self.bot.send_audio(
                    self.chat_id,
                    audio=url,
                    title=song.name,
                    performer=song.artists,
                    caption=self.formatter.audio_caption(song),
                    parse_mode=ParseMode.HTML,
                )
                return
            except RetryAfter as exc:
                if attempt >= self.max_retries:
                    raise
                attempt += 1
                delay = _retry_seconds(exc.retry_after)
                logger.warning(
                    "⏳ Flood control | chat=%s song=%s | wait %.1fs (retry %d/%d)",
                    self.chat_id,
                    song.id,
                    delay,
                    attempt,
                    self.max_retries,
                )
                await asyncio.sleep(delay)

    async def deliver(self, song: Song, url: str) -> None:
        loader = await self.bot.send_message(self.chat_id, msg.DOWNLOAD_LOADER)
        try:
            await self._send_audio(song, url)
        finally:
            try:
                await self.bot.delete_message(self.chat_id, loader.message_id)
            except TelegramError as exc:
                logger.debug("🧹 Loader delete failed (ignored): %s", exc)

    def _report_text(self, outcome: DownloadOutcome) -> str:
        title = escape(outcome.title or outcome.item_id, quote=False)
        if outcome.status is DownloadStatus.NOT_FOUND:
            if outcome.kind is EntityKind.SONG:
                return msg.DOWNLOAD_SONG_NOT_FOUND
            return msg.NOT_FOUND[outcome.kind.value]
        if outcome.status is DownloadStatus.NO_ENCODING:
            return msg.DOWNLOAD_LINK_MISSING.format(title=title)
        if outcome.status is DownloadStatus.DELIVERY_FAILED:
            return msg.DOWNLOAD_SEND_FAILED
        return msg.DOWNLOAD_TRACK_FAILED.format(title=title)

    async def report(self, outcome: DownloadOutcome) -> None:
        if outcome.delivered:
            return
        try:
            await self.bot.send_message(self.chat_id, self._report_text(outcome), parse_mode=ParseMode.HTML)
        except asyncio.CancelledError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.warning("⚠️ Download report not sent | chat=%s | %s", self.chat_id, exc)


__all__ = ["TelegramAudioDelivery"]
