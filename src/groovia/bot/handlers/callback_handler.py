# 🎛️ groovia/bot/handlers/callback_handler.py
"""
🎛️ callback_handler.py — централізований обробник усіх inline-кнопок.

Призначення:
- Відповідає на натискання рівно один раз і до повільної роботи (з тостом для dl/pldl/abdl/q).
- Безпечно розбирає payload через `callback_data_factory.decode`; битий payload — no-op.
- Запамʼятовує користувача (для /stats і /broadcast), навіть якщо він лише тисне кнопки.
- Кладе payload у `context.callback_params` і делегує зареєстрованому хендлеру.
- Всі помилки йдуть у централізований `ExceptionHandlerService`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.error import TelegramError

# 🔠 Системні імпорти
import asyncio
import logging
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from groovia.bot.services.callback_data_factory import (
    CallbackAction,
    CallbackPayload,
    QualityChoice,
    decode,
)
from groovia.bot.services.callback_registry import CallbackRegistry
from groovia.bot.services.custom_context import CustomContext
from groovia.bot.ui import static_messages as msg
from groovia.domain.session.stats import GlobalStats
from groovia.errors.exception_handler_service import ExceptionHandlerService
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.callbacks")

_ACK_TEXTS = {
    CallbackAction.DOWNLOAD: msg.ACK_DOWNLOAD,
    CallbackAction.PLAYLIST_DOWNLOAD: msg.ACK_PLAYLIST_DOWNLOAD,
    CallbackAction.ALBUM_DOWNLOAD: msg.ACK_ALBUM_DOWNLOAD,
}


def ack_text(payload: Optional[CallbackPayload]) -> Optional[str]:
    """Текст тосту для підтвердження натискання (None — без тексту)."""
    if payload is None:
        return None
    if isinstance(payload, QualityChoice):
        return msg.QUALITY_SET.format(label=payload.quality.label)
    return _ACK_TEXTS.get(payload.action)


class CallbackHandler:
    """
    🎛️ Централізовано обробляє натискання на inline-кнопки.

    Примітка:
        Клас не містить бізнес-логіки; тільки розбір, підтвердження та делегування.
    """

    def __init__(
        self,
        registry: CallbackRegistry,
        exception_handler: ExceptionHandlerService,
        stats: Optional[GlobalStats] = None,
    ) -> None:
        self.registry = registry
        self._eh = exception_handler
        self.stats = stats

    async def handle(self, update: Update, context: CustomContext) -> None:
        query = update.callback_query
        if query is None:
            return

        user = update.effective_user
        if self.stats is not None and user is not None:
            self.stats.remember_user(user.id)

        raw_data = query.data
        payload = decode(raw_data)
        logger.info("👆 Callback received: %s", raw_data)

        try:
            await query.answer(text=ack_text(payload))
        except TelegramError as exc:
            logger.debug("Callback answer failed (non-critical): %s", exc)

        if payload is None:
            logger.warning("⚠️ Malformed callback_data ignored: %r", raw_data)
            return

        handler = self.registry.get_handler(payload.action)
        if handler is None:
            logger.warning("⚠️ Handler for callback '%s' not found.", payload.action.value)
            return

        context.callback_params = payload
        try:
            await handler(update, context)
        except asyncio.CancelledError:
            logger.warning("Callback handling cancelled.")
            raise
        except Exception as exc:  # noqa: BLE001
            await self._eh.handle(exc, update)


__all__ = ["CallbackHandler", "ack_text"]
