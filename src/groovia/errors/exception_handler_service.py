# 🛡️ groovia/errors/exception_handler_service.py
"""
🛡️ Центральний сервіс обробки помилок Telegram-хендлерів.

🔹 Конвертує винятки в `AppError` через стратегії.
🔹 `UserVisibleError` показується як є; решта — через `ReasonCode` і презентер.
🔹 Логує user_id і ніколи не піднімає винятків, окрім `CancelledError`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.constants import ParseMode

# 🔠 Системні імпорти
import asyncio
import logging
from typing import Iterable, List, Optional

# 🧩 Внутрішні модулі проєкту
from groovia.bot.ui import static_messages as msg
from groovia.bot.ui.error_presenter import build_error_message
from groovia.shared.utils.logger import LOG_NAME
from .custom_errors import AppError, UserVisibleError
from .reason_mapper import map_error_to_reason
from .strategies import IErrorHandlingStrategy

logger = logging.getLogger(LOG_NAME)


class ExceptionHandlerService:
    """🧠 Глобальний диспетчер помилок для асинхронних хендлерів."""

    def __init__(self, strategies: Iterable[IErrorHandlingStrategy]) -> None:
        self._strategies: List[IErrorHandlingStrategy] = list(strategies)
        logger.info("🛡️ ExceptionHandlerService init (strategies=%d)", len(self._strategies))

    async def handle(self, error: BaseException, update: Optional[object]) -> None:
        """
        Головна точка входу. Нічого не піднімає, окрім CancelledError.
        """
        if isinstance(error, asyncio.CancelledError):
            raise error

        user_id = self._extract_user_id(update)
        domain_error = self._convert_error(error)

        if isinstance(domain_error, UserVisibleError):
            logger.warning(
                "⚠️ UserVisibleError for user=%s: %s",
                user_id,
                domain_error.message,
                extra=domain_error.to_log_extra(),
                exc_info=error,
            )
            await self._safe_reply(update, domain_error.message)
            return

        logger.error("🔥 Unhandled exception for user=%s", user_id, exc_info=error)
        try:
            code, ctx = map_error_to_reason(error)  # type: ignore[arg-type]
            text = build_error_message(code, ctx=ctx)
        except Exception:  # noqa: BLE001
            logger.exception("🔥 Failed to build error message for user=%s", user_id)
            text = msg.ERROR_CRITICAL
        await self._safe_reply(update, text)

    # ================================
    # 🛠️ ДОПОМІЖНІ МЕТОДИ
    # ================================
    def _convert_error(self, error: BaseException) -> Optional[AppError]:
        if not isinstance(error, Exception):
            return None
        for strategy in self._strategies:
            try:
                converted = strategy.handle(error)
            except Exception:  # noqa: BLE001
                logger.exception("🔥 Strategy failed: %r", strategy)
                continue
            if converted is not None:
                return converted
        if isinstance(error, AppError):
            return error
        return None

    @staticmethod
    def _extract_user_id(update: Optional[object]) -> str:
        if not isinstance(update, Update) or update.effective_user is None:
            return "N/A"
        return str(update.effective_user.id)

    @staticmethod
    async def _safe_reply(update: Optional[object], text: str) -> None:
        """💬 Тихо намагається відповісти в чат апдейту."""
        message = getattr(update, "effective_message", None)
        if message is None:
            logger.debug("ℹ️ _safe_reply: no message object")
            return
        try:
            await message.reply_text(text, parse_mode=ParseMode.HTML)
        except Exception as send_err:  # noqa: BLE001
            logger.warning("⚠️ Failed to send error message: %s", send_err)


__all__ = ["ExceptionHandlerService"]
