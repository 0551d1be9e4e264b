# 📜 groovia/errors/strategies.py
"""
📜 Стратегії конвертації сторонніх винятків у доменні `AppError`.

🔹 Кожна стратегія розпізнає свій тип винятку або повертає None.
🔹 `ExceptionHandlerService` перебирає їх по черзі.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт (винятки)
from telegram.error import RetryAfter, TelegramError					# 🤖 Telegram винятки

# 🔠 Системні імпорти
import logging
from typing import Optional, Protocol

# 🧩 Внутрішні модулі проєкту
from groovia.bot.ui import static_messages as msg
from groovia.shared.utils.logger import LOG_NAME
from .custom_errors import AppError, CatalogError, NetworkRequestError

logger = logging.getLogger(f"{LOG_NAME}.errors")


class IErrorHandlingStrategy(Protocol):
    def handle(self, error: Exception) -> Optional[AppError]:
        """Вертає `AppError`, якщо виняток розпізнано, або None."""


# ================================
# 🎵 КАТАЛОГ
# ================================
class CatalogErrorStrategy:
    """🎵 `CatalogError` → повідомлення «каталог недоступний»."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if not isinstance(error, CatalogError):
            return None
        logger.debug("🎵 catalog error", extra=error.to_log_extra())
        return NetworkRequestError(
            msg.ERROR_CATALOG_UNAVAILABLE,
            url=error.endpoint,
            status_code=error.status_code,
            details=error.reason or str(error),
        )


# ================================
# 🌐 HTTPX
# ================================
def _request_url(error: httpx.HTTPError) -> str:
    try:
        return str(error.request.url)
    except RuntimeError:												# 🚫 request не привʼязаний до винятку
        return "N/A"


class HttpxErrorStrategy:
    """🌐 Перетворює httpx-помилки на `NetworkRequestError`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, httpx.TimeoutException):
            return NetworkRequestError(msg.ERROR_HTTP_TIMEOUT, url=_request_url(error), details=str(error))
        if isinstance(error, httpx.HTTPStatusError):
            status = error.response.status_code
            return NetworkRequestError(
                msg.ERROR_HTTP_STATUS.format(status_code=status),
                url=_request_url(error),
                status_code=status,
                details=str(error),
            )
        if isinstance(error, httpx.TransportError):					# 🌐 ConnectError, ReadError, ...
            return NetworkRequestError(msg.ERROR_HTTP_CONNECTION, url=_request_url(error), details=str(error))
        return None


# ================================
# 🤖 TELEGRAM
# ================================
class TelegramErrorStrategy:
    """🤖 Конвертує Telegram-помилки в `NetworkRequestError`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, RetryAfter):
            retry_after = error.retry_after
            secs = int(retry_after.total_seconds() if hasattr(retry_after, "total_seconds") else retry_after)
            return NetworkRequestError(
                msg.ERROR_TELEGRAM_RETRY_AFTER.format(seconds=secs),
                details=str(error),
                retry_after_s=secs,
            )
        if isinstance(error, TelegramError):
            return NetworkRequestError(msg.ERROR_TELEGRAM_GENERAL, details=str(error))
        return None


__all__ = [
    "IErrorHandlingStrategy",
    "CatalogErrorStrategy",
    "HttpxErrorStrategy",
    "TelegramErrorStrategy",
]
