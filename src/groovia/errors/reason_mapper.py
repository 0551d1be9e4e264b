# 🧭 groovia/errors/reason_mapper.py
"""
🧭 Мапить винятки → `ReasonCode` + контекст для тексту помилки.

Використовується для винятків, які не перетворила жодна стратегія.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx
from telegram.error import RetryAfter, TelegramError

# 🔠 Системні імпорти
from typing import Any, Dict, Tuple

# 🧩 Внутрішні модулі проєкту
from .custom_errors import CatalogError, NetworkRequestError
from .reason_codes import ReasonCode


def map_error_to_reason(exc: Exception) -> Tuple[ReasonCode, Dict[str, Any]]:
    """Повертає (reason_code, ctx); ctx підставляється в текст, наприклад {status_code}."""
    if isinstance(exc, CatalogError):
        return ReasonCode.CATALOG_UNAVAILABLE, {"status_code": exc.status_code}
    if isinstance(exc, NetworkRequestError):
        if exc.retry_after_s:
            return ReasonCode.TELEGRAM_RETRY_AFTER, {"seconds": exc.retry_after_s}
        if exc.status_code:
            return ReasonCode.HTTP_STATUS, {"status_code": exc.status_code}
        return ReasonCode.HTTP_CONNECTION, {}

    if isinstance(exc, httpx.TimeoutException):
        return ReasonCode.HTTP_TIMEOUT, {}
    if isinstance(exc, httpx.HTTPStatusError):
        return ReasonCode.HTTP_STATUS, {"status_code": exc.response.status_code}
    if isinstance(exc, httpx.TransportError):
        return ReasonCode.HTTP_CONNECTION, {}

    if isinstance(exc, RetryAfter):
        retry_after = exc.retry_after
        seconds = int(retry_after.total_seconds() if hasattr(retry_after, "total_seconds") else retry_after)
        return ReasonCode.TELEGRAM_RETRY_AFTER, {"seconds": seconds}
    if isinstance(exc, TelegramError):
        return ReasonCode.TELEGRAM_GENERAL, {}

    return ReasonCode.INTERNAL, {}


__all__ = ["map_error_to_reason"]
