# 🧮 groovia/errors/reason_codes.py
"""🧮 Коди причин, за якими будується текст помилки для користувача."""

from __future__ import annotations

from enum import Enum


class ReasonCode(str, Enum):
    CATALOG_UNAVAILABLE = "catalog_unavailable"
    HTTP_TIMEOUT = "http_timeout"
    HTTP_CONNECTION = "http_connection"
    HTTP_STATUS = "http_status"
    TELEGRAM_RETRY_AFTER = "telegram_retry_after"
    TELEGRAM_GENERAL = "telegram_general"
    INTERNAL = "internal"


__all__ = ["ReasonCode"]
