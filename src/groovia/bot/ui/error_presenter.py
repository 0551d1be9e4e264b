# 🚨 groovia/bot/ui/error_presenter.py
"""
🚨 Формує користувацькі повідомлення про помилки.

🔹 Бере текст з `static_messages` за `ReasonCode`.
🔹 Додає коротку пораду, що робити далі.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Any, Dict, Final, Optional

# 🧩 Внутрішні модулі проєкту
from groovia.bot.ui import static_messages as msg
from groovia.errors.reason_codes import ReasonCode

_NEXT_TIPS: Final[Dict[ReasonCode, str]] = {
    ReasonCode.CATALOG_UNAVAILABLE: "Thodi der baad dobara try karo.",
    ReasonCode.HTTP_TIMEOUT: "Network slow hai, dobara bhejo.",
    ReasonCode.HTTP_CONNECTION: "Internet check karke dobara try karo.",
    ReasonCode.TELEGRAM_RETRY_AFTER: "Kuch second ruk kar dobara try karo.",
    ReasonCode.INTERNAL: "Problem bani rahe to admin ko batao.",
}


def build_error_message(code: ReasonCode, *, ctx: Optional[Dict[str, Any]] = None) -> str:
    """Повертає HTML-текст помилки з порадою (якщо вона є)."""
    context = ctx or {}
    mapping: Dict[ReasonCode, str] = {
        ReasonCode.CATALOG_UNAVAILABLE: msg.ERROR_CATALOG_UNAVAILABLE,
        ReasonCode.HTTP_TIMEOUT: msg.ERROR_HTTP_TIMEOUT,
        ReasonCode.HTTP_CONNECTION: msg.ERROR_HTTP_CONNECTION,
        ReasonCode.HTTP_STATUS: msg.ERROR_HTTP_STATUS.format(status_code=context.get("status_code", "N/A")),
        ReasonCode.TELEGRAM_RETRY_AFTER: msg.ERROR_TELEGRAM_RETRY_AFTER.format(seconds=context.get("seconds", 1)),
        ReasonCode.TELEGRAM_GENERAL: msg.ERROR_TELEGRAM_GENERAL,
        ReasonCode.INTERNAL: msg.ERROR_CRITICAL,
    }
    body = mapping.get(code, msg.ERROR_UNKNOWN)
    tip = _NEXT_TIPS.get(code)
    if tip:
        return f"{body}\n\n<i>{tip}</i>"
    return body


__all__ = ["build_error_message"]
