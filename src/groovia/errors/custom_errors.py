# 🚨 groovia/errors/custom_errors.py
"""
🚨 Ієрархія доменних винятків.

🔹 `AppError` — база; `UserVisibleError` — текст можна показати користувачу як є.
🔹 `CatalogError` — API каталогу відповів не-2xx або `success: false`.
🔹 `NetworkRequestError` — мережевий/транспортний збій, перетворений стратегією.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, Optional


class AppError(Exception):
    """🧠 Базовий виняток застосунку."""

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_log_extra(self) -> Dict[str, object]:
        extra: Dict[str, object] = {"error_code": type(self).__name__}
        if self.details:
            extra["details"] = self.details
        return extra


class UserVisibleError(AppError):
    """👀 Помилка з готовим текстом для користувача."""


class CatalogError(AppError):
    """
    🎵 Збій API каталогу.

    `status_code` заповнений для не-2xx відповідей; для `success: false` він None,
    а причина лежить у `reason`.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=reason)
        self.endpoint = endpoint
        self.status_code = status_code
        self.reason = reason

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.endpoint:
            extra["endpoint"] = self.endpoint
        if self.status_code is not None:
            extra["status_code"] = self.status_code
        return extra


class NetworkRequestError(UserVisibleError):
    """🌐 Мережевий збій (таймаут, зʼєднання, Telegram RetryAfter)."""

    def __init__(
        self,
        message: str,
        *,
        details: Optional[str] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        retry_after_s: Optional[int] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.url = url
        self.status_code = status_code
        self.retry_after_s = retry_after_s

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.url:
            extra["url"] = self.url
        if self.status_code is not None:
            extra["status_code"] = self.status_code
        if self.retry_after_s is not None:
            extra["retry_after_s"] = self.retry_after_s
        return extra


__all__ = ["AppError", "UserVisibleError", "CatalogError", "NetworkRequestError"]
