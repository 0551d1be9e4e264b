# 🛠️ groovia/errors/error_handler.py
"""
🛠️ Фабрика декораторів для безпечного виконання async-хендлерів.

🔹 Не змінює сигнатуру функції.
🔹 Пропускає `asyncio.CancelledError`.
🔹 Шукає `Update` серед аргументів і делегує виняток `ExceptionHandlerService`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update

# 🔠 Системні імпорти
import asyncio
import functools
import logging
from typing import Any, Callable, Coroutine, Optional

# 🧩 Внутрішні модулі проєкту
from groovia.shared.utils.logger import LOG_NAME
from .exception_handler_service import ExceptionHandlerService

logger = logging.getLogger(f"{LOG_NAME}.errors")

AsyncHandler = Callable[..., Coroutine[Any, Any, Any]]


def _find_update(args: tuple, kwargs: dict) -> Optional[Update]:
    update = kwargs.get("update")
    if isinstance(update, Update):
        return update
    for arg in args:
        if isinstance(arg, Update):
            return arg
    return None


def make_error_handler(service: ExceptionHandlerService) -> Callable[[AsyncHandler], AsyncHandler]:
    """
    Створює декоратор, замкнений на `ExceptionHandlerService`.

    Обгорнутий хендлер повертає None, якщо виняток було оброблено.
    """

    def decorator(func: AsyncHandler) -> AsyncHandler:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except asyncio.CancelledError:
                logger.info("⏹️ handler cancelled: %s", func.__name__)
                raise
            except Exception as exc:  # noqa: BLE001
                await service.handle(exc, _find_update(args, kwargs))
                return None

        return wrapper

    return decorator


__all__ = ["make_error_handler"]
