# 🔗 groovia/bot/services/types.py
"""🔗 Спільні типи шару бота: сигнатура callback-хендлера та контракт фічі."""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update

# 🔠 Системні імпорти
from typing import TYPE_CHECKING, Awaitable, Callable, Dict, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .callback_data_factory import CallbackAction
    from .custom_context import CustomContext

CallbackHandlerType = Callable[[Update, "CustomContext"], Awaitable[None]]


@runtime_checkable
class Registrable(Protocol):
    """Фіча, що публікує свої callback-хендлери в реєстр."""

    def get_callback_handlers(self) -> Dict["CallbackAction", CallbackHandlerType]: ...


__all__ = ["CallbackHandlerType", "Registrable"]
