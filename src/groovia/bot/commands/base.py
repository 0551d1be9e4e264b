# 🏛️ groovia/bot/commands/base.py
"""
🏛️ Базовий контракт фічі бота.

🔹 `register_handlers` — додає команди в PTB Application
🔹 `get_callback_handlers` — мапа `CallbackAction` → async-обробник для реєстру
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram.ext import Application

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from typing import Dict

# 🧩 Внутрішні модулі проєкту
from groovia.bot.services.callback_data_factory import CallbackAction
from groovia.bot.services.types import CallbackHandlerType


class BaseFeature(ABC):
    """Фіча, яку `BotRegistrar` підключає до застосунку."""

    @abstractmethod
    def register_handlers(self, application: Application) -> None:
        """Реєструє командні хендлери фічі."""

    def get_callback_handlers(self) -> Dict[CallbackAction, CallbackHandlerType]:
        """Callback-и фічі; за замовчуванням — жодного."""
        return {}


__all__ = ["BaseFeature"]
