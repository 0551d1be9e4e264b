# 🗂️ groovia/bot/services/callback_registry.py
"""
🗂️ callback_registry.py — центральний реєстр обробників inline-кнопок.

🎯 Призначення:
    • Зберігає відповідність `CallbackAction` → async-обробник
    • Фічі реєструють себе самі через `get_callback_handlers()`
    • Пише діагностичні логи (конфлікти, джерела реєстрації)

⚙️ Особливості:
    • Ключ має бути `CallbackAction`, обробник — корутина (async def)
    • Повторна реєстрація дії перезаписує попередню з попередженням
"""

from __future__ import annotations

# 🔠 Системні імпорти
import inspect
import logging
from typing import Dict, Iterable, Iterator, Optional

# 🧩 Внутрішні модулі проєкту
from groovia.shared.utils.logger import LOG_NAME
from .callback_data_factory import CallbackAction
from .types import CallbackHandlerType, Registrable

logger = logging.getLogger(f"{LOG_NAME}.callbacks")


class CallbackRegistry:
    """
    🗂️ Реєстр callback-ів.

    Використання:
        1) Фіча реалізує `Registrable` і повертає мапу з `get_callback_handlers()`
        2) `registry.register(feature)` реєструє всі пари (action → handler)
        3) `get_handler(action)` повертає обробник або None
    """

    def __init__(self) -> None:
        self._handlers: Dict[CallbackAction, CallbackHandlerType] = {}

    # ==========================
    # ➕ РЕЄСТРАЦІЯ
    # ==========================
    def register(self, feature_instance: Registrable) -> None:
        """
        Реєструє всі обробники фічі.

        Raises:
            TypeError: ключ не `CallbackAction` або обробник не async-функція.
        """
        origin = feature_instance.__class__.__name__
        for action, handler in feature_instance.get_callback_handlers().items():
            self._register_pair(action, handler, origin_hint=origin)

    def register_map(self, mapping: Dict[CallbackAction, CallbackHandlerType], *, origin: str = "manual") -> None:
        for action, handler in mapping.items():
            self._register_pair(action, handler, origin_hint=origin)

    # ==========================
    # 🔍 ОТРИМАННЯ
    # ==========================
    def get_handler(self, action: CallbackAction) -> Optional[CallbackHandlerType]:
        return self._handlers.get(action)

    def missing(self, actions: Iterable[CallbackAction] = CallbackAction) -> Iterator[CallbackAction]:
        """Дії без зареєстрованого обробника (самоперевірка на старті)."""
        return (action for action in actions if action not in self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, action: object) -> bool:
        return action in self._handlers

    # ==========================
    # 🔒 ВНУТРІШНЯ РЕЄСТРАЦІЯ ПАРИ
    # ==========================
    def _register_pair(self, action: CallbackAction, handler: CallbackHandlerType, *, origin_hint: str) -> None:
        if not isinstance(action, CallbackAction):
            raise TypeError(f"Ключ callback-обробника має бути CallbackAction, а не {type(action)}")
        if not inspect.iscoroutinefunction(handler):
            raise TypeError(f"Обробник для '{action.value}' має бути async-функцією (async def).")

        if action in self._handlers:
            logger.warning("⚠️ Обробник для '%s' перезаписано (джерело: %s).", action.value, origin_hint)

        self._handlers[action] = handler
        logger.info("✅ Обробник для callback '%s' зареєстровано (джерело: %s).", action.value, origin_hint)


__all__ = ["CallbackRegistry"]
