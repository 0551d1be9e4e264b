# 🧠 groovia/bot/services/custom_context.py
"""
🧠 Розширений PTB-контекст.

🔹 `callback_params` — розібраний payload натиснутої inline-кнопки (кладе `CallbackHandler`).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram.ext import Application, CallbackContext, ExtBot

# 🔠 Системні імпорти
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .callback_data_factory import CallbackPayload


class CustomContext(CallbackContext[ExtBot, Dict[Any, Any], Dict[Any, Any], Dict[Any, Any]]):
    """Контекст, який передається в усі хендлери бота."""

    def __init__(
        self,
        application: Application,
        chat_id: Optional[int] = None,
        user_id: Optional[int] = None,
    ) -> None:
        super().__init__(application=application, chat_id=chat_id, user_id=user_id)
        self.callback_params: Optional["CallbackPayload"] = None


__all__ = ["CustomContext"]
