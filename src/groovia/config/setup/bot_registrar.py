# 🧾 groovia/config/setup/bot_registrar.py
"""
🧾 bot_registrar.py — реєстрація всіх обробників у застосунку.

🔹 Спочатку команди фіч, потім callback-диспетчер, останнім — роутер тексту.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram.ext import Application, CallbackQueryHandler, MessageHandler, filters

# 🔠 Системні імпорти
import logging

# 🧩 Внутрішні модулі проєкту
from groovia.config.setup.container import Container
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(LOG_NAME)


class BotRegistrar:
    """
    🔌 Реєструє всі обробники (хендлери) в Telegram Application.
    """

    def __init__(self, application: Application, container: Container):
        self.app = application
        self.container = container

    def register_handlers(self) -> None:
        logger.info("--- Починаю реєстрацію фіч ---")
        for feature in self.container.features:
            feature.register_handlers(self.app)
            logger.info("✅ Фіча '%s' зареєстрована.", feature.__class__.__name__)

        self.app.add_handler(CallbackQueryHandler(self.container.callback_handler.handle))

        # Останній MessageHandler: меню, посилання, запити та пошук за замовчуванням
        self.app.add_handler(
            MessageHandler(
                filters.TEXT & ~filters.COMMAND,
                self.container.error_handler(self.container.intent_router.handle),
            )
        )
        logger.info("--- Усі обробники зареєстровано ---")


__all__ = ["BotRegistrar"]
