# 🤖 groovia/bot/main.py
"""
🤖 Entry-point Telegram застосунку Groovia.

🔹 Ініціалізує логування, DI-контейнер та Application PTB.
🔹 Реєструє всі обробники й глобальний error-handler, запускає `run_polling`.
🔹 Після зупинки закриває HTTP-клієнт каталогу.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from dotenv import load_dotenv											# 🌱 Завантаження змінних оточення з .env
from telegram.ext import Application, ApplicationBuilder, ContextTypes					# 🤖 PTB v21 Application API

# 🔠 Системні імпорти
import logging															# 🧾 Логування подій запуску
import os																# 🌍 Робота з оточенням/ENV
from typing import Optional												# 🧮 Анотації Optional

# 🧩 Внутрішні модулі проєкту
from groovia.bot.services import CustomContext								# 🧠 Кастомний PTB-контекст
from groovia.config.config_service import ConfigService							# ⚙️ Завантаження конфігів
from groovia.config.setup.bot_registrar import BotRegistrar							# 📋 Реєстрація хендлерів
from groovia.config.setup.container import Container, bootstrap_logging				# 🚀 Логування + DI-контейнер
from groovia.shared.utils.logger import LOG_NAME								# 🏷️ Ім'я кореневого логера

logger = logging.getLogger(LOG_NAME)


# ================================
# 🧩 DI / APPLICATION BUILDER
# ================================
def build_application(token: str, container: Optional[Container] = None) -> Application:
    """
    Створює та повертає PTB Application із зареєстрованими обробниками.
    """
    if container is None:
        logger.debug("🧱 Створюємо DI-контейнер")
        container = Container(ConfigService())

    async def _post_shutdown(_: Application) -> None:
        await container.aclose()
        logger.info("🔌 HTTP-клієнт каталогу закрито")

    application = (
        ApplicationBuilder()
        .token(token)
        .context_types(ContextTypes(context=CustomContext))
        .post_shutdown(_post_shutdown)
        .build()
    )

    application.bot_data["container"] = container								# 📦 Зберігаємо контейнер для дебагу/тестів

    logger.info("🧾 Реєструємо обробники Telegram")
    BotRegistrar(application, container).register_handlers()

    async def _on_error(update, context) -> None:
        """
        Глобальний error-handler PTB: відправляє винятки у централізований сервіс.
        """
        err: Optional[Exception] = getattr(context, "error", None)
        if err is None:
            logger.debug("ℹ️ _on_error викликано без context.error")
            return
        logger.error("🔥 Виняток у PTB: %s", err, exc_info=err)
        try:
            await container.exception_handler_service.handle(err, update)
        except Exception as nested:  # noqa: BLE001
            logger.exception("💥 Global error handler failed: %s", nested)

    application.add_error_handler(_on_error)
    logger.info("✅ Application готовий до запуску")
    return application


def resolve_token(config: ConfigService) -> str:
    """
    Токен: BOT_TOKEN → TELEGRAM_BOT_TOKEN → `telegram.bot_token` з конфігу.

    Raises:
        RuntimeError: токен не задано ніде.
    """
    token = os.getenv("BOT_TOKEN") or os.getenv("TELEGRAM_BOT_TOKEN")
    if not token:
        logger.warning("⚠️ Токен в ENV не знайдено, читаємо з конфігів")
        token = config.get("telegram.bot_token")
    if not token:
        logger.critical("🚨 Не знайдено токен Telegram")
        raise RuntimeError("Set BOT_TOKEN (or TELEGRAM_BOT_TOKEN) in environment.")
    return str(token)


# ================================
# 🚀 ENTRYPOINT
# ================================
def run() -> None:
    """
    Основна точка входу: читає .env і токен, запускає бота.
    """
    load_dotenv()
    bootstrap_logging()

    token = resolve_token(ConfigService())
    application = build_application(token)
    logger.info("🤖 Bot is starting…")
    application.run_polling()
    logger.info("👋 Bot stopped")


if __name__ == "__main__":
    run()
