# 📬 groovia/bot/commands/core_commands_feature.py
"""
📬 Реалізація базових команд `/start` та `/help`.

🔹 Реєструє користувача у глобальній статистиці
🔹 Надсилає привітання та головне меню
🔹 Обслуговує інертну кнопку `noop` (номер сторінки)
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import Application, CommandHandler

# 🔠 Системні імпорти
import logging
from html import escape
from typing import Dict, cast

# 🧩 Внутрішні модулі проєкту
from groovia.bot.commands.base import BaseFeature
from groovia.bot.services.callback_data_factory import CallbackAction
from groovia.bot.services.callback_registry import CallbackRegistry
from groovia.bot.services.custom_context import CustomContext
from groovia.bot.services.types import CallbackHandlerType
from groovia.bot.ui import static_messages as msg
from groovia.bot.ui.keyboards.keyboards import Keyboard
from groovia.config.setup.constants import AppConstants
from groovia.domain.session.stats import GlobalStats
from groovia.errors.error_handler import make_error_handler
from groovia.errors.exception_handler_service import ExceptionHandlerService
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.commands.core")


class CoreCommandsFeature(BaseFeature):
    """
    ✨ Інкапсулює `/start`, `/help` та кнопку `noop`.
    """

    def __init__(
        self,
        registry: CallbackRegistry,
        constants: AppConstants,
        stats: GlobalStats,
        keyboard: Keyboard,
        exception_handler: ExceptionHandlerService,
    ) -> None:
        self.registry = registry
        self.const = constants
        self.stats = stats
        self.keyboard = keyboard

        safe_wrapper = make_error_handler(exception_handler)
        self._safe_start = cast(CallbackHandlerType, safe_wrapper(self.start_command))
        self._safe_help = cast(CallbackHandlerType, safe_wrapper(self.help_command))

        self.registry.register(self)

    # ================================
    # 🔌 РЕЄСТРАЦІЯ
    # ================================
    def register_handlers(self, application: Application) -> None:
        commands = self.const.LOGIC.COMMANDS
        application.add_handler(CommandHandler(commands.START, self._safe_start))
        application.add_handler(CommandHandler(commands.HELP, self._safe_help))
        logger.info("🧾 Core commands registered (start/help)")

    def get_callback_handlers(self) -> Dict[CallbackAction, CallbackHandlerType]:
        return {CallbackAction.NOOP: self.noop}

    # ================================
    # ▶️ /START
    # ================================
    async def start_command(self, update: Update, context: CustomContext) -> None:
        """
        Обробляє `/start`: запамʼятовує користувача, надсилає привітання та меню.
        """
        user = update.effective_user
        if user is not None:
            self.stats.remember_user(user.id)
        logger.info("➡️ /start by user=%s", getattr(user, "id", "unknown"))

        if update.message is None:
            return

        first_name = escape(getattr(user, "first_name", None) or "", quote=False)
        await update.message.reply_text(
            msg.START_WELCOME.format(first_name=first_name),
            reply_markup=self.keyboard.build_main_menu(),
            parse_mode=ParseMode.HTML,
        )

    # ================================
    # ▶️ /HELP
    # ================================
    async def help_command(self, update: Update, context: CustomContext) -> None:
        logger.info("ℹ️ /help by user=%s", getattr(update.effective_user, "id", "unknown"))
        if update.message is None:
            return
        await update.message.reply_text(
            msg.HELP_TEXT,
            reply_markup=self.keyboard.build_main_menu(),
            parse_mode=ParseMode.HTML,
        )

    async def noop(self, update: Update, context: CustomContext) -> None:
        """Кнопка «Page x/y»: підтвердження вже надіслано диспетчером."""
        return None


__all__ = ["CoreCommandsFeature"]
