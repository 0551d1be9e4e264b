# ⚙️ groovia/bot/commands/settings_feature.py
"""⚙️ Вибір якості завантаження (кнопки `q:96|160|320`)."""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.error import BadRequest
from telegram.ext import Application

# 🔠 Системні імпорти
import logging
from typing import Dict

# 🧩 Внутрішні модулі проєкту
from groovia.bot.commands.base import BaseFeature
from groovia.bot.services.callback_data_factory import CallbackAction, QualityChoice
from groovia.bot.services.callback_registry import CallbackRegistry
from groovia.bot.services.custom_context import CustomContext
from groovia.bot.services.types import CallbackHandlerType
from groovia.bot.ui.keyboards.keyboards import Keyboard
from groovia.domain.session.store import SessionStore
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.commands.settings")


class SettingsFeature(BaseFeature):
    def __init__(self, registry: CallbackRegistry, sessions: SessionStore, keyboard: Keyboard) -> None:
        self.registry = registry
        self.sessions = sessions
        self.keyboard = keyboard
        self.registry.register(self)

    def register_handlers(self, application: Application) -> None:
        logger.debug("⚙️ SettingsFeature has no command handlers")

    def get_callback_handlers(self) -> Dict[CallbackAction, CallbackHandlerType]:
        return {CallbackAction.QUALITY: self.on_quality}

    async def on_quality(self, update: Update, context: CustomContext) -> None:
        """Зберігає якість і перемальовує клавіатуру налаштувань на місці."""
        choice = context.callback_params
        query = update.callback_query
        if not isinstance(choice, QualityChoice) or update.effective_user is None:
            return

        session = self.sessions.get(update.effective_user.id)
        session.set_quality(choice.quality)
        logger.info("🎚️ Quality set | user=%s quality=%s", session.user_id, choice.quality.label)

        if query is None:
            return
        try:
            await query.edit_message_reply_markup(reply_markup=self.keyboard.build_settings(session.quality))
        except BadRequest as exc:
            if "not modified" not in str(exc).lower():
                raise
            logger.debug("⚙️ Settings keyboard unchanged | user=%s", session.user_id)


__all__ = ["SettingsFeature"]
