# 📋 groovia/bot/commands/main_menu_feature.py
"""
📋 Фіча головного меню (Reply-кнопки).

Призначення:
- Кнопки пошуку переводять сесію в очікування запиту потрібного типу.
- «Trending», «History», «Settings» відповідають одразу.

Інтеграція:
- `IntentRouter` визначає, що текст є кнопкою меню, і делегує на `handle_menu`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.constants import ParseMode

# 🔠 Системні імпорти
import logging

# 🧩 Внутрішні модулі проєкту
from groovia.bot.commands.music_feature import MusicFeature
from groovia.bot.services.custom_context import CustomContext
from groovia.bot.ui import static_messages as msg
from groovia.bot.ui.formatters.message_formatter import MessageFormatter
from groovia.bot.ui.keyboards.keyboards import Keyboard
from groovia.config.setup.constants import AppConstants
from groovia.domain.session.store import SessionStore
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.commands.menu")


class MainMenuFeature:
    """Обробляє текстові кнопки головного меню."""

    def __init__(
        self,
        *,
        constants: AppConstants,
        sessions: SessionStore,
        music: MusicFeature,
        keyboard: Keyboard,
        formatter: MessageFormatter,
    ) -> None:
        self.const = constants
        self.sessions = sessions
        self.music = music
        self.keyboard = keyboard
        self.formatter = formatter

    def is_menu_button(self, text: str) -> bool:
        return text in self.const.get_all_reply_buttons()

    async def handle_menu(self, update: Update, context: CustomContext) -> None:
        """Єдина точка обробки натискань на кнопки головного меню."""
        message = update.message
        if message is None or update.effective_user is None:
            logger.debug("📭 Skip main menu: update without message")
            return

        user_id = update.effective_user.id
        text = (message.text or "").strip()
        buttons = self.const.UI.REPLY_BUTTONS
        session = self.sessions.get(user_id)
        logger.info("🕹️ MainMenu click user=%s text=%r", user_id, text)

        kind = self.const.search_menu_kinds().get(text)
        if kind is not None:
            session.await_query(kind)
            await message.reply_text(msg.ASK_QUERY[kind.value], parse_mode=ParseMode.HTML)
            return

        if text == buttons.SETTINGS:
            await message.reply_text(
                msg.SETTINGS_PROMPT,
                reply_markup=self.keyboard.build_settings(session.quality),
            )
            return

        if text == buttons.HISTORY:
            entries = session.recent_history(self.const.LOGIC.LIMITS.HISTORY_SHOWN)
            await message.reply_text(self.formatter.history(entries), parse_mode=ParseMode.HTML)
            return

        if text == buttons.TRENDING:
            await self.music.show_trending(update)
            return

        logger.warning("⚠️ Unknown main menu button: %r", text)


__all__ = ["MainMenuFeature"]
