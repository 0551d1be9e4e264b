# 🛡️ groovia/bot/commands/admin_feature.py
"""
🛡️ Адмінські команди `/stats` та `/broadcast`.

🔹 Обидві працюють лише для налаштованого `admin.user_id`; інші виклики ігноруються
🔹 Розсилка не зупиняється на окремих збоях і звітує кількість sent / failed
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.constants import ParseMode
from telegram.error import TelegramError
from telegram.ext import Application, CommandHandler

# 🔠 Системні імпорти
import logging
from typing import Optional, Tuple, cast

# 🧩 Внутрішні модулі проєкту
from groovia.bot.commands.base import BaseFeature
from groovia.bot.services.custom_context import CustomContext
from groovia.bot.services.types import CallbackHandlerType
from groovia.bot.ui import static_messages as msg
from groovia.bot.ui.formatters.message_formatter import MessageFormatter
from groovia.config.setup.constants import AppConstants
from groovia.domain.session.stats import GlobalStats
from groovia.errors.error_handler import make_error_handler
from groovia.errors.exception_handler_service import ExceptionHandlerService
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.commands.admin")


class AdminFeature(BaseFeature):
    """
    📊 Статистика процесу та розсилка всім відомим користувачам.

    Args:
        admin_id: Telegram id адміністратора; None вимикає обидві команди.
    """

    def __init__(
        self,
        constants: AppConstants,
        stats: GlobalStats,
        formatter: MessageFormatter,
        exception_handler: ExceptionHandlerService,
        *,
        admin_id: Optional[int],
    ) -> None:
        self.const = constants
        self.stats = stats
        self.formatter = formatter
        self.admin_id = admin_id

        safe_wrapper = make_error_handler(exception_handler)
        self._safe_stats = cast(CallbackHandlerType, safe_wrapper(self.stats_command))
        self._safe_broadcast = cast(CallbackHandlerType, safe_wrapper(self.broadcast_command))
        if admin_id is None:
            logger.warning("⚠️ admin.user_id не задано: /stats та /broadcast вимкнені")

    def register_handlers(self, application: Application) -> None:
        commands = self.const.LOGIC.COMMANDS
        application.add_handler(CommandHandler(commands.STATS, self._safe_stats))
        application.add_handler(CommandHandler(commands.BROADCAST, self._safe_broadcast))
        logger.info("🛡️ Admin commands registered (stats/broadcast)")

    def _is_admin(self, update: Update) -> bool:
        user = update.effective_user
        allowed = self.admin_id is not None and user is not None and user.id == self.admin_id
        if not allowed:
            logger.info("🚫 Admin command denied | user=%s", getattr(user, "id", "unknown"))
        return allowed

    # ================================
    # 📊 /STATS
    # ================================
    async def stats_command(self, update: Update, context: CustomContext) -> None:
        if update.message is None or not self._is_admin(update):
            return
        await update.message.reply_text(self.formatter.stats(self.stats.snapshot()), parse_mode=ParseMode.HTML)

    # ================================
    # 📢 /BROADCAST
    # ================================
    @staticmethod
    def _broadcast_text(raw: Optional[str]) -> str:
        parts = (raw or "").split(None, 1)
        return parts[1].strip() if len(parts) > 1 else ""

    async def broadcast(self, context: CustomContext, text: str) -> Tuple[int, int]:
        """Надсилає текст усім відомим користувачам; повертає (sent, failed)."""
        body = self.formatter.broadcast(text)
        sent = failed = 0
        for user_id in self.stats.user_ids():
            try:
                await context.bot.send_message(user_id, body, parse_mode=ParseMode.HTML)
                sent += 1
            except TelegramError as exc:
                failed += 1
                logger.warning("📪 Broadcast failed | user=%s | %s", user_id, exc)
        return sent, failed

    async def broadcast_command(self, update: Update, context: CustomContext) -> None:
        if update.message is None or not self._is_admin(update):
            return
        text = self._broadcast_text(update.message.text)
        if not text:
            await update.message.reply_text(msg.BROADCAST_USAGE)
            return

        sent, failed = await self.broadcast(context, text)
        logger.info("📢 Broadcast done | sent=%d failed=%d", sent, failed)
        await update.message.reply_text(msg.BROADCAST_DONE.format(sent=sent, failed=failed))


__all__ = ["AdminFeature"]
