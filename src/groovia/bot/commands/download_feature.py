# ⬇️ groovia/bot/commands/download_feature.py
"""
⬇️ Кнопки завантаження: один трек (`dl`) та вся колекція (`pldl` / `abdl`).

Підтвердження кнопки («Downloading…») вже надіслав диспетчер; тут лише доставка.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.ext import Application

# 🔠 Системні імпорти
import logging
from typing import Dict, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from groovia.bot.commands.base import BaseFeature
from groovia.bot.services.callback_data_factory import CallbackAction, EntityRef
from groovia.bot.services.callback_registry import CallbackRegistry
from groovia.bot.services.custom_context import CustomContext
from groovia.bot.services.types import CallbackHandlerType
from groovia.bot.ui.formatters.message_formatter import MessageFormatter
from groovia.bot.ui.messengers.audio_delivery import TelegramAudioDelivery
from groovia.domain.music.entities import EntityKind
from groovia.infrastructure.services.download_service import DownloadService
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.commands.download")

_BATCH_KINDS = {
    CallbackAction.PLAYLIST_DOWNLOAD: EntityKind.PLAYLIST,
    CallbackAction.ALBUM_DOWNLOAD: EntityKind.ALBUM,
}


class DownloadFeature(BaseFeature):
    """⬇️ Запускає `DownloadService` для натиснутої кнопки."""

    def __init__(
        self,
        registry: CallbackRegistry,
        download_service: DownloadService,
        formatter: MessageFormatter,
    ) -> None:
        self.registry = registry
        self.download_service = download_service
        self.formatter = formatter
        self.registry.register(self)

    def register_handlers(self, application: Application) -> None:
        logger.debug("⬇️ DownloadFeature has no command handlers")

    def get_callback_handlers(self) -> Dict[CallbackAction, CallbackHandlerType]:
        return {
            CallbackAction.DOWNLOAD: self.on_download,
            CallbackAction.PLAYLIST_DOWNLOAD: self.on_download_all,
            CallbackAction.ALBUM_DOWNLOAD: self.on_download_all,
        }

    def _target(self, update: Update, context: CustomContext) -> Optional[Tuple[int, EntityRef, TelegramAudioDelivery]]:
        ref = context.callback_params
        user, chat = update.effective_user, update.effective_chat
        if not isinstance(ref, EntityRef) or user is None or chat is None:
            return None
        return user.id, ref, TelegramAudioDelivery(context.bot, chat.id, self.formatter)

    async def on_download(self, update: Update, context: CustomContext) -> None:
        target = self._target(update, context)
        if target is None:
            return
        user_id, ref, delivery = target
        await self.download_service.download_one(user_id, ref.item_id, delivery)

    async def on_download_all(self, update: Update, context: CustomContext) -> None:
        target = self._target(update, context)
        if target is None:
            return
        user_id, ref, delivery = target
        await self.download_service.download_all(user_id, _BATCH_KINDS[ref.action], ref.item_id, delivery)


__all__ = ["DownloadFeature"]
