# 🎵 groovia/bot/commands/music_feature.py
"""
🎵 Пошук, деталізація та похідні списки каталогу.

🔹 Callback-и: song/album/playlist/artist → картка; similar; artsongs/artalbums; page
🔹 `run_search` / `show_detail` — спільні точки входу для роутера тексту та меню
🔹 Перехід сторінки бере запит з кнопки, а не з сесії
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.ext import Application

# 🔠 Системні імпорти
import logging
from typing import Dict, Optional

# 🧩 Внутрішні модулі проєкту
from groovia.bot.commands.base import BaseFeature
from groovia.bot.services.callback_data_factory import CallbackAction, EntityRef, PageRequest
from groovia.bot.services.callback_registry import CallbackRegistry
from groovia.bot.services.custom_context import CustomContext
from groovia.bot.services.types import CallbackHandlerType
from groovia.bot.ui import static_messages as msg
from groovia.bot.ui.messengers.music_messenger import MusicMessenger
from groovia.domain.music.entities import EntityKind
from groovia.infrastructure.services.search_service import SearchService
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.commands.music")


def _user_id(update: Update) -> int:
    user = update.effective_user
    if user is None:
        raise ValueError("update has no effective_user")
    return user.id


class MusicFeature(BaseFeature):
    """🎵 Показ результатів пошуку, карток сутностей і пов'язаних списків."""

    def __init__(self, registry: CallbackRegistry, search_service: SearchService, messenger: MusicMessenger) -> None:
        self.registry = registry
        self.search_service = search_service
        self.messenger = messenger
        self.registry.register(self)

    def register_handlers(self, application: Application) -> None:
        """Команд немає: фіча працює через callback-и та роутер тексту."""
        logger.debug("🎵 MusicFeature has no command handlers")

    def get_callback_handlers(self) -> Dict[CallbackAction, CallbackHandlerType]:
        return {
            CallbackAction.SONG: self.on_detail,
            CallbackAction.ALBUM: self.on_detail,
            CallbackAction.PLAYLIST: self.on_detail,
            CallbackAction.ARTIST: self.on_detail,
            CallbackAction.SIMILAR: self.on_similar,
            CallbackAction.ARTIST_SONGS: self.on_artist_songs,
            CallbackAction.ARTIST_ALBUMS: self.on_artist_albums,
            CallbackAction.PAGE: self.on_page,
        }

    # ================================
    # 🔎 СПІЛЬНІ ТОЧКИ ВХОДУ
    # ================================
    async def run_search(self, update: Update, kind: EntityKind, query: str, page: int = 0) -> None:
        outcome = await self.search_service.search(_user_id(update), kind, query, page)
        await self.messenger.send_search(update, outcome)

    async def show_detail(
        self,
        update: Update,
        kind: EntityKind,
        *,
        entity_id: Optional[str] = None,
        link: Optional[str] = None,
    ) -> None:
        outcome = await self.search_service.detail(_user_id(update), kind, entity_id=entity_id, link=link)
        await self.messenger.send_detail(update, outcome)

    async def show_trending(self, update: Update) -> None:
        outcome = await self.search_service.trending(_user_id(update))
        await self.messenger.send_detail(update, outcome)

    # ================================
    # 📞 CALLBACK-И
    # ================================
    async def on_detail(self, update: Update, context: CustomContext) -> None:
        ref = context.callback_params
        if not isinstance(ref, EntityRef) or ref.kind is None:
            return
        await self.show_detail(update, ref.kind, entity_id=ref.item_id)

    async def on_page(self, update: Update, context: CustomContext) -> None:
        request = context.callback_params
        if not isinstance(request, PageRequest):
            return
        logger.info("📄 Page turn | kind=%s query=%r page=%d", request.kind.value, request.query, request.page)
        await self.run_search(update, request.kind, request.query, request.page)

    async def on_similar(self, update: Update, context: CustomContext) -> None:
        ref = context.callback_params
        if not isinstance(ref, EntityRef):
            return
        outcome = await self.search_service.similar(ref.item_id)
        await self.messenger.send_listing(update, outcome, empty_text=msg.SIMILAR_EMPTY, header=msg.SIMILAR_HEADER)

    async def on_artist_songs(self, update: Update, context: CustomContext) -> None:
        ref = context.callback_params
        if not isinstance(ref, EntityRef):
            return
        outcome = await self.search_service.artist_songs(ref.item_id)
        await self.messenger.send_listing(update, outcome, empty_text=msg.ARTIST_SONGS_EMPTY)

    async def on_artist_albums(self, update: Update, context: CustomContext) -> None:
        ref = context.callback_params
        if not isinstance(ref, EntityRef):
            return
        outcome = await self.search_service.artist_albums(ref.item_id)
        await self.messenger.send_listing(update, outcome, empty_text=msg.ARTIST_ALBUMS_EMPTY)


__all__ = ["MusicFeature"]
