# 🧭 groovia/bot/handlers/intent_router.py
"""
🧭 Роутер вільного тексту.

Пріоритет (перше правило, що спрацювало, виграє):
    1. Посилання JioSaavn → картка сутності за посиланням
    2. Кнопка головного меню → `MainMenuFeature`
    3. Сесія чекає запит (`AwaitingQuery`) → пошук цього типу, сторінка 0
    4. Усе інше → пошук пісень, сторінка 0

`classify` — чиста функція від тексту та сесії; `handle` виконує рішення.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from groovia.bot.commands.main_menu_feature import MainMenuFeature
from groovia.bot.commands.music_feature import MusicFeature
from groovia.bot.services.custom_context import CustomContext
from groovia.config.setup.constants import AppConstants
from groovia.domain.music.entities import EntityKind
from groovia.domain.session.state import AwaitingQuery, UserSession
from groovia.domain.session.stats import GlobalStats
from groovia.domain.session.store import SessionStore
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.router")


class IntentKind(str, Enum):
    CATALOG_LINK = "catalog_link"
    MENU_COMMAND = "menu_command"
    PENDING_QUERY = "pending_query"
    DEFAULT_SEARCH = "default_search"


@dataclass(frozen=True, slots=True)
class Intent:
    kind: IntentKind
    text: str
    entity_kind: Optional[EntityKind] = None
    link: Optional[str] = None


class IntentRouter:
    """🧭 Вирішує, що означає текстове повідомлення, і делегує відповідній фічі."""

    def __init__(
        self,
        constants: AppConstants,
        sessions: SessionStore,
        stats: GlobalStats,
        music: MusicFeature,
        menu: MainMenuFeature,
    ) -> None:
        self.const = constants
        self.sessions = sessions
        self.stats = stats
        self.music = music
        self.menu = menu

    # ================================
    # 🧮 КЛАСИФІКАЦІЯ
    # ================================
    def _detect_link(self, text: str) -> Optional[Intent]:
        match = self.const.LOGIC.LINK_PATTERN.search(text)
        if match is None:
            return None
        kind = self.const.link_kind(match.group(1))
        if kind is None:
            return None
        return Intent(IntentKind.CATALOG_LINK, text, entity_kind=kind, link=match.group(0))

    def classify(self, text: str, session: UserSession) -> Intent:
        text = text.strip()

        link = self._detect_link(text)
        if link is not None:
            return link

        if self.menu.is_menu_button(text):
            return Intent(IntentKind.MENU_COMMAND, text)

        if isinstance(session.state, AwaitingQuery):
            return Intent(IntentKind.PENDING_QUERY, text, entity_kind=session.state.kind)

        return Intent(IntentKind.DEFAULT_SEARCH, text, entity_kind=EntityKind.SONG)

    # ================================
    # 🎯 ОБРОБКА
    # ================================
    async def handle(self, update: Update, context: CustomContext) -> None:
        message = update.message
        user = update.effective_user
        if message is None or user is None or message.text is None:
            return

        self.stats.remember_user(user.id)
        session = self.sessions.get(user.id)
        intent = self.classify(message.text, session)
        logger.info("🧭 Intent user=%s → %s (%s)", user.id, intent.kind.value, getattr(intent.entity_kind, "value", "-"))

        if intent.kind is IntentKind.CATALOG_LINK and intent.entity_kind is not None:
            await self.music.show_detail(update, intent.entity_kind, link=intent.link)
        elif intent.kind is IntentKind.MENU_COMMAND:
            await self.menu.handle_menu(update, context)
        else:
            await self.music.run_search(update, intent.entity_kind or EntityKind.SONG, intent.text, 0)


__all__ = ["IntentKind", "Intent", "IntentRouter"]
