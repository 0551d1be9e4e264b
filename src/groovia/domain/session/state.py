# 🧭 groovia/domain/session/state.py
"""
🧭 Стан розмови одного користувача.

🔹 Явна машина станів: `Idle` → `AwaitingQuery(kind)` → `Browsing(kind, query, page)`.
🔹 `UserSession` зберігає якість аудіо, останню сторінку результатів та обмежену історію.
🔹 Запит і номер сторінки існують лише разом (у стані `Browsing`).
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Iterable, Optional, Tuple, Union

# 🧩 Внутрішні модулі проєкту
from groovia.domain.music.entities import (
    DEFAULT_QUALITY,
    AudioQuality,
    CatalogItem,
    EntityKind,
    HistoryEntry,
)
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.session")

HISTORY_LIMIT = 20


class SessionMode(str, Enum):
    NONE = "none"
    AWAITING_QUERY = "awaiting_query"
    SEARCH = "search"


# ================================
# 🧩 СТАНИ
# ================================
@dataclass(frozen=True, slots=True)
class Idle:
    """Нічого не очікуємо; довільний текст → пошук пісень."""

    @property
    def mode(self) -> SessionMode:
        return SessionMode.NONE


@dataclass(frozen=True, slots=True)
class AwaitingQuery:
    """Користувач обрав тип пошуку в меню й має надіслати запит."""

    kind: EntityKind

    @property
    def mode(self) -> SessionMode:
        return SessionMode.AWAITING_QUERY


@dataclass(frozen=True, slots=True)
class Browsing:
    """Показано сторінку `page` результатів пошуку `query`."""

    kind: EntityKind
    query: str
    page: int

    @property
    def mode(self) -> SessionMode:
        return SessionMode.SEARCH


SessionState = Union[Idle, AwaitingQuery, Browsing]


# ================================
# 👤 СЕСІЯ КОРИСТУВАЧА
# ================================
@dataclass
class UserSession:
    user_id: int
    quality: AudioQuality = DEFAULT_QUALITY
    state: SessionState = field(default_factory=Idle)
    last_results: Tuple[CatalogItem, ...] = ()
    history: Deque[HistoryEntry] = field(default_factory=lambda: deque(maxlen=HISTORY_LIMIT))

    # ---- похідні поля ----
    @property
    def mode(self) -> SessionMode:
        return self.state.mode

    @property
    def search_type(self) -> Optional[EntityKind]:
        if isinstance(self.state, (AwaitingQuery, Browsing)):
            return self.state.kind
        return None

    @property
    def query(self) -> Optional[str]:
        return self.state.query if isinstance(self.state, Browsing) else None

    @property
    def page(self) -> Optional[int]:
        return self.state.page if isinstance(self.state, Browsing) else None

    # ---- переходи ----
    def await_query(self, kind: EntityKind) -> None:
        """Вибір пункту пошуку в меню."""
        self.state = AwaitingQuery(kind)
        logger.debug("🧭 user=%s → AwaitingQuery(%s)", self.user_id, kind.value)

    def show_page(self, kind: EntityKind, query: str, page: int, items: Iterable[CatalogItem]) -> None:
        """Успішний пошук: стан і результати замінюються разом."""
        results = tuple(items)
        self.state = Browsing(kind=kind, query=query, page=page)
        self.last_results = results
        logger.debug(
            "🧭 user=%s → Browsing(%s, %r, page=%d) items=%d",
            self.user_id,
            kind.value,
            query,
            page,
            len(results),
        )

    def reset(self) -> None:
        self.state = Idle()

    def set_quality(self, quality: AudioQuality) -> None:
        self.quality = quality
        logger.info("🎚️ user=%s quality=%s", self.user_id, quality.label)

    def remember(self, kind: EntityKind, item_id: str, name: str) -> HistoryEntry:
        """Додає запис на початок історії; найстаріший витісняється понад ліміт."""
        entry = HistoryEntry(kind=kind, item_id=item_id, name=name)
        self.history.appendleft(entry)
        return entry

    def recent_history(self, limit: int = 10) -> Tuple[HistoryEntry, ...]:
        """Найсвіжіші `limit` записів, новіші першими."""
        return tuple(self.history)[: max(limit, 0)]


__all__ = [
    "HISTORY_LIMIT",
    "SessionMode",
    "Idle",
    "AwaitingQuery",
    "Browsing",
    "SessionState",
    "UserSession",
]
