# 🗃️ groovia/domain/session/store.py
"""
🗃️ Сховище сесій у памʼяті процесу.

Сесія створюється лениво при першому зверненні та живе до перезапуску.
Блокувань немає: обробники виконуються в одному event loop.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from collections import deque
from typing import Dict, Iterator

# 🧩 Внутрішні модулі проєкту
from groovia.domain.music.entities import AudioQuality, DEFAULT_QUALITY
from groovia.shared.utils.logger import LOG_NAME
from .state import HISTORY_LIMIT, UserSession

logger = logging.getLogger(f"{LOG_NAME}.domain.session")


class SessionStore:
    """Рівно одна `UserSession` на id користувача."""

    def __init__(self, history_limit: int = HISTORY_LIMIT, default_quality: AudioQuality = DEFAULT_QUALITY) -> None:
        self._sessions: Dict[int, UserSession] = {}
        self._history_limit = history_limit
        self._default_quality = default_quality

    def get(self, user_id: int) -> UserSession:
        session = self._sessions.get(user_id)
        if session is None:
            session = UserSession(
                user_id=user_id,
                quality=self._default_quality,
                history=deque(maxlen=self._history_limit),
            )
            self._sessions[user_id] = session
            logger.debug("🆕 Сесію створено | user=%s", user_id)
        return session

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[UserSession]:
        return iter(list(self._sessions.values()))


__all__ = ["SessionStore"]
