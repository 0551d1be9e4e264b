# 📊 groovia/domain/session/stats.py
"""
📊 Глобальна статистика процесу для команди /stats.

🔹 Лічильники запитів до каталогу та доставлених треків, множина відомих користувачів.
🔹 Кожне оновлення дублюється у Prometheus-лічильники.
🔹 Обнуляється лише перезапуском процесу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass, field
from typing import Set, Tuple

# 🧩 Внутрішні модулі проєкту
from groovia.shared.metrics import CATALOG_REQUESTS, DOWNLOADS, USERS_SEEN
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.stats")


@dataclass(frozen=True, slots=True)
class StatsSnapshot:
    users: int
    total_requests: int
    total_downloads: int


@dataclass
class GlobalStats:
    total_requests: int = 0
    total_downloads: int = 0
    users: Set[int] = field(default_factory=set)

    def record_request(self, endpoint: str = "unknown") -> None:
        self.total_requests += 1
        CATALOG_REQUESTS.labels(endpoint=endpoint).inc()

    def record_download(self) -> None:
        self.total_downloads += 1
        DOWNLOADS.inc()

    def remember_user(self, user_id: int) -> bool:
        """Додає користувача; True — якщо він новий."""
        if user_id in self.users:
            return False
        self.users.add(user_id)
        USERS_SEEN.inc()
        logger.info("👤 Новий користувач | user=%s total=%d", user_id, len(self.users))
        return True

    def user_ids(self) -> Tuple[int, ...]:
        return tuple(self.users)

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(
            users=len(self.users),
            total_requests=self.total_requests,
            total_downloads=self.total_downloads,
        )


__all__ = ["GlobalStats", "StatsSnapshot"]
