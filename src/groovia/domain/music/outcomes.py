# 📦 groovia/domain/music/outcomes.py
"""
📦 Результати операцій пошуку, деталізації та завантаження.

Порожній результат, відсутня сутність чи трек без аудіо — це звичайні
результати для показу користувачу, а не винятки.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from .entities import CatalogItem, EntityKind, ListedItem, SearchPage


class OutcomeStatus(str, Enum):
    OK = "ok"
    EMPTY_QUERY = "empty_query"
    NO_RESULTS = "no_results"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    status: OutcomeStatus
    kind: EntityKind
    query: str
    page: Optional[SearchPage] = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK


@dataclass(frozen=True, slots=True)
class DetailOutcome:
    status: OutcomeStatus
    kind: EntityKind
    item: Optional[CatalogItem] = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK


@dataclass(frozen=True, slots=True)
class ListingOutcome:
    """Непагінований список (схожі треки, пісні/альбоми артиста)."""

    status: OutcomeStatus
    kind: EntityKind
    items: Tuple[ListedItem, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK


class DownloadStatus(str, Enum):
    DELIVERED = "delivered"
    NOT_FOUND = "not_found"
    NO_ENCODING = "no_encoding"
    DELIVERY_FAILED = "delivery_failed"
    FAILED = "failed"                          # 💥 збій каталогу під час пакетного завантаження


@dataclass(frozen=True, slots=True)
class DownloadOutcome:
    status: DownloadStatus
    item_id: str
    kind: EntityKind = EntityKind.SONG
    title: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.status is DownloadStatus.DELIVERED


@dataclass(frozen=True, slots=True)
class BatchReport:
    kind: EntityKind
    collection_id: str
    found: bool
    outcomes: Tuple[DownloadOutcome, ...] = ()
    truncated_from: Optional[int] = None       # ✂️ скільки треків було до обрізання лімітом

    @property
    def delivered(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.delivered)

    @property
    def skipped(self) -> int:
        return len(self.outcomes) - self.delivered


__all__ = [
    "OutcomeStatus",
    "SearchOutcome",
    "DetailOutcome",
    "ListingOutcome",
    "DownloadStatus",
    "DownloadOutcome",
    "BatchReport",
]
