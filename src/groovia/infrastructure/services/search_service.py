# 🔎 groovia/infrastructure/services/search_service.py
"""
🔎 Оркестратор пошуку та деталізації.

🔹 `search` — сторінка результатів з наскрізною нумерацією та оновленням сесії.
🔹 `detail` — одна сутність за id або посиланням + запис в історію.
🔹 `similar` / `artist_songs` / `artist_albums` / `trending` — похідні списки.
🔹 Збої каталогу (`CatalogError`, httpx) не перехоплюються: їх обробляє межа хендлера.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import Any, List, Optional

# 🧩 Внутрішні модулі проєкту
from groovia.domain.music.entities import (
    CatalogItem,
    EntityKind,
    ListedItem,
    PaginationDescriptor,
    SearchPage,
    total_pages_for,
)
from groovia.domain.music.interfaces import ICatalogClient
from groovia.domain.music.outcomes import DetailOutcome, ListingOutcome, OutcomeStatus, SearchOutcome
from groovia.domain.session.store import SessionStore
from groovia.infrastructure.catalog.normalizer import extract_results, to_item, to_items, unwrap_entity
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.search")


def _listed(items: List[CatalogItem], offset: int = 0) -> tuple:
    return tuple(ListedItem(index=offset + i + 1, item=item) for i, item in enumerate(items))


class SearchService:
    """
    🔎 Пошук, деталі та списки каталогу.

    Args:
        catalog: Клієнт API каталогу.
        sessions: Сховище сесій (оновлюється при успішному пошуку та деталізації).
        page_size: Розмір сторінки пошуку.
        collection_limit: Скільки треків тягнути для альбому/плейлиста.
        listing_limit: Розмір непагінованих списків (схожі, артист).
        trending_playlist_id: Плейлист для кнопки «Trending».
    """

    def __init__(
        self,
        catalog: ICatalogClient,
        sessions: SessionStore,
        *,
        page_size: int = 10,
        collection_limit: int = 50,
        listing_limit: int = 10,
        trending_playlist_id: str = "110858205",
    ) -> None:
        self._catalog = catalog
        self._sessions = sessions
        self.page_size = page_size
        self.collection_limit = collection_limit
        self.listing_limit = listing_limit
        self.trending_playlist_id = trending_playlist_id

    # ================================
    # 🔎 ПОШУК
    # ================================
    async def search(self, user_id: int, kind: EntityKind, query: str, page: int = 0) -> SearchOutcome:
        """
        Повертає сторінку `page` (з нуля) результатів пошуку.

        Порожній запит → EMPTY_QUERY без звернення до каталогу.
        Порожній список → NO_RESULTS, сесія не змінюється.
        """
        text = (query or "").strip()
        if not text:
            logger.info("🔎 Empty query skipped | user=%s kind=%s", user_id, kind.value)
            return SearchOutcome(OutcomeStatus.EMPTY_QUERY, kind, text)

        page = max(int(page), 0)
        data = await self._catalog.search(kind, text, page, self.page_size)
        raw, total = extract_results(data)
        items = to_items(kind, raw)[: self.page_size]
        if not items:
            logger.info("🔎 No results | user=%s kind=%s query=%r page=%d", user_id, kind.value, text, page)
            return SearchOutcome(OutcomeStatus.NO_RESULTS, kind, text)

        offset = page * self.page_size
        pagination = PaginationDescriptor(
            kind=kind,
            query=text,
            page=page,
            total_pages=total_pages_for(max(total, offset + len(items)), self.page_size),
        )
        self._sessions.get(user_id).show_page(kind, text, page, items)
        logger.info(
            "🔎 Search ok | user=%s kind=%s query=%r page=%d/%d items=%d",
            user_id,
            kind.value,
            text,
            pagination.number,
            pagination.total_pages,
            len(items),
        )
        return SearchOutcome(
            OutcomeStatus.OK,
            kind,
            text,
            page=SearchPage(items=_listed(items, offset), pagination=pagination),
        )

    # ================================
    # 📄 ДЕТАЛІ
    # ================================
    async def _fetch_entity(self, kind: EntityKind, entity_id: Optional[str], link: Optional[str]) -> Any:
        if kind is EntityKind.SONG:
            return await self._catalog.song(song_id=entity_id, link=link)
        if kind is EntityKind.ALBUM:
            return await self._catalog.album(album_id=entity_id, link=link, limit=self.collection_limit)
        if kind is EntityKind.PLAYLIST:
            return await self._catalog.playlist(playlist_id=entity_id, link=link, limit=self.collection_limit)
        return await self._catalog.artist(artist_id=entity_id, link=link)

    async def detail(
        self,
        user_id: int,
        kind: EntityKind,
        *,
        entity_id: Optional[str] = None,
        link: Optional[str] = None,
    ) -> DetailOutcome:
        """
        Деталі однієї сутності. Потрібен `entity_id` або `link`.

        Альбом/плейлист без треків вважається відсутнім.
        """
        if not entity_id and not link:
            raise ValueError("entity_id or link is required")

        data = await self._fetch_entity(kind, entity_id, link)
        raw = unwrap_entity(data)
        if raw is None:
            logger.info("📄 Not found | kind=%s id=%s link=%s", kind.value, entity_id, link)
            return DetailOutcome(OutcomeStatus.NOT_FOUND, kind)

        item = to_item(kind, raw)
        if kind in (EntityKind.ALBUM, EntityKind.PLAYLIST) and not item.songs:  # type: ignore[union-attr]
            logger.info("📄 Collection without songs | kind=%s id=%s", kind.value, item.id)
            return DetailOutcome(OutcomeStatus.NOT_FOUND, kind)

        self._sessions.get(user_id).remember(kind, item.id, item.name)
        logger.info("📄 Detail ok | user=%s kind=%s id=%s", user_id, kind.value, item.id)
        return DetailOutcome(OutcomeStatus.OK, kind, item)

    async def trending(self, user_id: int) -> DetailOutcome:
        return await self.detail(user_id, EntityKind.PLAYLIST, entity_id=self.trending_playlist_id)

    # ================================
    # 📋 СПИСКИ
    # ================================
    def _listing(self, kind: EntityKind, raw: List[Any]) -> ListingOutcome:
        items = to_items(kind, raw)[: self.listing_limit]
        if not items:
            return ListingOutcome(OutcomeStatus.NO_RESULTS, kind)
        return ListingOutcome(OutcomeStatus.OK, kind, _listed(items))

    async def similar(self, song_id: str) -> ListingOutcome:
        data = await self._catalog.song_suggestions(song_id, limit=self.listing_limit)
        raw, _ = extract_results(data, "results", "data")
        return self._listing(EntityKind.SONG, raw)

    async def artist_songs(self, artist_id: str) -> ListingOutcome:
        data = await self._catalog.artist_songs(artist_id, page=0, limit=self.listing_limit)
        raw, _ = extract_results(data, "results", "songs")
        return self._listing(EntityKind.SONG, raw)

    async def artist_albums(self, artist_id: str) -> ListingOutcome:
        data = await self._catalog.artist_albums(artist_id, page=0, limit=self.listing_limit)
        raw, _ = extract_results(data, "results", "albums")
        return self._listing(EntityKind.ALBUM, raw)


__all__ = ["SearchService"]
