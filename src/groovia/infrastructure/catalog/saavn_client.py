# 🌐 groovia/infrastructure/catalog/saavn_client.py
"""
🌐 HTTP-клієнт API каталогу JioSaavn.

🔹 Один спільний `httpx.AsyncClient` на весь процес.
🔹 Лічильник запитів збільшується перед кожним мережевим викликом.
🔹 Не-2xx або `success: false` → `CatalogError`; транспортні збої httpx летять далі як є.
🔹 Без ретраїв: помилку обробляє межа хендлера.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                              # 🌐 Асинхронний HTTP-клієнт

# 🔠 Системні імпорти
import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from groovia.domain.music.entities import EntityKind
from groovia.domain.session.stats import GlobalStats
from groovia.errors.custom_errors import CatalogError
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.catalog")

DEFAULT_TIMEOUT_SEC = 20.0


class CatalogEndpoint(str, Enum):
    SEARCH_SONGS = "/api/search/songs"
    SEARCH_ALBUMS = "/api/search/albums"
    SEARCH_PLAYLISTS = "/api/search/playlists"
    SEARCH_ARTISTS = "/api/search/artists"
    SONGS = "/api/songs"
    SONG_SUGGESTIONS = "/api/songs/suggestions"
    ALBUMS = "/api/albums"
    PLAYLISTS = "/api/playlists"
    ARTISTS = "/api/artists"
    ARTIST_SONGS = "/api/artists/songs"
    ARTIST_ALBUMS = "/api/artists/albums"

    @classmethod
    def search_for(cls, kind: EntityKind) -> "CatalogEndpoint":
        return _SEARCH_ENDPOINTS[kind]


_SEARCH_ENDPOINTS = {
    EntityKind.SONG: CatalogEndpoint.SEARCH_SONGS,
    EntityKind.ALBUM: CatalogEndpoint.SEARCH_ALBUMS,
    EntityKind.PLAYLIST: CatalogEndpoint.SEARCH_PLAYLISTS,
    EntityKind.ARTIST: CatalogEndpoint.SEARCH_ARTISTS,
}


class SaavnClient:
    """
    🎵 Клієнт каталогу. Повертає поле `data` відповіді (або весь payload, якщо `data` немає).

    Args:
        base_url: Корінь API, напр. 'https://jiosavan-sigma.vercel.app'.
        stats: Глобальна статистика для лічильника запитів.
        timeout: Таймаут httpx у секундах.
        client: Готовий `httpx.AsyncClient` (тести підставляють MockTransport).
    """

    def __init__(
        self,
        base_url: str,
        stats: GlobalStats,
        *,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        user_agent: str = "groovia-bot",
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._stats = stats
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
        )
        logger.info("🌐 SaavnClient ready | base=%s", self._client.base_url)

    # ================================
    # 🔑 БАЗОВИЙ ЗАПИТ
    # ================================
    async def query(self, endpoint: CatalogEndpoint, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        GET `endpoint` з параметрами (None-значення відкидаються).

        Raises:
            CatalogError: HTTP-статус не 2xx, невалідний JSON або `success: false`.
            httpx.HTTPError: транспортний збій (таймаут, зʼєднання).
        """
        clean: Dict[str, Any] = {k: v for k, v in (params or {}).items() if v is not None}
        self._stats.record_request(endpoint.name.lower())
        logger.debug("➡️ GET %s %s", endpoint.value, clean)

        response = await self._client.get(endpoint.value, params=clean)
        if response.is_error:
            logger.warning("⚠️ Catalog HTTP %s | %s", response.status_code, endpoint.value)
            raise CatalogError(
                f"Saavn API error {response.status_code}",
                endpoint=endpoint.value,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise CatalogError("Saavn API returned invalid JSON", endpoint=endpoint.value, reason=str(exc)) from exc

        if not isinstance(payload, Mapping) or not payload.get("success"):
            reason = payload.get("message") if isinstance(payload, Mapping) else None
            logger.warning("⚠️ Catalog success:false | %s | %s", endpoint.value, reason)
            raise CatalogError("Saavn API success:false", endpoint=endpoint.value, reason=reason)

        data = payload.get("data")
        return payload if data is None else data

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("🔌 SaavnClient closed")

    # ================================
    # 🔎 ПОШУК
    # ================================
    async def search(self, kind: EntityKind, query: str, page: int = 0, limit: int = 10) -> Any:
        return await self.query(
            CatalogEndpoint.search_for(kind),
            {"query": query, "page": page, "limit": limit},
        )

    # ================================
    # 🎼 ДЕТАЛІ
    # ================================
    async def song(self, *, song_id: Optional[str] = None, link: Optional[str] = None) -> Any:
        return await self.query(CatalogEndpoint.SONGS, {"id": song_id, "link": link})

    async def song_suggestions(self, song_id: str, limit: int = 10) -> Any:
        return await self.query(CatalogEndpoint.SONG_SUGGESTIONS, {"id": song_id, "limit": limit})

    async def album(
        self, *, album_id: Optional[str] = None, link: Optional[str] = None, page: int = 0, limit: int = 50
    ) -> Any:
        return await self.query(CatalogEndpoint.ALBUMS, {"id": album_id, "link": link, "page": page, "limit": limit})

    async def playlist(
        self, *, playlist_id: Optional[str] = None, link: Optional[str] = None, page: int = 0, limit: int = 50
    ) -> Any:
        return await self.query(
            CatalogEndpoint.PLAYLISTS,
            {"id": playlist_id, "link": link, "page": page, "limit": limit},
        )

    async def artist(self, *, artist_id: Optional[str] = None, link: Optional[str] = None) -> Any:
        return await self.query(CatalogEndpoint.ARTISTS, {"id": artist_id, "link": link})

    async def artist_songs(self, artist_id: str, page: int = 0, limit: int = 10) -> Any:
        return await self.query(CatalogEndpoint.ARTIST_SONGS, {"id": artist_id, "page": page, "limit": limit})

    async def artist_albums(self, artist_id: str, page: int = 0, limit: int = 10) -> Any:
        return await self.query(CatalogEndpoint.ARTIST_ALBUMS, {"id": artist_id, "page": page, "limit": limit})


__all__ = ["CatalogEndpoint", "SaavnClient", "DEFAULT_TIMEOUT_SEC"]
