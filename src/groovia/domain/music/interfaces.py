# 🎵 groovia/domain/music/interfaces.py
"""
🎵 Контракти музичного домену.

🔹 `ICatalogClient` — джерело сутностей каталогу (HTTP-реалізація в infrastructure).
🔹 `IAudioDelivery` — порт доставки аудіо користувачу (Telegram-реалізація в bot.ui).
🔹 Оркестратори залежать лише від цих протоколів, тож тести підставляють прості фейки.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Any, Optional, Protocol, runtime_checkable

# 🧩 Внутрішні модулі проєкту
from .entities import EntityKind, Song
from .outcomes import DownloadOutcome


@runtime_checkable
class ICatalogClient(Protocol):
    """Сирий доступ до API каталогу; повертає поле `data` відповіді."""

    async def search(self, kind: EntityKind, query: str, page: int, limit: int) -> Any: ...

    async def song(self, *, song_id: Optional[str] = None, link: Optional[str] = None) -> Any: ...

    async def song_suggestions(self, song_id: str, limit: int = 10) -> Any: ...

    async def album(
        self, *, album_id: Optional[str] = None, link: Optional[str] = None, page: int = 0, limit: int = 50
    ) -> Any: ...

    async def playlist(
        self, *, playlist_id: Optional[str] = None, link: Optional[str] = None, page: int = 0, limit: int = 50
    ) -> Any: ...

    async def artist(self, *, artist_id: Optional[str] = None, link: Optional[str] = None) -> Any: ...

    async def artist_songs(self, artist_id: str, page: int = 0, limit: int = 10) -> Any: ...

    async def artist_albums(self, artist_id: str, page: int = 0, limit: int = 10) -> Any: ...


@runtime_checkable
class IAudioDelivery(Protocol):
    """
    Доставляє аудіо конкретному чату.

    `deliver` піднімає виняток, якщо транспорт не прийняв файл.
    `report` повідомляє про пропущений трек і не піднімає ніколи.
    """

    async def deliver(self, song: Song, url: str) -> None: ...

    async def report(self, outcome: DownloadOutcome) -> None: ...


__all__ = ["ICatalogClient", "IAudioDelivery"]
