# ⬇️ groovia/infrastructure/services/download_service.py
"""
⬇️ Оркестратор завантажень.

🔹 `download_one` — деталі треку → URL за якістю користувача → лічильник → доставка.
🔹 `download_all` — усі треки альбому/плейлиста послідовно, у порядку списку.
🔹 Збій доставки логується й повідомляється через порт, але не летить вище.
🔹 У пакетному режимі збій одного треку (навіть каталогу) лише пропускає трек.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
import logging
from typing import List, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from groovia.domain.music.entities import AudioQuality, EntityKind, Song
from groovia.domain.music.interfaces import IAudioDelivery, ICatalogClient
from groovia.domain.music.outcomes import BatchReport, DownloadOutcome, DownloadStatus
from groovia.domain.music.quality import DEFAULT_FALLBACK_ORDER, resolve_audio_url
from groovia.domain.session.stats import GlobalStats
from groovia.domain.session.store import SessionStore
from groovia.infrastructure.catalog.normalizer import to_item, to_song, unwrap_entity
from groovia.shared.metrics import DOWNLOAD_SKIPPED
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.download")


class DownloadService:
    """
    ⬇️ Доставка аудіо одного треку або цілої колекції.

    Args:
        catalog: Клієнт API каталогу.
        sessions: Сховище сесій (звідси якість користувача).
        stats: Глобальна статистика (лічильник завантажень).
        fallback_order: Порядок запасних рівнів якості.
        batch_limit: Максимум треків за одне «Download all».
        collection_limit: Скільки треків запитувати в каталогу для колекції.
    """

    def __init__(
        self,
        catalog: ICatalogClient,
        sessions: SessionStore,
        stats: GlobalStats,
        *,
        fallback_order: Sequence[AudioQuality] = DEFAULT_FALLBACK_ORDER,
        batch_limit: int = 50,
        collection_limit: int = 50,
    ) -> None:
        self._catalog = catalog
        self._sessions = sessions
        self._stats = stats
        self.fallback_order = tuple(fallback_order)
        self.batch_limit = batch_limit
        self.collection_limit = collection_limit

    # ================================
    # 🎵 ОДИН ТРЕК
    # ================================
    async def _fetch_song(self, song_id: str) -> Optional[Song]:
        raw = unwrap_entity(await self._catalog.song(song_id=song_id))
        return to_song(raw) if raw is not None else None

    async def _skip(self, delivery: IAudioDelivery, outcome: DownloadOutcome) -> DownloadOutcome:
        DOWNLOAD_SKIPPED.labels(reason=outcome.status.value).inc()
        await delivery.report(outcome)
        return outcome

    async def download_one(self, user_id: int, song_id: str, delivery: IAudioDelivery) -> DownloadOutcome:
        """
        Завантажує один трек.

        Raises:
            CatalogError / httpx.HTTPError: збій каталогу (обробляє межа хендлера).
        """
        song = await self._fetch_song(song_id)
        if song is None:
            logger.info("⬇️ Song not found | user=%s song=%s", user_id, song_id)
            return await self._skip(delivery, DownloadOutcome(DownloadStatus.NOT_FOUND, song_id))

        quality = self._sessions.get(user_id).quality
        url = resolve_audio_url(song, quality, self.fallback_order)
        if not url:
            return await self._skip(
                delivery,
                DownloadOutcome(DownloadStatus.NO_ENCODING, song_id, title=song.name),
            )

        self._stats.record_download()
        try:
            await delivery.deliver(song, url)
        except asyncio.CancelledError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.warning("📤 Delivery failed | user=%s song=%s | %s", user_id, song_id, exc)
            return await self._skip(
                delivery,
                DownloadOutcome(DownloadStatus.DELIVERY_FAILED, song_id, title=song.name),
            )

        logger.info("✅ Delivered | user=%s song=%s quality=%s", user_id, song_id, quality.label)
        return DownloadOutcome(DownloadStatus.DELIVERED, song_id, title=song.name)

    # ================================
    # 📦 КОЛЕКЦІЯ
    # ================================
    async def _fetch_collection_song_ids(self, kind: EntityKind, collection_id: str) -> Optional[List[str]]:
        if kind is EntityKind.ALBUM:
            data = await self._catalog.album(album_id=collection_id, limit=self.collection_limit)
        elif kind is EntityKind.PLAYLIST:
            data = await self._catalog.playlist(playlist_id=collection_id, limit=self.collection_limit)
        else:
            raise ValueError(f"download_all does not support {kind.value}")

        raw = unwrap_entity(data)
        if raw is None:
            return None
        collection = to_item(kind, raw)
        return [song.id for song in collection.songs]  # type: ignore[union-attr]

    async def download_all(
        self,
        user_id: int,
        kind: EntityKind,
        collection_id: str,
        delivery: IAudioDelivery,
    ) -> BatchReport:
        """
        Послідовно завантажує треки альбому/плейлиста.

        Колекцію обрізано до `batch_limit`; жоден трек не зупиняє пакет.
        """
        song_ids = await self._fetch_collection_song_ids(kind, collection_id)
        if not song_ids:
            logger.info("📦 Collection empty or missing | kind=%s id=%s", kind.value, collection_id)
            await delivery.report(DownloadOutcome(DownloadStatus.NOT_FOUND, collection_id, kind=kind))
            return BatchReport(kind=kind, collection_id=collection_id, found=False)

        truncated_from: Optional[int] = None
        if len(song_ids) > self.batch_limit:
            truncated_from = len(song_ids)
            song_ids = song_ids[: self.batch_limit]
            logger.info("✂️ Batch capped | kind=%s id=%s %d → %d", kind.value, collection_id, truncated_from, len(song_ids))

        outcomes: List[DownloadOutcome] = []
        for song_id in song_ids:
            try:
                outcome = await self.download_one(user_id, song_id, delivery)
            except asyncio.CancelledError:
                raise
            except Exception as exc:  # noqa: BLE001
                logger.warning("⚠️ Track skipped | kind=%s id=%s song=%s | %s", kind.value, collection_id, song_id, exc)
                outcome = await self._skip(delivery, DownloadOutcome(DownloadStatus.FAILED, song_id))
            outcomes.append(outcome)

        report = BatchReport(
            kind=kind,
            collection_id=collection_id,
            found=True,
            outcomes=tuple(outcomes),
            truncated_from=truncated_from,
        )
        logger.info(
            "📦 Batch done | user=%s kind=%s id=%s delivered=%d skipped=%d",
            user_id,
            kind.value,
            collection_id,
            report.delivered,
            report.skipped,
        )
        return report


__all__ = ["DownloadService"]
