# 🎚️ groovia/domain/music/quality.py
"""
🎚️ Вибір аудіо-версії треку за якістю.

🔹 Спершу точний збіг з уподобанням користувача.
🔹 Далі — впорядкований список запасних рівнів (за замовчуванням 320 → 160 → 96).
🔹 Якщо жодна мітка не впізнана — остання доступна версія; порожній набір → None.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import Iterable, Optional, Sequence, Tuple

# 🧩 Внутрішні модулі проєкту
from groovia.shared.utils.logger import LOG_NAME
from .entities import AudioEncoding, AudioQuality, Song

logger = logging.getLogger(f"{LOG_NAME}.domain.music")

DEFAULT_FALLBACK_ORDER: Tuple[AudioQuality, ...] = (
    AudioQuality.HIGH,
    AudioQuality.MEDIUM,
    AudioQuality.LOW,
)


def parse_fallback_order(raw: Optional[Iterable[object]]) -> Tuple[AudioQuality, ...]:
    """
    Перетворює значення з конфігу (['320', '160', '96']) на кортеж `AudioQuality`.

    Невідомі значення пропускаються з попередженням; порожній результат → порядок за замовчуванням.
    """
    order = []
    for value in raw or ():
        try:
            quality = AudioQuality.parse(value)  # type: ignore[arg-type]
        except ValueError:
            logger.warning("⚠️ Невідомий рівень якості у fallback_order: %r", value)
            continue
        if quality not in order:
            order.append(quality)
    return tuple(order) or DEFAULT_FALLBACK_ORDER


def _first_match(encodings: Sequence[AudioEncoding], quality: AudioQuality) -> Optional[AudioEncoding]:
    for encoding in encodings:
        if quality.matches(encoding.quality_label):
            return encoding
    return None


def select_encoding(
    encodings: Sequence[AudioEncoding],
    preference: AudioQuality,
    fallback_order: Sequence[AudioQuality] = DEFAULT_FALLBACK_ORDER,
) -> Optional[AudioEncoding]:
    """Повертає обрану версію або None, якщо `encodings` порожній."""
    if not encodings:
        return None
    for quality in (preference, *fallback_order):
        match = _first_match(encodings, quality)
        if match is not None:
            return match
    return encodings[-1]


def resolve_audio_url(
    song: Song,
    preference: AudioQuality,
    fallback_order: Sequence[AudioQuality] = DEFAULT_FALLBACK_ORDER,
) -> Optional[str]:
    """
    URL аудіо для `song` з урахуванням уподобання; None — версій немає («unavailable»).
    """
    encoding = select_encoding(song.encodings, preference, fallback_order)
    if encoding is None:
        logger.info("🚫 Немає аудіо-версій | song=%s", song.id)
        return None
    if not preference.matches(encoding.quality_label):
        logger.debug(
            "🎚️ Якість %s недоступна для song=%s, взято %s",
            preference.label,
            song.id,
            encoding.quality_label,
        )
    return encoding.url


__all__ = [
    "DEFAULT_FALLBACK_ORDER",
    "parse_fallback_order",
    "select_encoding",
    "resolve_audio_url",
]
