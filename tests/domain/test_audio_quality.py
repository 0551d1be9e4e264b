"""
🧪 test_audio_quality.py — вибір аудіо-версії за якістю

Перевіряє:
- Точний збіг з уподобанням користувача
- Запасний порядок 320 → 160 → 96
- Останню доступну версію, якщо мітки не впізнано
- Порожній набір версій → None
"""

import pytest

from groovia.domain.music.entities import AudioEncoding, AudioQuality, Song
from groovia.domain.music.quality import (
    DEFAULT_FALLBACK_ORDER,
    parse_fallback_order,
    resolve_audio_url,
    select_encoding,
)


def _enc(*labels):
    return tuple(AudioEncoding(quality_label=label, url=f"https://cdn/{label}") for label in labels)


def test_exact_preference_wins():
    chosen = select_encoding(_enc("96kbps", "160kbps", "320kbps"), AudioQuality.MEDIUM)
    assert chosen.url == "https://cdn/160kbps"


def test_falls_back_to_highest_available():
    chosen = select_encoding(_enc("96kbps", "160kbps"), AudioQuality.HIGH)
    assert chosen.quality_label == "160kbps"


def test_unrecognised_labels_use_last_encoding():
    chosen = select_encoding(_enc("12kbps", "48kbps"), AudioQuality.HIGH)
    assert chosen.quality_label == "48kbps"


def test_empty_encodings_return_none():
    assert select_encoding((), AudioQuality.HIGH) is None
    assert resolve_audio_url(Song(id="x", name="X"), AudioQuality.LOW) is None


def test_duplicate_labels_pick_first_match():
    encodings = (
        AudioEncoding("320kbps", "https://cdn/a"),
        AudioEncoding("320kbps", "https://cdn/b"),
    )
    assert select_encoding(encodings, AudioQuality.HIGH).url == "https://cdn/a"


def test_resolve_audio_url_uses_song_encodings():
    song = Song(id="5WXAlMNt", name="Tum Hi Ho", encodings=_enc("96kbps", "320kbps"))
    assert resolve_audio_url(song, AudioQuality.LOW) == "https://cdn/96kbps"
    assert resolve_audio_url(song, AudioQuality.MEDIUM) == "https://cdn/320kbps"


def test_custom_fallback_order_is_respected():
    encodings = _enc("96kbps", "320kbps")
    order = (AudioQuality.LOW, AudioQuality.HIGH)
    assert select_encoding(encodings, AudioQuality.MEDIUM, order).quality_label == "96kbps"


@pytest.mark.parametrize("raw,expected", [
    (["320", "160", "96"], DEFAULT_FALLBACK_ORDER),
    (["96", "96kbps", 320], (AudioQuality.LOW, AudioQuality.HIGH)),
    (["bogus"], DEFAULT_FALLBACK_ORDER),
    (None, DEFAULT_FALLBACK_ORDER),
])
def test_parse_fallback_order(raw, expected):
    assert parse_fallback_order(raw) == expected


def test_quality_parse_accepts_labels():
    assert AudioQuality.parse("320kbps") is AudioQuality.HIGH
    assert AudioQuality.parse(160) is AudioQuality.MEDIUM
    with pytest.raises(ValueError):
        AudioQuality.parse("128")
