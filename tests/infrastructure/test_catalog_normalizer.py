"""
🧪 test_catalog_normalizer.py — нормалізація JSON каталогу

Перевіряє:
- Різні форми полів артистів і посилань
- HTML-сутності в назвах
- Розгортання одиночної сутності та списку результатів
"""

from conftest import raw_collection, raw_song

from groovia.domain.music.entities import Album, EntityKind, Playlist, Song
from groovia.infrastructure.catalog.normalizer import (
    extract_results,
    to_artist,
    to_item,
    to_items,
    to_song,
    unwrap_entity,
)


def test_to_song_reads_modern_shape():
    song = to_song(raw_song("5WXAlMNt"))
    assert isinstance(song, Song)
    assert song.name == "Tum Hi Ho"
    assert song.artists == "Arijit Singh"
    assert song.album == "Aashiqui 2"
    assert song.duration == 262
    assert song.cover_url.endswith("500x500.jpg")
    assert [e.quality_label for e in song.encodings] == ["96kbps", "160kbps", "320kbps"]


def test_to_song_reads_legacy_shape_and_unescapes():
    legacy = {
        "id": "abc",
        "title": "Kal Ho Naa Ho &amp; Reprise",
        "primaryArtists": "Sonu Nigam",
        "album": "Kal Ho Naa Ho",
        "duration": "321",
        "download_urls": [{"quality": "160kbps", "link": "https://cdn/160"}],
    }
    song = to_song(legacy)
    assert song.name == "Kal Ho Naa Ho & Reprise"
    assert song.artists == "Sonu Nigam"
    assert song.album == "Kal Ho Naa Ho"
    assert song.duration == 321
    assert song.encodings[0].url == "https://cdn/160"


def test_collection_songs_and_count():
    album = to_item(EntityKind.ALBUM, raw_collection("alb", "Aashiqui 2", [raw_song("1"), raw_song("2")]))
    assert isinstance(album, Album)
    assert [s.id for s in album.songs] == ["1", "2"]
    assert album.song_count == 2

    playlist = to_item(EntityKind.PLAYLIST, {"id": "pl", "name": "Hits", "songs": []})
    assert isinstance(playlist, Playlist)
    assert playlist.songs == () and playlist.song_count is None


def test_to_artist_role_default():
    artist = to_artist({"id": "459320", "name": "Arijit Singh"})
    assert artist.role == "Artist"


def test_to_items_skips_entries_without_id():
    items = to_items(EntityKind.SONG, [raw_song("1"), {"name": "broken"}, "junk"])
    assert [item.id for item in items] == ["1"]


def test_unwrap_entity_variants():
    assert unwrap_entity({"id": "x", "name": "X"})["id"] == "x"
    assert unwrap_entity([{"id": "y"}])["id"] == "y"
    assert unwrap_entity({"results": [{"id": "z"}]})["id"] == "z"
    assert unwrap_entity([]) is None
    assert unwrap_entity(None) is None


def test_extract_results_total_fallbacks():
    assert extract_results({"total": 57, "results": [1, 2]}) == ([1, 2], 57)
    assert extract_results({"results": [1, 2, 3]}) == ([1, 2, 3], 3)
    assert extract_results([1]) == ([1], 1)
    assert extract_results({"songs": [1]}, "results", "songs") == ([1], 1)
    assert extract_results("nope") == ([], 0)
