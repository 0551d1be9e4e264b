"""
🧪 test_message_formatter.py — HTML-форматування повідомлень

Перевіряє:
- Формат тривалості
- Рядки списків і наскрізну нумерацію
- Екранування даних каталогу
- Історію та підпис аудіо
"""

import pytest

from groovia.bot.ui import static_messages as msg
from groovia.bot.ui.formatters.message_formatter import MessageFormatter
from groovia.domain.music.entities import (
    Album,
    Artist,
    EntityKind,
    HistoryEntry,
    ListedItem,
    PaginationDescriptor,
    Playlist,
    SearchPage,
    Song,
)

formatter = MessageFormatter()


@pytest.mark.parametrize("seconds,expected", [(0, "00:00"), (183, "03:03"), (None, "00:00"), (-5, "00:00"), (3600, "60:00"), (6000, "100:00")])
def test_seconds_to_time(seconds, expected):
    assert formatter.seconds_to_time(seconds) == expected


def test_item_lines():
    assert formatter.song_line(Song(id="1", name="Tum Hi Ho", artists="Arijit Singh", duration=262)) == (
        "🎵 Tum Hi Ho • Arijit Singh • 04:22"
    )
    assert formatter.album_line(Album(id="2", name="Aashiqui 2", artists="Mithoon", song_count=11)).endswith("11 songs")
    assert "? songs" in formatter.playlist_line(Playlist(id="3", name="Hits"))
    assert formatter.artist_line(Artist(id="4", name="Arijit Singh", role="Singer")) == "👤 Arijit Singh • Singer"


def test_search_page_numbering_and_escaping():
    items = (
        ListedItem(11, Song(id="a", name="<Live>", artists="A & B")),
        ListedItem(12, Song(id="b", name="Two")),
    )
    page = SearchPage(items=items, pagination=PaginationDescriptor(EntityKind.SONG, "Tum <Hi>", 1, 3))
    text = formatter.search_page(page)
    assert "Tum &lt;Hi&gt;" in text
    assert "Page 2/3" in text
    assert "11. 🎵 &lt;Live&gt; • A &amp; B" in text
    assert "\n12. 🎵 Two" in text


def test_captions():
    song = Song(id="1", name="Tum Hi Ho", artists="Arijit Singh", album="Aashiqui 2", duration=262, year="2013")
    caption = formatter.caption(song)
    assert "<b>Tum Hi Ho</b>" in caption and "💿 Aashiqui 2" in caption and "2013" in caption

    album = Album(id="2", name="Aashiqui 2", songs=(song, song))
    assert "🎵 2 songs" in formatter.caption(album)
    assert "Songs" in formatter.caption(Artist(id="3", name="Arijit"))


def test_history_and_empty_history():
    assert formatter.history([]) == msg.HISTORY_EMPTY
    text = formatter.history([HistoryEntry(EntityKind.ALBUM, "1", "Aashiqui 2")])
    assert text.startswith(msg.HISTORY_HEADER)
    assert "📀 Aashiqui 2" in text


def test_audio_caption_escapes():
    text = formatter.audio_caption(Song(id="1", name="Rock & Roll", artists="X"))
    assert "Rock &amp; Roll" in text
