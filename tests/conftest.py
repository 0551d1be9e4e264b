# tests/conftest.py
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Додаємо src у sys.path, щоб імпорт "groovia.…" працював без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from groovia.domain.session.stats import GlobalStats  # noqa: E402
from groovia.domain.session.store import SessionStore  # noqa: E402


# ──────────────────────────────────────────────────────────────────────────────
#                       🎼 Сирі відповіді каталогу (JSON)
# ──────────────────────────────────────────────────────────────────────────────

def raw_song(song_id: str, name: str = "Tum Hi Ho", *, qualities=("96kbps", "160kbps", "320kbps"), **extra) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": song_id,
        "name": name,
        "duration": 262,
        "year": "2013",
        "language": "hindi",
        "album": {"id": "alb-1", "name": "Aashiqui 2"},
        "artists": {"primary": [{"id": "459320", "name": "Arijit Singh"}]},
        "image": [
            {"quality": "150x150", "url": f"https://c.saavncdn.com/{song_id}-150x150.jpg"},
            {"quality": "500x500", "url": f"https://c.saavncdn.com/{song_id}-500x500.jpg"},
        ],
        "downloadUrl": [
            {"quality": q, "url": f"https://aac.saavncdn.com/{song_id}_{q.replace('kbps', '')}.mp4"} for q in qualities
        ],
    }
    payload.update(extra)
    return payload


def raw_collection(collection_id: str, name: str, songs: List[Dict[str, Any]], **extra) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": collection_id,
        "name": name,
        "songCount": len(songs),
        "songs": songs,
        "image": [],
    }
    payload.update(extra)
    return payload


class FakeCatalog:
    """
    Фейковий клієнт каталогу: повертає заздалегідь задані відповіді й пише журнал викликів.
    Відповіді вже розгорнуті (поле `data`), як у `SaavnClient`.
    """

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.search_data: Any = {"total": 0, "results": []}
        self.songs: Dict[str, Any] = {}
        self.albums: Dict[str, Any] = {}
        self.playlists: Dict[str, Any] = {}
        self.artists: Dict[str, Any] = {}
        self.by_link: Dict[str, Any] = {}
        self.suggestions: Any = []
        self.artist_songs_data: Any = {"songs": []}
        self.artist_albums_data: Any = {"albums": []}
        self.song_errors: Dict[str, Exception] = {}

    async def search(self, kind, query, page=0, limit=10):
        self.calls.append(("search", kind, query, page, limit))
        return self.search_data

    async def song(self, *, song_id: Optional[str] = None, link: Optional[str] = None):
        self.calls.append(("song", song_id, link))
        if song_id in self.song_errors:
            raise self.song_errors[song_id]
        if link:
            return self.by_link.get(link, [])
        data = self.songs.get(song_id)
        return [data] if data else []

    async def song_suggestions(self, song_id, limit=10):
        self.calls.append(("song_suggestions", song_id, limit))
        return self.suggestions

    async def album(self, *, album_id=None, link=None, page=0, limit=50):
        self.calls.append(("album", album_id, link, limit))
        if link:
            return self.by_link.get(link)
        return self.albums.get(album_id)

    async def playlist(self, *, playlist_id=None, link=None, page=0, limit=50):
        self.calls.append(("playlist", playlist_id, link, limit))
        if link:
            return self.by_link.get(link)
        return self.playlists.get(playlist_id)

    async def artist(self, *, artist_id=None, link=None):
        self.calls.append(("artist", artist_id, link))
        if link:
            return self.by_link.get(link)
        return self.artists.get(artist_id)

    async def artist_songs(self, artist_id, page=0, limit=10):
        self.calls.append(("artist_songs", artist_id, page, limit))
        return self.artist_songs_data

    async def artist_albums(self, artist_id, page=0, limit=10):
        self.calls.append(("artist_albums", artist_id, page, limit))
        return self.artist_albums_data


# ──────────────────────────────────────────────────────────────────────────────
#                               🔧 Фікстури
# ──────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def sessions() -> SessionStore:
    return SessionStore()


@pytest.fixture
def stats() -> GlobalStats:
    return GlobalStats()
