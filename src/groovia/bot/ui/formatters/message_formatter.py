# 🎨 groovia/bot/ui/formatters/message_formatter.py
"""
🎨 Перетворює доменні сутності на HTML-текст для Telegram.

🔹 Однорядкові представлення пісні/альбому/плейлиста/артиста для списків
🔹 Підписи карток деталізації та аудіо
🔹 Історія, статистика та заголовок сторінки пошуку
🔹 Усі значення з каталогу екрануються (`html.escape`)
"""

from __future__ import annotations

# 🔠 Системні імпорти
from html import escape
from typing import Final, Iterable, List, Optional

# 🧩 Внутрішні модулі проєкту
from groovia.bot.ui import static_messages as msg
from groovia.domain.music.entities import (
    Album,
    Artist,
    CatalogItem,
    EntityKind,
    HistoryEntry,
    ListedItem,
    Playlist,
    SearchPage,
    Song,
)
from groovia.domain.session.stats import StatsSnapshot

_UNKNOWN_COUNT: Final[str] = "?"
_KIND_EMOJI: Final = {
    EntityKind.SONG: "🎵",
    EntityKind.ALBUM: "📀",
    EntityKind.PLAYLIST: "📂",
    EntityKind.ARTIST: "👤",
}


def _e(value: Optional[str]) -> str:
    return escape(value or "", quote=False)


class MessageFormatter:
    """
    📦 Формує HTML-повідомлення (parse_mode='HTML') без бізнес-логіки.
    """

    # ================================
    # ⏱️ ПРИМІТИВИ
    # ================================
    @staticmethod
    def seconds_to_time(seconds: Optional[int]) -> str:
        """183 → '03:03'; None або відʼємне → '00:00'."""
        total = max(int(seconds or 0), 0)
        minutes, rest = divmod(total, 60)
        return f"{minutes:02d}:{rest:02d}"

    # ================================
    # 📋 РЯДКИ СПИСКІВ
    # ================================
    def song_line(self, song: Song) -> str:
        return f"🎵 {_e(song.name)} • {_e(song.artists)} • {self.seconds_to_time(song.duration)}"

    def album_line(self, album: Album) -> str:
        count = album.song_count if album.song_count is not None else _UNKNOWN_COUNT
        return f"📀 {_e(album.name)} • {_e(album.artists)} • {count} songs"

    def playlist_line(self, playlist: Playlist) -> str:
        count = playlist.song_count if playlist.song_count is not None else _UNKNOWN_COUNT
        return f"📂 {_e(playlist.name)} • {_e(playlist.subtitle)} • {count} songs"

    def artist_line(self, artist: Artist) -> str:
        return f"👤 {_e(artist.name)} • {_e(artist.role)}"

    def item_line(self, item: CatalogItem) -> str:
        if isinstance(item, Song):
            return self.song_line(item)
        if isinstance(item, Album):
            return self.album_line(item)
        if isinstance(item, Playlist):
            return self.playlist_line(item)
        return self.artist_line(item)

    def numbered_lines(self, items: Iterable[ListedItem]) -> str:
        return "\n".join(f"{listed.index}. {self.item_line(listed.item)}" for listed in items)

    # ================================
    # 🔎 ПОШУК
    # ================================
    def search_page(self, page: SearchPage) -> str:
        pagination = page.pagination
        header = msg.SEARCH_RESULTS_HEADER.format(
            header=msg.SEARCH_HEADERS[pagination.kind.value],
            query=_e(pagination.query),
            page=pagination.number,
            total_pages=pagination.total_pages,
        )
        return header + self.numbered_lines(page.items)

    # ================================
    # 📄 КАРТКИ
    # ================================
    def song_caption(self, song: Song) -> str:
        lines: List[str] = [f"🎵 <b>{_e(song.name)}</b>", f"👤 {_e(song.artists)}"]
        if song.album:
            lines.append(f"💿 {_e(song.album)}")
        meta = f"⏱ {self.seconds_to_time(song.duration)}"
        if song.year:
            meta += f" • 🗓 {_e(song.year)}"
        if song.language:
            meta += f" • 🌐 {_e(song.language)}"
        lines.append(meta)
        return "\n".join(lines) + "\n\n" + msg.SONG_CARD_HINT

    def album_caption(self, album: Album) -> str:
        lines = [f"📀 <b>{_e(album.name)}</b>"]
        if album.artists:
            lines.append(f"👤 {_e(album.artists)}")
        if album.year:
            lines.append(f"🗓 {_e(album.year)}")
        lines.append(f"🎵 {len(album.songs)} songs")
        return "\n".join(lines) + "\n\n" + _e(msg.COLLECTION_CARD_HINT)

    def playlist_caption(self, playlist: Playlist) -> str:
        lines = [f"📂 <b>{_e(playlist.name)}</b>"]
        if playlist.subtitle:
            lines.append(_e(playlist.subtitle))
        lines.append(f"🎵 {len(playlist.songs)} songs")
        return "\n".join(lines) + "\n\n" + _e(msg.COLLECTION_CARD_HINT)

    def artist_caption(self, artist: Artist) -> str:
        lines = [f"👤 <b>{_e(artist.name)}</b>"]
        if artist.role:
            lines.append(_e(artist.role))
        return "\n".join(lines) + "\n" + _e(msg.ARTIST_CARD_HINT)

    def caption(self, item: CatalogItem) -> str:
        if isinstance(item, Song):
            return self.song_caption(item)
        if isinstance(item, Album):
            return self.album_caption(item)
        if isinstance(item, Playlist):
            return self.playlist_caption(item)
        return self.artist_caption(item)

    def audio_caption(self, song: Song) -> str:
        return msg.AUDIO_CAPTION.format(title=_e(song.name), artists=_e(song.artists))

    # ================================
    # 🕘 ІСТОРІЯ / 📊 СТАТИСТИКА
    # ================================
    def history(self, entries: Iterable[HistoryEntry]) -> str:
        lines = [f"{_KIND_EMOJI.get(entry.kind, '•')} {_e(entry.name)}" for entry in entries]
        if not lines:
            return msg.HISTORY_EMPTY
        return msg.HISTORY_HEADER + "\n".join(lines)

    def stats(self, snapshot: StatsSnapshot) -> str:
        return msg.STATS_TEXT.format(
            users=snapshot.users,
            requests=snapshot.total_requests,
            downloads=snapshot.total_downloads,
        )

    def broadcast(self, text: str) -> str:
        return msg.BROADCAST_TEMPLATE.format(text=_e(text))


__all__ = ["MessageFormatter"]
