# 💬 groovia/bot/ui/static_messages.py
"""
💬 Статичні тексти, які бачить користувач (HTML parse mode).

Плейсхолдери у фігурних дужках заповнюються через `.format(...)`;
значення, що приходять від користувача чи каталогу, екрануються до підстановки.
"""

# ================================
# 👋 СТАРТ / ДОВІДКА
# ================================
START_WELCOME = (
    "Hey {first_name} 👋\n\n"
    "Main <b>Groovia Bot</b> hoon – JioSaavn se gaane search, explore aur download karne ke liye.\n\n"
    "• Seedha gaane ka naam type karo – main song search karunga\n"
    "• Ya neeche menu se songs, albums, playlists, artists search karo\n"
    "• JioSaavn ka song/album/playlist link bhejoge to direct fetch hoga"
)

HELP_TEXT = (
    "Quick guide:\n\n"
    "• \"Tum Hi Ho\" likho → top 10 songs\n"
    "• \"🎵 Search songs\" → song search mode\n"
    "• \"📀 Search albums\" → album search mode\n"
    "• \"📂 Search playlists\" → playlist search mode\n"
    "• \"👤 Search artists\" → artist search mode\n"
    "• JioSaavn URL paste karo → uska detail directly\n"
    "• ⚙️ Settings → download quality choose"
)

# ================================
# 🔎 ПОШУК
# ================================
ASK_QUERY = {
    "song": "Kaunsa song? Naam bhejo 🎵",
    "album": "Album ka naam bhejo 📀",
    "playlist": "Playlist ka naam bhejo 📂",
    "artist": "Artist ka naam bhejo 👤",
}

SEARCH_EMPTY_QUERY = "Koi naam to likho na 😅"
SEARCH_NO_RESULTS = "Kuch nahi mila 😶‍🌫️"

SEARCH_HEADERS = {
    "song": "🎵 <b>Songs</b>",
    "album": "📀 <b>Albums</b>",
    "playlist": "📂 <b>Playlists</b>",
    "artist": "👤 <b>Artists</b>",
}
SEARCH_RESULTS_HEADER = "{header} for <i>{query}</i>\nPage {page}/{total_pages}\n\n"

# ================================
# 📄 ДЕТАЛІ
# ================================
NOT_FOUND = {
    "song": "Song nahi mila 😢",
    "album": "Album nahi mila 😢",
    "playlist": "Playlist nahi mili 😢",
    "artist": "Artist nahi mila 😢",
}

SONG_CARD_HINT = "<i>Use the buttons below to download or explore similar tracks.</i>"
COLLECTION_CARD_HINT = "Tap any song in the list to download individually, or use \"Download all\"."
ARTIST_CARD_HINT = "Tap \"Songs\" ya \"Albums\" se aur explore karo."

SIMILAR_HEADER = "✨ <b>Similar tracks</b>:"
SIMILAR_EMPTY = "Similar songs nahi mile 😅"
ARTIST_SONGS_EMPTY = "Koi song nahi mila 😢"
ARTIST_ALBUMS_EMPTY = "Koi album nahi mila 😢"

HISTORY_EMPTY = "Abhi tak koi history nahi hai 🙂"
HISTORY_HEADER = "🕘 <b>Recent</b>\n"

# ================================
# ⚙️ НАЛАШТУВАННЯ
# ================================
SETTINGS_PROMPT = "Download quality choose karo (jitna jyada, utna heavy but better audio):"
QUALITY_SET = "Quality set to {label}"

# ================================
# ⬇️ ЗАВАНТАЖЕННЯ
# ================================
ACK_DOWNLOAD = "Downloading…"
ACK_PLAYLIST_DOWNLOAD = "Playlist download start…"
ACK_ALBUM_DOWNLOAD = "Album download start…"

DOWNLOAD_LOADER = "⏳ Fetching high-quality audio for you..."
DOWNLOAD_SONG_NOT_FOUND = "Song not found 😢"
DOWNLOAD_LINK_MISSING = "Download link missing 😢 ({title})"
DOWNLOAD_SEND_FAILED = "Telegram ko file bhejte waqt error aaya 😢"
DOWNLOAD_TRACK_FAILED = "⚠️ Track skip hua: {title}"
AUDIO_CAPTION = "🎵 {title}\n👤 {artists}\n\nDownloaded via @GrooviaBot"

# ================================
# 🛡️ АДМІН
# ================================
STATS_TEXT = (
    "📊 <b>Bot stats</b>\n"
    "Users seen: {users}\n"
    "Requests: {requests}\n"
    "Downloads: {downloads}"
)
BROADCAST_USAGE = "Usage: /broadcast message"
BROADCAST_TEMPLATE = "📢 <b>Broadcast</b>\n{text}"
BROADCAST_DONE = "Broadcast sent. ✅ {sent} • ❌ {failed}"

# ================================
# 🚨 ПОМИЛКИ
# ================================
ERROR_CATALOG_UNAVAILABLE = "😵 JioSaavn abhi jawab nahi de raha."
ERROR_HTTP_TIMEOUT = "⏱️ Server ne time par jawab nahi diya."
ERROR_HTTP_CONNECTION = "🌐 Server se connect nahi ho paya."
ERROR_HTTP_STATUS = "⚠️ Server error (HTTP {status_code})."
ERROR_TELEGRAM_RETRY_AFTER = "⏳ Telegram bol raha hai {seconds} sec ruko."
ERROR_TELEGRAM_GENERAL = "🤖 Telegram se message bhejne me dikkat aayi."
ERROR_CRITICAL = "❌ Kuch gadbad ho gayi. Thodi der baad try karo."
ERROR_UNKNOWN = "❓ Unknown error."
