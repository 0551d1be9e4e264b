# 🎧 groovia/__init__.py
"""
🎧 Groovia — Telegram-бот для пошуку та завантаження музики з каталогу JioSaavn.

🔹 `bot` — Telegram-шар (фічі, хендлери, UI).
🔹 `domain` — сесії користувачів, сутності каталогу, вибір якості.
🔹 `infrastructure` — HTTP-клієнт каталогу та оркестратори пошуку/завантаження.
"""

__version__ = "1.0.0"
