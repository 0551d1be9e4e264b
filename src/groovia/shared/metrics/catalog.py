# 📈 groovia/shared/metrics/catalog.py
"""
📈 Лічильники каталогу та завантажень.

🔹 `CATALOG_REQUESTS` — кожен HTTP-запит до API каталогу (з міткою endpoint).
🔹 `DOWNLOADS` / `DOWNLOAD_SKIPPED` — доставлені та пропущені треки.
🔹 `USERS_SEEN` — нові користувачі з моменту старту процесу.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter                              # 📊 Prometheus-лічильники

CATALOG_REQUESTS = Counter(
    "groovia_catalog_requests_total",
    "Requests issued to the music catalog API",
    ["endpoint"],
)

DOWNLOADS = Counter(
    "groovia_downloads_total",
    "Audio tracks handed to the chat transport",
)

DOWNLOAD_SKIPPED = Counter(
    "groovia_download_skipped_total",
    "Tracks skipped during download",
    ["reason"],
)

USERS_SEEN = Counter(
    "groovia_users_seen_total",
    "Distinct chat users seen since process start",
)

__all__ = ["CATALOG_REQUESTS", "DOWNLOADS", "DOWNLOAD_SKIPPED", "USERS_SEEN"]
