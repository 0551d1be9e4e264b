# 📊 groovia/shared/metrics/__init__.py
"""
📊 Prometheus-метрики бота.

🔹 Лічильники запитів до каталогу, доставлених треків і користувачів.
🔹 Експортер `/metrics`, який водночас слугує health-ендпоінтом.
"""

from __future__ import annotations

from .catalog import CATALOG_REQUESTS, DOWNLOADS, DOWNLOAD_SKIPPED, USERS_SEEN
from .exporters import maybe_start_prometheus

__all__ = [
    "CATALOG_REQUESTS",
    "DOWNLOADS",
    "DOWNLOAD_SKIPPED",
    "USERS_SEEN",
    "maybe_start_prometheus",
]
