# 🧭 groovia/infrastructure/services/__init__.py
"""🧭 Оркестратори пошуку та завантаження."""

from .download_service import DownloadService
from .search_service import SearchService

__all__ = ["SearchService", "DownloadService"]
