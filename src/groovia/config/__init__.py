# ⚙️ groovia/config/__init__.py
from .config_service import ConfigService

__all__ = ["ConfigService"]
