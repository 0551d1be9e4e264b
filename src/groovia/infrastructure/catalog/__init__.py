# 🌐 groovia/infrastructure/catalog/__init__.py
from .saavn_client import CatalogEndpoint, SaavnClient

__all__ = ["CatalogEndpoint", "SaavnClient"]
