# 🚨 groovia/errors/__init__.py
from .custom_errors import AppError, CatalogError, NetworkRequestError, UserVisibleError

__all__ = ["AppError", "CatalogError", "NetworkRequestError", "UserVisibleError"]
