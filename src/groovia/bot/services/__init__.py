# 🧰 groovia/bot/services/__init__.py
"""🧰 Службові обʼєкти шару бота: контекст, callback-дані, реєстр."""

from .custom_context import CustomContext

__all__ = ["CustomContext"]
