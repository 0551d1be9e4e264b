# 🧩 groovia/bot/commands/__init__.py
"""🧩 Фічі бота: команди, меню та callback-и."""
