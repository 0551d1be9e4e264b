# 🎨 groovia/bot/ui/__init__.py
"""🎨 Шар представлення: тексти, форматування, клавіатури, відправка."""
