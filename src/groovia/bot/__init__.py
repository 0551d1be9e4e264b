# 🤖 groovia/bot/__init__.py
"""🤖 Telegram-шар Groovia: фічі, хендлери, UI."""
