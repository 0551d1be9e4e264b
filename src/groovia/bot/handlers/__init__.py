# 🎯 groovia/bot/handlers/__init__.py
"""🎯 Глобальні хендлери: роутер тексту та диспетчер inline-кнопок."""
