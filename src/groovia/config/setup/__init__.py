# 🧱 groovia/config/setup/__init__.py
"""🧱 Складання застосунку: константи, DI-контейнер, реєстрація хендлерів."""
