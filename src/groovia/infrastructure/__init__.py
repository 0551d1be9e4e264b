# 🏗️ groovia/infrastructure/__init__.py
"""🏗️ Інфраструктура: клієнт каталогу та сервіси-оркестратори."""
