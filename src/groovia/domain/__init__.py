# 🏭 groovia/domain/__init__.py
"""🏭 Доменний шар: сутності каталогу, вибір якості, сесії та статистика."""
