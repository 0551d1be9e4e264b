# 🚀 groovia/shared/metrics/exporters.py
"""
🚀 Запуск HTTP-експортера Prometheus.

🔹 Відповідає 200 на будь-який шлях, тому використовується і як liveness-проба хостингу.
🔹 Повторний виклик для того самого порту нічого не робить.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import start_http_server                    # 🌐 Вбудований HTTP-сервер метрик

# 🔠 Системні імпорти
import logging
import threading
from typing import Set

# 🧩 Внутрішні модулі проєкту
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(LOG_NAME)

_started_ports: Set[int] = set()
_lock = threading.Lock()


def maybe_start_prometheus(port: int, addr: str = "0.0.0.0") -> bool:
    """
    Піднімає експортер на `port`, якщо він ще не запущений.

    Returns:
        bool: True, якщо сервер запущено цим викликом.
    """
    with _lock:
        if port in _started_ports:
            logger.debug("📈 Prometheus вже слухає порт %s", port)
            return False
        start_http_server(port, addr=addr)                         # 🧵 Окремий daemon-потік
        _started_ports.add(port)
    logger.info("📈 Health/metrics endpoint on %s:%s", addr, port)
    return True


__all__ = ["maybe_start_prometheus"]
