# 📜 groovia/shared/utils/logger.py
"""
📜 Єдина схема логування бота Groovia.

🔹 Піднімає логер `groovia` з консольним та файловим (з ротацією) виводом.
🔹 Файл може писатися у JSON, щоб логи легко збирались зовнішніми агрегаторами.
🔹 Приглушує балакучі сторонні бібліотеки (httpx, telegram, apscheduler).
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json									# 📦 Серіалізація записів у JSON
import logging									# 🪵 Стандартний logging
import sys									# 🖥️ stdout для консолі
import threading								# 🔒 Захист від паралельної ініціалізації
from dataclasses import dataclass, field					# 🧱 DTO-конфіг
from logging.handlers import TimedRotatingFileHandler			# 📁 Ротація файлів за часом
from pathlib import Path								# 📂 Шляхи до лог-файлів
from typing import Any, Dict, Mapping, Optional, Union			# 🧰 Типи

# ================================
# 🧾 КОНСТАНТИ МОДУЛЯ
# ================================
LOG_NAME: str = "groovia"							# 🏷️ Кореневий неймспейс логерів
PLAIN_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s:%(lineno)d | %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(message)s"

DEFAULT_SUPPRESS: Mapping[str, str] = {
    "httpx": "WARNING",								# 🌐 Кожен GET до каталогу інакше йде в INFO
    "httpcore": "WARNING",
    "telegram": "WARNING",
    "apscheduler": "WARNING",
}

# Службові атрибути LogRecord, які не потрапляють у JSON як extra
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime"}

_lock = threading.Lock()


# ================================
# 🧾 DTO КОНФІГУРАЦІЇ
# ================================
@dataclass
class LoggingConfig:
    """Налаштування логування; значення за замовчуванням підходять для локального запуску."""
    level: str = "INFO"
    console: bool = True
    json: bool = False
    file: Optional[str] = "logs/groovia.log"				# 🚫 None або "" → лише консоль
    when: str = "midnight"
    interval: int = 1
    backup_count: int = 7
    encoding: str = "utf-8"
    suppress: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_SUPPRESS))
    console_format: str = CONSOLE_FORMAT
    file_format: str = PLAIN_FORMAT


# ================================
# 🧰 ФОРМАТТЕР
# ================================
class JsonFormatter(logging.Formatter):
    """Пише кожен запис одним JSON-рядком разом із полями з `extra=`."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "where": f"{record.module}.{record.funcName}:{record.lineno}",
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():			# 🔎 Підхоплюємо extra-поля
            if key in _RESERVED_ATTRS or key.startswith("_") or key in payload:
                continue
            try:
                json.dumps(value)
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = repr(value)				# 🔄 Несеріалізовані значення → repr
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


# ================================
# 🛠️ ДОПОМОЖНІ ФУНКЦІЇ
# ================================
def _to_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    """Перетворює 'debug' / 10 / None на числовий рівень."""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    return getattr(logging, str(value).upper(), default)


def _file_handler(cfg: LoggingConfig) -> logging.Handler:
    """Створює файловий хендлер з ротацією, гарантуючи наявність директорії."""
    path = Path(str(cfg.file))
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(
        filename=str(path),
        when=cfg.when,
        interval=cfg.interval,
        backupCount=cfg.backup_count,
        encoding=cfg.encoding,
    )
    handler.setFormatter(JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format))
    return handler


def _apply_suppress(suppress: Mapping[str, str]) -> None:
    for name, level in suppress.items():
        logging.getLogger(name).setLevel(_to_level(level, logging.WARNING))


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def init_logging(cfg: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Налаштовує логер `groovia`. Повторний виклик замінює попередні хендлери.

    Args:
        cfg: Налаштування; `None` → значення за замовчуванням.

    Returns:
        logging.Logger: Кореневий логер застосунку.
    """
    cfg = cfg or LoggingConfig()
    with _lock:
        root = logging.getLogger(LOG_NAME)
        root.setLevel(_to_level(cfg.level))

        for handler in list(root.handlers):			# 🧹 Прибираємо наші попередні хендлери
            root.removeHandler(handler)
            handler.close()

        if cfg.console:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(logging.Formatter(cfg.console_format))
            root.addHandler(console)

        if cfg.file:
            root.addHandler(_file_handler(cfg))

        _apply_suppress(cfg.suppress)

        root.info(
            "✅ Logging initialized | level=%s console=%s json=%s file=%s",
            logging.getLevelName(root.level),
            "ON" if cfg.console else "OFF",
            "ON" if cfg.json else "OFF",
            cfg.file or "-",
        )
        return root


def init_logging_from_config(node: Optional[Mapping[str, Any]]) -> logging.Logger:
    """
    Ініціалізує логування з вузла `logging:` конфігурації.

    Невідомі ключі ігноруються, відсутні беруться з `LoggingConfig`.
    """
    node = dict(node or {})
    defaults = LoggingConfig()
    suppress = dict(DEFAULT_SUPPRESS)
    suppress.update(node.get("suppress") or {})
    cfg = LoggingConfig(
        level=str(node.get("level") or defaults.level),
        console=bool(node.get("console", defaults.console)),
        json=bool(node.get("json", defaults.json)),
        file=node.get("file", defaults.file),
        when=str(node.get("when") or defaults.when),
        interval=int(node.get("interval") or defaults.interval),
        backup_count=int(node.get("backup_count") or defaults.backup_count),
        suppress=suppress,
        console_format=node.get("console_format") or defaults.console_format,
        file_format=node.get("file_format") or defaults.file_format,
    )
    return init_logging(cfg)


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """Повертає дочірній логер `groovia.<suffix>` або кореневий."""
    return logging.getLogger(f"{LOG_NAME}.{suffix}" if suffix else LOG_NAME)


__all__ = [
    "LOG_NAME",
    "LoggingConfig",
    "JsonFormatter",
    "init_logging",
    "init_logging_from_config",
    "get_logger",
]
