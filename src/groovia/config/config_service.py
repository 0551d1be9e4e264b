# ⚙️ groovia/config/config_service.py
"""
⚙️ config_service.py — доступ до конфігурації бота.

🔹 Клас `ConfigService`:
- Завантажує `config.yaml` з пакета, потім накладає змінні середовища (.env).
- Надає єдиний метод `.get("a.b.c", default, cast=...)`.
- Працює як Singleton.
"""

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import logging                              # 🧾 Логування
import os                                   # 📁 Доступ до змінних середовища
from pathlib import Path                    # 📁 Шлях до config.yaml
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from groovia.shared.utils.logger import LOG_NAME

logger = logging.getLogger(LOG_NAME)

# Змінна середовища → крапковий ключ конфігурації (перші непорожні виграють)
ENV_KEYS: Mapping[str, Tuple[str, ...]] = {
    "telegram.bot_token": ("BOT_TOKEN", "TELEGRAM_BOT_TOKEN"),
    "catalog.base_url": ("SAAVN_BASE",),
    "admin.user_id": ("ADMIN_ID",),
    "health.port": ("PORT",),
    "logging.level": ("LOG_LEVEL",),
}

DEFAULT_YAML_PATH = Path(__file__).parent / "config.yaml"


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх параметрів бота.
    Конфігурація зчитується один раз; `reset()` дозволяє перечитати її (тести, перезапуск).
    """

    _instance: Optional["ConfigService"] = None
    _config: Dict[str, Any]

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs()
            cls._instance = instance
            logger.debug("🔄 ConfigService створено, конфігурацію завантажено")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Скидає singleton; наступний `ConfigService()` перечитає джерела."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """
        📥 Пріоритет: config.yaml → змінні середовища (.env). Пізніше джерело перекриває раніше.
        """
        try:
            with open(DEFAULT_YAML_PATH, "r", encoding="utf-8") as f:
                self._deep_update(self._config, yaml.safe_load(f) or {})
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити config.yaml: %s", e)

        load_dotenv()
        env_values: Dict[str, Any] = {}
        for key, names in ENV_KEYS.items():
            for name in names:
                value = os.getenv(name)
                if value:                                    # 🚫 Порожні змінні не затирають YAML
                    env_values[key] = value
                    break
        self._deep_update(self._config, self._unflatten_dict(env_values))
        logger.info("✅ Конфігурацію завантажено (env overrides: %s)", sorted(env_values) or "-")

    def get(self, key: str, default: Any = None, cast: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        🔑 Повертає значення за крапковим ключем (наприклад 'catalog.base_url').

        Args:
            key: Ключ у форматі з крапкою.
            default: Значення, якщо ключ не знайдено (або cast не вдався).
            cast: Необовʼязкове перетворення типу (int, str, ...).
        """
        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        if value is None:
            return default
        if cast is None:
            return value
        try:
            return cast(value)
        except (TypeError, ValueError):
            logger.warning("⚠️ Ключ '%s': не вдалося привести %r через %s", key, value, getattr(cast, "__name__", cast))
            return default

    def as_dict(self) -> Dict[str, Any]:
        """Поверхнева копія обʼєднаної конфігурації (для діагностики)."""
        return dict(self._config)

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ
    # ===============================
    @staticmethod
    def _unflatten_dict(d: Mapping[str, Any]) -> Dict[str, Any]:
        """'telegram.bot_token' → {'telegram': {'bot_token': ...}}"""
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split(".")
            ref = result
            for part in parts[:-1]:
                ref = ref.setdefault(part, {})
            ref[parts[-1]] = value
        return result

    @classmethod
    def _deep_update(cls, source: Dict[str, Any], overrides: Mapping[str, Any]) -> None:
        """🔁 Рекурсивно зливає словники; вкладені dict обʼєднуються, решта перезаписується."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                cls._deep_update(source[key], value)
            else:
                source[key] = value


__all__ = ["ConfigService", "ENV_KEYS"]
