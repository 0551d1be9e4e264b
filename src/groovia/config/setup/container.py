# 📦 groovia/config/setup/container.py
"""
📦 Контейнер залежностей Telegram-бота.

🔹 Створює сервіси в правильному порядку DI
🔹 Один `SaavnClient`, одне сховище сесій і одна статистика на процес
🔹 Дає єдину точку доступу до фіч, роутера та callback-диспетчера
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import Any, List, Optional

# 🧩 Внутрішні модулі проєкту

# 🤖 Bot-фічі та хендлери
from groovia.bot.commands.admin_feature import AdminFeature
from groovia.bot.commands.base import BaseFeature
from groovia.bot.commands.core_commands_feature import CoreCommandsFeature
from groovia.bot.commands.download_feature import DownloadFeature
from groovia.bot.commands.main_menu_feature import MainMenuFeature
from groovia.bot.commands.music_feature import MusicFeature
from groovia.bot.commands.settings_feature import SettingsFeature
from groovia.bot.handlers.callback_handler import CallbackHandler
from groovia.bot.handlers.intent_router import IntentRouter
from groovia.bot.services.callback_registry import CallbackRegistry
from groovia.bot.ui.formatters.message_formatter import MessageFormatter
from groovia.bot.ui.keyboards.keyboards import Keyboard
from groovia.bot.ui.messengers.music_messenger import MusicMessenger

# ⚙️ Конфігурація
from groovia.config.config_service import ConfigService
from groovia.config.setup.constants import CONST, AppConstants

# 🏭 Доменна логіка
from groovia.domain.music.entities import AudioQuality
from groovia.domain.music.quality import parse_fallback_order
from groovia.domain.session.state import HISTORY_LIMIT
from groovia.domain.session.stats import GlobalStats
from groovia.domain.session.store import SessionStore

# 🚨 Обробка помилок
from groovia.errors.error_handler import make_error_handler
from groovia.errors.exception_handler_service import ExceptionHandlerService
from groovia.errors.strategies import CatalogErrorStrategy, HttpxErrorStrategy, TelegramErrorStrategy

# 📦 Інфраструктура
from groovia.infrastructure.catalog.saavn_client import DEFAULT_TIMEOUT_SEC, SaavnClient
from groovia.infrastructure.services.download_service import DownloadService
from groovia.infrastructure.services.search_service import SearchService
from groovia.shared.metrics.exporters import maybe_start_prometheus
from groovia.shared.utils.logger import LOG_NAME, init_logging_from_config

logger = logging.getLogger(LOG_NAME)


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _int_or_default(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _optional_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    if value in (None, ""):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("⚠️ Не вдалося привести %r до int", value)
        return default


def bootstrap_logging() -> logging.Logger:
    """
    Зчитує конфіг логування і запускає кореневий логер.
    """
    node = ConfigService().get("logging", {}) or {}
    return init_logging_from_config(node)


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """
    Координує ініціалізацію інфраструктурних, доменних та бот-сервісів.
    """

    def __init__(self, config: ConfigService, *, catalog: Optional[SaavnClient] = None):
        self.config = config
        self.constants: AppConstants = CONST
        logger.info("🚀 Стартуємо побудову контейнера залежностей")
        self._bootstrap_metrics_if_enabled()
        self._setup_error_handlers()
        self._setup_state()
        self._setup_catalog(catalog)
        self._setup_services()
        self._setup_ui()
        self._setup_features_and_handlers()
        logger.info("✅ Контейнер ініціалізовано успішно")

    # ================================
    # 📈 HEALTH / МЕТРИКИ
    # ================================
    def _bootstrap_metrics_if_enabled(self) -> None:
        """
        Стартує Prometheus-експортер; він же відповідає 200 як health-endpoint.
        """
        try:
            if not bool(self.config.get("health.enabled", True)):
                logger.debug("📉 Health/metrics endpoint вимкнено конфігом")
                return
            port = _int_or_default(self.config.get("health.port", 3000), 3000)
            if maybe_start_prometheus(port):
                logger.info("📈 Health/metrics endpoint запущено на порті %s", port)
        except Exception:  # noqa: BLE001
            logger.exception("⚠️ Не вдалося стартувати health/metrics endpoint")

    # ================================
    # 🛡️ ОБРОБКА ПОМИЛОК
    # ================================
    def _setup_error_handlers(self) -> None:
        strategies = [
            CatalogErrorStrategy(),
            HttpxErrorStrategy(),
            TelegramErrorStrategy(),
        ]
        self.exception_handler_service = ExceptionHandlerService(strategies=strategies)
        self.error_handler = make_error_handler(self.exception_handler_service)
        logger.debug("🛡️ ExceptionHandlerService активовано (%d стратегій)", len(strategies))

    # ================================
    # 🗃️ СТАН ПРОЦЕСУ
    # ================================
    def _setup_state(self) -> None:
        raw_quality = self.config.get("music.quality.default", AudioQuality.HIGH.value)
        try:
            default_quality = AudioQuality.parse(raw_quality)
        except ValueError:
            logger.warning("⚠️ Невідома якість за замовчуванням %r, беремо 320", raw_quality)
            default_quality = AudioQuality.HIGH

        self.stats = GlobalStats()
        self.sessions = SessionStore(history_limit=HISTORY_LIMIT, default_quality=default_quality)
        self.admin_id = _optional_int(self.config.get("admin.user_id"))

    # ================================
    # 🌐 КАТАЛОГ
    # ================================
    def _setup_catalog(self, catalog: Optional[SaavnClient]) -> None:
        self.saavn_client = catalog or SaavnClient(
            base_url=self.config.get("catalog.base_url", "https://jiosavan-sigma.vercel.app"),
            stats=self.stats,
            timeout=float(self.config.get("catalog.timeout_sec", DEFAULT_TIMEOUT_SEC) or DEFAULT_TIMEOUT_SEC),
            user_agent=self.config.get("catalog.user_agent", "groovia-bot"),
        )

    # ================================
    # 🧭 ОРКЕСТРАТОРИ
    # ================================
    def _setup_services(self) -> None:
        collection_limit = _int_or_default(self.config.get("music.collection_page_size"), 50)
        self.search_service = SearchService(
            self.saavn_client,
            self.sessions,
            page_size=_int_or_default(self.config.get("music.search_page_size"), 10),
            collection_limit=collection_limit,
            listing_limit=_int_or_default(self.config.get("music.detail_list_size"), 10),
            trending_playlist_id=str(self.config.get("music.trending_playlist_id", "110858205")),
        )
        self.download_service = DownloadService(
            self.saavn_client,
            self.sessions,
            self.stats,
            fallback_order=parse_fallback_order(self.config.get("music.quality.fallback_order")),
            batch_limit=_int_or_default(self.config.get("music.batch.max_tracks"), 50),
            collection_limit=collection_limit,
        )

    # ================================
    # 🎨 UI
    # ================================
    def _setup_ui(self) -> None:
        self.formatter = MessageFormatter()
        self.keyboard = Keyboard(self.constants)
        self.music_messenger = MusicMessenger(
            self.formatter,
            self.keyboard,
            detail_list_size=_int_or_default(self.config.get("music.detail_list_size"), 10),
        )

    # ================================
    # 📚 ФІЧІ ТА РОУТЕРИ
    # ================================
    def _setup_features_and_handlers(self) -> None:
        self.callback_registry = CallbackRegistry()
        self.music_feature = MusicFeature(
            registry=self.callback_registry,
            search_service=self.search_service,
            messenger=self.music_messenger,
        )
        self.features: List[BaseFeature] = [
            CoreCommandsFeature(
                registry=self.callback_registry,
                constants=self.constants,
                stats=self.stats,
                keyboard=self.keyboard,
                exception_handler=self.exception_handler_service,
            ),
            self.music_feature,
            DownloadFeature(
                registry=self.callback_registry,
                download_service=self.download_service,
                formatter=self.formatter,
            ),
            SettingsFeature(registry=self.callback_registry, sessions=self.sessions, keyboard=self.keyboard),
            AdminFeature(
                self.constants,
                self.stats,
                self.formatter,
                self.exception_handler_service,
                admin_id=self.admin_id,
            ),
        ]
        missing = list(self.callback_registry.missing())
        if missing:
            logger.warning("⚠️ Callback-и без обробника: %s", [action.value for action in missing])

        self.callback_handler = CallbackHandler(
            registry=self.callback_registry,
            exception_handler=self.exception_handler_service,
            stats=self.stats,
        )
        self.main_menu_feature = MainMenuFeature(
            constants=self.constants,
            sessions=self.sessions,
            music=self.music_feature,
            keyboard=self.keyboard,
            formatter=self.formatter,
        )
        self.intent_router = IntentRouter(
            constants=self.constants,
            sessions=self.sessions,
            stats=self.stats,
            music=self.music_feature,
            menu=self.main_menu_feature,
        )
        logger.debug("📚 Фічі та роутери ініціалізовані (%d)", len(self.features))

    async def aclose(self) -> None:
        await self.saavn_client.close()


__all__ = ["Container", "bootstrap_logging"]
