"""
🧪 test_exception_service.py — централізована обробка помилок

Перевіряє:
- Збій каталогу → повідомлення «каталог недоступний»
- Таймаут httpx та RetryAfter Telegram
- Невідомий виняток → критичне повідомлення
- Декоратор make_error_handler і CancelledError
"""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from telegram.error import RetryAfter

from groovia.bot.ui import static_messages as msg
from groovia.errors.custom_errors import CatalogError
from groovia.errors.error_handler import make_error_handler
from groovia.errors.exception_handler_service import ExceptionHandlerService
from groovia.errors.strategies import CatalogErrorStrategy, HttpxErrorStrategy, TelegramErrorStrategy


@pytest.fixture
def service():
    return ExceptionHandlerService([CatalogErrorStrategy(), HttpxErrorStrategy(), TelegramErrorStrategy()])


def _update():
    update = MagicMock()
    update.effective_message.reply_text = AsyncMock()
    return update


def _reply(update):
    return update.effective_message.reply_text.await_args.args[0]


@pytest.mark.asyncio
async def test_catalog_error_is_user_visible(service):
    update = _update()
    await service.handle(CatalogError("Saavn API error 502", endpoint="/api/search/songs", status_code=502), update)
    assert _reply(update) == msg.ERROR_CATALOG_UNAVAILABLE


@pytest.mark.asyncio
async def test_httpx_timeout(service):
    update = _update()
    request = httpx.Request("GET", "https://saavn.test/api/songs")
    await service.handle(httpx.ReadTimeout("slow", request=request), update)
    assert _reply(update) == msg.ERROR_HTTP_TIMEOUT


@pytest.mark.asyncio
async def test_telegram_retry_after(service):
    update = _update()
    await service.handle(RetryAfter(12), update)
    assert _reply(update) == msg.ERROR_TELEGRAM_RETRY_AFTER.format(seconds=12)


@pytest.mark.asyncio
async def test_unknown_error_is_logged_and_reported(service, caplog):
    update = _update()
    with caplog.at_level(logging.ERROR):
        await service.handle(KeyError("oops"), update)
    assert "Unhandled exception" in caplog.text
    assert _reply(update).startswith(msg.ERROR_CRITICAL)


@pytest.mark.asyncio
async def test_reply_failure_is_swallowed(service):
    update = _update()
    update.effective_message.reply_text.side_effect = RuntimeError("chat gone")
    await service.handle(ValueError("x"), update)


@pytest.mark.asyncio
async def test_decorator_routes_errors_and_keeps_cancellation():
    service = MagicMock()
    service.handle = AsyncMock()
    safe = make_error_handler(service)

    @safe
    async def faulty(update, context):
        raise RuntimeError("boom")

    @safe
    async def cancelled(update, context):
        raise asyncio.CancelledError()

    assert await faulty(MagicMock(), MagicMock()) is None
    service.handle.assert_awaited_once()

    with pytest.raises(asyncio.CancelledError):
        await cancelled(MagicMock(), MagicMock())
