"""
🧪 test_callback_dispatch.py — реєстр і диспетчер inline-кнопок

Перевіряє:
- Підтвердження натискання рівно один раз (з тостом для завантажень)
- Битий payload → лише підтвердження
- Делегування зареєстрованому хендлеру з розібраним payload
- Помилку хендлера → ExceptionHandlerService
- Запамʼятовування користувача, який лише тисне кнопки
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from groovia.bot.handlers.callback_handler import CallbackHandler, ack_text
from groovia.bot.services.callback_data_factory import CallbackAction, EntityRef, PageRequest, QualityChoice
from groovia.bot.services.callback_registry import CallbackRegistry
from groovia.bot.ui import static_messages as msg
from groovia.domain.music.entities import AudioQuality, EntityKind
from groovia.domain.session.stats import GlobalStats


def _update(data):
    update = MagicMock()
    update.callback_query.data = data
    update.callback_query.answer = AsyncMock()
    return update


def _context():
    context = MagicMock()
    context.callback_params = None
    return context


def _dispatcher(mapping):
    registry = CallbackRegistry()
    registry.register_map(mapping, origin="test")
    eh = MagicMock()
    eh.handle = AsyncMock()
    return CallbackHandler(registry, eh), eh


@pytest.mark.asyncio
async def test_download_is_acked_once_with_toast():
    seen = []

    async def on_download(update, context):
        seen.append(context.callback_params)

    handler, _ = _dispatcher({CallbackAction.DOWNLOAD: on_download})
    update = _update("dl:5WXAlMNt")

    await handler.handle(update, _context())

    update.callback_query.answer.assert_awaited_once_with(text=msg.ACK_DOWNLOAD)
    assert seen == [EntityRef(CallbackAction.DOWNLOAD, "5WXAlMNt")]


@pytest.mark.asyncio
async def test_malformed_payload_only_acks():
    called = AsyncMock()

    async def on_song(update, context):
        await called()

    handler, eh = _dispatcher({CallbackAction.SONG: on_song})
    update = _update("song")

    await handler.handle(update, _context())

    update.callback_query.answer.assert_awaited_once_with(text=None)
    called.assert_not_awaited()
    eh.handle.assert_not_awaited()


@pytest.mark.asyncio
async def test_page_callback_carries_query_from_button():
    seen = []

    async def on_page(update, context):
        seen.append(context.callback_params)

    handler, _ = _dispatcher({CallbackAction.PAGE: on_page})
    update = _update("page:album|Kabhi%20Khushi%20Kabhie%20Gham|1")

    await handler.handle(update, _context())

    assert seen == [PageRequest(EntityKind.ALBUM, "Kabhi Khushi Kabhie Gham", 1)]
    update.callback_query.answer.assert_awaited_once()


@pytest.mark.asyncio
async def test_handler_error_goes_to_exception_service():
    error = RuntimeError("boom")

    async def on_similar(update, context):
        raise error

    handler, eh = _dispatcher({CallbackAction.SIMILAR: on_similar})
    update = _update("similar:1")

    await handler.handle(update, _context())

    eh.handle.assert_awaited_once_with(error, update)
    update.callback_query.answer.assert_awaited_once()


@pytest.mark.asyncio
async def test_unregistered_action_is_ignored():
    handler, eh = _dispatcher({})
    update = _update("artist:1")
    await handler.handle(update, _context())
    update.callback_query.answer.assert_awaited_once()
    eh.handle.assert_not_awaited()


def test_ack_texts():
    assert ack_text(QualityChoice(AudioQuality.LOW)) == msg.QUALITY_SET.format(label="96kbps")
    assert ack_text(EntityRef(CallbackAction.ALBUM_DOWNLOAD, "1")) == msg.ACK_ALBUM_DOWNLOAD
    assert ack_text(EntityRef(CallbackAction.SONG, "1")) is None
    assert ack_text(None) is None


def test_registry_rejects_sync_handlers_and_reports_missing():
    registry = CallbackRegistry()
    with pytest.raises(TypeError):
        registry.register_map({CallbackAction.NOOP: lambda update, context: None})
    with pytest.raises(TypeError):
        registry.register_map({"noop": AsyncMock()})

    async def noop(update, context):
        return None

    registry.register_map({CallbackAction.NOOP: noop})
    assert CallbackAction.NOOP in registry and len(registry) == 1
    assert CallbackAction.SONG in set(registry.missing())


@pytest.mark.asyncio
async def test_button_press_remembers_user():
    stats = GlobalStats()
    eh = MagicMock()
    eh.handle = AsyncMock()
    handler = CallbackHandler(CallbackRegistry(), eh, stats=stats)
    update = _update("noop")
    update.effective_user.id = 42

    await handler.handle(update, _context())

    assert stats.users == {42}
    update.callback_query.answer.assert_awaited_once()
