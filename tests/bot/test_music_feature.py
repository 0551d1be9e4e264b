"""
🧪 test_music_feature.py — картки сутностей і перехід сторінок

Перевіряє:
- Картку з обкладинкою надсилаємо фото
- Збій `reply_photo` → та сама картка текстом з тими ж кнопками
- Flood control при відправці фото не ковтається
- Перехід сторінки бере запит з кнопки, навіть якщо сесія вже інша
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from conftest import raw_song
from telegram.error import BadRequest, RetryAfter

from groovia.bot.commands.music_feature import MusicFeature
from groovia.bot.services.callback_data_factory import PageRequest
from groovia.bot.services.callback_registry import CallbackRegistry
from groovia.bot.ui.formatters.message_formatter import MessageFormatter
from groovia.bot.ui.keyboards.keyboards import Keyboard
from groovia.bot.ui.messengers.music_messenger import MusicMessenger
from groovia.config.setup.constants import CONST
from groovia.domain.music.entities import EntityKind, ImageRef, Song
from groovia.domain.music.outcomes import DetailOutcome, OutcomeStatus
from groovia.domain.session.state import Browsing
from groovia.infrastructure.services.search_service import SearchService

formatter = MessageFormatter()
keyboard = Keyboard(CONST)


def _update(user_id=1):
    update = MagicMock()
    update.effective_user.id = user_id
    update.effective_message.reply_text = AsyncMock()
    update.effective_message.reply_photo = AsyncMock()
    return update


def _song_with_cover():
    return Song(
        id="s1",
        name="Tum Hi Ho",
        artists="Arijit Singh",
        duration=262,
        images=(ImageRef("500x500", "https://c.saavncdn.com/s1-500x500.jpg"),),
    )


@pytest.mark.asyncio
async def test_song_card_sent_as_photo():
    messenger = MusicMessenger(formatter, keyboard)
    update = _update()

    await messenger.send_detail(update, DetailOutcome(OutcomeStatus.OK, EntityKind.SONG, _song_with_cover()))

    kwargs = update.effective_message.reply_photo.await_args.kwargs
    assert kwargs["photo"] == "https://c.saavncdn.com/s1-500x500.jpg"
    update.effective_message.reply_text.assert_not_awaited()


@pytest.mark.asyncio
async def test_broken_cover_falls_back_to_text_card():
    messenger = MusicMessenger(formatter, keyboard)
    update = _update()
    update.effective_message.reply_photo.side_effect = BadRequest("Wrong file identifier/http url specified")
    song = _song_with_cover()

    await messenger.send_detail(update, DetailOutcome(OutcomeStatus.OK, EntityKind.SONG, song))

    args, kwargs = update.effective_message.reply_text.await_args
    assert args[0] == formatter.caption(song)
    assert kwargs["reply_markup"] == keyboard.build_card(song)


@pytest.mark.asyncio
async def test_cover_flood_control_propagates():
    messenger = MusicMessenger(formatter, keyboard)
    update = _update()
    update.effective_message.reply_photo.side_effect = RetryAfter(5)

    with pytest.raises(RetryAfter):
        await messenger.send_detail(update, DetailOutcome(OutcomeStatus.OK, EntityKind.SONG, _song_with_cover()))
    update.effective_message.reply_text.assert_not_awaited()


@pytest.mark.asyncio
async def test_page_turn_uses_button_query_not_session(catalog, sessions):
    sessions.get(1).show_page(EntityKind.ARTIST, "Arijit", 0, ())
    catalog.search_data = {"total": 25, "results": [raw_song(f"k{i}", f"K3G {i}") for i in range(10)]}
    feature = MusicFeature(CallbackRegistry(), SearchService(catalog, sessions, page_size=10), MusicMessenger(formatter, keyboard))
    update = _update()
    context = MagicMock()
    context.callback_params = PageRequest(EntityKind.SONG, "Kabhi Khushi Kabhie Gham", 1)

    await feature.on_page(update, context)

    assert catalog.calls == [("search", EntityKind.SONG, "Kabhi Khushi Kabhie Gham", 1, 10)]
    assert sessions.get(1).state == Browsing(EntityKind.SONG, "Kabhi Khushi Kabhie Gham", 1)
    text = update.effective_message.reply_text.await_args.args[0]
    assert "11." in text and "K3G 0" in text
