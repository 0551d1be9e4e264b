"""
🧪 test_admin_feature.py — команди /stats та /broadcast

Перевіряє:
- Доступ лише для налаштованого адміністратора
- Текст статистики
- Розсилку з підрахунком sent / failed
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram.error import Forbidden

from groovia.bot.commands.admin_feature import AdminFeature
from groovia.bot.ui import static_messages as msg
from groovia.bot.ui.formatters.message_formatter import MessageFormatter
from groovia.config.setup.constants import CONST
from groovia.domain.session.stats import GlobalStats

ADMIN_ID = 1000


def _feature(stats, admin_id=ADMIN_ID):
    return AdminFeature(CONST, stats, MessageFormatter(), MagicMock(), admin_id=admin_id)


def _update(user_id, text):
    update = MagicMock()
    update.effective_user.id = user_id
    update.message.text = text
    update.message.reply_text = AsyncMock()
    return update


@pytest.mark.asyncio
async def test_stats_for_admin():
    stats = GlobalStats()
    stats.remember_user(1)
    stats.record_request()
    feature = _feature(stats)
    update = _update(ADMIN_ID, "/stats")

    await feature.stats_command(update, MagicMock())

    text = update.message.reply_text.await_args.args[0]
    assert "Users seen: 1" in text and "Requests: 1" in text and "Downloads: 0" in text


@pytest.mark.asyncio
@pytest.mark.parametrize("admin_id", [ADMIN_ID, None])
async def test_non_admin_is_ignored(admin_id):
    feature = _feature(GlobalStats(), admin_id=admin_id)
    update = _update(42, "/broadcast hello")
    context = MagicMock()
    context.bot.send_message = AsyncMock()

    await feature.stats_command(update, context)
    await feature.broadcast_command(update, context)

    update.message.reply_text.assert_not_awaited()
    context.bot.send_message.assert_not_awaited()


@pytest.mark.asyncio
async def test_broadcast_counts_failures():
    stats = GlobalStats()
    for user_id in (1, 2, 3):
        stats.remember_user(user_id)
    feature = _feature(stats)
    context = MagicMock()

    async def send_message(chat_id, text, **kwargs):
        if chat_id == 2:
            raise Forbidden("bot was blocked by the user")

    context.bot.send_message = AsyncMock(side_effect=send_message)
    update = _update(ADMIN_ID, "/broadcast\nNew <b>songs</b> added")

    await feature.broadcast_command(update, context)

    sent_text = context.bot.send_message.await_args_list[0].args[1]
    assert "New &lt;b&gt;songs&lt;/b&gt; added" in sent_text
    update.message.reply_text.assert_awaited_once_with(msg.BROADCAST_DONE.format(sent=2, failed=1))


@pytest.mark.asyncio
async def test_broadcast_without_text_shows_usage():
    feature = _feature(GlobalStats())
    update = _update(ADMIN_ID, "/broadcast   ")
    await feature.broadcast_command(update, MagicMock())
    update.message.reply_text.assert_awaited_once_with(msg.BROADCAST_USAGE)
