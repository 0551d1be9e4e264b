"""
🧪 test_music_keyboards.py — клавіатури бота

Перевіряє:
- Головне меню (Reply)
- Пагінацію на межах сторінок
- Кнопки карток сутностей
- Позначку поточної якості
"""

from telegram import InlineKeyboardMarkup, ReplyKeyboardMarkup

from groovia.bot.ui.keyboards.keyboards import Keyboard
from groovia.config.setup.constants import CONST
from groovia.domain.music.entities import (
    Album,
    Artist,
    AudioQuality,
    EntityKind,
    ListedItem,
    PaginationDescriptor,
    Playlist,
    Song,
)

keyboard = Keyboard(CONST)


def _data(markup):
    return [[button.callback_data for button in row] for row in markup.inline_keyboard]


def _texts(markup):
    return [[button.text for button in row] for row in markup.inline_keyboard]


def test_main_menu_structure_and_cache():
    menu = keyboard.build_main_menu()
    assert isinstance(menu, ReplyKeyboardMarkup)
    rows = [[button.text for button in row] for row in menu.keyboard]
    assert rows[0] == ["🎵 Search songs", "📀 Search albums"]
    assert rows[-1] == ["⚙️ Settings"]
    assert menu.resize_keyboard is True
    assert keyboard.build_main_menu() is menu


def test_pagination_first_page_only_next():
    rows = keyboard.pagination_rows(PaginationDescriptor(EntityKind.SONG, "Tum Hi Ho", 0, 6))
    assert len(rows) == 1
    assert [b.callback_data for b in rows[0]] == ["page:song|Tum%20Hi%20Ho|1", "noop"]
    assert rows[0][1].text == "Page 1/6"


def test_pagination_middle_page_both():
    rows = keyboard.pagination_rows(PaginationDescriptor(EntityKind.ALBUM, "x", 2, 6))
    assert [b.callback_data for b in rows[0]] == ["page:album|x|1", "page:album|x|3"]
    assert rows[1][0].text == "Page 3/6"


def test_pagination_last_and_single_page():
    last = keyboard.pagination_rows(PaginationDescriptor(EntityKind.SONG, "x", 5, 6))
    assert [b.text for b in last[0]] == ["⬅️ Prev", "Page 6/6"]
    single = keyboard.pagination_rows(PaginationDescriptor(EntityKind.SONG, "x", 0, 1))
    assert _texts(InlineKeyboardMarkup(single)) == [["Page 1/1"]]


def test_results_rows_two_per_row_and_truncated_names():
    items = tuple(ListedItem(i + 1, Song(id=f"s{i}", name="A very long song name here")) for i in range(3))
    markup = keyboard.build_results(items, PaginationDescriptor(EntityKind.SONG, "q", 0, 1))
    data = _data(markup)
    assert data[0] == ["song:s0", "song:s1"]
    assert data[1] == ["song:s2"]
    assert markup.inline_keyboard[0][0].text == "▶ A very long song"


def test_card_buttons():
    assert _data(keyboard.build_card(Song(id="1", name="S"))) == [["dl:1", "similar:1"]]
    assert _data(keyboard.build_card(Album(id="2", name="A"))) == [["abdl:2"]]
    assert _data(keyboard.build_card(Playlist(id="3", name="P"))) == [["pldl:3"]]
    assert _data(keyboard.build_card(Artist(id="4", name="R"))) == [["artsongs:4", "artalbums:4"]]


def test_settings_marks_current_quality():
    markup = keyboard.build_settings(AudioQuality.MEDIUM)
    texts = [row[0].text for row in markup.inline_keyboard]
    assert texts[1].startswith("✅ ")
    assert not texts[0].startswith("✅") and not texts[2].startswith("✅")
    assert [row[0].callback_data for row in markup.inline_keyboard] == ["q:96", "q:160", "q:320"]
