"""
🧪 test_search_service.py — оркестратор пошуку та деталізації

Перевіряє:
- Наскрізну нумерацію та кількість сторінок
- Порожній запит без звернення до каталогу
- Оновлення сесії лише при успішному пошуку; повторний пошук дає той самий стан
- Деталі за id і за посиланням, запис в історію
- Похідні списки (схожі, пісні/альбоми артиста, trending)
"""

import pytest
from conftest import raw_collection, raw_song

from groovia.domain.music.entities import EntityKind
from groovia.domain.music.outcomes import OutcomeStatus
from groovia.domain.session.state import AwaitingQuery, Browsing
from groovia.infrastructure.services.search_service import SearchService


@pytest.fixture
def service(catalog, sessions):
    return SearchService(catalog, sessions, page_size=10, listing_limit=5, trending_playlist_id="110858205")


@pytest.mark.asyncio
async def test_search_first_page(service, catalog, sessions):
    catalog.search_data = {"total": 57, "results": [raw_song(str(i), f"Song {i}") for i in range(10)]}

    outcome = await service.search(1, EntityKind.SONG, "  Tum Hi Ho  ")

    assert outcome.ok
    assert catalog.calls == [("search", EntityKind.SONG, "Tum Hi Ho", 0, 10)]
    page = outcome.page
    assert [listed.index for listed in page.items] == list(range(1, 11))
    assert page.pagination.total_pages == 6
    assert page.pagination.has_next and not page.pagination.has_previous
    assert sessions.get(1).state == Browsing(EntityKind.SONG, "Tum Hi Ho", 0)


@pytest.mark.asyncio
async def test_search_numbering_continues_on_later_pages(service, catalog):
    catalog.search_data = {"total": 57, "results": [raw_song(f"a{i}") for i in range(7)]}

    outcome = await service.search(1, EntityKind.ALBUM, "Kabhi Khushi Kabhie Gham", page=5)

    assert [listed.index for listed in outcome.page.items] == list(range(51, 58))
    assert outcome.page.pagination.number == 6
    assert not outcome.page.pagination.has_next


@pytest.mark.asyncio
async def test_empty_query_skips_catalog(service, catalog):
    outcome = await service.search(1, EntityKind.SONG, "   ")
    assert outcome.status is OutcomeStatus.EMPTY_QUERY
    assert catalog.calls == []


@pytest.mark.asyncio
async def test_no_results_keeps_session(service, catalog, sessions):
    sessions.get(1).await_query(EntityKind.PLAYLIST)
    catalog.search_data = {"total": 0, "results": []}

    outcome = await service.search(1, EntityKind.PLAYLIST, "zzzz")

    assert outcome.status is OutcomeStatus.NO_RESULTS
    assert sessions.get(1).state == AwaitingQuery(EntityKind.PLAYLIST)


@pytest.mark.asyncio
async def test_total_smaller_than_offset_still_counts_current_page(service, catalog):
    catalog.search_data = {"total": 3, "results": [raw_song("x")]}
    outcome = await service.search(1, EntityKind.SONG, "q", page=1)
    assert outcome.page.pagination.total_pages == 2


@pytest.mark.asyncio
async def test_detail_by_id_records_history(service, catalog, sessions):
    catalog.songs["5WXAlMNt"] = raw_song("5WXAlMNt")

    outcome = await service.detail(1, EntityKind.SONG, entity_id="5WXAlMNt")

    assert outcome.ok and outcome.item.name == "Tum Hi Ho"
    history = sessions.get(1).recent_history()
    assert [(h.kind, h.item_id) for h in history] == [(EntityKind.SONG, "5WXAlMNt")]


@pytest.mark.asyncio
async def test_detail_by_link(service, catalog):
    link = "https://www.jiosaavn.com/album/aashiqui-2/abc"
    catalog.by_link[link] = raw_collection("alb-1", "Aashiqui 2", [raw_song("1")])

    outcome = await service.detail(1, EntityKind.ALBUM, link=link)

    assert outcome.ok and outcome.item.id == "alb-1"
    assert ("album", None, link, 50) in catalog.calls


@pytest.mark.asyncio
async def test_detail_missing_and_empty_collection(service, catalog, sessions):
    missing = await service.detail(1, EntityKind.SONG, entity_id="ghost")
    assert missing.status is OutcomeStatus.NOT_FOUND

    catalog.playlists["empty"] = raw_collection("empty", "Nothing", [])
    empty = await service.detail(1, EntityKind.PLAYLIST, entity_id="empty")
    assert empty.status is OutcomeStatus.NOT_FOUND
    assert sessions.get(1).recent_history() == ()


@pytest.mark.asyncio
async def test_detail_requires_id_or_link(service):
    with pytest.raises(ValueError):
        await service.detail(1, EntityKind.ARTIST)


@pytest.mark.asyncio
async def test_trending_uses_configured_playlist(service, catalog):
    catalog.playlists["110858205"] = raw_collection("110858205", "Trending Today", [raw_song("1")])
    outcome = await service.trending(1)
    assert outcome.ok and outcome.item.name == "Trending Today"


@pytest.mark.asyncio
async def test_listings_are_capped(service, catalog):
    catalog.suggestions = [raw_song(str(i)) for i in range(8)]
    catalog.artist_songs_data = {"total": 2, "songs": [raw_song("s1"), raw_song("s2")]}
    catalog.artist_albums_data = {"albums": []}

    similar = await service.similar("5WXAlMNt")
    songs = await service.artist_songs("459320")
    albums = await service.artist_albums("459320")

    assert len(similar.items) == 5
    assert [listed.index for listed in songs.items] == [1, 2]
    assert albums.status is OutcomeStatus.NO_RESULTS


@pytest.mark.asyncio
async def test_repeated_search_leaves_identical_session(service, catalog, sessions):
    catalog.search_data = {"total": 12, "results": [raw_song(f"t{i}", f"Track {i}") for i in range(10)]}

    await service.search(1, EntityKind.SONG, "Tum Hi Ho", page=0)
    first = (sessions.get(1).state, sessions.get(1).last_results)
    await service.search(1, EntityKind.SONG, "Tum Hi Ho", page=0)
    second = (sessions.get(1).state, sessions.get(1).last_results)

    assert first == second
    assert first[0] == Browsing(EntityKind.SONG, "Tum Hi Ho", 0)
    assert [song.id for song in first[1]] == [f"t{i}" for i in range(10)]
