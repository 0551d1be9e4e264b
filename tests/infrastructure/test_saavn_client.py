"""
🧪 test_saavn_client.py — HTTP-клієнт каталогу (httpx.MockTransport)

Перевіряє:
- Шляхи та параметри запитів
- Розгортання поля `data`
- Не-2xx, `success: false` і битий JSON → CatalogError
- Лічильник запитів
"""

import httpx
import pytest

from groovia.domain.music.entities import EntityKind
from groovia.domain.session.stats import GlobalStats
from groovia.errors.custom_errors import CatalogError
from groovia.infrastructure.catalog.saavn_client import SaavnClient


def _client(handler, stats=None):
    stats = stats or GlobalStats()
    http = httpx.AsyncClient(base_url="https://saavn.test", transport=httpx.MockTransport(handler))
    return SaavnClient("https://saavn.test", stats, client=http), stats


@pytest.mark.asyncio
async def test_search_builds_request_and_unwraps_data():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"success": True, "data": {"total": 1, "results": [{"id": "1"}]}})

    client, stats = _client(handler)
    data = await client.search(EntityKind.SONG, "Tum Hi Ho", 0, 10)

    assert seen["path"] == "/api/search/songs"
    assert seen["params"] == {"query": "Tum Hi Ho", "page": "0", "limit": "10"}
    assert data == {"total": 1, "results": [{"id": "1"}]}
    assert stats.total_requests == 1
    await client.close()


@pytest.mark.asyncio
async def test_none_params_are_dropped():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"success": True, "data": [{"id": "1"}]})

    client, _ = _client(handler)
    await client.song(link="https://www.jiosaavn.com/song/tum-hi-ho/abc")
    assert seen["params"] == {"link": "https://www.jiosaavn.com/song/tum-hi-ho/abc"}


@pytest.mark.asyncio
async def test_http_error_raises_catalog_error():
    client, stats = _client(lambda request: httpx.Response(503, text="down"))
    with pytest.raises(CatalogError) as info:
        await client.album(album_id="1")
    assert info.value.status_code == 503
    assert info.value.endpoint == "/api/albums"
    assert stats.total_requests == 1


@pytest.mark.asyncio
async def test_success_false_raises_catalog_error():
    client, _ = _client(lambda request: httpx.Response(200, json={"success": False, "message": "bad id"}))
    with pytest.raises(CatalogError) as info:
        await client.playlist(playlist_id="nope")
    assert info.value.reason == "bad id"
    assert info.value.status_code is None


@pytest.mark.asyncio
async def test_invalid_json_raises_catalog_error():
    client, _ = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))
    with pytest.raises(CatalogError):
        await client.artist(artist_id="1")


@pytest.mark.asyncio
async def test_transport_error_propagates():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client, _ = _client(handler)
    with pytest.raises(httpx.ConnectError):
        await client.song_suggestions("1")
