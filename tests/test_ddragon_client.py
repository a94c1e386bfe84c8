"""Tests for the Data Dragon feed client."""
import httpx
import pytest

from conftest import BASE_URL, PNG, STATIC_URL
from domain.enums import AssetType
from domain.errors import FeedError
from infrastructure import DataDragonClient


class TestFetching:
    async def test_versions(self, feed) -> None:
        assert await feed.get_versions() == ["9.1.1"]

    async def test_fetch_image_returns_bytes(self, feed) -> None:
        data = await feed.fetch_image(f"{BASE_URL}/cdn/9.1.1/img/item/1001.png")
        assert data.startswith(PNG)

    async def test_non_success_raises_with_status_text(self, feed, fake_feed) -> None:
        url = f"{BASE_URL}/cdn/9.1.1/img/item/9999.png"
        fake_feed.missing.add(url)
        with pytest.raises(FeedError) as exc_info:
            await feed.fetch_image(url)
        assert exc_info.value.status_text == "Not Found"
        assert exc_info.value.status_code == 404
        assert exc_info.value.url == url

    async def test_unknown_json_document_raises(self, feed) -> None:
        with pytest.raises(FeedError):
            await feed.get_champion("9.1.1", "Nobody")

    async def test_static_reference_lists(self, feed) -> None:
        maps = await feed.get_maps()
        assert {m["mapId"] for m in maps} == {11, 12}
        assert [g["gametype"] for g in await feed.get_game_types()] == ["MATCHED_GAME", "CUSTOM_GAME"]

    async def test_network_error_becomes_feed_error(self) -> None:
        def _boom(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with DataDragonClient(base_url=BASE_URL, transport=httpx.MockTransport(_boom)) as client:
            with pytest.raises(FeedError):
                await client.get_versions()

    async def test_unexpected_versions_shape(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"latest": "9.1.1"}))
        async with DataDragonClient(base_url=BASE_URL, transport=transport) as client:
            with pytest.raises(FeedError):
                await client.get_versions()

    async def test_requires_context_manager(self) -> None:
        client = DataDragonClient(base_url=BASE_URL)
        with pytest.raises(RuntimeError):
            await client.get_versions()


class TestUrls:
    def test_data_and_image_urls(self) -> None:
        client = DataDragonClient(base_url=BASE_URL + "/", static_docs_url=STATIC_URL, locale="en_US")
        assert client.versions_url() == f"{BASE_URL}/api/versions.json"
        assert client.data_url("14.1.1", "champion/Aatrox") == f"{BASE_URL}/cdn/14.1.1/data/en_US/champion/Aatrox.json"
        assert client.image_url("14.1.1", AssetType.PASSIVE, "Aatrox_Passive.png") == (
            f"{BASE_URL}/cdn/14.1.1/img/passive/Aatrox_Passive.png"
        )
        assert client.static_url("gameModes") == f"{STATIC_URL}/gameModes.json"
