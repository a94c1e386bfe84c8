"""Shared fixtures: a fake Data Dragon feed and throwaway stores."""
from typing import Any, Dict, List, Optional, Set

import httpx
import pytest

from domain.errors import UnconfirmedUpdateError
from infrastructure import DataDragonClient, LocalBlobStore, SQLiteDocumentStore

BASE_URL = "https://ddragon.test"
STATIC_URL = "https://static.test/docs/lol"
PNG = b"\x89PNG\r\n\x1a\n"


def champion_detail(champion_id: str, key: str, name: str, passive_file: str) -> Dict[str, Any]:
    return {
        "id": champion_id,
        "key": key,
        "name": name,
        "title": "the Test Subject",
        "image": {"full": f"{champion_id}.png", "sprite": "champion0.png", "group": "champion"},
        "lore": "long lore",
        "tags": ["Fighter"],
        "partype": "Mana",
        "stats": {"hp": 580, "hpperlevel": 90, "armor": 38},
        "spells": [
            {"id": f"{champion_id}Q", "name": "Q", "cooldown": [16, 14, 12], "leveltip": {"label": ["Damage"]}},
            {"id": f"{champion_id}W", "name": "W", "cooldown": [20, 18, 16]},
        ],
        "passive": {"name": "Passive", "description": "does things", "image": {"full": passive_file}},
    }


class FakeFeed:
    """In-memory stand-in for the feed, served through httpx.MockTransport."""

    def __init__(self, versions: Optional[List[str]] = None, version: str = "9.1.1"):
        self.version = version
        self.versions = versions if versions is not None else [version]
        self.requests: List[str] = []
        self.missing: Set[str] = set()
        self.champions = {
            "Aatrox": champion_detail("Aatrox", "266", "Aatrox", "Aatrox_Passive.png"),
            "Nunu": champion_detail("Nunu", "20", "Nunu & Willump", "NunuPassive.png"),
        }
        self.items: Dict[str, Any] = {
            "1001": {"name": "Boots of Speed", "image": {"full": "1001.png"}, "maps": {"11": True, "12": True}},
            "3005": {"name": "Ghostblade", "image": {"full": "3005.png"}, "maps": {"11": False, "12": True}},
            "3340": {"name": "Warding Totem", "image": {"full": "3340.png"}, "maps": {"11": True, "12": False}},
        }
        self.maps = [
            {"mapId": 11, "mapName": "Summoner's Rift", "notes": "Current Version"},
            {"mapId": 12, "mapName": "Howling Abyss", "notes": "ARAM Map"},
        ]
        self.game_modes = [
            {"gameMode": "CLASSIC", "description": "Classic Summoner's Rift games"},
            {"gameMode": "ARAM", "description": "ARAM games"},
        ]
        self.game_types = [
            {"gametype": "MATCHED_GAME", "description": "all other games"},
            {"gametype": "CUSTOM_GAME", "description": "Custom games"},
        ]

    def data_url(self, name: str) -> str:
        return f"{BASE_URL}/cdn/{self.version}/data/en_US/{name}.json"

    def image_url(self, group: str, file_name: str) -> str:
        return f"{BASE_URL}/cdn/{self.version}/img/{group}/{file_name}"

    def routes(self) -> Dict[str, Any]:
        routes: Dict[str, Any] = {
            f"{BASE_URL}/api/versions.json": self.versions,
            f"{STATIC_URL}/maps.json": self.maps,
            f"{STATIC_URL}/gameModes.json": self.game_modes,
            f"{STATIC_URL}/gameTypes.json": self.game_types,
            self.data_url("champion"): {
                "type": "champion",
                "version": self.version,
                "data": {
                    cid: {"id": c["id"], "key": c["key"], "name": c["name"], "image": c["image"]}
                    for cid, c in self.champions.items()
                },
            },
            self.data_url("item"): {"type": "item", "version": self.version, "data": self.items},
        }
        for cid, champion in self.champions.items():
            routes[self.data_url(f"champion/{cid}")] = {"type": "champion", "data": {cid: champion}}
        return routes

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url in self.missing:
            return httpx.Response(404)
        if "/img/" in url:
            return httpx.Response(200, content=PNG + url.rsplit("/", 1)[-1].encode())
        routes = self.routes()
        if url in routes:
            return httpx.Response(200, json=routes[url])
        return httpx.Response(404)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def data_requests(self) -> List[str]:
        return [u for u in self.requests if "/img/" not in u]


class StaleReadStore:
    """Wraps a store so every conditional update sees a concurrent writer."""

    def __init__(self, inner):
        self._inner = inner
        self.updates = []

    def __getattr__(self, name):
        return getattr(self._inner, name)

    async def update(self, path, fields, expected_revision=None):
        self.updates.append(dict(fields))
        if expected_revision is not None:
            raise UnconfirmedUpdateError(path, expected_revision)
        return await self._inner.update(path, fields)


@pytest.fixture
def fake_feed() -> FakeFeed:
    return FakeFeed()


@pytest.fixture
async def feed(fake_feed):
    async with DataDragonClient(
        base_url=BASE_URL,
        static_docs_url=STATIC_URL,
        transport=fake_feed.transport(),
    ) as client:
        yield client


@pytest.fixture
async def store(tmp_path):
    s = SQLiteDocumentStore(tmp_path / "db" / "test.sqlite")
    yield s
    await s.close()


@pytest.fixture
def blobs(tmp_path) -> LocalBlobStore:
    return LocalBlobStore(tmp_path / "blobs")
