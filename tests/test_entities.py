"""Tests for feed-to-document mapping of the domain entities."""
import json

import pytest

from conftest import champion_detail
from domain.entities import (
    Champion,
    GameMode,
    Item,
    LeagueMap,
    SyncResult,
    VersionRecord,
    parse_champion_index,
)
from domain.enums import AssetType


class TestChampion:
    def test_document_keeps_selected_fields(self) -> None:
        detail = champion_detail("Nunu", "20", "Nunu & Willump", "NunuPassive.png")
        champion = Champion.from_detail("Nunu", {"data": {"Nunu": detail}})
        doc = champion.to_document()

        assert set(doc) == {"id", "key", "name", "title", "image", "partype", "stats", "spells", "passive"}
        assert doc["key"] == "20"
        assert json.loads(doc["spells"]) == detail["spells"]
        assert champion.image_file == "Nunu.png"
        assert champion.passive_image_file == "NunuPassive.png"

    def test_numeric_key_is_stringified(self) -> None:
        index = parse_champion_index(
            {"data": {"Aatrox": {"id": "Aatrox", "key": 266, "name": "Aatrox", "image": {"full": "Aatrox.png"}}}}
        )
        assert index[0].key == "266"
        assert index[0].summary().to_dict() == {"key": "266", "name": "Aatrox", "image": "Aatrox.png"}


class TestItem:
    def test_available_on(self) -> None:
        item = Item(key="3005", data={"name": "Ghostblade", "maps": {"11": False, "12": True}})
        assert not item.available_on("11")
        assert item.available_on("12")
        assert not item.available_on("21")

    def test_document_carries_key(self) -> None:
        item = Item(key="1001", data={"name": "Boots of Speed", "gold": {"total": 300}})
        assert item.to_document() == {"name": "Boots of Speed", "gold": {"total": 300}, "key": "1001"}


class TestReference:
    def test_map_document(self) -> None:
        rift = LeagueMap.from_feed({"mapId": 11, "mapName": "Summoner's Rift", "notes": "Current Version"})
        assert rift.document_id == "11"
        assert rift.to_document() == {"mapName": "Summoner's Rift", "notes": "Current Version"}

    def test_game_mode_document(self) -> None:
        mode = GameMode.from_feed({"gameMode": "ARAM", "description": "ARAM games"})
        assert mode.document_id == "ARAM"
        assert mode.to_document() == {"description": "ARAM games"}


class TestVersionRecord:
    def test_defaults_for_partial_document(self) -> None:
        record = VersionRecord.from_document({"version": "9.1.1"})
        assert record.loaded is False
        assert record.enabled is False
        assert record.to_document(include_summaries=False) == {"version": "9.1.1", "loaded": False, "enabled": False}


@pytest.mark.parametrize(
    "asset, path",
    [
        (AssetType.CHAMPION, "champions/Aatrox.png"),
        (AssetType.PASSIVE, "passives/Aatrox.png"),
        (AssetType.ITEM, "items/Aatrox.png"),
    ],
)
def test_blob_path(asset, path) -> None:
    assert asset.blob_path("Aatrox.png") == path


def test_sync_result_ok() -> None:
    assert SyncResult(version="9.1.1", loaded=True, enabled=True).ok
    assert not SyncResult(version="9.1.1", error="boom").ok
