"""Domain entities."""
from .version import Summary, VersionRecord
from .reference import LeagueMap, GameMode, GameType
from .champion import Champion, ChampionIndexEntry, parse_champion_index
from .item import Item, parse_item_index
from .sync_result import SyncResult

__all__ = [
    'Summary',
    'VersionRecord',
    'LeagueMap',
    'GameMode',
    'GameType',
    'Champion',
    'ChampionIndexEntry',
    'parse_champion_index',
    'Item',
    'parse_item_index',
    'SyncResult',
]
