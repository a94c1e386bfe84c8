"""Domain layer - entities, enums, errors and store interfaces."""
from .entities import (
    Summary, VersionRecord, LeagueMap, GameMode, GameType,
    Champion, ChampionIndexEntry, Item, SyncResult,
)
from .enums import AssetType, SyncState
from .errors import (
    DataDragonSyncError,
    FeedError,
    VersionResolutionError,
    UnknownVersionError,
    NoVersionAvailableError,
    StoreWriteError,
    UnconfirmedUpdateError,
    SyncInProgressError,
)
from .interfaces import DocumentSnapshot, WriteResult, IWriteBatch, IDocumentStore, IBlobStore

__all__ = [
    # Entities
    'Summary',
    'VersionRecord',
    'LeagueMap',
    'GameMode',
    'GameType',
    'Champion',
    'ChampionIndexEntry',
    'Item',
    'SyncResult',
    # Enums
    'AssetType',
    'SyncState',
    # Errors
    'DataDragonSyncError',
    'FeedError',
    'VersionResolutionError',
    'UnknownVersionError',
    'NoVersionAvailableError',
    'StoreWriteError',
    'UnconfirmedUpdateError',
    'SyncInProgressError',
    # Interfaces
    'DocumentSnapshot',
    'WriteResult',
    'IWriteBatch',
    'IDocumentStore',
    'IBlobStore',
]
