"""Domain enums."""
from .asset_type import AssetType
from .sync_state import SyncState

__all__ = [
    'AssetType',
    'SyncState',
]
