"""Application use cases."""
from .sync_static_data import SyncStaticDataUseCase

__all__ = [
    'SyncStaticDataUseCase',
]
