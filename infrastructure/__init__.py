"""Infrastructure layer - feed client, stores and repositories."""
from .api import DataDragonClient
from .repositories import GameDataRepository
from .storage import (
    SQLiteDocumentStore,
    LocalBlobStore,
    MinioBlobStore,
    build_document_store,
    build_blob_store,
)

__all__ = [
    'DataDragonClient',
    'GameDataRepository',
    'SQLiteDocumentStore',
    'LocalBlobStore',
    'MinioBlobStore',
    'build_document_store',
    'build_blob_store',
]
