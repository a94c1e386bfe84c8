"""Domain interfaces."""
from .store import (
    DocumentSnapshot,
    WriteResult,
    IWriteBatch,
    IDocumentStore,
    IBlobStore,
)

__all__ = [
    'DocumentSnapshot',
    'WriteResult',
    'IWriteBatch',
    'IDocumentStore',
    'IBlobStore',
]
