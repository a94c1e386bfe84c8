"""Document and blob store implementations."""
from .sqlite_document_store import SQLiteDocumentStore, SQLiteWriteBatch
from .local_blob_store import LocalBlobStore
from .minio_blob_store import MinioBlobStore
from .factory import build_document_store, build_blob_store

__all__ = [
    'SQLiteDocumentStore',
    'SQLiteWriteBatch',
    'LocalBlobStore',
    'MinioBlobStore',
    'build_document_store',
    'build_blob_store',
]
