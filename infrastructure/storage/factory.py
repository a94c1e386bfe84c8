"""Builds the store clients from settings, once per process."""
from config import Settings, settings as default_settings
from domain.interfaces import IBlobStore

from .local_blob_store import LocalBlobStore
from .minio_blob_store import MinioBlobStore
from .sqlite_document_store import SQLiteDocumentStore


def build_document_store(cfg: Settings = default_settings) -> SQLiteDocumentStore:
    return SQLiteDocumentStore(cfg.db_path())


def build_blob_store(cfg: Settings = default_settings) -> IBlobStore:
    if cfg.BLOB_BACKEND == "minio":
        return MinioBlobStore(
            endpoint=cfg.MINIO_ENDPOINT,
            access_key=cfg.MINIO_ACCESS_KEY,
            secret_key=cfg.MINIO_SECRET_KEY,
            bucket_name=cfg.MINIO_BUCKET,
            secure=cfg.MINIO_SECURE,
        )
    return LocalBlobStore(cfg.BLOB_DIR)
