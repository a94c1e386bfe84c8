from __future__ import annotations

import json
from typing import Optional

from config import settings
from core.logging import get_logger
from domain.entities import SyncResult
from infrastructure import DataDragonClient, build_blob_store, build_document_store
from application import SyncStaticDataUseCase


class SyncCommand:
    """Runs one sync from the command line and prints the result as JSON."""

    def __init__(self, requested_version: Optional[str] = None) -> None:
        self.requested_version = requested_version or ""
        self.log = get_logger(__name__, service="sync-cli")

    async def execute(self) -> SyncResult:
        settings.validate()
        settings.create_directories()
        store = build_document_store()
        blobs = build_blob_store()
        try:
            async with DataDragonClient() as feed:
                return await SyncStaticDataUseCase(feed, store, blobs).execute(self.requested_version)
        finally:
            await blobs.close()
            await store.close()

    async def run(self) -> int:
        result = await self.execute()
        print(json.dumps(result.to_dict(), indent=2), flush=True)
        if result.error:
            self.log.error(lambda: f"sync-finished-with-error version={result.version or '-'}")
            return 1
        return 0
