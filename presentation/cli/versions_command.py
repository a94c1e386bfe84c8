from __future__ import annotations

from typing import List

from config import settings
from core.logging import get_logger
from domain.entities import VersionRecord
from infrastructure import build_document_store
from infrastructure.repositories.game_data_repository import VERSIONS


class VersionsCommand:
    """Lists the versions held in the document store with their flags."""

    def __init__(self) -> None:
        self.log = get_logger(__name__, service="versions-cli")

    async def collect(self) -> List[tuple[VersionRecord, int, int]]:
        store = build_document_store()
        try:
            rows = []
            for snapshot in await store.list(VERSIONS):
                record = VersionRecord.from_document(snapshot.data)
                champions = len(await store.list(f"{snapshot.path}/champions"))
                items = len(await store.list(f"{snapshot.path}/items"))
                rows.append((record, champions, items))
            return rows
        finally:
            await store.close()

    async def run(self) -> int:
        print(f"Database: {settings.db_path()}", flush=True)
        rows = await self.collect()
        if not rows:
            print("No versions stored.", flush=True)
            return 0
        print(f"{'version':<14}{'loaded':<8}{'enabled':<9}{'champions':>10}{'items':>8}", flush=True)
        for record, champions, items in rows:
            print(
                f"{record.version:<14}{str(record.loaded).lower():<8}{str(record.enabled).lower():<9}"
                f"{champions:>10}{items:>8}",
                flush=True,
            )
        self.log.info("versions-listed", count=len(rows))
        return 0
