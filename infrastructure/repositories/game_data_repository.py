"""Game data repository: writes one Data Dragon version into the stores."""
import asyncio
import time
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from config import settings
from core.logging import get_logger
from domain.entities import (
    Champion,
    ChampionIndexEntry,
    GameMode,
    GameType,
    Item,
    LeagueMap,
    VersionRecord,
)
from domain.enums import AssetType
from domain.errors import SyncInProgressError, UnconfirmedUpdateError
from domain.interfaces import IBlobStore, IDocumentStore
from infrastructure.api import DataDragonClient

VERSIONS   = "versions"
MAPS       = "maps"
GAME_MODES = "gameModes"
GAME_TYPES = "gameTypes"
LEASES     = "leases"

_CONTENT_TYPES = {
    "jpg": "image/jpeg",
    "png": "image/png",
}


def content_type_for(url: str) -> str:
    """MIME type from the URL's extension; '' when unknown."""
    extension = url.split("?", 1)[0].rsplit(".", 1)[-1].lower()
    return _CONTENT_TYPES.get(extension, "")


class GameDataRepository:
    """Store gateway bound to a single version.

    Reference collections (maps, game modes, game types) are shared across
    versions and overwritten on every load. Champions and items live under
    `versions/{version}`, and their summaries are written onto the version
    document only after every entity they name has been written.
    """

    def __init__(
        self,
        store: IDocumentStore,
        blobs: IBlobStore,
        feed: DataDragonClient,
        version: str,
        *,
        primary_map_id: Optional[str] = None,
        cache_control: Optional[str] = None,
        upload_concurrency: Optional[int] = None,
    ):
        """
        Args:
            store: Document store client, shared for the process lifetime
            blobs: Blob store client for images
            feed: Open feed client used for champion details and images
            version: The version every write is namespaced under
        """
        self.store = store
        self.blobs = blobs
        self.feed = feed
        self.version = version
        self.primary_map_id = primary_map_id or settings.PRIMARY_MAP_ID
        self.cache_control = cache_control if cache_control is not None else settings.IMAGE_CACHE_CONTROL
        self._upload_slots = asyncio.Semaphore(upload_concurrency or settings.IMAGE_UPLOAD_CONCURRENCY)
        self.log = get_logger(__name__, service="store")

    @property
    def version_path(self) -> str:
        return f"{VERSIONS}/{self.version}"

    @property
    def lease_path(self) -> str:
        return f"{LEASES}/{self.version}"

    # ── Versions ───────────────────────────────────────────────────────

    async def list_versions(self) -> List[VersionRecord]:
        snapshots = await self.store.list(VERSIONS)
        return [VersionRecord.from_document(s.data) for s in snapshots if "version" in s.data]

    async def is_version_loaded(self, version: Optional[str] = None) -> bool:
        snapshot = await self.store.get(f"{VERSIONS}/{version or self.version}")
        return snapshot is not None and bool(snapshot.get("loaded", False))

    async def create_version(self) -> None:
        self.log.info("Adding version to db")
        # full replace: a half-loaded document from an aborted run is reset
        await self.store.set(self.version_path, VersionRecord(self.version).to_document(include_summaries=False))
        self.log.info("Version added")

    async def mark_loaded(self) -> bool:
        return await self._confirmed_update({"loaded": True}, "set version loaded")

    async def enable(self) -> bool:
        return await self._confirmed_update({"enabled": True}, "enable version")

    async def _confirmed_update(self, fields: Dict[str, Any], action: str) -> bool:
        """Apply `fields` only if nobody wrote the document since we read it.

        Returns False, without retrying, when the revision moved underneath
        us or the store reports an unchanged write time.
        """
        self.log.info(lambda: f"Trying to {action}")
        before = await self.store.get(self.version_path)
        expected = before.revision if before is not None else None
        try:
            result = await self.store.update(self.version_path, fields, expected_revision=expected)
        except UnconfirmedUpdateError:
            self.log.error(lambda: f"Unable to {action}; document changed during the update")
            return False

        if before is not None and result.update_time == before.update_time:
            self.log.error(lambda: f"Unable to {action}; write times didn't change")
            return False

        self.log.success(lambda: f"Done: {action}", revision=result.revision)
        return True

    # ── Reference collections ──────────────────────────────────────────

    async def _replace_collection(self, collection: str, documents: Iterable[Tuple[str, Dict[str, Any]]]) -> int:
        batch = self.store.batch()
        for doc_id, data in documents:
            batch.set(f"{collection}/{doc_id}", data)
        count = len(batch)
        await batch.commit()
        self.log.info(lambda: f"{collection} added", count=count)
        return count

    async def upsert_maps(self, maps: Sequence[LeagueMap]) -> int:
        return await self._replace_collection(MAPS, ((m.document_id, m.to_document()) for m in maps))

    async def upsert_game_modes(self, game_modes: Sequence[GameMode]) -> int:
        return await self._replace_collection(GAME_MODES, ((g.document_id, g.to_document()) for g in game_modes))

    async def upsert_game_types(self, game_types: Sequence[GameType]) -> int:
        return await self._replace_collection(GAME_TYPES, ((g.document_id, g.to_document()) for g in game_types))

    # ── Champions ──────────────────────────────────────────────────────

    async def upsert_champions(self, index: Sequence[ChampionIndexEntry]) -> int:
        """
        Load every champion in the index, one at a time.

        A failure part-way leaves the earlier champions written; nothing is
        rolled back and the summary is not written.
        """
        self.log.info("Adding champions to db", count=len(index))
        for entry in index:
            payload = await self.feed.get_champion(self.version, entry.id)
            await self.upsert_champion(Champion.from_detail(entry.id, payload))

        summaries = [entry.summary().to_dict() for entry in index]
        await self.store.update(self.version_path, {"champions": summaries})
        self.log.success("Finished adding champions to db", count=len(summaries))
        return len(summaries)

    async def upsert_champion(self, champion: Champion) -> None:
        # images are uploaded only once the document they belong to exists
        await self.store.set(f"{self.version_path}/champions/{champion.key}", champion.to_document())
        await self.upload_image(
            self.feed.image_url(self.version, AssetType.CHAMPION, champion.image_file),
            AssetType.CHAMPION.blob_path(champion.image_file),
        )
        await self.upload_image(
            self.feed.image_url(self.version, AssetType.PASSIVE, champion.passive_image_file),
            AssetType.PASSIVE.blob_path(champion.passive_image_file),
        )
        self.log.debug("Champion added", champion=champion.key)

    # ── Items ──────────────────────────────────────────────────────────

    async def upsert_items(self, items: Sequence[Item]) -> int:
        self.log.info("Adding items to db", count=len(items))
        batch = self.store.batch()
        summaries: List[Dict[str, str]] = []
        uploads = []
        for item in items:
            if item.available_on(self.primary_map_id):
                summaries.append(item.summary().to_dict())
            batch.set(f"{self.version_path}/items/{item.key}", item.to_document())
            uploads.append(self._bounded_upload(
                self.feed.image_url(self.version, AssetType.ITEM, item.image_file),
                AssetType.ITEM.blob_path(item.image_file),
            ))

        # each icon is its own object, so uploads may overlap
        outcomes = await asyncio.gather(*uploads, return_exceptions=True)
        failures = [o for o in outcomes if isinstance(o, BaseException)]
        if failures:
            for failure in failures:
                self.log.error(lambda: f"item-image-failed {failure}")
            raise failures[0]

        await batch.commit()
        await self.store.update(self.version_path, {"items": summaries})
        self.log.success("Items added", count=len(items), summarised=len(summaries))
        return len(items)

    # ── Images ─────────────────────────────────────────────────────────

    async def _bounded_upload(self, source_url: str, destination: str) -> None:
        async with self._upload_slots:
            await self.upload_image(source_url, destination)

    async def upload_image(self, source_url: str, destination: str) -> None:
        data = await self.feed.fetch_image(source_url)
        await self.blobs.upload(
            destination,
            data,
            content_type=content_type_for(source_url),
            cache_control=self.cache_control,
        )
        self.log.debug("Saved image", url=source_url, destination=destination)

    # ── Load lease ─────────────────────────────────────────────────────

    async def acquire_lease(self, owner: str, ttl_seconds: Optional[int] = None) -> None:
        """Claim `leases/{version}` for `owner` or raise SyncInProgressError.

        An expired lease, or one already held by `owner`, is taken over with
        a revision-checked write so two runs cannot both win it.
        """
        ttl = ttl_seconds if ttl_seconds is not None else settings.SYNC_LEASE_TTL_SECONDS
        now = time.time()
        lease = {"version": self.version, "owner": owner, "acquired_at": now, "expires_at": now + ttl}

        if await self.store.create(self.lease_path, lease) is not None:
            self.log.info("Lease acquired", owner=owner)
            return

        current = await self.store.get(self.lease_path)
        if current is None:
            # released between our create and get
            if await self.store.create(self.lease_path, lease) is not None:
                return
            raise SyncInProgressError(self.version)

        holder = current.get("owner", "")
        if holder != owner and current.get("expires_at", 0) > now:
            raise SyncInProgressError(self.version, holder)

        try:
            await self.store.set(self.lease_path, lease, expected_revision=current.revision)
        except UnconfirmedUpdateError as exc:
            raise SyncInProgressError(self.version) from exc
        self.log.warning("Lease taken over", owner=owner, previous_owner=holder)

    async def release_lease(self, owner: str) -> None:
        current = await self.store.get(self.lease_path)
        if current is not None and current.get("owner") == owner:
            await self.store.delete(self.lease_path)
            self.log.info("Lease released", owner=owner)
