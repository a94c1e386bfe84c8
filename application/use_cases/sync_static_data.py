"""Use case for syncing one Data Dragon version into the stores."""
from __future__ import annotations

import asyncio
import socket
import traceback
import uuid
from typing import Optional

from config import settings
from core.logging import context as log_context, get_logger
from domain.entities import (
    GameMode,
    GameType,
    LeagueMap,
    SyncResult,
    parse_champion_index,
    parse_item_index,
)
from domain.enums import SyncState
from domain.errors import UnconfirmedUpdateError
from domain.interfaces import IBlobStore, IDocumentStore
from infrastructure import DataDragonClient, GameDataRepository
from application.services import resolve_version


class SyncStaticDataUseCase:
    """
    Loads a version once and only once.

    Run states:
    ─────────────────────────────────────────────────────────────────
    ResolvingVersion → CheckingLoaded → AlreadyLoaded → Done
                                      → Loading       → Done

    AlreadyLoaded performs no writes. Loading writes, in order: version
    doc, maps, game modes, game types, champions, items, `loaded`,
    `enabled`. A run that stops part-way keeps `loaded=false`, so the
    next run simply starts over.
    ─────────────────────────────────────────────────────────────────

    `execute` never raises: failures end up in `SyncResult.error`.
    """

    def __init__(
        self,
        feed: DataDragonClient,
        store: IDocumentStore,
        blobs: IBlobStore,
        *,
        timeout_seconds: Optional[float] = None,
        lease_enabled: Optional[bool] = None,
        lease_ttl_seconds: Optional[int] = None,
        owner: Optional[str] = None,
    ):
        self.feed = feed
        self.store = store
        self.blobs = blobs
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.SYNC_TIMEOUT_SECONDS
        self.lease_enabled = settings.SYNC_LEASE_ENABLED if lease_enabled is None else lease_enabled
        self.lease_ttl_seconds = lease_ttl_seconds if lease_ttl_seconds is not None else settings.SYNC_LEASE_TTL_SECONDS
        self.owner = owner or f"{socket.gethostname()}:{uuid.uuid4().hex[:8]}"
        self.state = SyncState.RESOLVING_VERSION
        self.log = get_logger(__name__, service="sync")

    def _enter(self, state: SyncState) -> None:
        self.state = state
        self.log.debug(lambda: f"state {state.value}")

    async def execute(self, requested_version: Optional[str] = "") -> SyncResult:
        result = SyncResult()
        self._enter(SyncState.RESOLVING_VERSION)
        if requested_version:
            self.log.info("Version was given in request", version=requested_version)
        else:
            self.log.info("No version given in request")

        try:
            await asyncio.wait_for(self._run(result, requested_version or ""), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            result.error = (
                f"Sync of {result.version or 'unknown version'} exceeded its "
                f"{self.timeout_seconds:g}s deadline during {self.state.value}"
            )
            self.log.error(result.error)
        except Exception:
            result.error = traceback.format_exc()
            self.log.error("sync-failed", exc_info=True, version=result.version)

        self._enter(SyncState.DONE)
        return result

    async def _run(self, result: SyncResult, requested_version: str) -> None:
        versions = await self.feed.get_versions()
        result.version = resolve_version(requested_version, versions)

        with log_context(version=result.version):
            self.log.info("Determined version to load")
            repo = GameDataRepository(self.store, self.blobs, self.feed, result.version)

            self._enter(SyncState.CHECKING_LOADED)
            local_versions = await repo.list_versions()
            self.log.info("Got versions from local", versions=[v.version for v in local_versions])

            if await repo.is_version_loaded():
                self._enter(SyncState.ALREADY_LOADED)
                result.loaded = True
                result.enabled = True
                self.log.info("Version has already been loaded")
                return

            self._enter(SyncState.LOADING)
            self.log.info("Version has not already been loaded")
            if self.lease_enabled:
                await repo.acquire_lease(self.owner, self.lease_ttl_seconds)
            try:
                await self._load(repo, result)
            finally:
                if self.lease_enabled:
                    await repo.release_lease(self.owner)

    async def _load(self, repo: GameDataRepository, result: SyncResult) -> None:
        version = result.version

        with log_context(stage="version"):
            await repo.create_version()

        with log_context(stage="maps"):
            maps = [LeagueMap.from_feed(m) for m in await self.feed.get_maps()]
            await repo.upsert_maps(maps)

        with log_context(stage="game-modes"):
            game_modes = [GameMode.from_feed(g) for g in await self.feed.get_game_modes()]
            await repo.upsert_game_modes(game_modes)

        with log_context(stage="game-types"):
            game_types = [GameType.from_feed(g) for g in await self.feed.get_game_types()]
            await repo.upsert_game_types(game_types)

        with log_context(stage="champions"):
            champions = parse_champion_index(await self.feed.get_champion_index(version))
            await repo.upsert_champions(champions)

        with log_context(stage="items"):
            items = parse_item_index(await self.feed.get_item_index(version))
            await repo.upsert_items(items)

        with log_context(stage="finalize"):
            result.loaded = await repo.mark_loaded()
            if not result.loaded:
                raise UnconfirmedUpdateError(repo.version_path)
            result.enabled = await repo.enable()
            if not result.enabled:
                raise UnconfirmedUpdateError(repo.version_path)

        self.log.success("Version loaded and enabled")
