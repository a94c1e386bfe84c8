"""
Data Dragon sync HTTP endpoint - FastAPI implementation.

`POST /dataDragon` runs one sync and always answers 200; callers check the
`error` field of the body rather than the status code.
"""
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request
from pydantic import BaseModel, Field, ValidationError

from application import SyncStaticDataUseCase
from core.logging import get_logger
from domain.entities import SyncResult
from infrastructure import DataDragonClient, build_blob_store, build_document_store

SyncRunner = Callable[[str], Awaitable[SyncResult]]

log = get_logger(__name__, service="api")


class SyncRequest(BaseModel):
    version: Optional[str] = Field(default=None, description="Version to load; empty or null loads the latest")


class SyncResponse(BaseModel):
    version: str
    loaded: bool
    enabled: bool
    error: str


def _requested_version(raw: bytes) -> str:
    """Version named by a request body; anything unreadable asks for the latest."""
    if not raw.strip():
        return ""
    try:
        payload = SyncRequest.model_validate_json(raw)
    except ValidationError as exc:
        log.warning("Ignoring unreadable request body", errors=exc.error_count())
        return ""
    return payload.version or ""


def create_app(runner: Optional[SyncRunner] = None) -> FastAPI:
    """Build the app.

    Without a `runner`, the document and blob store clients are opened once
    in the lifespan and shared by every request.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if runner is not None:
            app.state.runner = runner
            yield
            return

        store = build_document_store()
        blobs = build_blob_store()

        async def _run(requested_version: str) -> SyncResult:
            async with DataDragonClient() as feed:
                return await SyncStaticDataUseCase(feed, store, blobs).execute(requested_version)

        app.state.runner = _run
        try:
            yield
        finally:
            await blobs.close()
            await store.close()

    app = FastAPI(
        title="Data Dragon Sync",
        description="Loads League of Legends static data into the document and blob stores",
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/dataDragon", response_model=SyncResponse)
    async def data_dragon(request: Request) -> SyncResponse:
        log.info("Start dataDragon")
        requested_version = _requested_version(await request.body())
        result = await request.app.state.runner(requested_version)
        log.info("End dataDragon", version=result.version, loaded=result.loaded, enabled=result.enabled)
        return SyncResponse(**result.to_dict())

    return app
