"""Data Dragon feed client."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from config import settings
from domain.enums import AssetType
from domain.errors import FeedError

logger = logging.getLogger(__name__)


class DataDragonClient:
    """Asynchronous client for the Data Dragon CDN and the static developer docs.

    Every non-success response raises `FeedError` with the status text.
    Nothing is retried; a failed fetch fails the stage that asked for it.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        static_docs_url: Optional[str] = None,
        locale: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url        = (base_url or settings.DDRAGON_BASE_URL).rstrip("/")
        self.static_docs_url = (static_docs_url or settings.STATIC_DOCS_URL).rstrip("/")
        self.locale          = locale or settings.DDRAGON_LOCALE
        self.timeout         = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _get(self, url: str) -> httpx.Response:
        if self.session is None:
            raise RuntimeError("DataDragonClient must be used inside 'async with'")
        try:
            response = await self.session.get(url)
        except httpx.HTTPError as exc:
            logger.error(f"Network error for {url}: {exc}")
            raise FeedError(f"Network error: {exc}", url=url) from exc

        if not response.is_success:
            logger.warning(f"HTTP {response.status_code} for {url}")
            raise FeedError(
                response.reason_phrase or f"HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )
        return response

    async def fetch_json(self, url: str) -> Any:
        response = await self._get(url)
        try:
            return response.json()
        except ValueError as exc:
            raise FeedError(f"Invalid JSON body: {exc}", url=url, status_code=response.status_code) from exc

    async def fetch_image(self, url: str) -> bytes:
        response = await self._get(url)
        return response.content

    # ── URLs ───────────────────────────────────────────────────────────

    def versions_url(self) -> str:
        return f"{self.base_url}/api/versions.json"

    def data_url(self, version: str, name: str) -> str:
        return f"{self.base_url}/cdn/{version}/data/{self.locale}/{name}.json"

    def image_url(self, version: str, asset: AssetType, file_name: str) -> str:
        return f"{self.base_url}/cdn/{version}/img/{asset.feed_group}/{file_name}"

    def static_url(self, name: str) -> str:
        return f"{self.static_docs_url}/{name}.json"

    # ── Versions ───────────────────────────────────────────────────────

    async def get_versions(self) -> List[str]:
        """Available versions, newest first."""
        url = self.versions_url()
        versions = await self.fetch_json(url)
        if not isinstance(versions, list):
            raise FeedError("Unexpected versions payload", url=url)
        return [str(v) for v in versions]

    # ── Static reference docs ──────────────────────────────────────────

    async def _get_list(self, name: str) -> List[Dict[str, Any]]:
        url = self.static_url(name)
        records = await self.fetch_json(url)
        if not isinstance(records, list):
            raise FeedError(f"Unexpected {name} payload", url=url)
        return records

    async def get_maps(self) -> List[Dict[str, Any]]:
        return await self._get_list("maps")

    async def get_game_modes(self) -> List[Dict[str, Any]]:
        return await self._get_list("gameModes")

    async def get_game_types(self) -> List[Dict[str, Any]]:
        return await self._get_list("gameTypes")

    # ── Versioned data ─────────────────────────────────────────────────

    async def _get_document(self, url: str) -> Dict[str, Any]:
        payload = await self.fetch_json(url)
        if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
            raise FeedError("Unexpected data document", url=url)
        return payload

    async def get_champion_index(self, version: str) -> Dict[str, Any]:
        return await self._get_document(self.data_url(version, "champion"))

    async def get_champion(self, version: str, champion_id: str) -> Dict[str, Any]:
        return await self._get_document(self.data_url(version, f"champion/{champion_id}"))

    async def get_item_index(self, version: str) -> Dict[str, Any]:
        return await self._get_document(self.data_url(version, "item"))
