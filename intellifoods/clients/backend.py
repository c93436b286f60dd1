from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from intellifoods.core import config
from intellifoods.core.request_context import forward_headers
from intellifoods.models.inventory import StorageLocation
from intellifoods.services.exceptions import NetworkError, NonSuccessStatus

log = logging.getLogger(__name__)


class BackendClient:
    """
    Thin async client for the web backend that hosts the session, inventory
    and recipe-generation endpoints. Every call has a bounded timeout; transport
    failures and timeouts raise NetworkError, non-2xx responses raise
    NonSuccessStatus.
    """

    def __init__(
        self,
        base_url: str = config.BACKEND_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        *,
        timeout_s: float,
        cookie: Optional[str] = None,
        json: Any = None,
    ) -> httpx.Response:
        headers = forward_headers(cookie)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=timeout_s, transport=self._transport
            ) as client:
                r = await client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e

        if not r.is_success:
            raise NonSuccessStatus(r.status_code, f"{method} {path} returned HTTP {r.status_code}")
        return r

    @staticmethod
    def _json_or_none(r: httpx.Response) -> Any:
        try:
            return r.json()
        except ValueError:
            log.warning("non-JSON body from %s", r.request.url.path)
            return None

    def _storage_path(self, location: StorageLocation) -> str:
        return config.STORAGE_PATH_TEMPLATE.format(location=StorageLocation(location).value)

    # --- session ---

    async def get_session(self, cookie: Optional[str] = None) -> bool:
        r = await self._request("GET", config.SESSION_PATH, timeout_s=config.SESSION_TIMEOUT_S, cookie=cookie)
        data = self._json_or_none(r) or {}
        return bool(data.get("isLoggedIn")) if isinstance(data, dict) else False

    async def sign_out(self, cookie: Optional[str] = None) -> None:
        await self._request("DELETE", config.SIGNOUT_PATH, timeout_s=config.SESSION_TIMEOUT_S, cookie=cookie)

    # --- inventory ---

    async def fetch_fridge_data(self, cookie: Optional[str] = None) -> Dict[str, Any]:
        r = await self._request("GET", config.FRIDGE_DATA_PATH, timeout_s=config.INVENTORY_TIMEOUT_S, cookie=cookie)
        data = self._json_or_none(r)
        return data if isinstance(data, dict) else {}

    async def add_food(self, location: StorageLocation, item: Dict[str, Any], cookie: Optional[str] = None) -> None:
        await self._request(
            "POST", self._storage_path(location), timeout_s=config.STORAGE_TIMEOUT_S, cookie=cookie, json=item
        )

    async def edit_food(
        self, location: StorageLocation, index: int, item: Dict[str, Any], cookie: Optional[str] = None
    ) -> None:
        await self._request(
            "PUT",
            self._storage_path(location),
            timeout_s=config.STORAGE_TIMEOUT_S,
            cookie=cookie,
            json={"index": index, "updatedItem": item},
        )

    async def delete_food(self, location: StorageLocation, index: int, cookie: Optional[str] = None) -> None:
        await self._request(
            "DELETE", self._storage_path(location), timeout_s=config.STORAGE_TIMEOUT_S, cookie=cookie, json={"index": index}
        )

    # --- recipes ---

    async def generate_recipe(self, payload: Dict[str, Any], cookie: Optional[str] = None) -> Any:
        r = await self._request("POST", config.RECIPES_PATH, timeout_s=config.RECIPE_TIMEOUT_S, cookie=cookie, json=payload)
        return self._json_or_none(r)
