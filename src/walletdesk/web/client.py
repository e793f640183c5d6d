"""HTTP client the views use to call the local API.

The views never talk to Circle directly; they go through the same
``/api`` routes a browser would.
"""

import logging
from typing import Any, Optional

import httpx

from walletdesk.web.contracts.envelope import ApiResponse

logger = logging.getLogger(__name__)


class LocalApiClient:
    """Fetches the local API routes and decodes the envelope."""

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    @classmethod
    def for_app(cls, app, base_url: Optional[str] = None) -> "LocalApiClient":
        """Client for ``app``: in-process unless ``base_url`` is given."""
        if base_url:
            return cls(httpx.AsyncClient(base_url=base_url))
        transport = httpx.ASGITransport(app=app)
        return cls(httpx.AsyncClient(transport=transport, base_url="http://walletdesk.local"))

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _fetch(self, method: str, path: str, json: Any = None) -> ApiResponse:
        response = await self._http.request(method, path, json=json)
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return ApiResponse.model_validate(response.json())

    async def list_wallet_sets(self) -> ApiResponse:
        return await self._fetch("GET", "/api/wallet-sets")

    async def create_wallet_set(self, form: dict) -> ApiResponse:
        return await self._fetch("POST", "/api/wallet-sets", json=form)

    async def list_wallets(self, wallet_set_id: str) -> ApiResponse:
        return await self._fetch("GET", f"/api/wallet-sets/{wallet_set_id}/wallets")

    async def create_wallet(self, wallet_set_id: str, form: dict) -> ApiResponse:
        return await self._fetch(
            "POST", f"/api/wallet-sets/{wallet_set_id}/wallets", json=form
        )
