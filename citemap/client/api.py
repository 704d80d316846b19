from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3001"


class GatewayError(Exception):
    """Raised for any failed call to the gateway, network or non-2xx."""


class GatewayClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, transport=transport, timeout=None)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "GatewayClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise GatewayError(f"{type(e).__name__}: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if resp.is_error:
            raise GatewayError(data.get("details") or data.get("error") or "Analysis failed")
        return data

    async def analyze(self, text: str) -> str:
        data = await self._request("POST", "/analyze", json={"text": text})
        return data.get("analysis") or ""

    async def health(self) -> dict[str, Any]:
        return await self._request("GET", "/health")
