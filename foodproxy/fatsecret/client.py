# -*- coding: utf-8 -*-
"""FatSecret Platform REST client (signed GET requests against server.api)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from ..config import Settings
from ..oauth import Signer

logger = logging.getLogger(__name__)


class FatSecretError(Exception):
    """Raised when the FatSecret API call fails."""


class FatSecretAPIError(FatSecretError):
    """The provider answered with an ``{"error": {...}}`` body."""

    def __init__(self, code: Optional[int], message: str) -> None:
        super().__init__(f"FatSecret error {code}: {message}")
        self.code = code
        self.message = message


def _extract_provider_error(data: Any) -> Optional[FatSecretAPIError]:
    if not isinstance(data, dict):
        return None
    err = data.get("error")
    if not isinstance(err, dict):
        return None
    code_raw = err.get("code")
    try:
        code = int(code_raw) if code_raw is not None else None
    except (TypeError, ValueError):
        code = None
    return FatSecretAPIError(code, str(err.get("message") or "unknown error"))


class FatSecretClient:
    def __init__(
        self,
        signer: Signer,
        *,
        base_url: str,
        timeout: float = 10.0,
        search_method: str = "foods.search",
        food_method: str = "food.get.v3",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._signer = signer
        self.base_url = base_url
        self.timeout = timeout
        self.search_method = search_method
        self.food_method = food_method
        self._transport = transport

    @classmethod
    def from_settings(cls, signer: Signer, settings: Settings, **kwargs: Any) -> "FatSecretClient":
        return cls(
            signer,
            base_url=settings.fatsecret_base_url,
            timeout=settings.fatsecret_timeout,
            search_method=settings.fatsecret_search_method,
            food_method=settings.fatsecret_food_method,
            **kwargs,
        )

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def request(
        self,
        params: Mapping[str, str],
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> Dict[str, Any]:
        """Sign ``params``, send them as query parameters and return the JSON body."""
        oauth_params = self._signer.sign("GET", self.base_url, params)
        full_params = {**params, **oauth_params}

        if client is None:
            async with self._http_client() as own_client:
                return await self._send(own_client, full_params)
        return await self._send(client, full_params)

    async def _send(self, client: httpx.AsyncClient, full_params: Dict[str, str]) -> Dict[str, Any]:
        method_name = full_params.get("method")
        try:
            resp = await client.get(self.base_url, params=full_params)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as exc:
            raise FatSecretError(f"{method_name} request failed: {exc}") from exc
        except ValueError as exc:
            snippet = (resp.text or "").replace("\n", " ").strip()[:200]
            raise FatSecretError(f"{method_name} returned non-JSON response: {snippet}") from exc

        provider_error = _extract_provider_error(data)
        if provider_error is not None:
            raise provider_error
        if not isinstance(data, dict):
            raise FatSecretError(f"{method_name} returned unexpected payload type {type(data).__name__}")
        return data

    async def search_foods(
        self,
        query: str,
        *,
        max_results: Optional[int] = None,
        page_number: Optional[int] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, str] = {
            "method": self.search_method,
            "search_expression": query,
            "format": "json",
        }
        if max_results is not None:
            params["max_results"] = str(max_results)
        if page_number is not None:
            params["page_number"] = str(page_number)
        return await self.request(params)

    def _food_params(self, food_id: str) -> Dict[str, str]:
        return {
            "method": self.food_method,
            "food_id": str(food_id),
            "format": "json",
        }

    async def get_food(self, food_id: str) -> Optional[Dict[str, Any]]:
        data = await self.request(self._food_params(food_id))
        return data.get("food") or None

    async def get_foods(self, food_ids: Sequence[str]) -> List[Optional[Dict[str, Any]]]:
        """Fetch several foods concurrently; each request is signed separately.

        The first failure cancels the remaining requests before the shared
        HTTP client is closed.
        """
        async with self._http_client() as client:
            tasks = [
                asyncio.ensure_future(self.request(self._food_params(fid), client=client))
                for fid in food_ids
            ]
            try:
                results = await asyncio.gather(*tasks)
            finally:
                pending = [task for task in tasks if not task.done()]
                for task in pending:
                    task.cancel()
                if pending:
                    await asyncio.gather(*pending, return_exceptions=True)
        return [data.get("food") or None for data in results]
