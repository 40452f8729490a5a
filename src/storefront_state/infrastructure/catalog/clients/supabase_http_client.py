from typing import Any

import httpx

from storefront_state.core.application.ports.common.exceptions import CatalogFetchError
from storefront_state.infrastructure.observability import get_logger

logger = get_logger("catalog")


class SupabaseHttpClient:
    """Thin async client for the Supabase PostgREST endpoint (``/rest/v1``)."""

    def __init__(self, base_url: str, api_key: str, timeout_seconds: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self.timeout_seconds = timeout_seconds

    def _get_headers(self) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

    async def select(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        url = f"{self.base_url}/rest/v1/{table}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(url, headers=self._get_headers(), params=params)
        except httpx.HTTPError as e:
            raise CatalogFetchError(f"Request to '{table}' failed: {e}", retryable=True) from e

        if response.status_code >= 400:
            logger.warning("Catalog query rejected", table=table, status_code=response.status_code)
            raise CatalogFetchError(
                f"Query on '{table}' returned an error",
                retryable=response.status_code >= 500 or response.status_code == 429,
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise CatalogFetchError(f"Query on '{table}' returned invalid JSON") from e

        if not isinstance(payload, list):
            raise CatalogFetchError(f"Query on '{table}' did not return a row list")
        return payload
