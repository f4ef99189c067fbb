"""HTTP search client.

Executes search bodies against an Elasticsearch-compatible ``_search``
endpoint over aiohttp.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

from ..core.base import SearchClient
from ..core.exceptions import ValidationError
from ..models.search import SearchResponse
from ..utils.http import HTTPClient

logger = logging.getLogger(__name__)


def search_path(collections: Sequence[str]) -> str:
    """Build the ``_search`` path for one or more collections."""
    if not collections:
        raise ValidationError("At least one collection is required")
    joined = ",".join(quote(name, safe="*-_.") for name in collections)
    return f"/{joined}/_search"


class HTTPSearchClient(SearchClient):
    """SearchClient backed by an aiohttp session."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        """Initialize search client.

        Args:
            base_url: Backend root URL, e.g. ``http://localhost:9200``
            timeout: Total request timeout in seconds
            headers: Extra headers sent with every request (e.g. authorization)
            http: Pre-built HTTP client, mainly for tests
        """
        self._http = http or HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    async def search(self, collections: Sequence[str], body: dict[str, Any]) -> SearchResponse:
        path = search_path(collections)
        status, payload = await self._http.post(path, json_body=body)
        logger.debug("Search completed", extra={"path": path, "status": status})
        return SearchResponse.from_payload(status, payload)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> HTTPSearchClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
