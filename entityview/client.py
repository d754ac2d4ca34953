"""
entityview.client
=================

Async client for the entities read endpoint.

``GET <endpoint>?search=&country=&status=`` returns ``{"data": [...]}``.
Every failure (non‑2xx status, timeout, connection error, undecodable or
malformed body) is reported uniformly as :class:`FetchFailed`; the status
code is kept on the exception as an extension point but nothing branches
on it.

Usage:
------
async with EntitiesClient("http://127.0.0.1:8000/api/entities") as client:
    entities = await client.fetch({"country": "AE"})
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional

import httpx

from entityview.models import Entity
from entityview.settings import settings

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Error taxonomy of the listing core (a single kind)."""
    FETCH_FAILED = "FetchFailed"

    def __str__(self) -> str:
        return self.value


class FetchFailed(Exception):
    """Network failure or non‑success response from the read endpoint."""

    kind = ErrorKind.FETCH_FAILED

    def __init__(self, message: str = "Failed to fetch entities", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class EntitiesClient:
    """
    Thin wrapper around :class:`httpx.AsyncClient` for the read endpoint.

    Args:
        endpoint: URL of the entities resource (defaults to settings)
        timeout: Per‑request timeout in seconds (defaults to settings)
        client: Optional pre‑configured AsyncClient; when given it is not
            closed by :meth:`aclose`
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.endpoint = endpoint or settings.entities_endpoint
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.timeout,
            headers={"Accept": "application/json"},
        )

    async def fetch(self, params: Dict[str, str]) -> List[Entity]:
        """
        Fetch one listing page.

        Args:
            params: Non‑empty query parameters (``search``, ``country``, ``status``)

        Returns:
            Entities in the order the endpoint returned them

        Raises:
            FetchFailed: For any transport, status or payload error
        """
        logger.debug(f"GET {self.endpoint} params={params}")
        try:
            response = await self._client.get(self.endpoint, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Entities endpoint returned {e.response.status_code}")
            raise FetchFailed(status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.warning(f"Entities endpoint unreachable: {e!r}")
            raise FetchFailed() from e

        try:
            body = response.json()
            rows = body["data"]
            if not isinstance(rows, list):
                raise TypeError("'data' must be a list")
            return [Entity.from_json(row) for row in rows]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Malformed entities payload: {e}")
            raise FetchFailed(status_code=response.status_code) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "EntitiesClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
