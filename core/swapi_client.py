# =============================================================================
# core/swapi_client.py  —  Upstream SWAPI HTTP Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues GET requests against the Star Wars API (SWAPI) and decodes the
#   JSON into the dataclasses from core/models.py.
#
# HOW IT WORKS:
#   1. The client is built once from Settings (base URL + timeout) and is
#      read-only afterwards.
#   2. Every call opens a short-lived httpx.AsyncClient, sends ONE request,
#      and closes it.  No connection state survives between calls.
#   3. The whole request is capped at settings.request_timeout seconds.
#      Transport failures (connection refused, timeout, 4xx/5xx) are
#      wrapped in UpstreamError, carrying the response body if there was one.
#   4. Everything else (bad JSON, unexpected shape) propagates as-is.
#
# ENDPOINTS USED:
#   GET /people/?search=<q>     → search_people()
#   GET /people/<id>/           → get_person()
#   GET /planets/?search=<q>    → search_planets()
#   GET /films/?search=<q>      → search_films()
#   GET /films/                 → list_films()
#
# TESTING:
#   Pass transport=httpx.MockTransport(handler) to serve canned responses
#   without touching the network.
# =============================================================================

import asyncio
import logging
from typing import Optional

import httpx

from core.config import Settings
from core.models import Character, Film, Planet, SearchResult

logger = logging.getLogger(__name__)

USER_AGENT = "swapi-mcp-server/1.0"


class UpstreamError(Exception):
    """An HTTP-level failure talking to SWAPI.

    Attributes:
        detail: The upstream response body when the server answered, else
                the transport error message.
        status_code: HTTP status, or None when no response was received.
    """

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class SwapiClient:
    """Read-only async client for the SWAPI REST API."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    async def _get_json(self, path: str, params: Optional[dict] = None):
        logger.debug("GET %s%s params=%s", self.settings.swapi_base_url, path, params)
        async with httpx.AsyncClient(
            base_url=self.settings.swapi_base_url,
            timeout=self.settings.request_timeout,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            transport=self._transport,
        ) as client:
            try:
                # httpx timeouts are per phase; wait_for caps the whole request.
                response = await asyncio.wait_for(
                    client.get(path, params=params), timeout=self.settings.request_timeout
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                body = exc.response.text.strip()
                raise UpstreamError(body or str(exc), exc.response.status_code) from exc
            except httpx.HTTPError as exc:
                raise UpstreamError(str(exc) or type(exc).__name__) from exc
            except asyncio.TimeoutError as exc:
                raise UpstreamError(
                    f"Request timed out after {self.settings.request_timeout:g} seconds"
                ) from exc
            return response.json()

    async def search_people(self, search: str) -> SearchResult[Character]:
        data = await self._get_json("/people/", params={"search": search})
        return SearchResult.from_json(data, Character.from_json)

    async def search_planets(self, search: str) -> SearchResult[Planet]:
        data = await self._get_json("/planets/", params={"search": search})
        return SearchResult.from_json(data, Planet.from_json)

    async def search_films(self, search: str) -> SearchResult[Film]:
        data = await self._get_json("/films/", params={"search": search})
        return SearchResult.from_json(data, Film.from_json)

    async def get_person(self, person_id: int) -> Character:
        data = await self._get_json(f"/people/{person_id}/")
        return Character.from_json(data)

    async def list_films(self) -> SearchResult[Film]:
        data = await self._get_json("/films/")
        return SearchResult.from_json(data, Film.from_json)
