# =============================================================================
# core/gateway.py  —  The Lookup Gateway
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements the five lookup operations on top of SwapiClient + the
#   formatters.  Each operation is one upstream GET followed by text
#   formatting; nothing is remembered between calls.
#
# HOW IT WORKS (the flow):
#   1. tools/mcp_server.py calls an operation (e.g. search_planets("tat"))
#   2. The gateway asks the client for typed data
#   3. Zero results → a fixed "No ... found" sentence (NOT an error)
#   4. Otherwise the formatter renders the blocks
#   5. The text comes back wrapped in a ToolResponse envelope
#
# ERROR POLICY:
#   Tool operations (search_*, get_character_by_id) NEVER raise.  Any
#   failure becomes ToolResponse(is_error=True) with a sentence naming the
#   operation:
#     UpstreamError  →  "Error while trying to <operation>: <detail>"
#     anything else  →  "Unexpected error while trying to <operation>: <exc>"
#
#   list_all_films() backs a passive MCP *resource*, and resources report
#   failure by raising.  It raises FilmCatalogError instead.
# =============================================================================

import logging

from core.formatting import (
    format_character,
    format_character_details,
    format_film,
    format_film_catalog,
    format_planet,
    format_search_results,
)
from core.models import ToolResponse
from core.swapi_client import SwapiClient, UpstreamError

logger = logging.getLogger(__name__)


class FilmCatalogError(Exception):
    """Raised when the full film list cannot be fetched or rendered."""


def error_response(exc: Exception, operation: str) -> ToolResponse:
    """Convert an exception into an error-flagged envelope."""
    if isinstance(exc, UpstreamError):
        return ToolResponse(f"Error while trying to {operation}: {exc.detail}", is_error=True)
    return ToolResponse(f"Unexpected error while trying to {operation}: {exc}", is_error=True)


class LookupGateway:
    """Stateless lookup operations over SWAPI.

    The client is passed in explicitly; it may be wired to any httpx
    transport.
    """

    def __init__(self, client: SwapiClient):
        self.client = client

    async def search_characters(self, search: str) -> ToolResponse:
        operation = "search characters"
        try:
            page = await self.client.search_people(search)
            if not page.results:
                return ToolResponse(f'No characters found matching "{search}".')
            return ToolResponse(format_search_results(page.results, format_character, "character(s)"))
        except Exception as exc:
            logger.exception("Failed to %s (search=%r)", operation, search)
            return error_response(exc, operation)

    async def search_planets(self, search: str) -> ToolResponse:
        operation = "search planets"
        try:
            page = await self.client.search_planets(search)
            if not page.results:
                return ToolResponse(f'No planets found matching "{search}".')
            return ToolResponse(format_search_results(page.results, format_planet, "planet(s)"))
        except Exception as exc:
            logger.exception("Failed to %s (search=%r)", operation, search)
            return error_response(exc, operation)

    async def search_films(self, search: str) -> ToolResponse:
        operation = "search films"
        try:
            page = await self.client.search_films(search)
            if not page.results:
                return ToolResponse(f'No films found matching "{search}".')
            return ToolResponse(format_search_results(page.results, format_film, "film(s)"))
        except Exception as exc:
            logger.exception("Failed to %s (search=%r)", operation, search)
            return error_response(exc, operation)

    async def get_character_by_id(self, id: int) -> ToolResponse:
        # No "not found" branch: an unknown ID is a 404 from SWAPI.
        operation = f"get character with ID {id}"
        try:
            char = await self.client.get_person(id)
            return ToolResponse(format_character_details(char))
        except Exception as exc:
            logger.exception("Failed to %s", operation)
            return error_response(exc, operation)

    async def list_all_films(self) -> str:
        """Full film catalog, sorted by episode.

        Raises:
            FilmCatalogError: On any upstream or parsing failure.
        """
        try:
            page = await self.client.list_films()
            return format_film_catalog(page.results)
        except Exception as exc:
            detail = exc.detail if isinstance(exc, UpstreamError) else str(exc)
            raise FilmCatalogError(f"Error while fetching films: {detail}") from exc
