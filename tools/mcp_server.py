# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools and the one MCP resource the agent can use.  Each
#   one is a thin wrapper around a core/gateway.py operation — it handles
#   logging and converts the gateway's ToolResponse into an MCP result.
#
# HOW IT WORKS (the flow):
#   1. The agent decides it needs Star Wars data (e.g., "who is Leia?")
#   2. It calls a tool by name via MCP (e.g., "search_characters")
#   3. FastMCP routes the call to the function registered below
#   4. The function calls the LookupGateway, which does one SWAPI request
#   5. The agent receives one text block (or an error-flagged text block)
#
# TOOLS vs RESOURCES:
#   - Tools are INVOKED with arguments.  Errors come back as a normal result
#     with isError=True (we raise ToolError; FastMCP builds that result).
#   - The all_films resource is READ, with no arguments.  Errors propagate
#     to the client as a failed read (we raise ResourceError).
#
# ALL TOOLS ARE READ-ONLY.  They carry readOnlyHint/idempotentHint
# annotations so the client knows they are safe to retry.
#
# RUNNING THIS SERVER:
#     a) Run standalone:  python -m tools.mcp_server
#     b) Spawned by the Google ADK agent via stdio transport (agent/)
# =============================================================================

import logging
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ResourceError, ToolError

from core.config import load_settings
from core.gateway import FilmCatalogError, LookupGateway
from core.models import ToolResponse
from core.swapi_client import SwapiClient

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to the agent over STDOUT.
# A log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

_RESPONSE_PREVIEW_CHARS = 200

ALL_FILMS_URI = "swapi://films/all"

_READ_ONLY = {"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True}


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> None:
    """Log the first line(s) of a response in GREEN."""
    preview = text if len(text) <= _RESPONSE_PREVIEW_CHARS else text[:_RESPONSE_PREVIEW_CHARS] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response: {preview!r}{_RESET}")


def _deliver(tool_name: str, response: ToolResponse) -> str:
    """Return the text of a successful envelope, or raise it as a ToolError.

    FastMCP turns a ToolError into a CallToolResult with isError=True and
    the message as its single text block.
    """
    if response.is_error:
        _log_status(f"{tool_name} failed")
        raise ToolError(response.text)
    _log_response(tool_name, response.text)
    return response.text


# =============================================================================
# Server factory
# =============================================================================
# The gateway is passed in; main() builds the real one, tests build one
# backed by an httpx.MockTransport.
# =============================================================================
def create_server(gateway: LookupGateway) -> FastMCP:
    """Build the FastMCP server with all tools and resources registered."""

    mcp = FastMCP(
        "swapi-mcp-server",
        instructions=(
            "Read-only lookups against the Star Wars API (SWAPI). "
            "Use search_characters, search_planets and search_films to look "
            "things up by name or title, get_character_by_id when you know a "
            "character's numeric ID, and read swapi://films/all for the full "
            "film list in episode order."
        ),
    )

    # -------------------------------------------------------------------------
    # TOOL 1: search_characters
    # -------------------------------------------------------------------------
    @mcp.tool(annotations={"title": "Search Characters", **_READ_ONLY})
    async def search_characters(search: str) -> str:
        """Search Star Wars characters by name.

        Matching is case-insensitive and partial ("sky" finds Luke and
        Anakin Skywalker).  Returns one block per character with height,
        mass, hair/skin/eye color, birth year and gender.

        Args:
            search: Name (or part of a name) of the character.
        """
        _log_request("search_characters", search=search)
        return _deliver("search_characters", await gateway.search_characters(search))

    # -------------------------------------------------------------------------
    # TOOL 2: search_planets
    # -------------------------------------------------------------------------
    @mcp.tool(annotations={"title": "Search Planets", **_READ_ONLY})
    async def search_planets(search: str) -> str:
        """Search Star Wars planets by name.

        Returns one block per planet with climate, terrain, population,
        diameter, rotation period and orbital period.

        Args:
            search: Name (or part of a name) of the planet.
        """
        _log_request("search_planets", search=search)
        return _deliver("search_planets", await gateway.search_planets(search))

    # -------------------------------------------------------------------------
    # TOOL 3: search_films
    # -------------------------------------------------------------------------
    @mcp.tool(annotations={"title": "Search Films", **_READ_ONLY})
    async def search_films(search: str) -> str:
        """Search Star Wars films by title.

        Returns one block per film with episode number, director,
        producers, release date and the full opening crawl.

        Args:
            search: Title (or part of a title) of the film.
        """
        _log_request("search_films", search=search)
        return _deliver("search_films", await gateway.search_films(search))

    # -------------------------------------------------------------------------
    # TOOL 4: get_character_by_id
    # -------------------------------------------------------------------------
    @mcp.tool(annotations={"title": "Get Character by ID", **_READ_ONLY})
    async def get_character_by_id(id: int) -> str:
        """Get the details of one Star Wars character by numeric SWAPI ID.

        Returns the character's physical traits plus the URL of their
        homeworld and the number of films they appear in.  An unknown ID
        comes back as an error.

        Args:
            id: SWAPI person ID (e.g., 1 is Luke Skywalker).
        """
        _log_request("get_character_by_id", id=id)
        return _deliver("get_character_by_id", await gateway.get_character_by_id(id))

    # -------------------------------------------------------------------------
    # RESOURCE: all_films
    # -------------------------------------------------------------------------
    @mcp.resource(
        ALL_FILMS_URI,
        name="all_films",
        title="All Films",
        description="Every Star Wars film in SWAPI, sorted by episode number.",
        mime_type="text/plain",
    )
    async def all_films() -> str:
        _log_request("all_films")
        try:
            text = await gateway.list_all_films()
        except FilmCatalogError as exc:
            _log_status(str(exc))
            raise ResourceError(str(exc)) from exc
        _log_response("all_films", text)
        return text

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    load_dotenv()
    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        server = create_server(LookupGateway(SwapiClient(settings)))
    except Exception:
        # Logging may not be configured yet if settings were invalid.
        configure_logging()
        logging.exception("Failed to start the SWAPI MCP server")
        sys.exit(1)

    logging.info(f"SWAPI MCP server running on stdio (upstream: {settings.swapi_base_url})")
    server.run()


if __name__ == "__main__":
    main()
