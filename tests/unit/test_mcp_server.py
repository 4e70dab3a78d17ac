"""Tests for the FastMCP server, exercised in memory through fastmcp.Client."""

from unittest.mock import patch

import pytest
from fastmcp import Client

from core.gateway import LookupGateway
from tools import mcp_server
from tools.mcp_server import ALL_FILMS_URI, create_server
from tests.conftest import server_error_handler, timeout_handler

TOOL_NAMES = {"search_characters", "search_planets", "search_films", "get_character_by_id"}


@pytest.fixture
def server(gateway):
    return create_server(gateway)


@pytest.fixture
def failing_server(make_client):
    return create_server(LookupGateway(make_client(server_error_handler)))


class TestDiscovery:
    @pytest.mark.asyncio
    async def test_advertises_four_tools(self, server):
        async with Client(server) as client:
            tools = await client.list_tools()

        assert {tool.name for tool in tools} == TOOL_NAMES

    @pytest.mark.asyncio
    async def test_input_schemas(self, server):
        async with Client(server) as client:
            tools = {tool.name: tool for tool in await client.list_tools()}

        assert tools["search_planets"].inputSchema["properties"]["search"]["type"] == "string"
        assert tools["get_character_by_id"].inputSchema["properties"]["id"]["type"] == "integer"
        assert tools["get_character_by_id"].inputSchema["required"] == ["id"]

    @pytest.mark.asyncio
    async def test_tools_are_read_only(self, server):
        async with Client(server) as client:
            tools = await client.list_tools()

        for tool in tools:
            assert tool.annotations.readOnlyHint is True
            assert tool.annotations.idempotentHint is True

    @pytest.mark.asyncio
    async def test_advertises_all_films_resource(self, server):
        async with Client(server) as client:
            resources = await client.list_resources()

        assert [str(r.uri) for r in resources] == [ALL_FILMS_URI]
        assert resources[0].name == "all_films"
        assert resources[0].mimeType == "text/plain"
        assert resources[0].title == "All Films"


class TestToolCalls:
    @pytest.mark.asyncio
    async def test_search_characters(self, server):
        async with Client(server) as client:
            result = await client.call_tool("search_characters", {"search": "luke"})

        assert result.is_error is False
        assert len(result.content) == 1
        assert result.content[0].text.startswith("Found 1 character(s):")

    @pytest.mark.asyncio
    async def test_get_character_by_id(self, server):
        async with Client(server) as client:
            result = await client.call_tool("get_character_by_id", {"id": 1})

        text = result.content[0].text
        assert "Name: Luke Skywalker" in text
        assert "Number of films: 5" in text

    @pytest.mark.asyncio
    async def test_not_found_is_plain_text(self, server):
        async with Client(server) as client:
            result = await client.call_tool("search_films", {"search": "Holiday Special"})

        assert result.is_error is False
        assert result.content[0].text == 'No films found matching "Holiday Special".'

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "tool, arguments, label",
        [
            ("search_characters", {"search": "luke"}, "search characters"),
            ("search_planets", {"search": "hoth"}, "search planets"),
            ("search_films", {"search": "hope"}, "search films"),
            ("get_character_by_id", {"id": 4}, "get character with ID 4"),
        ],
    )
    async def test_upstream_failure_is_error_flagged(self, failing_server, tool, arguments, label):
        async with Client(failing_server) as client:
            result = await client.call_tool(tool, arguments, raise_on_error=False)

        assert result.is_error is True
        assert len(result.content) == 1
        assert label in result.content[0].text
        assert "Service Unavailable" in result.content[0].text

    @pytest.mark.asyncio
    async def test_timeout_is_error_flagged(self, make_client):
        server = create_server(LookupGateway(make_client(timeout_handler)))

        async with Client(server) as client:
            result = await client.call_tool("search_planets", {"search": "hoth"}, raise_on_error=False)

        assert result.is_error is True
        assert "search planets" in result.content[0].text


class TestAllFilmsResource:
    @pytest.mark.asyncio
    async def test_read_sorted_catalog(self, server):
        async with Client(server) as client:
            contents = await client.read_resource(ALL_FILMS_URI)

        text = contents[0].text
        assert text.startswith("Star Wars films:")
        assert text.index("Episode 4:") < text.index("Episode 5:")

    @pytest.mark.asyncio
    async def test_failure_propagates_to_reader(self, failing_server):
        async with Client(failing_server) as client:
            with pytest.raises(Exception, match="fetching films"):
                await client.read_resource(ALL_FILMS_URI)


class TestMain:
    def test_invalid_settings_exit_with_status_1(self, monkeypatch):
        monkeypatch.setenv("SWAPI_TIMEOUT", "soon")

        with patch.object(mcp_server, "load_dotenv"), pytest.raises(SystemExit) as excinfo:
            mcp_server.main()

        assert excinfo.value.code == 1

    def test_runs_server_with_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("SWAPI_BASE_URL", "http://localhost:3000/api")

        with (
            patch.object(mcp_server, "load_dotenv"),
            patch.object(mcp_server, "create_server") as create,
        ):
            mcp_server.main()

        gateway = create.call_args.args[0]
        assert gateway.client.settings.swapi_base_url == "http://localhost:3000/api"
        create.return_value.run.assert_called_once_with()

    def test_crash_while_serving_is_not_reported_as_startup_failure(self, monkeypatch):
        monkeypatch.delenv("SWAPI_TIMEOUT", raising=False)

        with (
            patch.object(mcp_server, "load_dotenv"),
            patch.object(mcp_server, "create_server") as create,
        ):
            create.return_value.run.side_effect = RuntimeError("stdio closed")
            with pytest.raises(RuntimeError, match="stdio closed"):
                mcp_server.main()
