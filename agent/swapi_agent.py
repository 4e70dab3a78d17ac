# =============================================================================
# agent/swapi_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures and creates the Google ADK agent: the coordinator that
#   receives user questions, calls the SWAPI MCP tools, and answers.
#
# ARCHITECTURE — ADK + LiteLlm + MCP:
#   - ADK     = orchestration (sessions, tool calling)
#   - LiteLlm = the model adapter (any provider; OpenRouter by default)
#   - MCP     = the tool connection (tools/mcp_server.py over stdio)
#
#   ┌──────────────────────────────┐        ┌──────────────────────────┐
#   │  Google ADK Agent            │  stdio │  FastMCP Server          │
#   │  prompt + LiteLlm + MCP  ────┼───────▶│  (tools/mcp_server.py)   │
#   └──────────────────────────────┘        │  • search_characters     │
#                                           │  • search_planets        │
#                                           │  • search_films          │
#                                           │  • get_character_by_id   │
#                                           │  • swapi://films/all     │
#                                           └────────────┬─────────────┘
#                                                        ▼
#                                           ┌──────────────────────────┐
#                                           │  core/ → SWAPI over HTTP │
#                                           └──────────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the MCP server as a subprocess ("uv run python -m
#   tools.mcp_server" from the project root) and talks to it over
#   stdin/stdout.  Tools are discovered automatically.
# =============================================================================

import os
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool.mcp_toolset import MCPToolset, StdioServerParameters

from agent.prompt import get_swapi_guide_prompt
from core.config import Settings, load_settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create and configure the SWAPI guide agent.

    Args:
        settings: Process settings; read from the environment when omitted.
                  Only agent_model is used here; the server subprocess
                  reads its own settings from the inherited environment.

    Returns:
        A configured Google ADK Agent instance.
    """
    settings = settings or load_settings()

    # uv run makes the subprocess use the project's .venv (fastmcp, httpx).
    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=PROJECT_ROOT,
            env=dict(os.environ),
        ),
    )

    agent = Agent(
        name="swapi_guide",
        model=LiteLlm(model=settings.agent_model),
        instruction=get_swapi_guide_prompt(),
        tools=[mcp_tools],
    )

    return agent
