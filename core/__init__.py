# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL lookup logic for the SWAPI tool server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  The only third-party import is httpx (the upstream client).
#   Every formatter and model here can be exercised in a bare Python REPL
#   with zero internet access.
#
# The agent framework and the MCP server are just the wiring; the core is
# the engine.
# =============================================================================
