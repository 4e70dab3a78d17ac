# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that exposes the SWAPI lookups.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between the agent framework and the
#   core lookup logic.  mcp_server.py:
#     1. Builds a LookupGateway from core/
#     2. Registers each gateway operation as a FastMCP tool or resource
#     3. Converts ToolResponse envelopes into MCP results (text / isError)
#     4. Logs every call to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP or format text (that's in core/)
#   - They do NOT make decisions (that's the agent's job)
#   - They do NOT know about Google ADK
#
# TOOL CONTRACT QUALITY:
#   Each tool has a descriptive name, a docstring the LLM reads to decide
#   WHEN to call it, and a single typed parameter (str or int).
# =============================================================================
