# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is the "brain" that orchestrates everything.  It:
#     1. Receives the user's question ("Which planet is Luke from?")
#     2. Decides which SWAPI tools to call, and in which order
#     3. Calls them (via MCP) over stdio
#     4. Answers in plain language from the tool output
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the lookup logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
#
# The LLM (any LiteLlm model string, OpenRouter by default) reads the
# system prompt and the tool descriptions, then decides how to proceed.
# =============================================================================
