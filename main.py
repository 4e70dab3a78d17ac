# =============================================================================
# main.py  —  Entry Point for the SWAPI Guide Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py                        # interactive
#   uv run python main.py "Where is Luke from?"  # one question, then exit
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/swapi_agent.py); ADK starts the
#      MCP server (tools/mcp_server.py) as a subprocess
#   2. Opens an in-memory session
#   3. For each question, agent/conversation.py runs one turn, printing each
#      tool call as it happens, and the final answer is shown
# =============================================================================

import argparse
import asyncio

from dotenv import load_dotenv

# LiteLlm reads its API key (OPENROUTER_API_KEY, ...) from the environment
# when it initializes, so .env must be loaded before the agent is created.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService

from agent.conversation import AgentReply, collect_reply
from agent.swapi_agent import create_agent

APP_NAME = "swapi_guide"
USER_ID = "demo_user"
EXIT_COMMANDS = ("quit", "exit", "q")
RULE = "-" * 70


def _print_tool_call(call) -> None:
    print(f"  🔧 {call.describe()}")


def _print_reply(reply: AgentReply) -> None:
    print(RULE)
    if reply.answered:
        print(f"\n🤖 Agent:\n\n{reply.text}")
    else:
        print("\n⚠️  No response generated. The agent may have encountered an error.")
    if reply.tool_calls:
        print(f"\n   ({len(reply.tool_calls)} tool call(s) this turn)")


async def run_agent(question=None):
    """Start a session and answer one question, or loop until the user quits."""
    agent = create_agent()
    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    async def ask(text: str) -> AgentReply:
        print(f"\n🤖 Agent is thinking...\n{RULE}")
        reply = await collect_reply(runner, USER_ID, session.id, text, on_tool_call=_print_tool_call)
        _print_reply(reply)
        return reply

    if question:
        reply = await ask(question)
        return 0 if reply.answered else 1

    print("💬 Ask about Star Wars characters, planets or films! (Type 'quit' to exit)")
    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            user_input = "quit"

        if user_input.lower() in EXIT_COMMANDS:
            print("\n👋 Goodbye!")
            return 0
        if user_input:
            await ask(user_input)


def main() -> int:
    parser = argparse.ArgumentParser(description="Ask the SWAPI guide agent about Star Wars.")
    parser.add_argument("question", nargs="?", help="Ask a single question and exit.")
    args = parser.parse_args()
    return asyncio.run(run_agent(args.question))


if __name__ == "__main__":
    raise SystemExit(main())
