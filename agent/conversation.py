# =============================================================================
# agent/conversation.py  —  One Conversational Turn
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Sends one user question to an ADK Runner and folds the event stream that
#   comes back into an AgentReply:
#     - every function_call part  → a ToolCall (name + arguments)
#     - the LAST text part        → the answer
#
#   main.py uses this for the interactive loop and for one-shot questions.
#   Anything with a run_async(user_id=, session_id=, new_message=) async
#   generator works as the runner.
# =============================================================================

from dataclasses import dataclass, field

from google.genai import types


@dataclass
class ToolCall:
    name: str
    args: dict = field(default_factory=dict)

    def describe(self) -> str:
        """e.g. search_characters(search='luke')"""
        arg_str = ", ".join(f"{k}={v!r}" for k, v in self.args.items())
        return f"{self.name}({arg_str})"


@dataclass
class AgentReply:
    text: str = ""
    tool_calls: list[ToolCall] = field(default_factory=list)

    @property
    def answered(self) -> bool:
        return bool(self.text)


def build_user_message(text: str) -> types.Content:
    return types.Content(role="user", parts=[types.Part(text=text)])


async def collect_reply(runner, user_id: str, session_id: str, text: str, on_tool_call=None) -> AgentReply:
    """Run one turn and gather the tool calls and final answer.

    Args:
        runner: An ADK Runner (or anything with the same run_async signature).
        user_id: The ADK user the session belongs to.
        session_id: The session to continue.
        text: The user's question.
        on_tool_call: Optional callback, invoked with each ToolCall as it
                      streams in (the REPL uses it to print progress).
    """
    reply = AgentReply()

    async for event in runner.run_async(
        user_id=user_id,
        session_id=session_id,
        new_message=build_user_message(text),
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if getattr(part, "text", None):
                reply.text = part.text

            function_call = getattr(part, "function_call", None)
            if function_call:
                call = ToolCall(name=function_call.name, args=dict(function_call.args or {}))
                reply.tool_calls.append(call)
                if on_tool_call is not None:
                    on_tool_call(call)

    return reply
