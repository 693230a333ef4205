"""MCP tool definition and call routing for search_web.

Two kinds of failure leave this module differently:
- Protocol errors (unknown tool, malformed arguments) raise McpError and reach
  the client as JSON-RPC errors; the search never ran.
- Search failures come back as a normal CallToolResult with isError=True; the
  search ran but produced no usable answer.
"""

from typing import Any

import structlog
from mcp.shared.exceptions import McpError
from mcp.types import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    CallToolResult,
    ErrorData,
    TextContent,
    Tool,
)

from perplexity_search.config.intents import INTENT_PROFILES, Complexity, SearchIntent
from perplexity_search.tools.dispatcher import EscalatingDispatcher
from perplexity_search.tools.validation import validate_search_arguments
from perplexity_search.utils.exceptions import InvalidSearchArgumentsError

logger = structlog.get_logger()

SEARCH_TOOL_NAME = "search_web"


def _intent_help() -> str:
    parts = [f"{p.name} for {p.description}" for p in INTENT_PROFILES.values()]
    return f"Type of search ({', '.join(parts)})"


def get_tools() -> list[Tool]:
    """Get the search_web tool definition."""
    return [
        Tool(
            name=SEARCH_TOOL_NAME,
            description=(
                "Research technical topics, troubleshoot issues, or get latest updates "
                "using Perplexity AI"
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "The search query",
                    },
                    "intent": {
                        "type": "string",
                        "enum": [i.value for i in SearchIntent],
                        "description": _intent_help(),
                    },
                    "complexity": {
                        "type": "string",
                        "enum": [c.value for c in Complexity],
                        "description": "Expected complexity of the query",
                    },
                },
                "required": ["query"],
            },
        ),
    ]


async def handle_call(
    name: str,
    arguments: Any,
    dispatcher: EscalatingDispatcher,
) -> CallToolResult:
    """Route a tools/call request to the dispatcher.

    Raises:
        McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS for bad arguments
    """
    if name != SEARCH_TOOL_NAME:
        raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

    try:
        request = validate_search_arguments(arguments)
    except InvalidSearchArgumentsError as e:
        logger.info("Rejected search arguments", errors=e.errors)
        raise McpError(
            ErrorData(code=INVALID_PARAMS, message=str(e), data={"errors": e.errors})
        ) from e

    outcome = await dispatcher.dispatch(request)

    if not outcome.ok:
        return CallToolResult(
            content=[TextContent(type="text", text=outcome.error or "Unknown error")],
            isError=True,
        )

    return CallToolResult(content=[TextContent(type="text", text=outcome.answer or "")])
