"""
MCP server exposing the search_web tool.

Entry point for the MCP server using STDIO transport.
Run with: python -m perplexity_search
"""

import asyncio
import sys

import structlog
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from perplexity_search.clients.perplexity import PerplexityClient
from perplexity_search.mcp_tools import get_tools, handle_call
from perplexity_search.tools.dispatcher import EscalatingDispatcher
from perplexity_search.tools.heuristics import AnswerHeuristic
from perplexity_search.utils.config import Settings, configure_logging, settings
from perplexity_search.utils.exceptions import ConfigurationError

logger = structlog.get_logger()

SERVER_NAME = "perplexity-server"
SERVER_VERSION = "0.1.0"


def create_server(dispatcher: EscalatingDispatcher) -> Server:
    """Create the MCP server with search_web registered."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return get_tools()

    # Registered directly rather than through @server.call_tool(): the
    # decorator turns every exception into an isError result, and McpError
    # must reach the client as a JSON-RPC error.
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await handle_call(req.params.name, req.params.arguments, dispatcher)
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


def create_dispatcher(
    settings: Settings, client: PerplexityClient | None = None
) -> EscalatingDispatcher:
    """Build the dispatcher (and client, unless given) from settings."""
    return EscalatingDispatcher(
        client or PerplexityClient.from_settings(settings),
        heuristic=AnswerHeuristic.from_settings(settings),
        max_tokens=settings.max_output_tokens,
    )


async def serve(settings: Settings) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    client = PerplexityClient.from_settings(settings)
    server = create_server(create_dispatcher(settings, client))

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Perplexity MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await client.close()


def main() -> None:
    """Run the MCP server."""
    configure_logging(settings)

    try:
        settings.get_api_key()
    except ConfigurationError as e:
        logger.error("Startup failed", error=str(e))
        sys.exit(1)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
