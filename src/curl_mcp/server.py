"""MCP Server implementation."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import uvicorn
from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server

from curl_mcp.config import Settings, get_settings, setup_logging
from curl_mcp.tools import register_resources, register_tools

logger = logging.getLogger(__name__)

# Type aliases for ASGI
Scope = dict[str, Any]
Receive = Any
Send = Any


def create_server() -> Server:
    """Create and configure the MCP server.

    Returns:
        Configured MCP server instance.
    """
    server = Server("curl-mcp-server")
    register_tools(server)
    register_resources(server)
    return server


async def send_plain(send: Send, status: int, body: bytes) -> None:
    """Send a complete plain-text ASGI response."""
    await send(
        {
            "type": "http.response.start",
            "status": status,
            "headers": [(b"content-type", b"text/plain")],
        }
    )
    await send({"type": "http.response.body", "body": body})


def create_app(server: Server, sse: SseServerTransport) -> Any:
    """Create the ASGI application for the SSE transport.

    Routes:
        GET /sse: open an MCP session over server-sent events.
        POST /messages: client-to-server messages of an open session.
        POST /sse: answered with 200 for clients that check the endpoint.
        anything else: 404.

    Args:
        server: The MCP server instance.
        sse: The SSE transport.

    Returns:
        ASGI application callable.
    """

    async def open_session(scope: Scope, receive: Receive, send: Send) -> None:
        logger.info(f"SSE session opened by {scope.get('client')}")
        try:
            async with sse.connect_sse(scope, receive, send) as (read, write):
                await server.run(read, write, server.create_initialization_options())
        except Exception as e:
            logger.error(f"SSE session failed: {e}")
            return
        logger.info("SSE session closed")

    async def post_message(scope: Scope, receive: Receive, send: Send) -> None:
        await sse.handle_post_message(scope, receive, send)

    async def acknowledge(scope: Scope, receive: Receive, send: Send) -> None:
        await send_plain(send, 200, b"OK")

    routes = {
        ("GET", "/sse"): open_session,
        ("POST", "/messages"): post_message,
        ("POST", "/sse"): acknowledge,
    }

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        """Dispatch HTTP requests by method and path."""
        if scope["type"] != "http":
            return

        handler = routes.get((scope["method"], scope["path"]))
        if handler is None:
            await send_plain(send, 404, b"Not Found")
            return
        await handler(scope, receive, send)

    return app


async def run_stdio(server: Server) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run_server(settings: Settings | None = None) -> None:
    """Run the MCP server on the configured transport.

    Args:
        settings: Optional settings override.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings)
    server = create_server()

    if settings.transport == "stdio":
        logger.info("curl MCP server running on stdio")
        asyncio.run(run_stdio(server))
        return

    sse = SseServerTransport("/messages")
    app = create_app(server, sse)

    logger.info(
        f"curl MCP server listening on {settings.server_host}:{settings.server_port}"
    )
    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
    )


if __name__ == "__main__":
    run_server()
