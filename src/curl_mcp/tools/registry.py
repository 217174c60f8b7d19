"""MCP tool registration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import mcp.types as types

from curl_mcp.errors import OperationFailed
from curl_mcp.tools.catalog import OPERATIONS
from curl_mcp.tools.handlers import run_operation

if TYPE_CHECKING:
    from mcp.server import Server

logger = logging.getLogger(__name__)


def list_tool_definitions() -> list[types.Tool]:
    """Build the MCP tool definitions from the operation catalog."""
    return [
        types.Tool(
            name=spec.name,
            description=spec.description,
            inputSchema=spec.input_schema,
        )
        for spec in OPERATIONS.values()
    ]


def register_tools(server: Server) -> None:
    """Register all MCP tools with the server.

    Args:
        server: The MCP server instance.
    """

    @server.list_tools()  # type: ignore[misc]
    async def list_tools() -> list[types.Tool]:
        """Return the list of available tools."""
        return list_tool_definitions()

    @server.call_tool()  # type: ignore[misc]
    async def call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent | types.ImageContent | types.EmbeddedResource]:
        """Handle tool execution.

        Args:
            name: The tool name.
            arguments: The tool arguments.

        Returns:
            List of content items.

        Raises:
            ValueError: If the tool name is unknown or the arguments are invalid.
            OperationFailed: If curl could not run or exited nonzero.
        """
        logger.info(f"Executing {name}...")
        result = await run_operation(name, arguments)
        if result.is_error:
            raise OperationFailed(result.output)
        return [types.TextContent(type="text", text=result.output)]
