"""Tools module for MCP tool definitions and operation handling."""

from curl_mcp.tools.catalog import OPERATIONS, build_descriptor
from curl_mcp.tools.handlers import run_operation
from curl_mcp.tools.info import register_resources
from curl_mcp.tools.registry import register_tools

__all__ = [
    "OPERATIONS",
    "build_descriptor",
    "register_resources",
    "register_tools",
    "run_operation",
]
