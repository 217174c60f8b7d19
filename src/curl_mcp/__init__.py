"""MCP server issuing HTTP requests through curl."""

__version__ = "1.0.0"
