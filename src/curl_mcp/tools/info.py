"""Informational resources about the HTTP tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

import mcp.types as types
from mcp.server.lowlevel.helper_types import ReadResourceContents

if TYPE_CHECKING:
    from mcp.server import Server
    from pydantic import AnyUrl

INFO_URI_PREFIX = "http://info/"
INFO_URI_TEMPLATE = INFO_URI_PREFIX + "{type}"

INFO_TEXTS: dict[str, str] = {
    "tools": """Available HTTP tools:
- http_get: Perform GET requests
- http_post: Perform POST requests
- http_put: Perform PUT requests
- http_delete: Perform DELETE requests
- http_head: Perform HEAD requests
- curl_custom: Execute custom curl commands
- http_upload: Upload files via HTTP POST
- http_download: Download files via HTTP GET
- auth_test: Test authentication methods

All tools support:
- Custom headers
- Authentication (Bearer, Basic, Digest, OAuth2, API Key, Custom)
- Timeout configuration
- SSL/TLS options
- Redirect handling""",
    "auth": """Authentication types supported:
1. Bearer Token:
   { "type": "bearer", "token": "your-jwt-token" }

2. Basic Authentication:
   { "type": "basic", "username": "user", "password": "pass" }

3. Digest Authentication:
   { "type": "digest", "username": "user", "password": "pass" }

4. OAuth2 Token:
   { "type": "oauth2", "token": "your-oauth2-token" }

5. API Key in Header:
   { "type": "api_key", "key": "X-API-Key", "value": "your-api-key" }

6. Custom Authorization:
   { "type": "custom", "header": "Authorization: Custom token123" }""",
    "examples": """Authentication examples:
1. Bearer token API call:
   auth: { "type": "bearer", "token": "eyJhbGciOiJIUzI1NiIs..." }

2. Basic auth login:
   auth: { "type": "basic", "username": "admin", "password": "secret" }

3. API key in header:
   auth: { "type": "api_key", "key": "X-API-Key", "value": "abc123" }

4. Custom OAuth header:
   auth: { "type": "custom", "header": "Authorization: OAuth oauth_token=abc123" }

5. Test authentication:
   Use auth_test tool to verify credentials work correctly""",
}

UNKNOWN_INFO_TEXT = "Unknown info type. Available: tools, auth, examples"


def get_info(info_type: str) -> str:
    """Return the informational text for a type, or a hint listing valid types."""
    return INFO_TEXTS.get(info_type, UNKNOWN_INFO_TEXT)


def info_type_from_uri(uri: str) -> str:
    """Extract the info type from an ``http://info/{type}`` URI.

    Raises:
        ValueError: If the URI is not an info resource.
    """
    if not uri.startswith(INFO_URI_PREFIX):
        raise ValueError(f"Unknown resource: {uri}")
    return uri[len(INFO_URI_PREFIX) :].strip("/")


def register_resources(server: Server) -> None:
    """Register the informational resources with the server.

    Args:
        server: The MCP server instance.
    """

    @server.list_resource_templates()  # type: ignore[misc]
    async def list_resource_templates() -> list[types.ResourceTemplate]:
        return [
            types.ResourceTemplate(
                uriTemplate=INFO_URI_TEMPLATE,
                name="http_info",
                description="Information about HTTP tools and curl usage",
                mimeType="text/plain",
            )
        ]

    @server.read_resource()  # type: ignore[misc]
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        info_type = info_type_from_uri(str(uri))
        return [ReadResourceContents(content=get_info(info_type), mime_type="text/plain")]
