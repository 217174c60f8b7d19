"""Request translation and execution engine."""

from curl_mcp.core.auth import resolve_auth
from curl_mcp.core.compiler import compile_command
from curl_mcp.core.executor import execute
from curl_mcp.core.result import parse_result
from curl_mcp.core.types import (
    ApiKeyAuth,
    AuthDescriptor,
    BasicAuth,
    BearerAuth,
    CustomAuth,
    DigestAuth,
    ExecutionFailure,
    ExecutionResult,
    ExecutionSuccess,
    FailureKind,
    OAuth2Auth,
    Operation,
    ParsedResponse,
    RequestDescriptor,
)

__all__ = [
    "ApiKeyAuth",
    "AuthDescriptor",
    "BasicAuth",
    "BearerAuth",
    "CustomAuth",
    "DigestAuth",
    "ExecutionFailure",
    "ExecutionResult",
    "ExecutionSuccess",
    "FailureKind",
    "OAuth2Auth",
    "Operation",
    "ParsedResponse",
    "RequestDescriptor",
    "compile_command",
    "execute",
    "parse_result",
    "resolve_auth",
]
