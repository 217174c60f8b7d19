"""Value types shared by the request translation and execution engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, TypeAlias


class Operation(str, Enum):
    """Operations exposed by the server, named after their MCP tools."""

    HTTP_GET = "http_get"
    HTTP_POST = "http_post"
    HTTP_PUT = "http_put"
    HTTP_DELETE = "http_delete"
    HTTP_HEAD = "http_head"
    HTTP_UPLOAD = "http_upload"
    HTTP_DOWNLOAD = "http_download"
    AUTH_TEST = "auth_test"
    CURL_CUSTOM = "curl_custom"

    @property
    def method(self) -> str:
        """HTTP method performed by this operation, or CUSTOM for raw curl."""
        return _METHODS[self]


_METHODS: dict[Operation, str] = {
    Operation.HTTP_GET: "GET",
    Operation.HTTP_POST: "POST",
    Operation.HTTP_PUT: "PUT",
    Operation.HTTP_DELETE: "DELETE",
    Operation.HTTP_HEAD: "HEAD",
    Operation.HTTP_UPLOAD: "POST",
    Operation.HTTP_DOWNLOAD: "GET",
    Operation.AUTH_TEST: "GET",
    Operation.CURL_CUSTOM: "CUSTOM",
}

DEFAULT_TIMEOUTS: dict[Operation, int] = {
    Operation.HTTP_GET: 30,
    Operation.HTTP_POST: 30,
    Operation.HTTP_PUT: 30,
    Operation.HTTP_DELETE: 30,
    Operation.HTTP_HEAD: 30,
    Operation.HTTP_UPLOAD: 60,
    Operation.HTTP_DOWNLOAD: 300,
    Operation.AUTH_TEST: 30,
}

DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_FIELD_NAME = "file"


# Authentication descriptors


@dataclass(frozen=True, slots=True)
class BearerAuth:
    """Bearer token sent in the Authorization header."""

    type: ClassVar[str] = "bearer"

    token: str | None = None


@dataclass(frozen=True, slots=True)
class OAuth2Auth:
    """OAuth2 access token, sent exactly like a bearer token."""

    type: ClassVar[str] = "oauth2"

    token: str | None = None


@dataclass(frozen=True, slots=True)
class BasicAuth:
    type: ClassVar[str] = "basic"

    username: str | None = None
    password: str | None = None


@dataclass(frozen=True, slots=True)
class DigestAuth:
    type: ClassVar[str] = "digest"

    username: str | None = None
    password: str | None = None


@dataclass(frozen=True, slots=True)
class ApiKeyAuth:
    """API key passed as a custom header.

    Attributes:
        key: Header name (e.g., "X-API-Key").
        value: Header value.
    """

    type: ClassVar[str] = "api_key"

    key: str | None = None
    value: str | None = None


@dataclass(frozen=True, slots=True)
class CustomAuth:
    """Complete header line supplied verbatim by the caller."""

    type: ClassVar[str] = "custom"

    header: str | None = None


AuthDescriptor: TypeAlias = (
    BearerAuth | OAuth2Auth | BasicAuth | DigestAuth | ApiKeyAuth | CustomAuth
)

AUTH_TYPES: dict[str, type[AuthDescriptor]] = {
    cls.type: cls
    for cls in (BearerAuth, OAuth2Auth, BasicAuth, DigestAuth, ApiKeyAuth, CustomAuth)
}


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Normalized description of a single operation invocation.

    Attributes:
        operation: Which catalog operation this request belongs to.
        url: Target URL. Unused by CURL_CUSTOM.
        headers: Extra request headers, emitted in iteration order.
        body: Request payload for POST/PUT.
        content_type: Content-Type sent along with ``body``.
        auth: Authentication strategy, if any.
        timeout_seconds: Passed to curl as ``--max-time``. Defaults per operation.
        follow_redirects: Follow 3xx responses (ignored for upload).
        insecure_tls: Skip TLS certificate verification.
        file_path: File to upload (HTTP_UPLOAD only).
        field_name: Multipart form field for the upload.
        output_path: Destination file (HTTP_DOWNLOAD only).
        raw_args: Verbatim curl arguments (CURL_CUSTOM only).
    """

    operation: Operation
    url: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None
    content_type: str = DEFAULT_CONTENT_TYPE
    auth: AuthDescriptor | None = None
    timeout_seconds: int | None = None
    follow_redirects: bool = True
    insecure_tls: bool = False
    file_path: str | None = None
    field_name: str = DEFAULT_FIELD_NAME
    output_path: str | None = None
    raw_args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.timeout_seconds is None and self.operation in DEFAULT_TIMEOUTS:
            object.__setattr__(
                self, "timeout_seconds", DEFAULT_TIMEOUTS[self.operation]
            )

    @property
    def method(self) -> str:
        return self.operation.method


CompiledCommand: TypeAlias = list[str]


# Execution results


class FailureKind(str, Enum):
    """Why an execution did not produce output."""

    LAUNCH_ERROR = "LaunchError"
    EXTERNAL_TOOL_ERROR = "ExternalToolError"


@dataclass(frozen=True, slots=True)
class ExecutionSuccess:
    """curl exited with status 0.

    Attributes:
        raw_output: Everything curl wrote to stdout.
        stderr: Everything curl wrote to stderr (the -v trace for auth tests).
    """

    raw_output: str
    stderr: str = ""


@dataclass(frozen=True, slots=True)
class ExecutionFailure:
    """curl could not be launched or exited with a nonzero status."""

    kind: FailureKind
    message: str
    exit_code: int | None = None


ExecutionResult: TypeAlias = ExecutionSuccess | ExecutionFailure


@dataclass(frozen=True, slots=True)
class ParsedResponse:
    """Response body split from the trailing status markers."""

    body: str
    http_status_code: int | None = None
    elapsed_seconds: float | None = None
