"""Catalog of the exposed operations and their argument schemas."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from curl_mcp.core.types import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_FIELD_NAME,
    DEFAULT_TIMEOUTS,
    ApiKeyAuth,
    AuthDescriptor,
    BasicAuth,
    BearerAuth,
    CustomAuth,
    DigestAuth,
    OAuth2Auth,
    Operation,
    RequestDescriptor,
)
from curl_mcp.errors import (
    InvalidToolArguments,
    MalformedAuthDescriptor,
    RequiredFieldMissing,
)

AuthType = Literal["bearer", "basic", "digest", "oauth2", "api_key", "custom"]


class AuthConfig(BaseModel):
    """Authentication configuration."""

    type: Annotated[AuthType, Field(description="Authentication type")]
    token: Annotated[
        str | None, Field(description="Bearer token or OAuth2 token")
    ] = None
    username: Annotated[
        str | None, Field(description="Username for basic/digest auth")
    ] = None
    password: Annotated[
        str | None, Field(description="Password for basic/digest auth")
    ] = None
    key: Annotated[str | None, Field(description="API key header name")] = None
    value: Annotated[str | None, Field(description="API key value")] = None
    header: Annotated[
        str | None,
        Field(
            description=(
                "Custom authorization header "
                "(e.g., 'Authorization: Custom token123')"
            )
        ),
    ] = None

    def to_descriptor(self) -> AuthDescriptor:
        """Convert to the matching authentication descriptor."""
        if self.type == "bearer":
            return BearerAuth(token=self.token)
        if self.type == "oauth2":
            return OAuth2Auth(token=self.token)
        if self.type == "basic":
            return BasicAuth(username=self.username, password=self.password)
        if self.type == "digest":
            return DigestAuth(username=self.username, password=self.password)
        if self.type == "api_key":
            return ApiKeyAuth(key=self.key, value=self.value)
        return CustomAuth(header=self.header)


Headers = Annotated[
    dict[str, str] | None, Field(description="Optional headers to include")
]
OptionalAuth = Annotated[
    AuthConfig | None, Field(description="Authentication configuration")
]
Insecure = Annotated[
    bool, Field(description="Allow insecure SSL connections (default: false)")
]


def _timeout_field(operation: Operation) -> Any:
    default = DEFAULT_TIMEOUTS[operation]
    return Field(
        default=default,
        gt=0,
        description=f"Request timeout in seconds (default: {default})",
    )


class ToolArguments(BaseModel):
    """Base class for validated tool arguments."""

    model_config = ConfigDict(populate_by_name=True)

    operation: ClassVar[Operation]

    def descriptor_fields(self) -> dict[str, Any]:
        """Keyword arguments for RequestDescriptor, minus the operation."""
        return {}

    def to_descriptor(self) -> RequestDescriptor:
        return RequestDescriptor(operation=self.operation, **self.descriptor_fields())


class HttpRequestArguments(ToolArguments):
    """Arguments shared by the plain HTTP method tools."""

    operation: ClassVar[Operation] = Operation.HTTP_GET

    url: Annotated[str, Field(description="The URL to send the request to")]
    headers: Headers = None
    auth: OptionalAuth = None
    timeout: int = _timeout_field(Operation.HTTP_GET)
    follow_redirects: Annotated[
        bool,
        Field(alias="followRedirects", description="Follow redirects (default: true)"),
    ] = True
    insecure: Insecure = False

    def descriptor_fields(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "headers": dict(self.headers or {}),
            "auth": self.auth.to_descriptor() if self.auth else None,
            "timeout_seconds": self.timeout,
            "follow_redirects": self.follow_redirects,
            "insecure_tls": self.insecure,
        }


class HttpGetArguments(HttpRequestArguments):
    operation: ClassVar[Operation] = Operation.HTTP_GET


class HttpDeleteArguments(HttpRequestArguments):
    operation: ClassVar[Operation] = Operation.HTTP_DELETE


class HttpHeadArguments(HttpRequestArguments):
    operation: ClassVar[Operation] = Operation.HTTP_HEAD


class HttpBodyArguments(HttpRequestArguments):
    """Arguments for methods that carry a request body."""

    data: Annotated[str | None, Field(description="Request body data")] = None
    content_type: Annotated[
        str,
        Field(
            alias="contentType",
            description="Content-Type header (default: application/json)",
        ),
    ] = DEFAULT_CONTENT_TYPE

    def descriptor_fields(self) -> dict[str, Any]:
        fields = super().descriptor_fields()
        fields["body"] = self.data
        fields["content_type"] = self.content_type
        return fields


class HttpPostArguments(HttpBodyArguments):
    operation: ClassVar[Operation] = Operation.HTTP_POST


class HttpPutArguments(HttpBodyArguments):
    operation: ClassVar[Operation] = Operation.HTTP_PUT


class HttpDownloadArguments(HttpRequestArguments):
    operation: ClassVar[Operation] = Operation.HTTP_DOWNLOAD

    url: Annotated[str, Field(description="The URL to download from")]
    output_path: Annotated[
        str,
        Field(alias="outputPath", description="Path where to save the downloaded file"),
    ]
    timeout: int = _timeout_field(Operation.HTTP_DOWNLOAD)

    def descriptor_fields(self) -> dict[str, Any]:
        fields = super().descriptor_fields()
        fields["output_path"] = self.output_path
        return fields


class HttpUploadArguments(ToolArguments):
    operation: ClassVar[Operation] = Operation.HTTP_UPLOAD

    url: Annotated[str, Field(description="The URL to upload the file to")]
    file_path: Annotated[
        str, Field(alias="filePath", description="Path to the file to upload")
    ]
    field_name: Annotated[
        str,
        Field(
            alias="fieldName",
            description="Form field name for the file (default: file)",
        ),
    ] = DEFAULT_FIELD_NAME
    headers: Headers = None
    auth: OptionalAuth = None
    timeout: int = _timeout_field(Operation.HTTP_UPLOAD)
    insecure: Insecure = False

    def descriptor_fields(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "file_path": self.file_path,
            "field_name": self.field_name,
            "headers": dict(self.headers or {}),
            "auth": self.auth.to_descriptor() if self.auth else None,
            "timeout_seconds": self.timeout,
            "insecure_tls": self.insecure,
        }


class AuthTestArguments(ToolArguments):
    operation: ClassVar[Operation] = Operation.AUTH_TEST

    url: Annotated[
        str, Field(description="The URL to test authentication against")
    ]
    auth: Annotated[
        AuthConfig,
        Field(description="Authentication configuration (required)"),
    ]
    timeout: int = _timeout_field(Operation.AUTH_TEST)
    insecure: Insecure = False

    def descriptor_fields(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "auth": self.auth.to_descriptor(),
            "timeout_seconds": self.timeout,
            "insecure_tls": self.insecure,
        }


class CurlCustomArguments(ToolArguments):
    operation: ClassVar[Operation] = Operation.CURL_CUSTOM

    args: Annotated[
        list[str],
        Field(description="Array of curl arguments (without 'curl' command itself)"),
    ]

    def descriptor_fields(self) -> dict[str, Any]:
        return {"raw_args": tuple(self.args)}


@dataclass(frozen=True, slots=True)
class OperationSpec:
    """A catalog entry: one MCP tool backed by one operation."""

    operation: Operation
    title: str
    description: str
    arguments: type[ToolArguments]

    @property
    def name(self) -> str:
        return self.operation.value

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments, using their wire names."""
        return self.arguments.model_json_schema(by_alias=True)


OPERATIONS: dict[str, OperationSpec] = {
    spec.name: spec
    for spec in (
        OperationSpec(
            Operation.HTTP_GET,
            "HTTP GET Request",
            "Perform an HTTP GET request using curl",
            HttpGetArguments,
        ),
        OperationSpec(
            Operation.HTTP_POST,
            "HTTP POST Request",
            "Perform an HTTP POST request using curl",
            HttpPostArguments,
        ),
        OperationSpec(
            Operation.HTTP_PUT,
            "HTTP PUT Request",
            "Perform an HTTP PUT request using curl",
            HttpPutArguments,
        ),
        OperationSpec(
            Operation.HTTP_DELETE,
            "HTTP DELETE Request",
            "Perform an HTTP DELETE request using curl",
            HttpDeleteArguments,
        ),
        OperationSpec(
            Operation.HTTP_HEAD,
            "HTTP HEAD Request",
            "Perform an HTTP HEAD request using curl",
            HttpHeadArguments,
        ),
        OperationSpec(
            Operation.CURL_CUSTOM,
            "Custom Curl Command",
            "Execute a custom curl command with full control over parameters",
            CurlCustomArguments,
        ),
        OperationSpec(
            Operation.HTTP_UPLOAD,
            "HTTP File Upload",
            "Upload a file using HTTP POST with curl",
            HttpUploadArguments,
        ),
        OperationSpec(
            Operation.HTTP_DOWNLOAD,
            "HTTP Download File",
            "Download a file using curl",
            HttpDownloadArguments,
        ),
        OperationSpec(
            Operation.AUTH_TEST,
            "Test Authentication",
            "Test different authentication methods with a simple GET request",
            AuthTestArguments,
        ),
    )
}


def get_operation(name: str) -> OperationSpec:
    """Look up a catalog entry by tool name.

    Raises:
        ValueError: If the tool name is unknown.
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise ValueError(f"Unknown tool: {name}") from None


def _is_required(arguments: type[ToolArguments], name: str) -> bool:
    """Whether a top-level argument, given by name or alias, is required."""
    for field_name, info in arguments.model_fields.items():
        if name in (field_name, info.alias):
            return info.is_required()
    return False


def _translate_validation_error(
    error: ValidationError, arguments: type[ToolArguments]
) -> InvalidToolArguments:
    """Map a pydantic validation error onto the tool argument error types."""
    details = error.errors()

    for detail in details:
        loc = tuple(str(part) for part in detail["loc"])
        if loc == ("auth", "type") and detail["type"] == "literal_error":
            return MalformedAuthDescriptor(
                f"Unknown authentication type: {detail.get('input')!r}"
            )

    for detail in details:
        loc = detail["loc"]
        # An explicit null for a required top-level argument counts as missing
        null_required = (
            len(loc) == 1
            and detail.get("input", "") is None
            and _is_required(arguments, str(loc[0]))
        )
        if detail["type"] == "missing" or null_required:
            return RequiredFieldMissing(".".join(str(part) for part in loc))

    return InvalidToolArguments(str(error))


def build_descriptor(
    name: str, arguments: Mapping[str, Any] | None
) -> RequestDescriptor:
    """Validate tool arguments and build the request descriptor.

    Args:
        name: Tool name (e.g., "http_get").
        arguments: Raw tool arguments from the caller.

    Returns:
        The normalized request descriptor.

    Raises:
        ValueError: If the tool name is unknown.
        MalformedAuthDescriptor: If the auth type is not supported.
        RequiredFieldMissing: If a required argument is absent.
        InvalidToolArguments: For any other schema violation.
    """
    spec = get_operation(name)
    try:
        parsed = spec.arguments.model_validate(dict(arguments or {}))
    except ValidationError as e:
        raise _translate_validation_error(e, spec.arguments) from e
    return parsed.to_descriptor()
