"""Tests for the operation catalog."""

from __future__ import annotations

import pytest

from curl_mcp.core.types import (
    ApiKeyAuth,
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
from curl_mcp.tools.catalog import OPERATIONS, build_descriptor, get_operation

URL = "https://api.example.com"


class TestOperations:
    """Tests for the OPERATIONS table."""

    def test_nine_operations(self) -> None:
        """Every operation has exactly one catalog entry."""
        assert set(OPERATIONS) == {op.value for op in Operation}

    def test_schema_uses_wire_names(self) -> None:
        """Input schemas expose the camelCase parameter names."""
        schema = OPERATIONS["http_post"].input_schema
        properties = schema["properties"]
        assert {"url", "data", "contentType", "followRedirects", "insecure"} <= set(
            properties
        )
        assert schema["required"] == ["url"]

    def test_upload_schema(self) -> None:
        """Upload has no followRedirects and requires a file path."""
        schema = OPERATIONS["http_upload"].input_schema
        assert "followRedirects" not in schema["properties"]
        assert set(schema["required"]) == {"url", "filePath"}

    def test_auth_test_requires_auth(self) -> None:
        """Auth test declares auth as required."""
        schema = OPERATIONS["auth_test"].input_schema
        assert set(schema["required"]) == {"url", "auth"}

    def test_custom_schema(self) -> None:
        """curl_custom only takes the raw argument array."""
        schema = OPERATIONS["curl_custom"].input_schema
        assert list(schema["properties"]) == ["args"]

    def test_unknown_tool(self) -> None:
        """Unknown tool names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown tool"):
            get_operation("http_patch")


class TestBuildDescriptor:
    """Tests for build_descriptor function."""

    def test_get_defaults(self) -> None:
        """Omitted arguments fall back to their defaults."""
        descriptor = build_descriptor("http_get", {"url": URL})
        assert descriptor == RequestDescriptor(
            operation=Operation.HTTP_GET,
            url=URL,
            timeout_seconds=30,
            follow_redirects=True,
            insecure_tls=False,
        )

    def test_post_arguments(self) -> None:
        """Body arguments map onto the descriptor."""
        descriptor = build_descriptor(
            "http_post",
            {
                "url": URL,
                "data": "a=1",
                "contentType": "text/plain",
                "headers": {"X-A": "1"},
                "timeout": 5,
                "followRedirects": False,
                "insecure": True,
            },
        )
        assert descriptor.method == "POST"
        assert descriptor.body == "a=1"
        assert descriptor.content_type == "text/plain"
        assert dict(descriptor.headers) == {"X-A": "1"}
        assert descriptor.timeout_seconds == 5
        assert descriptor.follow_redirects is False
        assert descriptor.insecure_tls is True

    def test_download_defaults(self) -> None:
        descriptor = build_descriptor(
            "http_download", {"url": URL, "outputPath": "/tmp/x"}
        )
        assert descriptor.output_path == "/tmp/x"
        assert descriptor.timeout_seconds == 300

    def test_upload_defaults(self) -> None:
        descriptor = build_descriptor("http_upload", {"url": URL, "filePath": "a.txt"})
        assert descriptor.file_path == "a.txt"
        assert descriptor.field_name == "file"
        assert descriptor.timeout_seconds == 60
        assert descriptor.method == "POST"

    def test_custom_args(self) -> None:
        descriptor = build_descriptor("curl_custom", {"args": ["-I", URL]})
        assert descriptor.raw_args == ("-I", URL)
        assert descriptor.url is None

    @pytest.mark.parametrize(
        ("auth", "expected"),
        [
            ({"type": "bearer", "token": "t"}, BearerAuth(token="t")),
            ({"type": "oauth2", "token": "t"}, OAuth2Auth(token="t")),
            (
                {"type": "basic", "username": "u", "password": "p"},
                BasicAuth(username="u", password="p"),
            ),
            (
                {"type": "digest", "username": "u", "password": "p"},
                DigestAuth(username="u", password="p"),
            ),
            (
                {"type": "api_key", "key": "X-API-Key", "value": "v"},
                ApiKeyAuth(key="X-API-Key", value="v"),
            ),
            ({"type": "custom", "header": "X: y"}, CustomAuth(header="X: y")),
        ],
    )
    def test_auth_variants(self, auth: dict[str, str], expected: object) -> None:
        """Each auth type becomes its descriptor variant."""
        descriptor = build_descriptor("http_get", {"url": URL, "auth": auth})
        assert descriptor.auth == expected

    def test_incomplete_auth_is_accepted(self) -> None:
        """Missing auth sub-fields are not a validation error."""
        descriptor = build_descriptor(
            "http_get", {"url": URL, "auth": {"type": "basic", "username": "u"}}
        )
        assert descriptor.auth == BasicAuth(username="u")

    def test_unknown_auth_type(self) -> None:
        """Unknown auth types are rejected at the boundary."""
        with pytest.raises(MalformedAuthDescriptor, match="kerberos"):
            build_descriptor("http_get", {"url": URL, "auth": {"type": "kerberos"}})

    def test_missing_url(self) -> None:
        with pytest.raises(RequiredFieldMissing) as exc_info:
            build_descriptor("http_get", {})
        assert exc_info.value.field == "url"

    def test_none_arguments(self) -> None:
        """Missing argument object behaves like an empty one."""
        with pytest.raises(RequiredFieldMissing):
            build_descriptor("http_delete", None)

    def test_auth_test_without_auth(self) -> None:
        """Auth test requires an auth configuration."""
        with pytest.raises(RequiredFieldMissing) as exc_info:
            build_descriptor("auth_test", {"url": URL})
        assert exc_info.value.field == "auth"

    def test_auth_test_with_null_auth(self) -> None:
        with pytest.raises(RequiredFieldMissing):
            build_descriptor("auth_test", {"url": URL, "auth": None})

    def test_null_optional_argument(self) -> None:
        """An explicit null for an optional argument is invalid, not missing."""
        with pytest.raises(InvalidToolArguments) as exc_info:
            build_descriptor("http_get", {"url": URL, "timeout": None})
        assert not isinstance(exc_info.value, RequiredFieldMissing)

    def test_null_required_argument(self) -> None:
        """An explicit null for a required argument counts as missing."""
        with pytest.raises(RequiredFieldMissing) as exc_info:
            build_descriptor("http_download", {"url": URL, "outputPath": None})
        assert exc_info.value.field == "outputPath"

    def test_non_positive_timeout(self) -> None:
        with pytest.raises(InvalidToolArguments):
            build_descriptor("http_get", {"url": URL, "timeout": 0})

    def test_errors_are_value_errors(self) -> None:
        """Argument errors surface as ValueError to the MCP layer."""
        with pytest.raises(ValueError):
            build_descriptor("http_upload", {"url": URL})
