"""Tests for operation handlers."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from curl_mcp.config import Settings
from curl_mcp.core.compiler import WRITE_OUT_FORMAT
from curl_mcp.core.types import (
    ExecutionFailure,
    ExecutionSuccess,
    FailureKind,
    ParsedResponse,
)
from curl_mcp.errors import MalformedAuthDescriptor
from curl_mcp.tools.handlers import run_operation

URL = "https://api.example.com/items"
RAW = '{"ok":true}\n\nHTTP_CODE:200\nTIME_TOTAL:0.1'


def mock_execute(result: ExecutionSuccess | ExecutionFailure) -> AsyncMock:
    return AsyncMock(return_value=result)


class TestRunOperation:
    """Tests for run_operation function."""

    def test_get_returns_raw_output(self, test_settings: Settings) -> None:
        """A successful request returns curl's stdout unchanged."""
        execute = mock_execute(ExecutionSuccess(raw_output=RAW))
        with patch("curl_mcp.tools.handlers.execute", execute):
            result = asyncio.run(run_operation("http_get", {"url": URL}, test_settings))

        assert result.output == RAW
        assert result.is_error is False
        assert result.response == ParsedResponse(
            body='{"ok":true}\n\n', http_status_code=200, elapsed_seconds=0.1
        )

    def test_passes_compiled_command(self, test_settings: Settings) -> None:
        """The executor receives the compiled argv, timeout and binary."""
        execute = mock_execute(ExecutionSuccess(raw_output=RAW))
        settings = test_settings.model_copy(update={"curl_binary": "/usr/local/bin/curl"})
        with patch("curl_mcp.tools.handlers.execute", execute):
            asyncio.run(
                run_operation(
                    "http_get",
                    {"url": URL, "auth": {"type": "bearer", "token": "abc"}},
                    settings,
                )
            )

        execute.assert_awaited_once_with(
            [
                "-s",
                "-w",
                WRITE_OUT_FORMAT,
                "-L",
                "--max-time",
                "30",
                "-H",
                "Authorization: Bearer abc",
                URL,
            ],
            30,
            binary="/usr/local/bin/curl",
        )

    def test_failure_message(self, test_settings: Settings) -> None:
        """Execution failures are rendered as error text."""
        failure = ExecutionFailure(
            kind=FailureKind.EXTERNAL_TOOL_ERROR,
            message="exit code 6: Could not resolve host",
            exit_code=6,
        )
        with patch("curl_mcp.tools.handlers.execute", mock_execute(failure)):
            result = asyncio.run(run_operation("http_post", {"url": URL}, test_settings))

        assert result.output == "Error: exit code 6: Could not resolve host"
        assert result.is_error is True
        assert result.response is None

    def test_launch_failure(self, test_settings: Settings) -> None:
        """A missing curl binary is reported, not raised."""
        settings = test_settings.model_copy(
            update={"curl_binary": "/nonexistent/bin/curl"}
        )
        result = asyncio.run(run_operation("http_get", {"url": URL}, settings))
        assert result.is_error is True
        assert result.output.startswith("Error: ")

    def test_download_message(self, test_settings: Settings) -> None:
        raw = "\n\nHTTP_CODE:200\nTIME_TOTAL:1.2"
        with patch(
            "curl_mcp.tools.handlers.execute",
            mock_execute(ExecutionSuccess(raw_output=raw)),
        ):
            result = asyncio.run(
                run_operation(
                    "http_download",
                    {"url": URL, "outputPath": "/tmp/items.json"},
                    test_settings,
                )
            )

        assert result.output == f"File downloaded successfully to: /tmp/items.json\n{raw}"

    def test_auth_test_message(self, test_settings: Settings) -> None:
        """Auth test names the auth type and includes the verbose trace."""
        execution = ExecutionSuccess(raw_output=RAW, stderr="> GET /items HTTP/2")
        with patch("curl_mcp.tools.handlers.execute", mock_execute(execution)):
            result = asyncio.run(
                run_operation(
                    "auth_test",
                    {"url": URL, "auth": {"type": "api_key", "key": "K", "value": "V"}},
                    test_settings,
                )
            )

        assert result.output.startswith(
            f"Authentication test completed with api_key authentication:\n\n{RAW}"
        )
        assert "> GET /items HTTP/2" in result.output

    def test_auth_test_failure(self, test_settings: Settings) -> None:
        failure = ExecutionFailure(
            kind=FailureKind.EXTERNAL_TOOL_ERROR, message="exit code 28: ", exit_code=28
        )
        with patch("curl_mcp.tools.handlers.execute", mock_execute(failure)):
            result = asyncio.run(
                run_operation(
                    "auth_test",
                    {"url": URL, "auth": {"type": "bearer", "token": "t"}},
                    test_settings,
                )
            )

        assert result.output == "Authentication test failed: exit code 28: "

    def test_custom_output_without_markers(self, test_settings: Settings) -> None:
        """Raw invocations without markers parse to no metadata."""
        execute = mock_execute(ExecutionSuccess(raw_output="HTTP/1.1 200 OK\r\n"))
        with patch("curl_mcp.tools.handlers.execute", execute):
            result = asyncio.run(
                run_operation("curl_custom", {"args": ["-I", URL]}, test_settings)
            )

        assert result.output == "HTTP/1.1 200 OK\r\n"
        assert result.response == ParsedResponse(body="HTTP/1.1 200 OK\r\n")
        execute.assert_awaited_once_with(["-I", URL], None, binary="curl")

    def test_invalid_arguments_raise(self, test_settings: Settings) -> None:
        """Validation errors propagate before anything is executed."""
        execute = mock_execute(ExecutionSuccess(raw_output=""))
        with patch("curl_mcp.tools.handlers.execute", execute):
            with pytest.raises(MalformedAuthDescriptor):
                asyncio.run(
                    run_operation(
                        "http_get",
                        {"url": URL, "auth": {"type": "ntlm"}},
                        test_settings,
                    )
                )
        execute.assert_not_awaited()

    def test_uses_global_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without explicit settings, the environment configures the binary."""
        monkeypatch.setenv("CURL_MCP_CURL_BINARY", "/opt/curl/bin/curl")
        execute = mock_execute(ExecutionSuccess(raw_output=RAW))
        with patch("curl_mcp.tools.handlers.execute", execute):
            asyncio.run(run_operation("http_head", {"url": URL}))

        assert execute.await_args.kwargs["binary"] == "/opt/curl/bin/curl"
