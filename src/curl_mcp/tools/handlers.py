"""Operation handlers: compile, execute and render a tool invocation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from curl_mcp.config import Settings, get_settings
from curl_mcp.core import compile_command, execute, parse_result
from curl_mcp.core.types import (
    ExecutionFailure,
    ExecutionSuccess,
    Operation,
    RequestDescriptor,
)
from curl_mcp.tools.catalog import build_descriptor
from curl_mcp.tools.types import OperationResult, SuccessFormatter

logger = logging.getLogger(__name__)


def format_raw(descriptor: RequestDescriptor, execution: ExecutionSuccess) -> str:
    """Return curl's stdout unchanged."""
    return execution.raw_output


def format_download(descriptor: RequestDescriptor, execution: ExecutionSuccess) -> str:
    return (
        f"File downloaded successfully to: {descriptor.output_path}\n"
        f"{execution.raw_output}"
    )


def format_auth_test(descriptor: RequestDescriptor, execution: ExecutionSuccess) -> str:
    """Render the auth test result, including curl's verbose trace."""
    auth_type = descriptor.auth.type if descriptor.auth else "no"
    output = (
        f"Authentication test completed with {auth_type} authentication:\n\n"
        f"{execution.raw_output}"
    )
    if execution.stderr:
        output += f"\n\nVerbose output:\n{execution.stderr}"
    return output


SUCCESS_FORMATTERS: dict[Operation, SuccessFormatter] = {
    Operation.HTTP_DOWNLOAD: format_download,
    Operation.AUTH_TEST: format_auth_test,
}


def format_failure(descriptor: RequestDescriptor, failure: ExecutionFailure) -> str:
    if descriptor.operation is Operation.AUTH_TEST:
        return f"Authentication test failed: {failure.message}"
    return f"Error: {failure.message}"


async def run_descriptor(
    descriptor: RequestDescriptor,
    settings: Settings | None = None,
) -> OperationResult:
    """Compile and execute a request descriptor.

    Args:
        descriptor: The request to run.
        settings: Optional settings override.

    Returns:
        OperationResult with the text for the caller.
    """
    if settings is None:
        settings = get_settings()

    command = compile_command(descriptor)
    execution = await execute(
        command, descriptor.timeout_seconds, binary=settings.curl_binary
    )

    if isinstance(execution, ExecutionFailure):
        logger.warning(
            f"{descriptor.operation.value} failed ({execution.kind.value}): "
            f"{execution.message}"
        )
        return OperationResult(
            output=format_failure(descriptor, execution), is_error=True
        )

    response = parse_result(execution.raw_output)
    logger.info(
        f"{descriptor.operation.value} {descriptor.url or ''} -> "
        f"HTTP {response.http_status_code} in {response.elapsed_seconds}s"
    )

    formatter = SUCCESS_FORMATTERS.get(descriptor.operation, format_raw)
    return OperationResult(output=formatter(descriptor, execution), response=response)


async def run_operation(
    name: str,
    arguments: Mapping[str, Any] | None,
    settings: Settings | None = None,
) -> OperationResult:
    """Validate tool arguments and run the operation.

    Args:
        name: Tool name.
        arguments: Raw tool arguments.
        settings: Optional settings override.

    Returns:
        OperationResult with the text for the caller.

    Raises:
        ValueError: If the tool is unknown or its arguments are invalid.
    """
    descriptor = build_descriptor(name, arguments)
    return await run_descriptor(descriptor, settings)
