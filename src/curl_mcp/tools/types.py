"""Type definitions for operation handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from curl_mcp.core.types import (
    ExecutionSuccess,
    ParsedResponse,
    RequestDescriptor,
)


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Result of an operation invocation.

    Attributes:
        output: Text returned to the MCP client.
        is_error: Whether curl failed to run or exited nonzero.
        response: Parsed status markers of a successful execution.
    """

    output: str
    is_error: bool = False
    response: ParsedResponse | None = None


class SuccessFormatter(Protocol):
    """Protocol for rendering a successful execution as tool output."""

    def __call__(
        self, descriptor: RequestDescriptor, execution: ExecutionSuccess
    ) -> str:
        """Return the text shown to the caller."""
        ...
