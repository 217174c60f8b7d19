"""Errors raised when tool arguments are rejected."""

from __future__ import annotations


class InvalidToolArguments(ValueError):
    """Tool arguments failed schema validation."""


class MalformedAuthDescriptor(InvalidToolArguments):
    """The auth configuration names an unknown authentication type."""


class RequiredFieldMissing(InvalidToolArguments):
    """A required tool argument was not supplied."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Missing required argument: {field}")


class OperationFailed(RuntimeError):
    """curl could not be launched or exited nonzero.

    Raised at the MCP boundary so the client receives an error result whose
    text is the rendered failure message.
    """
