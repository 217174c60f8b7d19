"""Subprocess execution of compiled curl commands."""

from __future__ import annotations

import asyncio
import logging
import shlex
from collections.abc import Sequence

from curl_mcp.core.types import (
    ExecutionFailure,
    ExecutionResult,
    ExecutionSuccess,
    FailureKind,
)

logger = logging.getLogger(__name__)

# Read size for the stdout/stderr pipes
CHUNK_SIZE = 64 * 1024

DEFAULT_BINARY = "curl"


async def _drain(stream: asyncio.StreamReader | None) -> str:
    """Read a pipe to EOF chunk by chunk and decode it."""
    if stream is None:
        return ""

    chunks: list[bytes] = []
    while True:
        chunk = await stream.read(CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks).decode("utf-8", errors="replace")


async def execute(
    command: Sequence[str],
    timeout_seconds: int | None = None,
    *,
    binary: str = DEFAULT_BINARY,
) -> ExecutionResult:
    """Run the external client with the given arguments.

    The binary is spawned directly, never through a shell. No wall-clock
    limit is enforced here: ``timeout_seconds`` is expected to already be
    part of ``command`` as ``--max-time``, so a client that ignores it
    keeps running.

    Args:
        command: Compiled arguments, without the binary itself.
        timeout_seconds: Timeout the client was asked to honor (logged only).
        binary: Executable to launch.

    Returns:
        ExecutionSuccess with the captured stdout on exit code 0,
        otherwise an ExecutionFailure describing what went wrong.
    """
    argv = [binary, *command]
    logger.debug(f"Executing: {shlex.join(argv)} (client timeout: {timeout_seconds}s)")

    try:
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (OSError, ValueError) as e:
        # ValueError: arguments the OS cannot pass, e.g. embedded NUL bytes
        logger.warning(f"Failed to launch {binary}: {e}")
        return ExecutionFailure(kind=FailureKind.LAUNCH_ERROR, message=str(e))

    stdout, stderr = await asyncio.gather(
        _drain(process.stdout), _drain(process.stderr)
    )
    returncode = await process.wait()

    if returncode == 0:
        logger.debug(f"{binary} finished, {len(stdout)} chars of output")
        return ExecutionSuccess(raw_output=stdout, stderr=stderr)

    logger.warning(f"{binary} exited with code {returncode}")
    return ExecutionFailure(
        kind=FailureKind.EXTERNAL_TOOL_ERROR,
        message=f"exit code {returncode}: {stderr}",
        exit_code=returncode,
    )
