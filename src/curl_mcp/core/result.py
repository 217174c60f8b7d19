"""Parsing of the status markers appended to curl output."""

from __future__ import annotations

from curl_mcp.core.compiler import ELAPSED_MARKER, STATUS_MARKER
from curl_mcp.core.types import ParsedResponse


def _marker_value(raw_output: str, position: int, marker: str) -> str:
    """Return the text following a marker up to the end of its line."""
    start = position + len(marker)
    end = raw_output.find("\n", start)
    if end == -1:
        end = len(raw_output)
    return raw_output[start:end].strip()


def _to_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


def _to_float(value: str) -> float | None:
    try:
        return float(value)
    except ValueError:
        return None


def parse_result(raw_output: str) -> ParsedResponse:
    """Split raw curl output into body, status code and elapsed time.

    The marker block is written by curl after the body, so the last
    occurrence of each marker is used. Malformed marker values leave the
    corresponding field unset.

    Args:
        raw_output: Captured stdout of a successful execution.

    Returns:
        ParsedResponse with the body preceding the marker block.

    Examples:
        >>> parse_result("ok\\n\\nHTTP_CODE:200\\nTIME_TOTAL:0.42")
        ParsedResponse(body='ok\\n\\n', http_status_code=200, elapsed_seconds=0.42)
        >>> parse_result("plain")
        ParsedResponse(body='plain', http_status_code=None, elapsed_seconds=None)
    """
    status_pos = raw_output.rfind(STATUS_MARKER)
    elapsed_pos = raw_output.rfind(ELAPSED_MARKER)

    positions = [pos for pos in (status_pos, elapsed_pos) if pos != -1]
    if not positions:
        return ParsedResponse(body=raw_output)

    status_code = None
    if status_pos != -1:
        status_code = _to_int(_marker_value(raw_output, status_pos, STATUS_MARKER))

    elapsed = None
    if elapsed_pos != -1:
        elapsed = _to_float(_marker_value(raw_output, elapsed_pos, ELAPSED_MARKER))

    return ParsedResponse(
        body=raw_output[: min(positions)],
        http_status_code=status_code,
        elapsed_seconds=elapsed,
    )
