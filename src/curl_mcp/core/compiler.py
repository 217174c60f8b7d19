"""Compilation of request descriptors into curl argument lists."""

from __future__ import annotations

from curl_mcp.core.auth import resolve_auth
from curl_mcp.core.types import CompiledCommand, Operation, RequestDescriptor

STATUS_MARKER = "HTTP_CODE:"
ELAPSED_MARKER = "TIME_TOTAL:"

# curl expands the \n escapes itself, so they stay literal here
WRITE_OUT_FORMAT = r"\n\nHTTP_CODE:%{http_code}\nTIME_TOTAL:%{time_total}"

# Operations that never follow redirects
NO_REDIRECT_OPERATIONS: frozenset[Operation] = frozenset(
    {Operation.HTTP_UPLOAD, Operation.AUTH_TEST}
)

# Operations that need an explicit -X flag
EXPLICIT_METHOD_OPERATIONS: frozenset[Operation] = frozenset(
    {Operation.HTTP_POST, Operation.HTTP_PUT, Operation.HTTP_DELETE}
)

# Methods that may carry a request body
BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT"})


def compile_command(descriptor: RequestDescriptor) -> CompiledCommand:
    """Compile a request descriptor into an ordered curl argument list.

    The order is fixed: output-format flags first, then the download
    destination, method, redirect, TLS and timeout flags, authentication,
    body, multipart file field, caller headers and finally the URL.
    CURL_CUSTOM descriptors compile to their raw arguments unchanged.

    Args:
        descriptor: The request to compile.

    Returns:
        A new list of arguments, without the curl executable itself.
    """
    if descriptor.operation is Operation.CURL_CUSTOM:
        return list(descriptor.raw_args)

    args: CompiledCommand = ["-s", "-w", WRITE_OUT_FORMAT]
    if descriptor.operation is Operation.AUTH_TEST:
        args.append("-v")

    if descriptor.operation is Operation.HTTP_DOWNLOAD and descriptor.output_path:
        args.extend(["-o", descriptor.output_path])

    method = descriptor.method
    if method == "HEAD":
        # -I alone makes curl send HEAD; -X HEAD would wait for a body
        args.append("-I")
    elif descriptor.operation in EXPLICIT_METHOD_OPERATIONS:
        args.extend(["-X", method])

    if descriptor.follow_redirects and descriptor.operation not in NO_REDIRECT_OPERATIONS:
        args.append("-L")
    if descriptor.insecure_tls:
        args.append("-k")
    if descriptor.timeout_seconds:
        args.extend(["--max-time", str(descriptor.timeout_seconds)])

    for fragment in resolve_auth(descriptor.auth):
        args.extend(fragment)

    if descriptor.body and method in BODY_METHODS:
        args.extend(["-d", descriptor.body])
        args.extend(["-H", f"Content-Type: {descriptor.content_type}"])

    if descriptor.operation is Operation.HTTP_UPLOAD and descriptor.file_path:
        args.extend(["-F", f"{descriptor.field_name}=@{descriptor.file_path}"])

    for name, value in descriptor.headers.items():
        args.extend(["-H", f"{name}: {value}"])

    if descriptor.url is not None:
        args.append(descriptor.url)

    return args
