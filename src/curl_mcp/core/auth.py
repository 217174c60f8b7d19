"""Translation of authentication descriptors into curl arguments."""

from __future__ import annotations

from curl_mcp.core.types import (
    ApiKeyAuth,
    AuthDescriptor,
    BasicAuth,
    BearerAuth,
    CustomAuth,
    DigestAuth,
    OAuth2Auth,
)

# Rendering of a missing bearer/oauth2 token inside the header value
UNDEFINED = "undefined"

ArgumentFragment = tuple[str, ...]


def resolve_auth(auth: AuthDescriptor | None) -> list[ArgumentFragment]:
    """Resolve an authentication descriptor into curl argument fragments.

    Descriptors missing a required sub-field contribute nothing. A bearer or
    oauth2 descriptor without a token still emits its header, with the token
    rendered as ``undefined``.

    Args:
        auth: The authentication descriptor, or None.

    Returns:
        Argument fragments in the order they must appear on the command line.

    Examples:
        >>> resolve_auth(BearerAuth(token="abc"))
        [('-H', 'Authorization: Bearer abc')]
        >>> resolve_auth(BasicAuth(username="u"))
        []
        >>> resolve_auth(None)
        []
    """
    if auth is None:
        return []

    if isinstance(auth, (BearerAuth, OAuth2Auth)):
        token = auth.token if auth.token is not None else UNDEFINED
        return [("-H", f"Authorization: Bearer {token}")]

    if isinstance(auth, BasicAuth):
        if auth.username and auth.password:
            return [("-u", f"{auth.username}:{auth.password}")]
        return []

    if isinstance(auth, DigestAuth):
        if auth.username and auth.password:
            return [("--digest",), ("-u", f"{auth.username}:{auth.password}")]
        return []

    if isinstance(auth, ApiKeyAuth):
        if auth.key and auth.value:
            return [("-H", f"{auth.key}: {auth.value}")]
        return []

    if isinstance(auth, CustomAuth):
        if auth.header:
            return [("-H", auth.header)]
        return []

    return []
