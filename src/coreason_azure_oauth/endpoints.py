# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azure_oauth

"""
URL templates and strict endpoint parsing for the Microsoft identity platform.
"""

from typing import Final

from pydantic import HttpUrl, TypeAdapter, ValidationError

from coreason_azure_oauth.exceptions import MalformedEndpointError
from coreason_azure_oauth.utils.logger import logger

AUTHORITY_HOST: Final = "https://login.microsoftonline.com"

AUTHORITY_TEMPLATE: Final = AUTHORITY_HOST + "/{tenant}"
AUTHORIZE_TEMPLATE: Final = AUTHORITY_TEMPLATE + "/oauth2/v2.0/authorize"
TOKEN_TEMPLATE: Final = AUTHORITY_TEMPLATE + "/oauth2/v2.0/token"
DEVICE_CODE_TEMPLATE: Final = AUTHORITY_TEMPLATE + "/oauth2/v2.0/devicecode"
LOGOUT_TEMPLATE: Final = AUTHORITY_TEMPLATE + "/oauth2/v2.0/logout"
DISCOVERY_TEMPLATE: Final = AUTHORITY_TEMPLATE + "/v2.0/.well-known/openid-configuration"

# Characters that would move the identifier out of its single path segment.
_SEGMENT_DELIMITERS: Final = frozenset("/?#")

_http_url: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)


def parse_endpoint(raw: str) -> HttpUrl:
    """
    Parses an endpoint string into an absolute HTTPS URL.

    The string must already be in canonical form: if the URL parser would
    strip, percent-encode or otherwise rewrite any part of it, the string is
    rejected rather than silently changed.

    Args:
        raw: The candidate endpoint URL.

    Returns:
        HttpUrl: The parsed URL. ``str()`` of it equals ``raw``.

    Raises:
        MalformedEndpointError: If the string is not a strict absolute HTTPS URL.
    """
    if any(ch.isspace() or not ch.isprintable() for ch in raw):
        raise MalformedEndpointError(f"Endpoint contains whitespace or control characters: {raw!r}")

    try:
        url = _http_url.validate_python(raw)
    except ValidationError as e:
        raise MalformedEndpointError(f"Endpoint is not a valid URL: {raw!r}") from e

    if url.scheme != "https" or not url.host:
        raise MalformedEndpointError(f"Endpoint must be an absolute HTTPS URL: {raw!r}")

    if str(url) != raw:
        raise MalformedEndpointError(f"Endpoint is not in canonical form: {raw!r} parses as {str(url)!r}")

    return url


def check_tenant_segment(tenant: str) -> str:
    """
    Ensures a tenant identifier fills exactly one non-empty path segment.

    The GUID or domain form itself is not checked; the identity platform is
    the authority on which tenants exist.

    Raises:
        MalformedEndpointError: If the identifier is empty or contains '/', '?' or '#'.
    """
    if not tenant:
        raise MalformedEndpointError("Tenant identifier must not be empty")

    found = _SEGMENT_DELIMITERS.intersection(tenant)
    if found:
        raise MalformedEndpointError(
            f"Tenant identifier {tenant!r} contains URL delimiters: {''.join(sorted(found))!r}"
        )
    return tenant


def tenant_endpoint(template: str, tenant: str) -> HttpUrl:
    """
    Substitutes a tenant identifier into a URL template and parses the result.

    Args:
        template: One of the ``*_TEMPLATE`` constants.
        tenant: The tenant path segment, substituted verbatim.

    Returns:
        HttpUrl: The parsed endpoint.

    Raises:
        MalformedEndpointError: If the identifier or the resulting URL is invalid.
    """
    try:
        return parse_endpoint(template.format(tenant=check_tenant_segment(tenant)))
    except MalformedEndpointError as e:
        logger.warning(f"Rejected tenant identifier {tenant!r}: {e}")
        raise
