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
Factories handing a Provider to Authlib's httpx OAuth2 clients.

Token exchange, PKCE and refresh are performed by Authlib; this module only
wires the provider's endpoints and token model into the client.
"""

from typing import Any

from authlib.common.security import generate_token
from authlib.integrations.httpx_client import AsyncOAuth2Client, OAuth2Client
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

from coreason_azure_oauth.models import AuthorizationRequest, TokenLifetime
from coreason_azure_oauth.provider import Provider
from coreason_azure_oauth.utils.logger import logger

PKCE_METHOD = "S256"


def _client_options(provider: Provider, client_kwargs: dict[str, Any]) -> dict[str, Any]:
    options = dict(client_kwargs)
    options.setdefault("code_challenge_method", PKCE_METHOD)
    # Authlib refreshes expired tokens only when it knows the token endpoint
    if provider.lifetime is TokenLifetime.REFRESH:
        options.setdefault("token_endpoint", str(provider.token_endpoint()))
    return options


def create_client(
    provider: Provider,
    client_id: str,
    client_secret: str | None = None,
    redirect_uri: str | None = None,
    scope: str | None = None,
    instrument: bool = True,
    **client_kwargs: Any,
) -> AsyncOAuth2Client:
    """
    Creates an async OAuth2 client for the given provider.

    Args:
        provider: The provider supplying the endpoints, e.g. ``AZURE_COMMON``.
        client_id: The application (client) ID.
        client_secret: The client secret, if the application is confidential.
        redirect_uri: The redirect URI registered for the application.
        scope: Space separated scopes to request.
        instrument: Attach OpenTelemetry httpx instrumentation. Defaults to True.
        **client_kwargs: Extra Authlib or httpx options (timeout, transport, update_token, ...).

    Returns:
        AsyncOAuth2Client: A client whose ``fetch_token()`` targets the provider's token endpoint.
            The caller owns it and must close it.
    """
    client = AsyncOAuth2Client(
        client_id=client_id,
        client_secret=client_secret,
        redirect_uri=redirect_uri,
        scope=scope,
        **_client_options(provider, client_kwargs),
    )
    if instrument:
        HTTPXClientInstrumentor().instrument_client(client)
    logger.debug(f"Created async OAuth2 client for token endpoint {provider.token_endpoint()}")
    return client


def create_sync_client(
    provider: Provider,
    client_id: str,
    client_secret: str | None = None,
    redirect_uri: str | None = None,
    scope: str | None = None,
    instrument: bool = True,
    **client_kwargs: Any,
) -> OAuth2Client:
    """
    Sync counterpart of :func:`create_client`.
    """
    client = OAuth2Client(
        client_id=client_id,
        client_secret=client_secret,
        redirect_uri=redirect_uri,
        scope=scope,
        **_client_options(provider, client_kwargs),
    )
    if instrument:
        HTTPXClientInstrumentor().instrument_client(client)
    logger.debug(f"Created OAuth2 client for token endpoint {provider.token_endpoint()}")
    return client


def authorization_url(
    client: AsyncOAuth2Client | OAuth2Client,
    provider: Provider,
    **kwargs: Any,
) -> AuthorizationRequest:
    """
    Builds the URL that starts the authorization code flow with PKCE.

    Args:
        client: A client from :func:`create_client` or :func:`create_sync_client`.
        provider: The provider whose authorization endpoint is used.
        **kwargs: Extra query parameters (prompt, login_hint, domain_hint, ...).

    Returns:
        AuthorizationRequest: The URL, state and code verifier. Pass the verifier
            to ``fetch_token(code=..., code_verifier=...)``.
    """
    code_verifier = generate_token(48)
    url, state = client.create_authorization_url(
        str(provider.auth_endpoint()), code_verifier=code_verifier, **kwargs
    )
    return AuthorizationRequest(url=url, state=state, code_verifier=code_verifier)
