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
Data models for the coreason-azure-oauth package.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, SecretStr, field_validator


class TokenType(StrEnum):
    BEARER = "Bearer"


class TokenLifetime(StrEnum):
    """
    How the OAuth2 client treats token expiry.

    STATIC tokens never expire, EXPIRING tokens expire without a refresh token,
    REFRESH tokens expire and are renewed with a refresh token.
    """

    STATIC = "static"
    EXPIRING = "expiring"
    REFRESH = "refresh"


class ProviderConfig(BaseModel):
    """
    Immutable pair of OAuth2 endpoints plus the token model the client should use.

    This model is frozen so a single instance can be shared by any number of
    clients and threads.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "auth_uri": "https://login.microsoftonline.com/common/oauth2/v2.0/authorize",
                "token_uri": "https://login.microsoftonline.com/common/oauth2/v2.0/token",
                "lifetime": "refresh",
                "token_type": "Bearer",
            }
        },
    )

    auth_uri: HttpUrl = Field(..., description="Where the user agent is redirected to authenticate and authorize.")
    token_uri: HttpUrl = Field(..., description="Where an authorization code or refresh token is exchanged.")
    lifetime: TokenLifetime = Field(
        default=TokenLifetime.REFRESH, description="Token lifetime model the OAuth2 client applies."
    )
    token_type: TokenType = Field(default=TokenType.BEARER, description="Token type issued by the token endpoint.")

    @field_validator("auth_uri", "token_uri", mode="after")
    @classmethod
    def validate_https(cls, v: HttpUrl) -> HttpUrl:
        """
        Ensures endpoints are absolute HTTPS URLs.
        """
        if v.scheme != "https" or not v.host:
            raise ValueError(f"Endpoint must be an absolute HTTPS URL, got {v}")
        return v

    def auth_endpoint(self) -> HttpUrl:
        """Returns the authorization endpoint."""
        return self.auth_uri

    def token_endpoint(self) -> HttpUrl:
        """Returns the token endpoint."""
        return self.token_uri


class AuthorizationRequest(BaseModel):
    """
    Where to send the user to start the authorization code flow.

    Attributes:
        url (str): The authorization URL including client_id, state and PKCE challenge.
        state (str): The anti-CSRF state to compare with the redirect callback.
        code_verifier (SecretStr): The PKCE verifier to send with the token request.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    state: str
    code_verifier: SecretStr
