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
Configuration for the coreason-azure-oauth package.
"""

from typing import Any
from urllib.parse import urlparse

from authlib.integrations.httpx_client import AsyncOAuth2Client, OAuth2Client
from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from coreason_azure_oauth.client import create_client, create_sync_client
from coreason_azure_oauth.providers import AzureProvider, resolve_provider

_LOOPBACK_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


class CoreasonAzureOAuthConfig(BaseSettings):
    """
    Configuration settings for coreason-azure-oauth.

    Attributes:
        tenant (str): 'common', 'organizations', 'consumers', or a tenant GUID or domain.
        client_id (str): The application (client) ID registered in Azure AD.
        client_secret (SecretStr | None): The client secret for confidential applications.
        redirect_uri (str | None): The redirect URI registered for the application.
        scope (str): Space separated scopes to request.
        http_timeout (float): Timeout in seconds for token endpoint requests.
    """

    model_config = SettingsConfigDict(
        env_prefix="COREASON_AZURE_",
        case_sensitive=False,
    )

    unsafe_local_dev: bool = False
    tenant: str = "common"
    client_id: str
    client_secret: SecretStr | None = None
    redirect_uri: str | None = None
    scope: str = "openid profile offline_access"
    http_timeout: float = Field(default=10.0, gt=0, description="Timeout in seconds for all IdP network operations.")

    @field_validator("tenant")
    @classmethod
    def validate_tenant(cls, v: str) -> str:
        """
        Normalizes the tenant and ensures it yields valid endpoints.

        Raises:
            ValueError: If the tenant identifier cannot be substituted into the endpoints.
        """
        return resolve_provider(v).tenant

    @field_validator("redirect_uri", mode="after")
    @classmethod
    def validate_redirect_https(cls, v: str | None, info: ValidationInfo) -> str | None:
        """
        Ensures the redirect URI uses HTTPS unless it targets the loopback interface
        or local development is explicitly enabled.
        """
        if v is None:
            return v

        parsed = urlparse(v)
        if parsed.scheme == "https":
            return v
        if parsed.scheme == "http" and (
            parsed.hostname in _LOOPBACK_HOSTS or info.data.get("unsafe_local_dev", False)
        ):
            return v
        raise ValueError("HTTPS is required for redirect_uri. Use a loopback address or 'unsafe_local_dev=True'.")

    def provider(self) -> AzureProvider:
        return resolve_provider(self.tenant)

    def _client_args(self) -> dict[str, Any]:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret.get_secret_value() if self.client_secret else None,
            "redirect_uri": self.redirect_uri,
            "scope": self.scope,
            "timeout": self.http_timeout,
        }

    def create_client(self, **client_kwargs: Any) -> AsyncOAuth2Client:
        """Creates an async OAuth2 client for the configured tenant."""
        return create_client(self.provider(), **self._client_args(), **client_kwargs)

    def create_sync_client(self, **client_kwargs: Any) -> OAuth2Client:
        """Creates a sync OAuth2 client for the configured tenant."""
        return create_sync_client(self.provider(), **self._client_args(), **client_kwargs)
