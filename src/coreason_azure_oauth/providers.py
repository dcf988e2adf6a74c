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
Azure Active Directory (Microsoft identity platform v2.0) providers.

Azure exposes one set of endpoints per audience. Pick the provider matching the
accounts you want to sign in:

* ``AZURE_COMMON``: personal Microsoft accounts and work or school accounts.
* ``AZURE_ORGANIZATION``: work or school accounts only.
* ``AZURE_CONSUMER``: personal Microsoft accounts only.
* ``AzureTenant.new(tenant_id)``: accounts of a single tenant.
"""

from enum import StrEnum
from typing import Final, Literal

from pydantic import Field, HttpUrl, model_validator

from coreason_azure_oauth.endpoints import (
    AUTHORITY_TEMPLATE,
    AUTHORIZE_TEMPLATE,
    DEVICE_CODE_TEMPLATE,
    DISCOVERY_TEMPLATE,
    LOGOUT_TEMPLATE,
    TOKEN_TEMPLATE,
    check_tenant_segment,
    parse_endpoint,
    tenant_endpoint,
)
from coreason_azure_oauth.exceptions import MalformedEndpointError
from coreason_azure_oauth.models import ProviderConfig, TokenLifetime, TokenType
from coreason_azure_oauth.utils.logger import logger


class AzureAudience(StrEnum):
    COMMON = "common"
    ORGANIZATIONS = "organizations"
    CONSUMERS = "consumers"


class AzureProvider(ProviderConfig):
    """
    Endpoints of one Azure AD authority, plus the derived OpenID Connect endpoints.

    Attributes:
        tenant (str): The authority path segment (an audience name or a tenant identifier).
    """

    tenant: str = Field(..., description="Authority path segment, e.g. 'common' or 'contoso.onmicrosoft.com'.")
    lifetime: Literal[TokenLifetime.REFRESH] = TokenLifetime.REFRESH  # type: ignore[assignment]
    token_type: Literal[TokenType.BEARER] = TokenType.BEARER  # type: ignore[assignment]

    @model_validator(mode="after")
    def validate_tenant_endpoints(self) -> "AzureProvider":
        """
        Ensures the endpoints are the ones the tenant segment produces, so the
        derived endpoints always belong to the same authority.

        Raises:
            MalformedEndpointError: If the tenant is invalid or an endpoint belongs to another authority.
        """
        check_tenant_segment(self.tenant)
        for name, template in (("auth_uri", AUTHORIZE_TEMPLATE), ("token_uri", TOKEN_TEMPLATE)):
            expected = tenant_endpoint(template, self.tenant)
            if str(getattr(self, name)) != str(expected):
                raise MalformedEndpointError(
                    f"{name} {getattr(self, name)} does not match tenant {self.tenant!r} (expected {expected})"
                )
        return self

    def authority(self) -> HttpUrl:
        return parse_endpoint(AUTHORITY_TEMPLATE.format(tenant=self.tenant))

    def discovery_endpoint(self) -> HttpUrl:
        """Returns the OpenID Connect metadata document URL."""
        return parse_endpoint(DISCOVERY_TEMPLATE.format(tenant=self.tenant))

    def device_code_endpoint(self) -> HttpUrl:
        """Returns the device authorization endpoint (RFC 8628)."""
        return parse_endpoint(DEVICE_CODE_TEMPLATE.format(tenant=self.tenant))

    def logout_endpoint(self) -> HttpUrl:
        return parse_endpoint(LOGOUT_TEMPLATE.format(tenant=self.tenant))


class AzureTenant(AzureProvider):
    """
    Only users with a work or school account from a specific Azure AD tenant can sign in.

    Either the tenant's GUID or its friendly domain name can be used, e.g.
    ``8eaef023-2b34-4da1-9baa-8bc8c9d6a490`` or ``contoso.onmicrosoft.com``.
    """

    @classmethod
    def new(cls, tenant_id: str) -> "AzureTenant":
        """
        Builds the provider for a single tenant.

        The identifier is substituted verbatim into the endpoint templates. Its
        GUID or domain form is not validated.

        Args:
            tenant_id: The tenant GUID or domain name.

        Returns:
            AzureTenant: A new provider owned by the caller.

        Raises:
            MalformedEndpointError: If the identifier is empty, spans more than one
                path segment, or produces a URL that does not parse strictly.
        """
        auth_uri = tenant_endpoint(AUTHORIZE_TEMPLATE, tenant_id)
        token_uri = tenant_endpoint(TOKEN_TEMPLATE, tenant_id)
        logger.debug(f"Built Azure tenant provider for {tenant_id!r}")
        return cls(
            tenant=tenant_id,
            auth_uri=auth_uri,
            token_uri=token_uri,
            lifetime=TokenLifetime.REFRESH,
            token_type=TokenType.BEARER,
        )


# Users with either a personal or an organisation Microsoft account can sign in.
AZURE_COMMON: Final = AzureProvider(
    tenant=AzureAudience.COMMON.value,
    auth_uri=parse_endpoint("https://login.microsoftonline.com/common/oauth2/v2.0/authorize"),
    token_uri=parse_endpoint("https://login.microsoftonline.com/common/oauth2/v2.0/token"),
)

# Only users with an organisation (work or school) account can sign in.
AZURE_ORGANIZATION: Final = AzureProvider(
    tenant=AzureAudience.ORGANIZATIONS.value,
    auth_uri=parse_endpoint("https://login.microsoftonline.com/organizations/oauth2/v2.0/authorize"),
    token_uri=parse_endpoint("https://login.microsoftonline.com/organizations/oauth2/v2.0/token"),
)

# Only users with a personal account can sign in.
AZURE_CONSUMER: Final = AzureProvider(
    tenant=AzureAudience.CONSUMERS.value,
    auth_uri=parse_endpoint("https://login.microsoftonline.com/consumers/oauth2/v2.0/authorize"),
    token_uri=parse_endpoint("https://login.microsoftonline.com/consumers/oauth2/v2.0/token"),
)

_FIXED_PROVIDERS: Final[dict[str, AzureProvider]] = {
    AzureAudience.COMMON: AZURE_COMMON,
    AzureAudience.ORGANIZATIONS: AZURE_ORGANIZATION,
    AzureAudience.CONSUMERS: AZURE_CONSUMER,
}


def resolve_provider(tenant: str) -> AzureProvider:
    """
    Maps a tenant setting to a provider.

    'common', 'organizations' and 'consumers' (any case) return the shared
    constants; any other value is treated as a tenant identifier.

    Args:
        tenant: The audience name or tenant identifier. Surrounding whitespace is ignored.

    Returns:
        AzureProvider: The matching provider.

    Raises:
        MalformedEndpointError: If a tenant identifier is invalid.
    """
    name = tenant.strip()
    fixed = _FIXED_PROVIDERS.get(name.lower())
    if fixed is not None:
        return fixed
    return AzureTenant.new(name)
