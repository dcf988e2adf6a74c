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
Azure Active Directory (OpenID Connect) provider configuration for Authlib OAuth2 clients.
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .client import authorization_url, create_client, create_sync_client
from .config import CoreasonAzureOAuthConfig
from .exceptions import CoreasonAzureOAuthError, MalformedEndpointError
from .models import AuthorizationRequest, ProviderConfig, TokenLifetime, TokenType
from .provider import Provider
from .providers import (
    AZURE_COMMON,
    AZURE_CONSUMER,
    AZURE_ORGANIZATION,
    AzureAudience,
    AzureProvider,
    AzureTenant,
    resolve_provider,
)

__all__ = [
    "AZURE_COMMON",
    "AZURE_CONSUMER",
    "AZURE_ORGANIZATION",
    "AuthorizationRequest",
    "AzureAudience",
    "AzureProvider",
    "AzureTenant",
    "CoreasonAzureOAuthConfig",
    "CoreasonAzureOAuthError",
    "MalformedEndpointError",
    "Provider",
    "ProviderConfig",
    "TokenLifetime",
    "TokenType",
    "authorization_url",
    "create_client",
    "create_sync_client",
    "resolve_provider",
]
