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
The Provider capability consumed by the OAuth2 client factories.
"""

from typing import Protocol, runtime_checkable

from pydantic import HttpUrl

from coreason_azure_oauth.models import TokenLifetime, TokenType


@runtime_checkable
class Provider(Protocol):
    """
    Where to send a user for authorization and where to exchange a code for a token.
    """

    lifetime: TokenLifetime
    token_type: TokenType

    def auth_endpoint(self) -> HttpUrl: ...

    def token_endpoint(self) -> HttpUrl: ...
