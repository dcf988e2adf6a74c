# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azure_oauth

import pytest
from pydantic import ValidationError

from coreason_azure_oauth.models import AuthorizationRequest, ProviderConfig, TokenLifetime, TokenType
from coreason_azure_oauth.provider import Provider
from coreason_azure_oauth.providers import AZURE_COMMON, AzureTenant

AUTH = "https://idp.example.com/oauth2/authorize"
TOKEN = "https://idp.example.com/oauth2/token"


def test_provider_config_defaults() -> None:
    config = ProviderConfig(auth_uri=AUTH, token_uri=TOKEN)
    assert str(config.auth_endpoint()) == AUTH
    assert str(config.token_endpoint()) == TOKEN
    assert config.lifetime is TokenLifetime.REFRESH
    assert config.token_type is TokenType.BEARER
    assert isinstance(config, Provider)


def test_provider_config_requires_https() -> None:
    with pytest.raises(ValidationError, match="HTTPS"):
        ProviderConfig(auth_uri="http://idp.example.com/authorize", token_uri=TOKEN)


def test_provider_config_rejects_garbage() -> None:
    with pytest.raises(ValidationError):
        ProviderConfig(auth_uri="not a url", token_uri=TOKEN)


def test_provider_config_forbids_extra_fields() -> None:
    with pytest.raises(ValidationError):
        ProviderConfig(auth_uri=AUTH, token_uri=TOKEN, scope="openid")  # type: ignore[call-arg]


class TestImmutability:
    def test_assignment_blocked(self) -> None:
        with pytest.raises(ValidationError):
            AZURE_COMMON.auth_uri = TOKEN  # type: ignore[misc]

        tenant = AzureTenant.new("contoso.onmicrosoft.com")
        with pytest.raises(ValidationError):
            tenant.tenant = "fabrikam.com"  # type: ignore[misc]

    def test_copy_on_write(self) -> None:
        config = ProviderConfig(auth_uri=AUTH, token_uri=TOKEN)
        updated = config.model_copy(update={"lifetime": TokenLifetime.EXPIRING})
        assert updated.lifetime is TokenLifetime.EXPIRING
        assert config.lifetime is TokenLifetime.REFRESH

    def test_usable_as_dict_key(self) -> None:
        registry = {AZURE_COMMON: "common", AzureTenant.new("fabrikam.com"): "fabrikam"}
        assert registry[AzureTenant.new("fabrikam.com")] == "fabrikam"


def test_token_enums_are_strings() -> None:
    assert TokenType.BEARER == "Bearer"
    assert TokenLifetime.REFRESH == "refresh"


def test_authorization_request_hides_verifier() -> None:
    request = AuthorizationRequest(url=AUTH, state="xyz", code_verifier="secret-verifier")
    assert "secret-verifier" not in repr(request)
    assert request.code_verifier.get_secret_value() == "secret-verifier"
