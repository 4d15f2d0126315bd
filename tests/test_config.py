"""
Unit tests for the provider descriptor.
"""

import pytest
from pydantic import ValidationError

from oauth2_authcode import ConfigurationError, ProviderConfig


def test_loads_camel_case_descriptor():
    config = ProviderConfig.from_mapping(
        {
            "clientId": "abc",
            "clientSecret": "shh",
            "authUri": "https://provider.example/auth",
            "accessTokenUri": "https://provider.example/token",
            "userInfoUri": "https://provider.example/me",
            "scope": "email",
            "state": "s",
            "offline": True,
        }
    )

    assert config.client_id == "abc"
    assert config.client_secret == "shh"
    assert config.auth_uri == "https://provider.example/auth"
    assert config.access_token_uri == "https://provider.example/token"
    assert config.user_info_uri == "https://provider.example/me"
    assert config.offline is True


def test_loads_snake_case_descriptor():
    config = ProviderConfig.from_mapping({"client_id": "abc", "auth_uri": "https://provider.example/auth"})

    assert config.client_id == "abc"
    assert config.client_secret is None
    assert config.offline is False


def test_from_mapping_returns_existing_config(provider):
    assert ProviderConfig.from_mapping(provider) is provider


def test_missing_client_id_raises_configuration_error():
    with pytest.raises(ConfigurationError, match="clientId") as exc_info:
        ProviderConfig.from_mapping({"authUri": "https://provider.example/auth"})

    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_empty_client_id_is_rejected():
    with pytest.raises(ConfigurationError):
        ProviderConfig.from_mapping({"clientId": ""})


@pytest.mark.parametrize(
    "uri",
    ["http://provider.example/auth", "provider.example/auth", "/oauth/authorize", "https://"],
)
def test_non_https_uri_is_rejected(uri):
    with pytest.raises(ConfigurationError, match="authUri"):
        ProviderConfig.from_mapping({"clientId": "abc", "authUri": uri})


def test_direct_construction_raises_validation_error():
    with pytest.raises(ValidationError):
        ProviderConfig(client_id="abc", access_token_uri="http://provider.example/token")


def test_require_names_all_missing_fields():
    config = ProviderConfig(client_id="abc")

    with pytest.raises(ConfigurationError) as exc_info:
        config.require("access_token_uri", "client_secret")

    assert exc_info.value.fields == ("access_token_uri", "client_secret")
    assert "access_token_uri, client_secret" in str(exc_info.value)


def test_require_passes_when_fields_are_set(provider):
    provider.require("auth_uri", "access_token_uri", "user_info_uri", "client_secret")


def test_config_is_frozen(provider):
    with pytest.raises(ValidationError):
        provider.client_id = "other"
