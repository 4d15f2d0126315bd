"""
Shared test configuration and fixtures.
"""

import pytest

from oauth2_authcode import ProviderConfig


@pytest.fixture
def provider() -> ProviderConfig:
    """Provider descriptor with only the required fields for every operation."""
    return ProviderConfig(
        client_id="client-123",
        client_secret="s3cr3t",
        auth_uri="https://provider.example/oauth/authorize",
        access_token_uri="https://provider.example/oauth/token",
        user_info_uri="https://provider.example/userinfo",
    )


@pytest.fixture
def full_provider(provider: ProviderConfig) -> ProviderConfig:
    """Provider descriptor with scope, state and offline access set."""
    return provider.model_copy(update={"scope": "email profile", "state": "xyz/123", "offline": True})
