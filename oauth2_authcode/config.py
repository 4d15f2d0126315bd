from collections.abc import Mapping
from typing import Any, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .exceptions import ConfigurationError


class ProviderConfig(BaseModel):
    """Endpoints and client credentials of one OAuth2 provider."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # OAuth Client Configuration
    client_id: str = Field(min_length=1)
    client_secret: Optional[str] = None

    # Provider Endpoints
    auth_uri: Optional[str] = None
    access_token_uri: Optional[str] = None
    user_info_uri: Optional[str] = None

    # Authorization Request Options
    scope: Optional[str] = None
    state: Optional[str] = None
    offline: bool = False

    @field_validator("auth_uri", "access_token_uri", "user_info_uri")
    @classmethod
    def _check_https_uri(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"not a valid URL: {e}") from e
        if url.scheme != "https" or not url.host:
            raise ValueError("must be an absolute https:// URL")
        return value

    @classmethod
    def from_mapping(cls, provider: Union["ProviderConfig", Mapping[str, Any]]) -> "ProviderConfig":
        """Validate a provider descriptor, accepting snake_case or camelCase keys."""
        if isinstance(provider, cls):
            return provider
        try:
            return cls.model_validate(provider)
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(e) from e

    def require(self, *fields: str) -> None:
        """Raise ConfigurationError naming every listed field that is unset or empty."""
        missing = tuple(field for field in fields if not getattr(self, field))
        if missing:
            raise ConfigurationError(
                f"Provider configuration is missing required field(s): {', '.join(missing)}",
                missing,
            )
