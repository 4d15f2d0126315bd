from __future__ import annotations

from pydantic import ValidationError


class OAuthClientError(Exception):
    """Base class for errors raised by the OAuth2 client helpers."""


class ConfigurationError(OAuthClientError, ValueError):
    """Raised when a provider descriptor cannot serve the requested operation."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        self.fields = fields
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, validation_error: ValidationError) -> ConfigurationError:
        fields: list[str] = []
        error_messages: list[str] = []
        for error in validation_error.errors():
            field = ".".join(map(str, error["loc"]))
            fields.append(field)
            error_messages.append(f"  - Field `{field}`: {error['msg']}. Received: {repr(error.get('input'))}")

        helpful_message = "Invalid OAuth2 provider configuration:\n" + "\n".join(error_messages)
        return cls(helpful_message, tuple(fields))


class TransportError(OAuthClientError):
    """Raised when the HTTP round-trip to the provider fails before a reply is read."""

    def __init__(self, uri: str, method: str, reason: str) -> None:
        self.uri = uri
        self.method = method
        super().__init__(f"{method} {uri} failed: {reason}")
