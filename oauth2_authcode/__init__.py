"""
OAuth2 Authorization Code Client Helpers

Stateless helpers for the client side of the OAuth2 authorization code grant:
building the provider redirect URI, exchanging an authorization code or a
refresh token for an access token, and fetching user info with a bearer token.
"""

from .config import ProviderConfig
from .exceptions import ConfigurationError, OAuthClientError, TransportError
from .oauth_service import authenticate_by_code, authenticate_by_token, create_redirect, get_user_info
from .query import build_query_string
from .reply import interpret_reply
from .schemas import GrantType, HttpMethod, TokenResponse
from .transport import request

__all__ = [
    "create_redirect",
    "authenticate_by_code",
    "authenticate_by_token",
    "get_user_info",
    "ProviderConfig",
    "TokenResponse",
    "GrantType",
    "HttpMethod",
    "build_query_string",
    "interpret_reply",
    "request",
    "OAuthClientError",
    "ConfigurationError",
    "TransportError",
]
