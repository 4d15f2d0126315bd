import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Optional, TypeVar, Union

import httpx

from .config import ProviderConfig
from .exceptions import ConfigurationError, TransportError
from .query import build_query_string
from .schemas import GrantType, HttpMethod, TokenResponse
from .transport import request

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

T = TypeVar("T")

Provider = Union[ProviderConfig, Mapping[str, Any]]
Callback = Callable[[Any], Union[Awaitable[None], None]]


def _require_arguments(**arguments: Any) -> None:
    missing = tuple(name for name, value in arguments.items() if not value)
    if missing:
        raise ConfigurationError(f"Missing required argument(s): {', '.join(missing)}", missing)


async def _deliver(
    outcome: Awaitable[T], callback: Optional[Callback]
) -> Union[T, TransportError]:
    """
    Await a request and hand its outcome to ``callback`` exactly once.

    Without a callback the result is returned and TransportError propagates.
    With one, the callback receives either the result or the TransportError,
    and the same object is returned.
    """
    if callback is None:
        return await outcome

    result: Union[T, TransportError]
    try:
        result = await outcome
    except TransportError as e:
        result = e

    delivered = callback(result)
    if inspect.isawaitable(delivered):
        await delivered
    return result


def create_redirect(provider: Provider, redirect_uri: str, locale: Optional[str] = None) -> str:
    """
    Build the provider authorization URL the user agent should be sent to.

    Args:
        provider: Provider descriptor, a ProviderConfig or a mapping.
        redirect_uri: URI the provider redirects back to with the authorization code.
        locale: Language of the provider's login page. Falls back to "en".

    Returns:
        ``auth_uri`` followed by the encoded authorization request parameters.

    Raises:
        ConfigurationError: If the descriptor is invalid, has no ``auth_uri``, or
            ``redirect_uri`` is empty.
    """
    config = ProviderConfig.from_mapping(provider)
    config.require("auth_uri")
    _require_arguments(redirect_uri=redirect_uri)

    parameters: dict[str, Any] = {
        "client_id": config.client_id,
        "display": "page",
        "locale": locale or DEFAULT_LOCALE,
        "redirect_uri": redirect_uri,
        "response_type": "code",
    }

    if config.offline:
        parameters["access_type"] = "offline"

    if config.scope:
        parameters["scope"] = config.scope

    if config.state:
        parameters["state"] = config.state

    return f"{config.auth_uri}?{build_query_string(parameters)}"


async def _exchange(
    config: ProviderConfig,
    parameters: dict[str, Any],
    callback: Optional[Callback],
    client: Optional[httpx.AsyncClient],
) -> Union[TokenResponse, TransportError]:
    if config.scope:
        parameters["scope"] = config.scope

    if config.state:
        parameters["state"] = config.state

    logger.debug(f"Requesting {parameters['grant_type']} grant from {config.access_token_uri}")
    return await _deliver(
        request(
            config.access_token_uri,
            HttpMethod.POST,
            build_query_string(parameters),
            interpret_body=True,
            client=client,
        ),
        callback,
    )


async def authenticate_by_code(
    provider: Provider,
    redirect_uri: str,
    code: str,
    callback: Optional[Callback] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Union[TokenResponse, TransportError]:
    """
    Exchange an authorization code for an access token.

    Raises:
        ConfigurationError: If ``access_token_uri`` or ``client_secret`` is missing,
            or a credential argument is empty.
        TransportError: On network failure, unless a callback is given.
    """
    config = ProviderConfig.from_mapping(provider)
    config.require("access_token_uri", "client_secret")
    _require_arguments(redirect_uri=redirect_uri, code=code)

    parameters: dict[str, Any] = {
        "client_id": config.client_id,
        "client_secret": config.client_secret,
        "redirect_uri": redirect_uri,
        "code": code,
        "grant_type": GrantType.AUTHORIZATION_CODE,
    }
    return await _exchange(config, parameters, callback, client)


async def authenticate_by_token(
    provider: Provider,
    refresh_token: str,
    callback: Optional[Callback] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Union[TokenResponse, TransportError]:
    """
    Request a new access token with a refresh token.

    Raises:
        ConfigurationError: If ``access_token_uri`` or ``client_secret`` is missing,
            or a credential argument is empty.
        TransportError: On network failure, unless a callback is given.
    """
    config = ProviderConfig.from_mapping(provider)
    config.require("access_token_uri", "client_secret")
    _require_arguments(refresh_token=refresh_token)

    parameters: dict[str, Any] = {
        "client_id": config.client_id,
        "client_secret": config.client_secret,
        "refresh_token": refresh_token,
        "grant_type": GrantType.REFRESH_TOKEN,
    }
    return await _exchange(config, parameters, callback, client)


async def get_user_info(
    provider: Provider,
    access_token: str,
    callback: Optional[Callback] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Union[str, TransportError]:
    """Fetch the provider's user info document. The body is returned as received, unparsed."""
    config = ProviderConfig.from_mapping(provider)
    config.require("user_info_uri")
    _require_arguments(access_token=access_token)

    parameters = {"access_token": access_token}

    return await _deliver(
        request(
            config.user_info_uri,
            HttpMethod.GET,
            build_query_string(parameters),
            client=client,
        ),
        callback,
    )
