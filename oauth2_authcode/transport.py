import logging
from typing import Any, Optional, Union

import httpx

from .exceptions import ConfigurationError, TransportError
from .reply import interpret_reply
from .schemas import HttpMethod, TokenResponse

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _parse_https_uri(uri: str) -> httpx.URL:
    try:
        url = httpx.URL(uri)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigurationError(f"Invalid request URI {uri!r}: {e}", ("uri",)) from e
    if url.scheme != "https" or not url.host:
        raise ConfigurationError(f"Request URI must be an absolute https:// URL, got {uri!r}", ("uri",))
    return url


def _with_query(uri: str, payload: str) -> str:
    if not payload:
        return uri
    separator = "&" if "?" in uri else "?"
    return f"{uri}{separator}{payload}"


async def request(
    uri: str,
    method: Union[HttpMethod, str, None] = HttpMethod.POST,
    payload: str = "",
    interpret_body: bool = False,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> Union[TokenResponse, str]:
    """
    Make one HTTPS request and return the complete response body.

    POST sends ``payload`` as a form-encoded body; GET appends it to the URI as
    the query string. With ``interpret_body`` the body is run through
    ``interpret_reply`` and a ``TokenResponse`` is returned, otherwise the raw
    body text is returned. Non-2xx replies are returned like any other.

    A supplied ``client`` is used as-is and left open; otherwise a client is
    opened for this call only. No timeout applies unless one is given.

    Raises:
        ConfigurationError: If ``uri`` is not an absolute https:// URL or ``method`` is unsupported.
        TransportError: If the request could not be sent or the reply could not be read.
    """
    try:
        method = HttpMethod(str(method or HttpMethod.POST).upper())
    except ValueError as e:
        raise ConfigurationError(f"Unsupported HTTP method {method!r}", ("method",)) from e
    url = _parse_https_uri(uri)

    headers = {"content-type": FORM_CONTENT_TYPE}
    request_kwargs: dict[str, Any] = {"headers": headers}
    if method is HttpMethod.POST:
        body = payload.encode("utf-8")
        headers["content-length"] = str(len(body))
        request_kwargs["content"] = body
        target = uri
    else:
        target = _with_query(uri, payload)
    if timeout is not None:
        request_kwargs["timeout"] = timeout

    logger.debug(f"Issuing {method} request to {url.host}{url.path}")

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned_client:
                response = await owned_client.request(method.value, target, **request_kwargs)
        else:
            response = await client.request(method.value, target, **request_kwargs)
    except httpx.HTTPError as e:
        logger.error(f"{method} request to {url.host}{url.path} failed: {type(e).__name__}: {e}")
        raise TransportError(uri, method.value, f"{type(e).__name__}: {e}") from e

    if response.is_error:
        logger.warning(f"{method} request to {url.host}{url.path} returned status {response.status_code}")
    else:
        logger.debug(f"{method} request to {url.host}{url.path} completed with status {response.status_code}")

    if interpret_body:
        return interpret_reply(response.text)
    return response.text
