import json
import logging
from typing import Any, Optional, Union

from .schemas import TokenResponse

logger = logging.getLogger(__name__)


def _as_token(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _as_seconds(value: Any) -> Optional[Union[int, float]]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        for cast in (int, float):
            try:
                return cast(value)
            except ValueError:
                continue
    return None


def interpret_reply(body: Union[str, bytes, None]) -> TokenResponse:
    """
    Extract the token fields from a token endpoint reply.

    The body is parsed as JSON when possible; anything else is read as an empty
    document, so the result degrades to all-absent fields instead of raising.
    Fields are applied in a fixed order and later ones overwrite earlier ones:

    - ``access_token`` -> ``access_token``
    - ``refresh_token`` -> ``refresh_token``
    - ``state`` -> ``refresh_token`` (the echoed state replaces a refresh token)
    - ``expires`` -> ``expires``
    - ``expires_in`` -> ``expires``

    Falsy source values are ignored.
    """
    try:
        document = json.loads(body) if body else {}
    except (TypeError, ValueError, RecursionError):
        logger.warning("Token reply is not valid JSON, no token fields extracted")
        document = {}

    if not isinstance(document, dict):
        document = {}

    fields: dict[str, Any] = {"access_token": None, "refresh_token": None, "expires": None}

    if document.get("access_token"):
        fields["access_token"] = _as_token(document["access_token"])
    if document.get("refresh_token"):
        fields["refresh_token"] = _as_token(document["refresh_token"])
    # Known quirk: the state echo overwrites a real refresh token.
    if document.get("state"):
        fields["refresh_token"] = _as_token(document["state"])
    if document.get("expires"):
        fields["expires"] = _as_seconds(document["expires"])
    if document.get("expires_in"):
        fields["expires"] = _as_seconds(document["expires_in"])

    return TokenResponse(**fields)
