from enum import StrEnum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class GrantType(StrEnum):
    AUTHORIZATION_CODE = "authorization_code"
    REFRESH_TOKEN = "refresh_token"


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"


class TokenResponse(BaseModel):
    """Normalized token endpoint reply. None marks a field the provider did not send."""

    model_config = ConfigDict(frozen=True)

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires: Optional[Union[int, float]] = None
