from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError

from teamtasks.auth import INVALID_TOKEN_MESSAGE, decode_access_token
from teamtasks.config import Settings
from teamtasks.errors import UnauthenticatedError
from teamtasks.permissions import Action, Principal, authorize

# auto_error=False so a missing or non-bearer header gets our own 401 message
security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """Decode the bearer token into the caller's id and role."""
    if not credentials or not credentials.credentials:
        raise UnauthenticatedError(INVALID_TOKEN_MESSAGE)

    claims = decode_access_token(credentials.credentials, settings)
    try:
        return Principal(id=claims["sub"], role=claims["role"])
    except PydanticValidationError:
        raise UnauthenticatedError(INVALID_TOKEN_MESSAGE)


def require(action: Action) -> Callable[..., Principal]:
    """Dependency factory: an authenticated principal allowed to perform ``action``."""

    def _dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        return authorize(principal, action)

    return _dependency
