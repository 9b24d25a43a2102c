"""
FastAPI dependencies for authentication.

Provides ``get_settings``, ``get_user_repository`` and ``require_token``,
which are used across all routes.  Settings and the repository are built
once at startup and live on ``app.state``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request
from pydantic import ValidationError as PydanticValidationError

from auth.errors import AuthRequiredError, InvalidTokenError
from auth.jwt import verify_token
from config.settings import Settings
from database.repository import UserRepository
from utils.schemas import TokenClaims


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.users


def _token_from_header(authorization: Optional[str]) -> Optional[str]:
    """Second space-separated word of the header, whatever the scheme."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    return parts[1] if len(parts) > 1 and parts[1] else None


async def require_token(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    settings: Settings = Depends(get_settings),
) -> TokenClaims:
    """
    Extract and verify the token, returning its claims.

    401 when the header or token is absent, 400 when verification fails.
    """
    token = _token_from_header(authorization)
    if token is None:
        raise AuthRequiredError()
    payload = verify_token(token, settings.secret, settings.jwt_algorithm)
    try:
        return TokenClaims(**payload)
    except PydanticValidationError as exc:
        raise InvalidTokenError() from exc
