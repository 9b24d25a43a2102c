"""
Public and protected API routes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from auth.dependencies import get_settings, get_user_repository, require_token
from auth.errors import ForbiddenError, InternalError, NotFoundError
from config.settings import Settings
from database.repository import StoreError, UserRepository
from utils.schemas import MessageResponse, TokenClaims, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=MessageResponse)
async def welcome() -> Dict[str, Any]:
    return {"msg": "Bem vindo a nossa API"}


@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    claims: TokenClaims = Depends(require_token),
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Fetch a user by id, without the password.

    Any valid token may read any user unless
    ``restrict_user_lookup_to_owner`` is set.
    """
    if settings.restrict_user_lookup_to_owner and claims.id != user_id:
        raise ForbiddenError()

    try:
        user = await users.find_by_id(user_id)
    except StoreError as exc:
        logger.exception("User lookup failed for %s", user_id)
        raise InternalError() from exc

    if user is None:
        raise NotFoundError()

    return {"user": user.to_public()}
