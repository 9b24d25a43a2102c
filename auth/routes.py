"""
Auth API routes — register, login.

Route prefix: /auth
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from auth.dependencies import get_settings, get_user_repository
from auth.errors import ConflictError, InternalError, NotFoundError, ValidationError
from auth.jwt import create_token
from auth.password import hash_password_async, verify_password_async
from config.settings import Settings
from database.models import NewUser
from database.repository import DuplicateEmailError, StoreError, UserRepository
from utils.schemas import LoginRequest, MessageResponse, RegisterRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

_Body = TypeVar("_Body", bound=BaseModel)


def _body_or_empty(model: Type[_Body], body: Optional[_Body]) -> _Body:
    """A missing or null body is checked as if it were `{}`."""
    if body is not None:
        return body
    try:
        return model.model_validate({})
    except PydanticValidationError as exc:
        raise ValidationError(exc.errors()[0]["msg"]) from exc


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: Optional[RegisterRequest] = None,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Register a new user."""
    req = _body_or_empty(RegisterRequest, body)
    try:
        # Not atomic with the insert below.
        if await users.find_by_email(req.email) is not None:
            raise ConflictError()

        password_hash = await hash_password_async(req.password, settings.bcrypt_rounds)
        user_id = await users.insert(
            NewUser(name=req.name, email=req.email, password=password_hash)
        )
    except DuplicateEmailError as exc:
        raise ConflictError() from exc
    except StoreError as exc:
        logger.exception("Registration failed for %s", req.email)
        raise InternalError() from exc

    logger.info("Registered user %s (%s)", req.name, user_id)
    return {"msg": "Usuário criado com sucesso"}


@router.post("/login", response_model=TokenResponse)
async def login(
    body: Optional[LoginRequest] = None,
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Login with email + password."""
    req = _body_or_empty(LoginRequest, body)
    try:
        user = await users.find_by_email(req.email)
    except StoreError as exc:
        logger.exception("Login lookup failed for %s", req.email)
        raise InternalError() from exc

    if user is None:
        raise NotFoundError()

    if not user.password or not await verify_password_async(req.password, user.password):
        raise ValidationError("Senha incorreta")

    try:
        token = create_token(user.id, settings.secret, settings.jwt_algorithm)
    except Exception as exc:
        logger.exception("Token signing failed for user %s", user.id)
        raise InternalError() from exc

    logger.info("Login: %s (%s)", user.name, user.id)
    return {"msg": "Autenticação realizada com sucesso", "token": token}
