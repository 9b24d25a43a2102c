"""
Pydantic schemas for the request and response bodies of the API.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError


def _require(value: Optional[str], error_type: str, msg: str) -> None:
    if not value:
        raise PydanticCustomError(error_type, msg)


# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseModel):
    """
    Body of ``POST /auth/register``.

    Fields default to ``None`` so that a missing field reaches the presence
    checks below, which run in a fixed order and stop at the first failure.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("confirmpassword", "confirmPassword", "confirm_password"),
    )

    @model_validator(mode="after")
    def _check_fields(self) -> "RegisterRequest":
        _require(self.name, "name_required", "Nome é obrigatório")
        _require(self.email, "email_required", "Email é obrigatório")
        _require(self.password, "password_required", "Senha é obrigatório")
        if self.password != self.confirm_password:
            raise PydanticCustomError("password_mismatch", "As senhas não conferem")
        return self


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    @model_validator(mode="after")
    def _check_fields(self) -> "LoginRequest":
        _require(self.email, "email_required", "Email é obrigatório")
        _require(self.password, "password_required", "Senha é obrigatório")
        return self


# ═══════════════════════════════════════════════════════════════════════════════
# Responses
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    msg: str


class TokenResponse(MessageResponse):
    token: str


class UserPublic(BaseModel):
    """A user as returned to clients. Never carries the password."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: str


class UserResponse(BaseModel):
    user: UserPublic


class TokenClaims(BaseModel):
    """Decoded claims of a verified bearer token."""

    model_config = ConfigDict(extra="allow")

    id: str
    iat: Optional[int] = None
