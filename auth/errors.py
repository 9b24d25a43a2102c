"""
API error taxonomy.

Every failure a handler can report is an ``APIError`` subclass carrying
the HTTP status and the short message returned to the client as
``{"msg": ...}``.  Callers should branch on the status code, not the text.
"""

from __future__ import annotations

from typing import Optional

from fastapi import status

SERVER_ERROR_MSG = "Ocorreu erro no servidor"


class APIError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_msg: str = SERVER_ERROR_MSG

    def __init__(self, msg: Optional[str] = None) -> None:
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class ValidationError(APIError):
    """Client input is missing or inconsistent. Do not retry unchanged."""

    status_code = 422
    default_msg = "Dados inválidos"


class ConflictError(APIError):
    status_code = 422
    default_msg = "Por favor, utilize outro e-mail"


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_msg = "Usuário não encontrado"


class AuthRequiredError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "Acesso negado"


class InvalidTokenError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Token inválido"


class ForbiddenError(APIError):
    status_code = status.HTTP_403_FORBIDDEN
    default_msg = "Acesso negado"


class InternalError(APIError):
    """Unexpected server fault. The cause is logged, never sent to the client."""
