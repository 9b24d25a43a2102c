"""
JWT token creation and verification.

Tokens are HS256 JWTs (PyJWT) carrying the user id and the issue time.
They have no expiry: a token stays valid for as long as the signing
secret is unchanged.
"""

from __future__ import annotations

import time
from typing import Any, Dict

import jwt

from auth.errors import InvalidTokenError

DEFAULT_ALGORITHM = "HS256"


def create_token(user_id: str, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Create a signed token containing ``user_id``."""
    payload = {
        "id": user_id,
        "iat": int(time.time()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(token: str, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> Dict[str, Any]:
    """
    Verify ``token`` and return its claims.

    Raises ``InvalidTokenError`` for any malformed, tampered or wrongly
    signed token; the causes are deliberately not told apart.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["id"]},
        )
    except jwt.PyJWTError as exc:
        raise InvalidTokenError() from exc
    return payload
