"""
Application settings loaded from environment variables.
"""

from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    secret: str = "change-me-jwt-secret"     # HMAC secret for auth tokens
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = 12                  # bcrypt work factor

    # ── Database ─────────────────────────────────────────────────────────
    db_user: str = ""
    db_pass: str = ""
    db_host: str = "cluster0.mongodb.net"
    db_name: str = "test"
    db_uri: Optional[str] = None             # full URI, skips the SRV template
    users_collection: str = "users"
    enforce_unique_email_index: bool = False

    # ── Access ───────────────────────────────────────────────────────────
    restrict_user_lookup_to_owner: bool = False

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "frozen": True,
    }

    @property
    def mongo_uri(self) -> str:
        """Connection string for the MongoDB cluster."""
        if self.db_uri:
            return self.db_uri
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
            f"@{self.db_host}/?retryWrites=true&w=majority&appName=Cluster0"
        )
