"""
Document models for the ``users`` collection.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel

from utils.schemas import UserPublic


class NewUser(BaseModel):
    """A user about to be inserted. ``password`` is already a bcrypt hash."""

    name: str
    email: str
    password: str

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump()


class User(BaseModel):
    """A stored user. ``password`` is absent when read with the public projection."""

    id: str
    name: str
    email: str
    password: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        return cls(
            id=str(doc["_id"]),
            name=doc["name"],
            email=doc["email"],
            password=doc.get("password"),
        )

    def to_public(self) -> UserPublic:
        return UserPublic(id=self.id, name=self.name, email=self.email)
