"""
User repository — the only way route handlers touch the user store.

``UserRepository`` is the abstract interface (find by id, find by email,
insert); ``MongoUserRepository`` implements it on a motor collection.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, IndexModel
from pymongo.errors import DuplicateKeyError, PyMongoError

from database.models import NewUser, User

logger = logging.getLogger(__name__)

_PUBLIC_PROJECTION = {"password": 0}


class StoreError(Exception):
    """The user store failed to serve a request."""


class DuplicateEmailError(StoreError):
    """An insert hit the unique email index."""


class UserRepository(ABC):
    """Abstract access to stored users."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user without its password hash, or ``None``."""
        ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Return the user including its password hash, or ``None``."""
        ...

    @abstractmethod
    async def insert(self, user: NewUser) -> str:
        """Persist ``user`` and return the store-assigned id."""
        ...

    async def ensure_indexes(self) -> None:
        """Create any indexes the store needs. No-op by default."""


class MongoUserRepository(UserRepository):
    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        *,
        unique_email: bool = False,
    ) -> None:
        self._collection = collection
        self._unique_email = unique_email

    async def find_by_id(self, user_id: str) -> Optional[User]:
        try:
            oid = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None
        try:
            doc = await self._collection.find_one({"_id": oid}, _PUBLIC_PROJECTION)
        except PyMongoError as exc:
            raise StoreError(f"find_by_id failed: {exc}") from exc
        return User.from_document(doc) if doc else None

    async def find_by_email(self, email: str) -> Optional[User]:
        try:
            doc = await self._collection.find_one({"email": email})
        except PyMongoError as exc:
            raise StoreError(f"find_by_email failed: {exc}") from exc
        return User.from_document(doc) if doc else None

    async def insert(self, user: NewUser) -> str:
        try:
            result = await self._collection.insert_one(user.to_document())
        except DuplicateKeyError as exc:
            raise DuplicateEmailError(user.email) from exc
        except PyMongoError as exc:
            raise StoreError(f"insert failed: {exc}") from exc
        return str(result.inserted_id)

    async def ensure_indexes(self) -> None:
        if not self._unique_email:
            return
        await self._collection.create_indexes(
            [IndexModel([("email", ASCENDING)], unique=True, name="email_unique")]
        )
        logger.info("Unique email index ensured on %s", self._collection.name)
