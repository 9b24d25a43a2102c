"""
Shared fixtures: an in-memory user repository and a test client wired to it.
"""

from typing import Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from config.settings import Settings
from database.models import NewUser, User
from database.repository import UserRepository
from main import create_app

from helpers import TEST_SECRET


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository with the same contract as the Mongo one."""

    def __init__(self) -> None:
        self.docs: Dict[str, dict] = {}
        self.inserts: List[NewUser] = []
        self.fail_with: Optional[Exception] = None

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def find_by_id(self, user_id: str) -> Optional[User]:
        self._maybe_fail()
        doc = self.docs.get(user_id)
        if doc is None:
            return None
        public = {k: v for k, v in doc.items() if k != "password"}
        return User.from_document(public)

    async def find_by_email(self, email: str) -> Optional[User]:
        self._maybe_fail()
        for doc in self.docs.values():
            if doc["email"] == email:
                return User.from_document(doc)
        return None

    async def insert(self, user: NewUser) -> str:
        self._maybe_fail()
        oid = ObjectId()
        self.docs[str(oid)] = {"_id": oid, **user.to_document()}
        self.inserts.append(user)
        return str(oid)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, secret=TEST_SECRET, bcrypt_rounds=4)


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def client(settings, repo):
    app = create_app(settings, repository=repo)
    with TestClient(app) as c:
        yield c


