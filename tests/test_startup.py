"""
Tests for application startup and the MongoDB connection.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from database.repository import MongoUserRepository
from database.session import build_user_repository, connect
from main import create_app


class TestConnect:
    @pytest.mark.asyncio
    async def test_ping_failure_aborts(self, settings):
        client = MagicMock()
        client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))
        with patch("database.session.AsyncIOMotorClient", return_value=client):
            with pytest.raises(ServerSelectionTimeoutError):
                await connect(settings)
        client.close.assert_called_once()

    @pytest.mark.asyncio
    async def test_ping_success(self, settings):
        client = MagicMock()
        client.admin.command = AsyncMock(return_value={"ok": 1})
        with patch("database.session.AsyncIOMotorClient", return_value=client) as factory:
            assert await connect(settings) is client
        factory.assert_called_once_with(settings.mongo_uri)
        client.admin.command.assert_awaited_once_with("ping")


def test_build_user_repository(settings):
    client = MagicMock()
    repo = build_user_repository(client, settings)
    assert isinstance(repo, MongoUserRepository)
    client.__getitem__.assert_called_once_with(settings.db_name)


def test_lifespan_connects_and_closes(settings):
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    with patch("database.session.AsyncIOMotorClient", return_value=client):
        app = create_app(settings)
        with TestClient(app) as c:
            assert isinstance(app.state.users, MongoUserRepository)
            assert c.get("/").status_code == 200
    client.close.assert_called_once()


def test_startup_fails_without_store(settings):
    client = MagicMock()
    client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))
    with patch("database.session.AsyncIOMotorClient", return_value=client):
        app = create_app(settings)
        with pytest.raises(ServerSelectionTimeoutError):
            with TestClient(app):
                pass
