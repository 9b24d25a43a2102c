"""
Async MongoDB client factory (motor).
"""

from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorClient

from config.settings import Settings
from database.repository import MongoUserRepository

logger = logging.getLogger(__name__)


async def connect(settings: Settings) -> AsyncIOMotorClient:
    """
    Open a client and ping the cluster.

    Any connection or authentication failure propagates so the server never
    starts accepting requests without a store.
    """
    client = AsyncIOMotorClient(settings.mongo_uri)
    try:
        await client.admin.command("ping")
    except Exception:
        client.close()
        raise
    logger.info("Connected to MongoDB (database=%s)", settings.db_name)
    return client


def build_user_repository(client: AsyncIOMotorClient, settings: Settings) -> MongoUserRepository:
    collection = client[settings.db_name][settings.users_collection]
    return MongoUserRepository(collection, unique_email=settings.enforce_unique_email_index)
