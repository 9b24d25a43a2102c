"""
Authentication API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from api.middleware import register_exception_handlers, register_middleware
from api.routes import router as api_router
from auth.routes import router as auth_router
from config.settings import Settings
from database.repository import UserRepository
from database.session import build_user_repository, connect

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("pymongo", "motor", "asyncio"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[UserRepository] = None,
) -> FastAPI:
    """
    Build the application.

    ``settings`` defaults to the environment.  When ``repository`` is given
    no MongoDB connection is made; otherwise the cluster is connected and
    pinged during startup and a failure aborts it.
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if repository is None:
            client = await connect(settings)
            app.state.users = build_user_repository(client, settings)
        else:
            app.state.users = repository
        await app.state.users.ensure_indexes()
        logger.info("Application ready to accept requests.")
        try:
            yield
        finally:
            if client is not None:
                client.close()
                logger.info("MongoDB connection closed")

    app = FastAPI(
        title="Authentication API",
        version="1.0.0",
        description="User registration, login and bearer-token protected lookup.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(api_router)
    app.include_router(auth_router, prefix="/auth")

    return app


def run() -> None:
    settings = Settings()
    configure_logging(settings)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    run()
