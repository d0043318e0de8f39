import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from users_api.config import Settings, settings as default_settings
from users_api.database import MongoConnector
from users_api.errors import register_error_handlers
from users_api.routers import users

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    config = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: a connection failure propagates and aborts the server
        # before it binds its socket.
        mongo = MongoConnector(
            config.MONGO_URI,
            config.MONGO_DB_NAME,
            timeout_ms=config.MONGO_TIMEOUT_MS,
        )
        await mongo.connect()
        app.state.mongo = mongo
        yield
        # Shutdown
        await mongo.disconnect()

    app = FastAPI(
        title="Users API",
        description="Create and list user documents stored in MongoDB",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Error handlers
    register_error_handlers(app)

    # Routers
    app.include_router(users.router, prefix="/api")

    return app


app = create_app()


def run() -> None:
    """Start uvicorn on the configured host and port."""
    logging.basicConfig(
        level=default_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting Users API on port %d", default_settings.PORT)
    uvicorn.run(
        "users_api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
    )
