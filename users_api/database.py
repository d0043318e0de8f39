import logging
from typing import Callable

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = "mydb"


class StorageConnectionError(Exception):
    """Raised when MongoDB cannot be reached at startup."""


class MongoConnector:
    """
    Owns the process-wide MongoDB client.

    The lifespan in ``users_api.main`` constructs one connector, calls
    :meth:`connect` before the server starts listening and stores it on
    ``app.state.mongo``.  Request handlers reach the database only through
    the ``get_db`` dependency below.

    The motor client keeps pymongo's connection pool internally, so the
    single instance is shared by every concurrent request.
    """

    def __init__(
        self,
        uri: str,
        database_name: str | None = None,
        *,
        timeout_ms: int = 5000,
        client_factory: Callable[..., AsyncIOMotorClient] = AsyncIOMotorClient,
    ) -> None:
        self._uri = uri
        self._database_name = database_name
        self._timeout_ms = timeout_ms
        self._client_factory = client_factory
        self._client: AsyncIOMotorClient | None = None
        self._database: AsyncIOMotorDatabase | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def connect(self) -> None:
        """
        Open the client and ping the server.

        There is no retry: a failure here is logged and re-raised as
        :class:`StorageConnectionError`, which aborts application startup.
        """
        client = self._client_factory(
            self._uri,
            serverSelectionTimeoutMS=self._timeout_ms,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as exc:
            logger.error("MongoDB connection error: %s", exc)
            client.close()
            raise StorageConnectionError(str(exc)) from exc

        self._client = client
        if self._database_name:
            self._database = client[self._database_name]
        else:
            self._database = client.get_default_database(DEFAULT_DATABASE_NAME)
        logger.info("MongoDB connected (database=%s)", self._database.name)

    async def disconnect(self) -> None:
        """Close the client.  Safe to call more than once."""
        if self._client is not None:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB disconnected")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise StorageConnectionError("MongoDB is not connected")
        return self._database


def get_db(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.mongo.database
