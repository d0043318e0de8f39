"""
Test infrastructure for the Users API.

Strategy
--------
- mongomock-motor's AsyncMongoMockClient stands in for MongoDB, so the
  suite needs no running mongod.  Each test gets a brand-new client and
  therefore an empty database.
- The app's get_db dependency is overridden so every test-time request uses
  that in-memory database.  ASGITransport does not run the lifespan, so the
  real MongoConnector is never started by the endpoint tests.
- Failure paths use small fakes that raise pymongo errors, built in this
  module and exposed as fixtures.
"""
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import ServerSelectionTimeoutError

from users_api.database import get_db
from users_api.main import app


# ---------------------------------------------------------------------------
# Fakes for an unreachable MongoDB
# ---------------------------------------------------------------------------

class BrokenCursor:
    async def to_list(self, length=None):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")


class BrokenCollection:
    async def insert_one(self, document):
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    def find(self, *args, **kwargs):
        return BrokenCursor()


class BrokenDatabase:
    name = "broken"

    def __getitem__(self, name):
        return BrokenCollection()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def mongo_db():
    """Yield a fresh, empty in-memory database."""
    client = AsyncMongoMockClient()
    yield client["users_test"]


@pytest_asyncio.fixture
async def async_client(mongo_db) -> AsyncClient:
    """
    Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport,
    with get_db pointed at the in-memory database.
    """
    app.dependency_overrides[get_db] = lambda: mongo_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_client() -> AsyncClient:
    """Same as async_client, but every database call fails."""
    app.dependency_overrides[get_db] = lambda: BrokenDatabase()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
