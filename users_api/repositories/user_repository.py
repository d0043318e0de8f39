"""
User repository: raw insert/find operations on the ``users`` collection.

Driver errors are re-raised as :class:`UserRepositoryError` with the
original message and the driver exception chained as the cause.  The
caller cannot tell a connectivity failure from a rejected write; both map
to a 500 in the router.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from users_api.models import USERS_COLLECTION, UserDocument, new_user_document

logger = logging.getLogger(__name__)


class UserRepositoryError(Exception):
    """A MongoDB operation on the users collection failed."""


async def create_user(
    db: AsyncIOMotorDatabase, username: str, email: str, password: str
) -> UserDocument:
    """Insert a new user and return the stored document including ``_id``."""
    doc = new_user_document(username, email, password)
    try:
        result = await db[USERS_COLLECTION].insert_one(doc)
    except PyMongoError as exc:
        logger.error("Failed to insert user %r: %s", username, exc)
        raise UserRepositoryError(str(exc)) from exc

    doc["_id"] = result.inserted_id
    return doc


async def find_all_users(db: AsyncIOMotorDatabase) -> list[UserDocument]:
    """Return every user document in store order, unfiltered and unbounded."""
    try:
        return await db[USERS_COLLECTION].find({}).to_list(length=None)
    except PyMongoError as exc:
        logger.error("Failed to list users: %s", exc)
        raise UserRepositoryError(str(exc)) from exc
