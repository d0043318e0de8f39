"""
User service — create and list operations for the User aggregate.

This layer holds no rules of its own yet: it forwards to the repository
and serialises the returned documents.  Password hashing and email
uniqueness checks would belong here.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from users_api.models import user_to_dict
from users_api.repositories import user_repository
from users_api.schemas import UserCreate


async def get_users(db: AsyncIOMotorDatabase) -> list[dict]:
    """Return all users in the order MongoDB yields them."""
    docs = await user_repository.find_all_users(db)
    return [user_to_dict(d) for d in docs]


async def create_user(db: AsyncIOMotorDatabase, data: UserCreate) -> dict:
    """Create a new user and return its serialised dict."""
    doc = await user_repository.create_user(
        db,
        username=data.username,
        email=data.email,
        password=data.password,
    )
    return user_to_dict(doc)
