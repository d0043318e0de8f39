from __future__ import annotations

from typing import TypedDict

from bson import ObjectId

# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------
# Collection: users
#   _id       ObjectId  assigned by MongoDB on insert
#   username  str       required
#   email     str       required (no unique index)
#   password  str       required (stored as given)
#
# Presence and type of the string fields are checked by ``UserCreate``
# before a document is built; the collection itself has no validator.

USERS_COLLECTION = "users"

USER_FIELDS = ("username", "email", "password")


class UserDocument(TypedDict, total=False):
    _id: ObjectId
    username: str
    email: str
    password: str


def new_user_document(username: str, email: str, password: str) -> UserDocument:
    """Build an unsaved user document; ``_id`` is added by the insert."""
    return {"username": username, "email": email, "password": password}


def user_to_dict(doc: UserDocument) -> dict:
    """Serialise a stored user document to a JSON-ready dict."""
    data = {"_id": str(doc["_id"])}
    for field in USER_FIELDS:
        data[field] = doc.get(field)
    return data
