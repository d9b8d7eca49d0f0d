"""
app/db/user_backends.py

Purpose: Persistence backends for user records

- Email -> User key-value mapping with get / insert / replace / rename
- InMemoryUserBackend: process-lifetime dict (default, demo mode)
- MongoUserBackend: the `users` collection, email guarded by a unique index

Backends hand out copies; a record only changes through insert/replace/rename.
"""

from typing import Dict, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError
from app.core.logging import get_logger
from app.models.user import User

logger = get_logger(__name__)


class UserBackend:
    """Interface shared by all user backends."""

    name = "base"

    async def get(self, email: str) -> Optional[User]:
        raise NotImplementedError

    async def find_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    async def insert(self, user: User) -> None:
        raise NotImplementedError

    async def replace(self, user: User) -> None:
        raise NotImplementedError

    async def rename(self, old_email: str, user: User) -> None:
        """Moves the record from old_email to user.email in one step."""
        raise NotImplementedError

    async def count(self) -> int:
        raise NotImplementedError


class InMemoryUserBackend(UserBackend):
    """
    Dict keyed by email. No method awaits between reading and writing
    the dict, so every mutation is atomic on the event loop.
    """

    name = "memory"

    def __init__(self):
        self._users: Dict[str, User] = {}

    async def get(self, email: str) -> Optional[User]:
        user = self._users.get(email)
        return user.model_copy() if user else None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        # Linear scan, demo scale
        for user in self._users.values():
            if user.id == user_id:
                return user.model_copy()
        return None

    async def insert(self, user: User) -> None:
        if user.email in self._users:
            raise ConflictError("User already exists")
        self._users[user.email] = user.model_copy()

    async def replace(self, user: User) -> None:
        self._users[user.email] = user.model_copy()

    async def rename(self, old_email: str, user: User) -> None:
        if user.email in self._users:
            raise ConflictError("Email already in use")
        self._users[user.email] = user.model_copy()
        del self._users[old_email]

    async def count(self) -> int:
        return len(self._users)


class MongoUserBackend(UserBackend):
    """
    Users stored one document each, with unique indexes on `email` and
    `user_id` (see app/db/indexes.py). A rename is a single-document
    replace, so Mongo never exposes the record under both emails.
    """

    name = "mongo"

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def get(self, email: str) -> Optional[User]:
        document = await self.collection.find_one({"email": email})
        return User.from_document(document) if document else None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        document = await self.collection.find_one({"user_id": user_id})
        return User.from_document(document) if document else None

    async def insert(self, user: User) -> None:
        try:
            await self.collection.insert_one(user.to_document())
        except DuplicateKeyError as e:
            logger.warning("Duplicate key on insert", extra={"email": user.email})
            raise ConflictError("User already exists") from e

    async def replace(self, user: User) -> None:
        await self.collection.replace_one({"user_id": user.id}, user.to_document())

    async def rename(self, old_email: str, user: User) -> None:
        try:
            await self.collection.replace_one(
                {"user_id": user.id, "email": old_email},
                user.to_document()
            )
        except DuplicateKeyError as e:
            raise ConflictError("Email already in use") from e

    async def count(self) -> int:
        return await self.collection.count_documents({})
