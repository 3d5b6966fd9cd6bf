"""Mongo User Repository: Motor-backed implementation of UserRepository.

Invariants:
    - Every PyMongoError is logged and re-raised as DatabaseError (core/errors.py)
    - Each public method issues exactly one driver call, nothing is retried
    - find_all skips documents that fail to decode, it never fails because of one
    - update_one sets user_name, email and _id together (full replace of those fields)

Design Decisions:
    - Decode skip is logged with a count (WARNING) instead of surfaced to clients:
      best-effort enumeration
    - find_one decode failure is a DatabaseError: a single unreadable user is
      indistinguishable from a store failure for the caller
"""

import logging

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from usersvc.core.domain_types import UserId
from usersvc.core.errors import DatabaseError, ErrorContext
from usersvc.models.user import User

logger = logging.getLogger(__name__)


class MongoUserRepository:
    """UserRepository over a single Motor collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    async def insert(self, user_name: str, email: str) -> UserId:
        try:
            result = await self._collection.insert_one(
                {"user_name": user_name, "email": email},
            )
        except PyMongoError as e:
            raise _database_error(e, "insert") from e
        return UserId(result.inserted_id)

    async def find_one(self, user_id: UserId) -> User | None:
        try:
            document = await self._collection.find_one({"_id": user_id})
        except PyMongoError as e:
            raise _database_error(e, "find_one", user_id) from e
        if document is None:
            return None
        try:
            return User.from_document(document)
        except ValidationError as e:
            raise _database_error(e, "decode", user_id) from e

    async def find_all(self) -> list[User]:
        users: list[User] = []
        skipped = 0
        try:
            async for document in self._collection.find({}):
                try:
                    users.append(User.from_document(document))
                except ValidationError:
                    skipped += 1
        except PyMongoError as e:
            raise _database_error(e, "find") from e
        if skipped:
            logger.warning(
                f"Skipped {skipped} undecodable user document(s)",
                extra={"skipped": skipped, "operation": "find"},
            )
        return users

    async def update_one(self, user_id: UserId, user_name: str, email: str) -> int:
        try:
            result = await self._collection.update_one(
                {"_id": user_id},
                {"$set": {"user_name": user_name, "email": email, "_id": user_id}},
            )
        except PyMongoError as e:
            raise _database_error(e, "update_one", user_id) from e
        return result.matched_count

    async def delete_one(self, user_id: UserId) -> int:
        try:
            result = await self._collection.delete_one({"_id": user_id})
        except PyMongoError as e:
            raise _database_error(e, "delete_one", user_id) from e
        return result.deleted_count

    async def ping(self) -> bool:
        try:
            await self._collection.database.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}")
            return False


def _database_error(
    exc: Exception, operation: str, user_id: UserId | None = None,
) -> DatabaseError:
    ctx = ErrorContext(user_id=str(user_id) if user_id else None)
    logger.error(
        f"MongoDB {operation} error: {exc}",
        extra={"operation": operation, "user_id": ctx.user_id},
    )
    return DatabaseError(type(exc).__name__, operation, ctx)
