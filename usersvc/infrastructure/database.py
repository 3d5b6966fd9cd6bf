"""MongoDB Client Manager: shared async Motor client owned by the app lifespan.

Invariants:
    - One AsyncIOMotorClient per process, created in the lifespan and stored on app.state
    - The client is shared by every concurrent request; no handler-level locking

Design Decisions:
    - app.state over a module-level singleton: the handle travels through the
      request (Depends), tests swap it with dependency_overrides
    - Motor resolves the URI lazily: constructing the client performs no IO, the
      first operation (or ping) selects a server
"""

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from usersvc.core.repository_protocols import UserRepository
from usersvc.infrastructure.user_repository import MongoUserRepository


class MongoManager:
    """Owns the Motor client and hands out collection handles."""

    def __init__(
        self,
        mongo_uri: str,
        database: str,
        users_collection: str = "users",
        server_selection_timeout_ms: int = 5000,
    ):
        self.client = AsyncIOMotorClient(
            mongo_uri, serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self.database = self.client[database]
        self.users_collection = users_collection

    def users(self) -> AsyncIOMotorCollection:
        return self.database[self.users_collection]

    def close(self) -> None:
        self.client.close()


def get_mongo(request: Request) -> MongoManager:
    """FastAPI dependency: the client opened by the lifespan."""
    mongo = getattr(request.app.state, "mongo", None)
    if mongo is None:
        raise RuntimeError("Database not initialized")
    return mongo


def get_user_repository(request: Request) -> UserRepository:
    """FastAPI dependency for the users collection."""
    return MongoUserRepository(get_mongo(request).users())
