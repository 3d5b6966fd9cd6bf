"""Fake User Repository: in-memory UserRepository for route tests.

Invariants:
    - Satisfies the UserRepository Protocol structurally (no inheritance)
    - Every call is appended to `calls` as (method, args) before anything else
    - Operations named in `failures` raise DatabaseError instead of touching the store
    - `vanish_after_write` drops the document right after insert/update to simulate
      a concurrent delete between write and re-fetch
"""

from bson import ObjectId

from usersvc.core.domain_types import UserId
from usersvc.core.errors import DatabaseError
from usersvc.models.user import User


class FakeUserRepository:

    def __init__(self):
        self.documents: dict[ObjectId, dict] = {}
        self.calls: list[tuple[str, tuple]] = []
        self.failures: set[str] = set()
        self.vanish_after_write = False
        self.healthy = True

    def _enter(self, method: str, *args):
        self.calls.append((method, args))
        if method in self.failures:
            raise DatabaseError("simulated failure", method)

    async def insert(self, user_name: str, email: str) -> UserId:
        self._enter("insert", user_name, email)
        oid = ObjectId()
        if not self.vanish_after_write:
            self.documents[oid] = {"_id": oid, "user_name": user_name, "email": email}
        return UserId(oid)

    async def find_one(self, user_id: UserId) -> User | None:
        self._enter("find_one", user_id)
        document = self.documents.get(user_id)
        return User.from_document(document) if document else None

    async def find_all(self) -> list[User]:
        self._enter("find_all")
        return [User.from_document(d) for d in self.documents.values()]

    async def update_one(self, user_id: UserId, user_name: str, email: str) -> int:
        self._enter("update_one", user_id, user_name, email)
        if user_id not in self.documents:
            return 0
        if self.vanish_after_write:
            del self.documents[user_id]
        else:
            self.documents[user_id].update(user_name=user_name, email=email)
        return 1

    async def delete_one(self, user_id: UserId) -> int:
        self._enter("delete_one", user_id)
        return 1 if self.documents.pop(user_id, None) else 0

    async def ping(self) -> bool:
        self.calls.append(("ping", ()))
        return self.healthy

    def seed(self, user_name: str, email: str) -> ObjectId:
        oid = ObjectId()
        self.documents[oid] = {"_id": oid, "user_name": user_name, "email": email}
        return oid
