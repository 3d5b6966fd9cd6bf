"""Boundary Protocols: contracts between the route handlers and the document store.

Invariants:
    - Handlers NEVER import the Motor client, only these Protocol types
    - Every method raises DatabaseError (core/errors.py) on driver failure
    - update_one/delete_one report counts; zero matches is not an error

Design Decisions:
    - Protocol over ABC: structural subtyping, the test fake needs no inheritance
      (ADR: ExMA anti-pattern)
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Protocol

from usersvc.core.domain_types import UserId
from usersvc.models.user import User


class UserRepository(Protocol):
    """Contract for user persistence: implemented by infrastructure/user_repository.py."""
    async def insert(self, user_name: str, email: str) -> UserId: ...
    async def find_one(self, user_id: UserId) -> User | None: ...
    async def find_all(self) -> list[User]: ...
    async def update_one(
        self, user_id: UserId, user_name: str, email: str,
    ) -> int: ...
    async def delete_one(self, user_id: UserId) -> int: ...
    async def ping(self) -> bool: ...
