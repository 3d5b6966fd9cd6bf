"""User Schemas: Pydantic request/response contracts for the /users routes.

Invariants:
    - UserCreate and UserUpdate require both user_name and email as strings
    - UserResponse serializes the id under "_id" as the 24-char hex string
    - No format or uniqueness checks on email (plain text)

Design Decisions:
    - Separate from models/user.py: schemas are API contracts, the document model
      is persistence (ADR: DDD boundary)
    - UserUpdate is a full replacement, never a partial patch
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from usersvc.models.user import User


class UserCreate(BaseModel):
    """Payload for POST /users."""
    user_name: StrictStr
    email: StrictStr


class UserUpdate(BaseModel):
    """Payload for PUT /users/{id}: replaces both mutable fields."""
    user_name: StrictStr
    email: StrictStr


class UserResponse(BaseModel):
    """Public-facing user representation."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id", validation_alias="_id")
    user_name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(_id=str(user.id), user_name=user.user_name, email=user.email)
