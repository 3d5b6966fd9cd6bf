"""User Document: the single entity persisted in the "users" collection.

Invariants:
    - _id is a BSON ObjectId assigned by MongoDB at insert, immutable afterwards
    - user_name and email are always present as strings on a decodable document
    - Documents with a non-ObjectId _id or missing/non-string fields fail decoding

Design Decisions:
    - Pydantic model with arbitrary_types_allowed over a hand-written decoder: one
      validation path for every document read from the store
    - Strict mode: MongoDB values are never coerced (an int email is a decode failure)
"""

from typing import Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User document as stored in MongoDB."""

    model_config = ConfigDict(
        populate_by_name=True, arbitrary_types_allowed=True, strict=True,
    )

    id: ObjectId = Field(alias="_id")
    user_name: str
    email: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        """Decode a raw MongoDB document. Raises pydantic.ValidationError."""
        return cls.model_validate(document)

