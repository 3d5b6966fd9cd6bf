"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps bson.ObjectId, never a bare str in domain logic
    - parse_user_id accepts only the 24-char hex form
    - All valid modes encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to the raw setting value read from the environment
"""

from enum import Enum
from string import hexdigits
from typing import NewType

from bson import ObjectId

from usersvc.core.errors import InvalidUserIdError


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", ObjectId)

OBJECT_ID_HEX_LENGTH = 24


def is_user_id(raw: str) -> bool:
    """True when raw is the 24-char hex encoding of an ObjectId."""
    return len(raw) == OBJECT_ID_HEX_LENGTH and all(c in hexdigits for c in raw)


def parse_user_id(raw: str, invalid_status: int = 500) -> UserId:
    """Parse a path identifier. Raises InvalidUserIdError before any store call."""
    if not is_user_id(raw):
        raise InvalidUserIdError(raw, http_status=invalid_status)
    return UserId(ObjectId(raw))


# ─── Enums ───────────────────────────────────────────────────────

class ErrorMapping(str, Enum):
    """How store and identifier failures map onto HTTP statuses."""
    LEGACY = "legacy"
    NORMALIZED = "normalized"
