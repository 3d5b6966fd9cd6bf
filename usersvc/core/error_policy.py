"""Error Policy: pure mapping from handler failure situations to client-facing errors.

Invariants:
    - Each method returns an error, it never raises and never does IO
    - LEGACY keeps the historical status codes and bodies (malformed id is a 500,
      delete failure says "NOT FOUND" under a 500, store errors on reads are 404)
    - NORMALIZED uses 400 for a malformed id, 404 for a missing user, 500 for store failures
    - Create and List bodies are identical under both mappings

Design Decisions:
    - Policy object resolved once per request via Depends, so handlers stay
      free of if/else on the mapping (ADR: thin routes)
"""

from dataclasses import dataclass

from usersvc.core.domain_types import ErrorMapping, UserId, parse_user_id
from usersvc.core.errors import (
    ErrorContext,
    ResourceNotFoundError,
    StoreOperationError,
    UserServiceError,
)

CREATE_FAILED = "ERROR CREATING USER"
CREATED_NOT_FOUND = "ERROR FINDING CREATED USER"
LIST_FAILED = "CANNOT GET USERS"
USER_NOT_FOUND = "USER NOT FOUND"
UPDATED_NOT_FOUND = "UPDATED USER NOT FOUND"
DELETE_FAILED_LEGACY = "NOT FOUND"
DELETED = "DELETED"
GENERIC_STORE_FAILURE = "INTERNAL SERVER ERROR"


@dataclass(frozen=True)
class ErrorPolicy:
    """Builds the error each handler raises for a given failure."""

    mapping: ErrorMapping = ErrorMapping.LEGACY

    @property
    def legacy(self) -> bool:
        return self.mapping == ErrorMapping.LEGACY

    def parse_id(self, raw: str) -> UserId:
        return parse_user_id(raw, invalid_status=500 if self.legacy else 400)

    # ─── Create / List ──────────────────────────────────────────

    def create_failed(self, ctx: ErrorContext | None = None) -> UserServiceError:
        return StoreOperationError(CREATE_FAILED, context=ctx)

    def created_not_found(self, ctx: ErrorContext | None = None) -> UserServiceError:
        return StoreOperationError(CREATED_NOT_FOUND, context=ctx)

    def list_failed(self, ctx: ErrorContext | None = None) -> UserServiceError:
        return StoreOperationError(LIST_FAILED, context=ctx)

    # ─── Get-one ────────────────────────────────────────────────

    def user_not_found(self, ctx: ErrorContext | None = None) -> UserServiceError:
        return ResourceNotFoundError(USER_NOT_FOUND, context=ctx)

    def lookup_failed(self, ctx: ErrorContext | None = None) -> UserServiceError:
        if self.legacy:
            return ResourceNotFoundError(USER_NOT_FOUND, context=ctx)
        return StoreOperationError(GENERIC_STORE_FAILURE, context=ctx)

    # ─── Update ─────────────────────────────────────────────────

    def update_failed(self, ctx: ErrorContext | None = None) -> UserServiceError:
        if self.legacy:
            return ResourceNotFoundError(USER_NOT_FOUND, context=ctx)
        return StoreOperationError(GENERIC_STORE_FAILURE, context=ctx)

    def update_matched_nothing(self, ctx: ErrorContext | None = None) -> UserServiceError | None:
        """LEGACY ignores the matched count and lets the re-fetch decide."""
        if self.legacy:
            return None
        return ResourceNotFoundError(USER_NOT_FOUND, context=ctx)

    def updated_not_found(self, ctx: ErrorContext | None = None) -> UserServiceError:
        return ResourceNotFoundError(UPDATED_NOT_FOUND, context=ctx)

    def refetch_after_update_failed(self, ctx: ErrorContext | None = None) -> UserServiceError:
        if self.legacy:
            return ResourceNotFoundError(UPDATED_NOT_FOUND, context=ctx)
        return StoreOperationError(GENERIC_STORE_FAILURE, context=ctx)

    # ─── Delete ─────────────────────────────────────────────────

    def delete_failed(self, ctx: ErrorContext | None = None) -> UserServiceError:
        if self.legacy:
            return StoreOperationError(DELETE_FAILED_LEGACY, context=ctx)
        return StoreOperationError(GENERIC_STORE_FAILURE, context=ctx)

    def delete_body(self) -> str:
        # RFC 9110 forbids a 204 payload; only the legacy contract sends one
        return DELETED if self.legacy else ""
