"""User Routes: create, list, get-one, update and delete over the "users" collection.

Invariants:
    - Each handler parses its own identifier before any store call
    - Each handler catches DatabaseError at its boundary and raises the
      UserServiceError chosen by ErrorPolicy (static plain-text body)
    - Create/Update re-fetch after writing: two independent store calls, no transaction
    - Delete succeeds whether or not a document matched

Design Decisions:
    - No shared pre/post-processing pipeline: every operation owns its error
      translation, so the asymmetries between operations stay visible here
    - Repository and policy injected via Depends (ADR: no global store handle)
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from usersvc.api.dependencies import get_error_policy
from usersvc.core.error_policy import ErrorPolicy
from usersvc.core.errors import DatabaseError, ErrorContext
from usersvc.core.repository_protocols import UserRepository
from usersvc.infrastructure.database import get_user_repository
from usersvc.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    repo: UserRepository = Depends(get_user_repository),
    policy: ErrorPolicy = Depends(get_error_policy),
):
    """Insert a user, then read it back by its assigned id."""
    try:
        user_id = await repo.insert(body.user_name, body.email)
    except DatabaseError as e:
        raise policy.create_failed(e.context) from e

    ctx = ErrorContext(user_id=str(user_id), operation="find_one")
    try:
        user = await repo.find_one(user_id)
    except DatabaseError as e:
        raise policy.created_not_found(e.context) from e
    if user is None:
        raise policy.created_not_found(ctx)

    logger.info(f"User {user_id} created", extra={"user_id": str(user_id)})
    return UserResponse.from_user(user)


@router.get("", response_model=list[UserResponse])
async def list_users(
    repo: UserRepository = Depends(get_user_repository),
    policy: ErrorPolicy = Depends(get_error_policy),
):
    """All users in store-default order."""
    try:
        users = await repo.find_all()
    except DatabaseError as e:
        raise policy.list_failed(e.context) from e
    return [UserResponse.from_user(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
    policy: ErrorPolicy = Depends(get_error_policy),
):
    oid = policy.parse_id(user_id)
    ctx = ErrorContext(user_id=user_id, operation="find_one")
    try:
        user = await repo.find_one(oid)
    except DatabaseError as e:
        raise policy.lookup_failed(e.context) from e
    if user is None:
        raise policy.user_not_found(ctx)
    return UserResponse.from_user(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UserUpdate,
    repo: UserRepository = Depends(get_user_repository),
    policy: ErrorPolicy = Depends(get_error_policy),
):
    """Replace user_name and email, then return the stored document."""
    oid = policy.parse_id(user_id)
    ctx = ErrorContext(user_id=user_id, operation="update_one")
    try:
        matched = await repo.update_one(oid, body.user_name, body.email)
    except DatabaseError as e:
        raise policy.update_failed(e.context) from e
    if matched == 0:
        error = policy.update_matched_nothing(ctx)
        if error is not None:
            raise error

    try:
        user = await repo.find_one(oid)
    except DatabaseError as e:
        raise policy.refetch_after_update_failed(e.context) from e
    if user is None:
        raise policy.updated_not_found(ctx)

    logger.info(f"User {user_id} updated", extra={"user_id": user_id})
    return UserResponse.from_user(user)


@router.delete(
    "/{user_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_user(
    user_id: str,
    repo: UserRepository = Depends(get_user_repository),
    policy: ErrorPolicy = Depends(get_error_policy),
):
    oid = policy.parse_id(user_id)
    try:
        deleted = await repo.delete_one(oid)
    except DatabaseError as e:
        raise policy.delete_failed(e.context) from e

    logger.info(
        f"Delete user {user_id}: {deleted} document(s) removed",
        extra={"user_id": user_id},
    )
    return Response(
        content=policy.delete_body(),
        status_code=status.HTTP_204_NO_CONTENT,
        media_type="text/plain",
    )
