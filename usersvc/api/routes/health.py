"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if MongoDB does not answer ping (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load
      balancer (ADR: production readiness)
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from usersvc import __version__
from usersvc.core.repository_protocols import UserRepository
from usersvc.infrastructure.database import get_user_repository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "usersvc",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(repo: UserRepository = Depends(get_user_repository)):
    """Readiness probe: includes MongoDB connectivity."""
    if not await repo.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
