"""Health & Readiness Checks - liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if MongoDB is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from animal_api import __version__
from animal_api.api.dependencies import get_database
from animal_api.infrastructure.database import AnimalDatabase

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "animal-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(
    database: AnimalDatabase | None = Depends(get_database),
):
    """Readiness check: includes a MongoDB ping."""
    db_ok = await database.health_check() if database else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
