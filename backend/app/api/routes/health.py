"""Health Probes — liveness and readiness, outside the permission-checked API.

Invariants:
    - GET /api/v1/health/ answers 200 while the process runs
    - GET /api/v1/health/ready answers 503 (error envelope) until the database responds
    - Both answer in the same envelopes as the internal API
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.api.error_handlers import error_envelope
from app.infrastructure import database
from app.schemas.common import success_response

SERVICE_NAME = "tasktree-api"
SERVICE_VERSION = "1.0.0"

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness():
    return success_response({
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    })


@router.get("/ready")
async def readiness():
    # Looked up per call: the lifespan assigns it after import.
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=error_envelope("SERVICE_UNAVAILABLE", "Database unavailable"),
        )
    return success_response({"status": "ready", "checks": {"database": "healthy"}})
