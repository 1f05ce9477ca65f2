"""Health Routes — process liveness and personality-store reachability.

Invariants:
    - GET /health answers 200 whenever the process can serve requests
    - GET /health/ready answers 200 only when the personality store answers a probe query;
      otherwise 503 in the shared error envelope
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import personality_api.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def liveness():
    return {"status": "ok"}


@router.get("/ready")
async def readiness():
    """Probe the store through the session manager installed at startup."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        logger.warning("Readiness probe failed: personality store unreachable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "error": "Service Unavailable",
                "message": "Personality store is unreachable",
            },
        )
    return {"status": "ready", "store": "reachable"}
