"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/healthz always returns 200 "OK" (text/plain) if the process is up
    - GET /api/readyz returns 503 if the database is unreachable
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from chirpy.api.envelope import write_error, write_json
from chirpy.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["health"])


@router.get("/healthz", response_class=PlainTextResponse)
async def health_check():
    """Liveness probe."""
    return PlainTextResponse("OK", status_code=status.HTTP_200_OK)


@router.get("/readyz")
async def readiness_check():
    """Readiness probe, including database connectivity."""
    db = database.active_db
    if db is None or not await db.ping():
        return write_error(
            status.HTTP_503_SERVICE_UNAVAILABLE, "Database unavailable",
        )
    return write_json(status.HTTP_200_OK, {"status": "ready"})
