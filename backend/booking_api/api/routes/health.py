"""Health Probes: process liveness and booking-table readiness.

Invariants:
    - GET /health/ answers 200 without touching the database
    - GET /health/ready answers 200 only when the rooms table can be queried,
      503 otherwise (no manager, unreachable DB, missing schema)
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from booking_api.core.errors import DatabaseError
from booking_api.infrastructure import database

router = APIRouter(prefix="/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("/")
async def liveness():
    return {"status": "alive", "service": "booking-api"}


@router.get("/ready")
async def readiness():
    """Ready once rooms can be read; reports how many are bookable."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("database_not_initialized")
    try:
        rooms = await manager.count_rooms()
    except DatabaseError:
        return _not_ready("database_unavailable")
    return {"status": "ready", "rooms": rooms}
