"""
Anythink Market Backend — Service Routes
=========================================

What:  Welcome message at `/` and the health check at `/health`.
Who:   `/health` is called by Docker health checks, load balancers and
       monitoring; `/` is a smoke-test endpoint for humans.

Status levels:
    - healthy:   Database reachable
    - unhealthy: Database unreachable (the comments API cannot serve anything)

The endpoint answers 200 in both cases; callers read `status`.
"""

import logging
import time

from fastapi import APIRouter, Request

from app import __version__
from app.schemas.comment import HealthResponse, MessageResponse
from app.database import STORAGE_ERRORS

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads; used for uptime reporting
_start_time = time.time()


@router.get(
    "/",
    response_model=MessageResponse,
    summary="Welcome message",
)
async def welcome() -> MessageResponse:
    return MessageResponse(message="Welcome to Anythink Market Server")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description=(
        "Returns the health status of the backend service and its database. "
        "Used by Docker health checks and load balancers."
    ),
)
async def health_check(request: Request) -> HealthResponse:
    """
    Probe the database with `SELECT 1` and report aggregate status.

    Returns:
        HealthResponse with database status and uptime.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await request.app.state.database.ping()
    except STORAGE_ERRORS as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
