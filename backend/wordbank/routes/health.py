"""
Wordbank Backend — Health Check Route
======================================

What:  Health check endpoint for monitoring and container probes.
How:   Pings the document store and reports the aggregate status.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   Store reachable (HTTP 200)
    - unhealthy: Store unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from wordbank import __version__
from wordbank.database import get_word_store
from wordbank.schemas.word import HealthResponse
from wordbank.store_base import WordStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: WordStore = Depends(get_word_store),
) -> HealthResponse:
    """
    Check the health of the service and its document store.

    The store check is a `ping` command, which touches no collection.
    """
    if await store.ping():
        db_status = "connected"
        overall = "healthy"
    else:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: document store unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
