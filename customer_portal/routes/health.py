"""
Customer Portal - Health Check Route
======================================

What:  Liveness endpoint for load balancers and process managers.
How:   The service has no dependencies to probe, so a response at all means
       "healthy". Uptime is measured on the monotonic clock from module
       import, which happens once at process start; a restart resets it.
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from customer_portal.config import Settings, get_settings
from customer_portal.schemas.customer import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Health"])

APPLICATION_NAME = "customer-portal"

# Track when the process started for uptime reporting
_start_time = time.monotonic()


def uptime_seconds() -> float:
    return max(0.0, time.monotonic() - _start_time)


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision, e.g. 2024-01-15T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        uptime=uptime_seconds(),
        timestamp=utc_timestamp(),
        application=APPLICATION_NAME,
        environment=settings.environment,
    )
