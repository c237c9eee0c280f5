"""
AlgoTest Backend - Health Check Route
======================================

What:  Liveness endpoint for monitoring and load balancer health checks.
How:   The service has no dependencies to check, so answering at all means
       it is healthy; the body reports the current time and service name.
Who:   Called by container health checks, load balancers and uptime monitors.
"""

from fastapi import APIRouter

from algotest.config import settings
from algotest.schemas.algorithm import HealthResponse
from algotest.services.clock import utc_timestamp

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="OK",
        timestamp=utc_timestamp(),
        service=settings.service_name,
    )
