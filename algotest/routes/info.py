"""
AlgoTest Backend - API Discovery Route
=======================================

What:  GET /api/test, a static welcome message listing the public endpoints.
Who:   Used by the frontend and by humans checking that the API is reachable.
"""

from fastapi import APIRouter

from algotest import __version__
from algotest.schemas.algorithm import ApiInfoResponse

router = APIRouter(prefix="/api", tags=["Info"])

ENDPOINTS = [
    "GET /health - Health check",
    "GET /api/test - Test endpoint",
    "GET /api/algorithms - List algorithms",
    "POST /api/run-algorithm - Run algorithm",
]


@router.get(
    "/test",
    response_model=ApiInfoResponse,
    summary="API welcome and endpoint listing",
)
async def api_info() -> ApiInfoResponse:
    return ApiInfoResponse(
        message="Welcome to AlgoTest API!",
        version=__version__,
        endpoints=list(ENDPOINTS),
    )
