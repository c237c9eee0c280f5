"""
AlgoTest Backend - Algorithm Route Handlers
============================================

What:  GET /api/algorithms (catalog) and POST /api/run-algorithm (execution).
How:   The catalog is static; execution is delegated to the dispatcher in
       algotest.services.executor. Errors raised by the dispatcher are turned
       into JSON responses by the handlers registered in main.py.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body

from algotest.exceptions import ValidationError
from algotest.schemas.algorithm import (
    AlgorithmListResponse,
    ErrorResponse,
    ExecutionResult,
    RunAlgorithmRequest,
)
from algotest.services.catalog import ALGORITHMS
from algotest.services.executor import executor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Algorithms"])


@router.get(
    "/algorithms",
    response_model=AlgorithmListResponse,
    summary="List runnable algorithms",
)
async def list_algorithms() -> AlgorithmListResponse:
    return AlgorithmListResponse(algorithms=list(ALGORITHMS), count=len(ALGORITHMS))


@router.post(
    "/run-algorithm",
    response_model=ExecutionResult,
    responses={
        200: {"description": "Algorithm output with timing", "model": ExecutionResult},
        400: {"description": "Missing fields, malformed input or unknown algorithm", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Run an algorithm on the supplied input",
)
async def run_algorithm(
    body: Optional[RunAlgorithmRequest] = Body(default=None),
) -> ExecutionResult:
    """
    Run one algorithm and return its result with execution timing.

    Example:
        POST /api/run-algorithm {"algorithmId": 1, "input": [5, 3, 1, 4, 2]}
        → {"algorithmId": 1, "input": [5, 3, 1, 4, 2], "result": [1, 2, 3, 4, 5],
           "executionTimeMs": 0, "executionTime": "0ms", "timestamp": "..."}
    """
    if body is None:
        raise ValidationError(
            "Missing required fields: algorithmId and input",
            context={"fields": ["algorithmId", "input"]},
        )

    result = executor.run(body.algorithm_id, body.input)
    logger.debug(
        "Algorithm %s finished in %dms", result.algorithm_id, result.execution_time_ms
    )
    return result
