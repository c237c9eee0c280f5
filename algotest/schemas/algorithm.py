"""
AlgoTest Backend - Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the JSON contract of the API.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation.
Who:   Used by route handlers and by the execution dispatcher.

Field naming:
    Python attributes are snake_case; the wire format is camelCase
    (algorithmId, executionTimeMs). The alias generator bridges the two and
    `populate_by_name` lets internal code construct models with either form.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


CAMEL_CASE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class Category(str, Enum):
    SORTING = "Sorting"
    SEARCH = "Search"
    GRAPH = "Graph"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


# ══════════════════════════════════════════════════════════════════════════
# Catalog Models
# ══════════════════════════════════════════════════════════════════════════


class AlgorithmDescriptor(BaseModel):
    """
    What:  Static description of one runnable algorithm.
    Who:   Listed by GET /api/algorithms; `id` is the value clients send as
           `algorithmId` to POST /api/run-algorithm.
    """
    id: int = Field(description="Algorithm identifier accepted by /api/run-algorithm")
    name: str = Field(description="Display name")
    description: str = Field(description="One-line summary including complexity")
    category: Category = Field(description="Sorting, Search or Graph")
    difficulty: Difficulty = Field(description="Easy, Medium or Hard")

    model_config = {"frozen": True}


class AlgorithmListResponse(BaseModel):
    """Response wrapper for GET /api/algorithms."""
    algorithms: List[AlgorithmDescriptor] = Field(description="Every runnable algorithm")
    count: int = Field(description="Number of algorithms in the catalog")


# ══════════════════════════════════════════════════════════════════════════
# Execution Models
# ══════════════════════════════════════════════════════════════════════════


class RunAlgorithmRequest(BaseModel):
    """
    What:  Body of POST /api/run-algorithm.

    Both fields accept any JSON value; the dispatcher owns validation and
    answers missing or malformed fields with 400, never 422.

    Input shapes by algorithm:
        1, 2:  [5, 3, 1, 4, 2]
        3:     {"array": [1, 2, 3, 4, 5], "target": 4}
        4:     anything non-null
    """
    algorithm_id: Any = Field(default=None, description="Identifier from GET /api/algorithms")
    input: Any = Field(default=None, description="Algorithm input payload")

    model_config = CAMEL_CASE_CONFIG


class ShortestPathStub(BaseModel):
    """Fixed result returned for the shortest-path algorithm."""
    message: str = "Dijkstra's algorithm simulation"
    path: str = "A->B->C"


class ExecutionResult(BaseModel):
    """
    What:  Outcome of one algorithm run.
    Who:   Returned by POST /api/run-algorithm with HTTP 200.

    Result shapes by algorithm:
        1, 2:  sorted list of numbers
        3:     zero-based index of the target, or -1 when absent
        4:     {"message": ..., "path": "A->B->C"}
    """
    algorithm_id: Any = Field(description="Identifier exactly as supplied by the client")
    input: Any = Field(description="Input exactly as supplied by the client")
    result: Any = Field(description="Algorithm output")
    execution_time_ms: int = Field(ge=0, description="Wall-clock duration of the algorithm call")
    execution_time: str = Field(description="Same duration formatted as '<n>ms'")
    timestamp: str = Field(description="When the result was produced (UTC ISO 8601)")

    model_config = CAMEL_CASE_CONFIG


# ══════════════════════════════════════════════════════════════════════════
# Service Metadata Models
# ══════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Liveness response for GET /health."""
    status: str = Field(description="Always 'OK' while the process is serving")
    timestamp: str = Field(description="Current server time (UTC ISO 8601)")
    service: str = Field(description="Service name from configuration")


class ApiInfoResponse(BaseModel):
    """Welcome/discovery response for GET /api/test."""
    message: str
    version: str
    endpoints: List[str]


class ErrorResponse(BaseModel):
    """
    What:  Error body shape shared by all failure responses.

    Fields present by status:
        400: error, details, request_id
        404: error, path, request_id
        500: error, message, request_id
    """
    error: str = Field(description="Human-readable error summary")
    message: Optional[str] = Field(default=None, description="Fault detail (500 only)")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    path: Optional[str] = Field(default=None, description="Requested URL (404 only)")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
