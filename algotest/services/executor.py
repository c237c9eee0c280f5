"""
AlgoTest Backend - Execution Dispatcher
========================================

What:  Single entry point that turns (algorithmId, input) into an ExecutionResult.
How:   1. Reject absent fields (ValidationError)
       2. Resolve the identifier to a typed request variant, validating the
          input shape for that variant (UnknownAlgorithmError / ValidationError)
       3. Run the matching library function and time it with perf_counter
       4. Wrap output, original input, duration and timestamp in ExecutionResult
Who:   Called by POST /api/run-algorithm.

Dispatch Table:
    1 → SortRequest(bubble_sort)
    2 → SortRequest(quick_sort)
    3 → SearchRequest           input shaped as {"array": [...], "target": n}
    4 → StubRequest             fixed {"message", "path": "A->B->C"}

The dispatcher is stateless and performs no logging or I/O. Sorts run on a
copy, so the input echoed back in the result is exactly what the client sent.
"""

import math
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Union, assert_never

from algotest.config import settings
from algotest.exceptions import UnknownAlgorithmError, ValidationError
from algotest.schemas.algorithm import ExecutionResult, ShortestPathStub
from algotest.services import catalog
from algotest.services.algorithms import binary_search, bubble_sort, quick_sort
from algotest.services.clock import utc_timestamp

Number = Union[int, float]


# ══════════════════════════════════════════════════════════════════════════
# Request Variants
# ══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class SortRequest:
    algorithm: Callable[[List[Number]], List[Number]]
    values: List[Number]


@dataclass(frozen=True)
class SearchRequest:
    values: List[Number]
    target: Number


@dataclass(frozen=True)
class StubRequest:
    payload: Any


AlgorithmRequest = Union[SortRequest, SearchRequest, StubRequest]


def _is_number(value: Any) -> bool:
    # bool is an int subclass but JSON true/false are not numbers; NaN and
    # Infinity parse from JSON but have no place in an ordering
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _as_identifier(value: Any) -> Optional[int]:
    """Integer form of a JSON number identifier; None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class AlgorithmExecutor:
    """
    Maps algorithm identifiers to library functions and times their execution.

    Error Handling Strategy:
        Every failure is raised before the algorithm starts; once a request
        variant is built, running it cannot fail for well-formed numbers.
    """

    def run(self, algorithm_id: Any, payload: Any) -> ExecutionResult:
        """
        Execute one algorithm and return its timed result.

        Raises:
            ValidationError: algorithm_id or payload is None, or the payload
                does not have the shape the algorithm expects.
            UnknownAlgorithmError: algorithm_id is not in the catalog.
        """
        if algorithm_id is None or payload is None:
            raise ValidationError(
                "Missing required fields: algorithmId and input",
                context={"fields": ["algorithmId", "input"]},
            )

        request = self.build_request(algorithm_id, payload)

        start_time = time.perf_counter()
        result = self.execute(request)
        execution_time_ms = int((time.perf_counter() - start_time) * 1000)

        return ExecutionResult(
            algorithm_id=algorithm_id,
            input=payload,
            result=result,
            execution_time_ms=execution_time_ms,
            execution_time=f"{execution_time_ms}ms",
            timestamp=utc_timestamp(),
        )

    def build_request(self, algorithm_id: Any, payload: Any) -> AlgorithmRequest:
        """Resolve an identifier and payload to a validated request variant."""
        match _as_identifier(algorithm_id):
            case catalog.BUBBLE_SORT_ID:
                return SortRequest(bubble_sort, self._numbers(payload, "input"))
            case catalog.QUICK_SORT_ID:
                return SortRequest(quick_sort, self._numbers(payload, "input"))
            case catalog.BINARY_SEARCH_ID:
                return self._search_request(payload)
            case catalog.SHORTEST_PATH_ID:
                return StubRequest(payload)
            case _:
                raise UnknownAlgorithmError(algorithm_id)

    @staticmethod
    def execute(request: AlgorithmRequest) -> Any:
        """Run a request variant and return the raw algorithm output."""
        match request:
            case SortRequest(algorithm=algorithm, values=values):
                return algorithm(list(values))
            case SearchRequest(values=values, target=target):
                return binary_search(values, target)
            case StubRequest():
                return ShortestPathStub().model_dump()
            case _:
                assert_never(request)

    # ── Input Validation ──────────────────────────────────────────────────

    def _search_request(self, payload: Any) -> SearchRequest:
        if not isinstance(payload, dict):
            raise ValidationError(
                "Binary search input must be an object with 'array' and 'target'",
                field="input",
            )
        if "array" not in payload or "target" not in payload:
            raise ValidationError(
                "Binary search input requires both 'array' and 'target'",
                field="input",
            )

        target = payload["target"]
        if not _is_number(target):
            raise ValidationError("'target' must be a number", field="input.target")

        return SearchRequest(self._numbers(payload["array"], "input.array"), target)

    @staticmethod
    def _numbers(value: Any, field: str) -> List[Number]:
        """Validate a JSON array of numbers and return a copy of it."""
        if not isinstance(value, list):
            raise ValidationError(f"'{field}' must be an array of numbers", field=field)
        if len(value) > settings.max_input_length:
            raise ValidationError(
                f"'{field}' has {len(value)} elements; the maximum is {settings.max_input_length}",
                field=field,
                context={"max_input_length": settings.max_input_length},
            )
        if not all(_is_number(item) for item in value):
            raise ValidationError(f"'{field}' must contain only numbers", field=field)
        return list(value)


# Module-level singleton used by the routes
executor = AlgorithmExecutor()
