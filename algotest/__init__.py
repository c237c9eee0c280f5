"""
AlgoTest Backend - Application Package Initializer
===================================================

What: Marks the `algotest` directory as a Python package.
Who:  Used by uvicorn (`algotest.main:app`), pytest and the `algotest` console script.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (Dispatcher + Library)  │  ← Validation, timing, algorithms
    ├─────────────────────────────────────┤
    │           Schemas (Data)            │  ← Pydantic API contracts
    └─────────────────────────────────────┘

    There is no persistence layer: every request is computed from its own body.
"""

__version__ = "1.0.0"
