# Services package init
"""
AlgoTest Backend - Services Layer
==================================

Service Inventory:
    - algorithms.py:  bubble_sort, quick_sort, binary_search (pure functions)
    - catalog.py:     static AlgorithmDescriptor records and their identifiers
    - executor.py:    AlgorithmExecutor, identifier + input → timed ExecutionResult
    - clock.py:       UTC ISO 8601 timestamps
"""
