"""Static catalog of the algorithms the dispatcher can run."""

from typing import Tuple

from algotest.schemas.algorithm import AlgorithmDescriptor, Category, Difficulty

BUBBLE_SORT_ID = 1
QUICK_SORT_ID = 2
BINARY_SEARCH_ID = 3
SHORTEST_PATH_ID = 4

ALGORITHMS: Tuple[AlgorithmDescriptor, ...] = (
    AlgorithmDescriptor(
        id=BUBBLE_SORT_ID,
        name="Bubble Sort",
        description="Simple sorting algorithm with O(n²) time complexity",
        category=Category.SORTING,
        difficulty=Difficulty.EASY,
    ),
    AlgorithmDescriptor(
        id=QUICK_SORT_ID,
        name="Quick Sort",
        description="Efficient sorting algorithm with O(n log n) average time complexity",
        category=Category.SORTING,
        difficulty=Difficulty.MEDIUM,
    ),
    AlgorithmDescriptor(
        id=BINARY_SEARCH_ID,
        name="Binary Search",
        description="Search algorithm for sorted arrays with O(log n) time complexity",
        category=Category.SEARCH,
        difficulty=Difficulty.EASY,
    ),
    AlgorithmDescriptor(
        id=SHORTEST_PATH_ID,
        name="Dijkstra's Algorithm",
        description="Shortest path algorithm for weighted graphs",
        category=Category.GRAPH,
        difficulty=Difficulty.HARD,
    ),
)
