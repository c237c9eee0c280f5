"""
AlgoTest Backend - Algorithm Library
=====================================

What:  Textbook sorting and searching functions over numeric sequences.
How:   Plain functions with no state, no I/O and no logging. Callers own the
       lists they pass in.

Complexity:
    bubble_sort:    O(n²) time, O(1) extra space, in place, stable
    quick_sort:     O(n log n) average, O(n²) worst case, O(n) extra space per level
    binary_search:  O(log n) time, O(1) space
"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def bubble_sort(items: List[T]) -> List[T]:
    """
    Sort `items` ascending in place using adjacent swaps and return it.

    Each pass bubbles the largest remaining element to the end of the
    unsorted prefix, so pass `i` only needs to inspect `n - i - 1` pairs.
    """
    n = len(items)
    for i in range(n - 1):
        for j in range(n - i - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def quick_sort(items: Sequence[T]) -> List[T]:
    """
    Return a new ascending list using a three-way partition quick sort.

    The pivot is the element at the middle index. Already-sorted input with
    a repeated middle pivot degrades to quadratic time.
    """
    if len(items) <= 1:
        return list(items)

    pivot = items[len(items) // 2]
    left = [x for x in items if x < pivot]
    middle = [x for x in items if x == pivot]
    right = [x for x in items if x > pivot]

    return quick_sort(left) + middle + quick_sort(right)


def binary_search(items: Sequence[T], target: T) -> int:
    """
    Return the index of `target` in ascending `items`, or -1 if absent.

    `items` must already be sorted; this is not checked. With duplicates the
    index of whichever match the midpoint lands on first is returned.
    """
    left = 0
    right = len(items) - 1

    while left <= right:
        mid = (left + right) // 2
        if items[mid] == target:
            return mid
        if items[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    return -1
