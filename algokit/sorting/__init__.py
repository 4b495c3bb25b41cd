"""
In-place comparison sorts.

All functions sort a mutable sequence ascending and return None. merge_sort
is the stable O(n log n) choice used by the graph algorithms.
"""

from .sorts import (
    ALGORITHMS,
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
    validate_sorted,
)

__all__ = [
    "ALGORITHMS",
    "merge_sort",
    "quick_sort",
    "heap_sort",
    "shell_sort",
    "insertion_sort",
    "selection_sort",
    "bubble_sort",
    "validate_sorted",
]
