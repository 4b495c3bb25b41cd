"""
Comparison sorts over mutable sequences.

Every sort rearranges the passed sequence in place into ascending order and
returns None, like ``list.sort``. Items only need to support ``<`` against
each other, so anything orderable works, including graph edges (which
order by weight).

Provided algorithms:
- merge_sort: O(n log n), stable
- quick_sort: O(n log n) expected, O(n^2) worst case
- heap_sort: O(n log n)
- shell_sort: gap-halving sequence, O(n^2) worst case
- insertion_sort, selection_sort, bubble_sort: O(n^2)

Only merge_sort and insertion_sort (and bubble_sort) are stable. Callers that
rely on ties keeping their original order, such as the MST candidate
ordering, must use merge_sort.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 2 (insertion, merge), 6 (heapsort), 7 (quicksort).
"""

from typing import Any, Callable, Dict, MutableSequence


def _swap(a: MutableSequence[Any], i: int, j: int) -> None:
    if i != j:
        a[i], a[j] = a[j], a[i]


def merge_sort(items: MutableSequence[Any]) -> None:
    """
    Sort items in place with top-down merge sort.

    Stable: equal items keep their relative order.

    Args:
        items: Sequence to sort.

    Complexity: O(n log n) time, O(n) extra space.

    Example:
        >>> data = [3, 1, 2]
        >>> merge_sort(data)
        >>> data
        [1, 2, 3]
    """
    if len(items) > 1:
        _merge_sort(items, 0, len(items) - 1)


def _merge_sort(a: MutableSequence[Any], low: int, high: int) -> None:
    if low < high:
        middle = low + (high - low) // 2
        _merge_sort(a, low, middle)
        _merge_sort(a, middle + 1, high)
        _merge(a, low, middle, high)


def _merge(a: MutableSequence[Any], low: int, middle: int, high: int) -> None:
    # a[low:middle+1] and a[middle+1:high+1] are each already sorted
    lower = a[low : middle + 1]
    upper = a[middle + 1 : high + 1]

    i = j = 0
    for k in range(low, high + 1):
        # Take from upper only when strictly smaller so ties stay stable
        if j >= len(upper) or (i < len(lower) and not upper[j] < lower[i]):
            a[k] = lower[i]
            i += 1
        else:
            a[k] = upper[j]
            j += 1


def quick_sort(items: MutableSequence[Any]) -> None:
    """
    Sort items in place with quicksort (Lomuto partition).

    The middle element is used as pivot, and the loop recurses only into the
    smaller partition, so recursion depth stays O(log n) even on already
    sorted input.

    Args:
        items: Sequence to sort.

    Complexity: O(n log n) expected, O(n^2) worst case.
    """
    _quick_sort(items, 0, len(items) - 1)


def _quick_sort(a: MutableSequence[Any], low: int, high: int) -> None:
    while low < high:
        wall = _partition(a, low, high)
        if wall - low < high - wall:
            _quick_sort(a, low, wall - 1)
            low = wall + 1
        else:
            _quick_sort(a, wall + 1, high)
            high = wall - 1


def _partition(a: MutableSequence[Any], low: int, high: int) -> int:
    _swap(a, low + (high - low) // 2, high)
    pivot = a[high]
    wall = low
    for current in range(low, high):
        if a[current] < pivot:
            _swap(a, current, wall)
            wall += 1
    _swap(a, wall, high)
    return wall


def heap_sort(items: MutableSequence[Any]) -> None:
    """
    Sort items in place with heapsort.

    Builds a max-heap, then repeatedly moves the root to the end of the
    unsorted region and restores the heap property.

    Args:
        items: Sequence to sort.

    Complexity: O(n log n) time, O(1) extra space.
    """
    n = len(items)
    for parent in range(n // 2 - 1, -1, -1):
        _sift_down(items, parent, n - 1)

    for last in range(n - 1, 0, -1):
        _swap(items, 0, last)
        _sift_down(items, 0, last - 1)


def _sift_down(a: MutableSequence[Any], parent: int, last: int) -> None:
    while 2 * parent + 1 <= last:
        child = 2 * parent + 1
        if child + 1 <= last and a[child] < a[child + 1]:
            child += 1
        if a[parent] < a[child]:
            _swap(a, parent, child)
            parent = child
        else:
            return


def shell_sort(items: MutableSequence[Any]) -> None:
    """
    Sort items in place with Shell sort using gaps n/2, n/4, ..., 1.

    The final pass (gap 1) is a plain insertion sort over a nearly sorted
    sequence.

    Args:
        items: Sequence to sort.

    Complexity: O(n^2) worst case for this gap sequence.
    """
    gap = len(items) // 2
    while gap >= 1:
        for end in range(gap, len(items)):
            j = end
            while j - gap >= 0 and items[j] < items[j - gap]:
                _swap(items, j, j - gap)
                j -= gap
        gap //= 2


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place with insertion sort. Stable, O(n^2)."""
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            _swap(items, j, j - 1)
            j -= 1


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place with selection sort. O(n^2), not stable."""
    n = len(items)
    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            if items[j] < items[smallest]:
                smallest = j
        _swap(items, i, smallest)


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort items in place with bubble sort. Stable, O(n^2).

    Stops early once a pass makes no swaps.
    """
    for end in range(len(items), 1, -1):
        swapped = False
        for j in range(1, end):
            if items[j] < items[j - 1]:
                _swap(items, j, j - 1)
                swapped = True
        if not swapped:
            return


def validate_sorted(items: MutableSequence[Any]) -> bool:
    """
    Check that items are in ascending order.

    Args:
        items: Sequence to check.

    Returns:
        True if no item is smaller than its predecessor.
    """
    return all(not items[i] < items[i - 1] for i in range(1, len(items)))


ALGORITHMS: Dict[str, Callable[[MutableSequence[Any]], None]] = {
    "merge": merge_sort,
    "quick": quick_sort,
    "heap": heap_sort,
    "shell": shell_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "bubble": bubble_sort,
}
