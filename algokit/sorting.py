"""Classic comparison sorts.

Every function takes any iterable and returns a new sorted list in
ascending order. The input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def _sift_down(heap: list[Any], root: int, size: int) -> None:
    """Restore the max-heap property below ``root`` within ``heap[:size]``."""
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left < size and heap[largest] < heap[left]:
            largest = left
        if right < size and heap[largest] < heap[right]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    result = list(items)
    size = len(result)
    for root in reversed(range(size // 2)):
        _sift_down(result, root, size)
    for end in reversed(range(1, size)):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end)
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(a: list[Any], low: int, high: int) -> int:
    """Partition ``a[low:high + 1]`` around ``a[low]``; return the pivot's final index."""
    pivot = a[low]
    i = low + 1
    j = high
    while i <= j:
        while i <= high and a[i] <= pivot:
            i += 1
        while j >= low and a[j] > pivot:
            j -= 1
        if i < j:
            a[i], a[j] = a[j], a[i]
    a[low], a[j] = a[j], a[low]
    return j


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quicksort using the first element of each range as the pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(result, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly selecting the smallest remaining element."""
    result = list(items)
    for i in range(len(result) - 1):
        min_index = min(range(i, len(result)), key=result.__getitem__)
        if min_index != i:
            result[i], result[min_index] = result[min_index], result[i]
    return result