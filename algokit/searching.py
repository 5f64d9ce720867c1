"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> bool:
    """Return whether ``target`` occurs in the ascending sequence ``items``."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = (left + right) // 2
        value = items[mid]
        if value == target:
            return True
        if value > target:
            right = mid - 1
        else:
            left = mid + 1
    return False


def linear_search(items: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next((index for index, value in enumerate(items) if value == target), None)