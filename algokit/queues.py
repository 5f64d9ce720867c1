"""Fixed-capacity FIFO, priority and double-ended queues."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(IndexError):
    """Raised when removing from an empty queue."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class BoundedQueue:
    """A linear FIFO queue over ``capacity`` slots.

    Slots freed by ``dequeue`` are not reused until the queue has been
    emptied completely: once ``capacity`` items have been enqueued since the
    queue was last empty, further enqueues overflow.
    """

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()
        self._slots_used = 0

    def enqueue(self, item: Any) -> None:
        """Append ``item`` at the rear."""
        if self._slots_used >= self.capacity:
            raise QueueFullError("queue overflow")
        self._items.append(item)
        self._slots_used += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("queue underflow")
        item = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return item

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self.capacity}, items={list(self)!r})"


def _priority_of(entry: tuple[Any, Any]) -> Any:
    return entry[1]


class BoundedPriorityQueue:
    """A queue kept in ascending order of priority, holding at most ``capacity`` items.

    The item with the lowest priority value is dequeued first. A new item is
    placed ahead of items already queued with the same priority.
    """

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _check_capacity(capacity)
        self._entries: list[tuple[Any, Any]] = []

    def enqueue(self, item: Any, priority: Any) -> None:
        """Insert ``item`` at the position given by ``priority``."""
        if len(self._entries) >= self.capacity:
            raise QueueFullError("queue overflow")
        position = bisect_left(self._entries, priority, key=_priority_of)
        self._entries.insert(position, (item, priority))

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if not self._entries:
            raise QueueEmptyError("queue underflow")
        item, _ = self._entries.pop(0)
        return item

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over ``(item, priority)`` pairs from front to rear."""
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"BoundedPriorityQueue(capacity={self.capacity}, entries={self._entries!r})"


class CircularDeque:
    """A double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 7) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[Any] = deque()

    def _ensure_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise QueueFullError("deque full")

    def _ensure_items(self) -> None:
        if not self._items:
            raise QueueEmptyError("deque empty")

    def push_front(self, item: Any) -> None:
        """Insert ``item`` at the front."""
        self._ensure_room()
        self._items.appendleft(item)

    def push_back(self, item: Any) -> None:
        """Insert ``item`` at the rear."""
        self._ensure_room()
        self._items.append(item)

    def pop_front(self) -> Any:
        """Remove and return the item at the front."""
        self._ensure_items()
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the item at the rear."""
        self._ensure_items()
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularDeque(capacity={self.capacity}, items={list(self)!r})"