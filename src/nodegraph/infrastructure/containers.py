"""Linear containers consumed by the graph engine.

``Queue`` and ``Stack`` supply traversal order for BFS and DFS;
``MinPriorityQueue`` drives Dijkstra and A*.  All three raise
``IndexError`` when read while empty.
"""

from __future__ import annotations

import heapq
import itertools
from collections import deque


class Queue[T]:
    """FIFO queue with O(1) enqueue and dequeue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    @property
    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]


class Stack[T]:
    """LIFO stack with O(1) push and pop."""

    def __init__(self) -> None:
        self._items: list[T] = []

    @property
    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]


class MinPriorityQueue[T]:
    """Binary-heap priority queue; lowest priority value is dequeued first.

    Ties are broken by insertion order, so items themselves are never
    compared and need not be orderable.  There is no decrease-key: callers
    enqueue a fresh entry and discard stale ones on dequeue.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    @property
    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def enqueue(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def dequeue(self) -> T:
        if not self._heap:
            raise IndexError("dequeue from an empty priority queue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek at an empty priority queue")
        return self._heap[0][2]
