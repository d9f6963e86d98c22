"""Binary min-heap priority queue used as the Dijkstra frontier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, TypeVar

from .exceptions import EmptyQueueError

T = TypeVar("T")


@dataclass(frozen=True)
class QueueEntry(Generic[T]):
    """A ``(value, priority)`` pair held by :class:`PriorityQueue`."""

    value: T
    priority: float


class PriorityQueue(Generic[T]):
    """Min-heap keyed by priority.

    The heap is stored implicitly in a list: the parent of index ``i`` is
    ``(i - 1) // 2`` and its children are ``2i + 1`` and ``2i + 2``. Entries
    with equal priority are not reordered relative to their parent, so the
    dequeue order for ties is deterministic for a given insertion sequence.
    Duplicate values are allowed; Dijkstra relies on this and discards stale
    entries itself.

    Examples:
        ```python
        >>> pq = PriorityQueue()
        >>> pq.enqueue("b", 2.0)
        'b'
        >>> pq.enqueue("a", 1.0)
        'a'
        >>> pq.dequeue()
        QueueEntry(value='a', priority=1.0)
        ```
    """

    def __init__(self) -> None:
        self._heap: List[QueueEntry[T]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def enqueue(self, value: T, priority: float) -> T:
        """Insert ``value`` with ``priority`` and return ``value``.

        Any priority is accepted, including ``math.inf``.
        """
        self._heap.append(QueueEntry(value, priority))
        self._sift_up(len(self._heap) - 1)
        return value

    def dequeue(self) -> QueueEntry[T]:
        """Remove and return the entry with the smallest priority.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("dequeue from an empty priority queue")
        heap = self._heap
        heap[0], heap[-1] = heap[-1], heap[0]
        smallest = heap.pop()
        if heap:
            self._sink_down(0)
        return smallest

    def peek(self) -> QueueEntry[T]:
        """Return the entry with the smallest priority without removing it.

        Raises:
            EmptyQueueError: If the queue is empty.
        """
        if not self._heap:
            raise EmptyQueueError("peek into an empty priority queue")
        return self._heap[0]

    # ---- internals ----------------------------------------------------

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        element = heap[index]
        while index > 0:
            parent_index = (index - 1) // 2
            parent = heap[parent_index]
            if parent.priority <= element.priority:
                break
            heap[parent_index] = element
            heap[index] = parent
            index = parent_index

    def _sink_down(self, index: int) -> None:
        heap = self._heap
        length = len(heap)
        element = heap[index]
        while True:
            left_index = 2 * index + 1
            right_index = 2 * index + 2
            swap = None

            if left_index < length and heap[left_index].priority < element.priority:
                swap = left_index

            if right_index < length:
                right = heap[right_index]
                if (swap is None and right.priority < element.priority) or (
                    swap is not None and right.priority < heap[swap].priority
                ):
                    swap = right_index

            if swap is None:
                break
            heap[index] = heap[swap]
            heap[swap] = element
            index = swap


__all__ = ["PriorityQueue", "QueueEntry"]
