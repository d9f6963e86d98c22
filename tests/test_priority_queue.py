"""
Unit tests for the binary min-heap PriorityQueue.
"""

import math
import random

import pytest

from adjgraph import EmptyQueueError, PriorityQueue, QueueEntry


def _assert_heap(pq: PriorityQueue) -> None:
    heap = pq._heap
    for i in range(len(heap)):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(heap):
                assert heap[i].priority <= heap[child].priority


def test_enqueue_returns_value():
    pq = PriorityQueue()
    assert pq.enqueue("A", 3.0) == "A"
    assert len(pq) == 1


def test_dequeue_returns_smallest_entry():
    pq = PriorityQueue()
    pq.enqueue("B", 2.0)
    pq.enqueue("C", 3.0)
    pq.enqueue("A", 1.0)

    assert pq.dequeue() == QueueEntry("A", 1.0)
    assert pq.dequeue().value == "B"
    assert pq.dequeue().value == "C"
    assert not pq


def test_dequeued_priorities_are_non_decreasing():
    rnd = random.Random(7)
    pq = PriorityQueue()
    for i in range(200):
        pq.enqueue(f"v{i}", rnd.choice([rnd.random() * 50, math.inf, 1.0]))
        _assert_heap(pq)

    out = []
    while pq:
        out.append(pq.dequeue().priority)
        _assert_heap(pq)

    assert out == sorted(out)
    assert len(out) == 200


def test_interleaved_operations_keep_heap_order():
    rnd = random.Random(3)
    pq = PriorityQueue()
    last = -math.inf
    for step in range(300):
        if pq and rnd.random() < 0.4:
            entry = pq.dequeue()
            # Anything enqueued afterwards may be smaller, so only compare
            # against the current minimum.
            assert not pq or entry.priority <= pq.peek().priority
        else:
            pq.enqueue(step, rnd.randint(0, 20))
        _assert_heap(pq)
    while pq:
        entry = pq.dequeue()
        assert entry.priority >= last
        last = entry.priority


def test_infinite_priority_is_accepted():
    pq = PriorityQueue()
    pq.enqueue("far", math.inf)
    pq.enqueue("near", 0.0)

    assert pq.dequeue().value == "near"
    assert pq.dequeue() == QueueEntry("far", math.inf)


def test_duplicate_values_are_kept():
    pq = PriorityQueue()
    pq.enqueue("A", 5.0)
    pq.enqueue("A", 1.0)

    assert [pq.dequeue().priority, pq.dequeue().priority] == [1.0, 5.0]


def test_sink_down_prefers_left_child_on_ties():
    pq = PriorityQueue()
    pq.enqueue("root", 0.0)
    pq.enqueue("left", 2.0)
    pq.enqueue("right", 2.0)
    pq.enqueue("leaf", 5.0)

    assert [pq.dequeue().value for _ in range(4)] == ["root", "left", "right", "leaf"]


def test_equal_priorities_dequeue_deterministically():
    pq = PriorityQueue()
    pq.enqueue("a", 0.0)
    pq.enqueue("b", 1.0)
    pq.enqueue("c", 1.0)

    assert [pq.dequeue().value for _ in range(3)] == ["a", "c", "b"]


def test_peek_does_not_remove():
    pq = PriorityQueue()
    pq.enqueue("x", 4.0)
    pq.enqueue("y", 2.0)

    assert pq.peek().value == "y"
    assert len(pq) == 2


def test_empty_queue_fails_fast():
    pq = PriorityQueue()

    with pytest.raises(EmptyQueueError):
        pq.dequeue()
    with pytest.raises(IndexError):
        pq.peek()
