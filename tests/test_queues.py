import threading
import time

import pytest

from voxelcore.queues import BlockingQueue, BufferedQueue, QueueCancelled


def test_try_enqueue_respects_capacity():
    queue = BlockingQueue(2)
    assert queue.try_enqueue("a") is True
    assert queue.try_enqueue("b") is True
    assert queue.try_enqueue("c") is False


def test_dequeue_is_fifo():
    queue = BlockingQueue(3)
    for item in ("a", "b", "c"):
        queue.try_enqueue(item)
    assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]


def test_dequeue_frees_capacity():
    queue = BlockingQueue(1)
    queue.try_enqueue("a")
    assert queue.dequeue() == "a"
    assert queue.try_enqueue("b") is True


def test_cancel_fails_dequeue_even_with_items():
    queue = BlockingQueue(2)
    queue.try_enqueue("a")
    queue.cancel()
    with pytest.raises(QueueCancelled):
        queue.dequeue()


def test_dequeue_blocks_until_item_arrives():
    queue = BlockingQueue(4)
    results = []
    worker = threading.Thread(target=lambda: results.append(queue.dequeue()))
    worker.start()
    time.sleep(0.05)
    assert results == []
    assert queue.try_enqueue("item")
    worker.join(timeout=5)
    assert results == ["item"]


def test_cancel_wakes_blocked_consumer():
    queue = BlockingQueue(4)
    errors = []

    def consume():
        try:
            queue.dequeue()
        except QueueCancelled as exc:
            errors.append(exc)

    worker = threading.Thread(target=consume)
    worker.start()
    time.sleep(0.05)
    queue.cancel()
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert len(errors) == 1
    with pytest.raises(QueueCancelled):
        queue.dequeue()


def test_buffered_queue_swaps():
    queue = BufferedQueue()
    queue.enqueue(1)
    queue.enqueue(2)
    first = queue.swap_dequeue()
    queue.enqueue(3)
    assert list(first) == [1, 2]
    second = queue.swap_dequeue()
    assert list(second) == [3]


def test_buffered_queue_returns_same_deques_alternately():
    queue = BufferedQueue()
    first = queue.swap_dequeue()
    second = queue.swap_dequeue()
    third = queue.swap_dequeue()
    assert first is third
    assert first is not second


def test_buffered_queue_clear():
    queue = BufferedQueue()
    queue.enqueue("x")
    queue.clear()
    assert list(queue.swap_dequeue()) == []
    assert list(queue.swap_dequeue()) == []