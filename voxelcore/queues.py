"""Thread-safe queues: a bounded blocking queue and a double-buffered queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueCancelled(Exception):
    """Raised by :meth:`BlockingQueue.dequeue` once the queue has been cancelled."""


class BlockingQueue(Generic[T]):
    """A bounded FIFO whose consumers block until an item arrives or it is cancelled."""

    def __init__(self, max_count: int) -> None:
        self._items: deque[T] = deque()
        self._condition = threading.Condition()
        self._max_count = max_count
        self._cancelled = False

    def try_enqueue(self, item: T) -> bool:
        """Add an item unless the queue is full; return whether it was added."""
        with self._condition:
            if len(self._items) >= self._max_count:
                return False
            self._items.append(item)
            self._condition.notify()
        return True

    def dequeue(self) -> T:
        """Remove and return the oldest item, waiting for one if necessary."""
        with self._condition:
            while True:
                if self._cancelled:
                    raise QueueCancelled("queue was cancelled")
                if self._items:
                    return self._items.popleft()
                self._condition.wait()

    def cancel(self) -> None:
        """Wake every waiting consumer and make all further dequeues fail."""
        with self._condition:
            self._cancelled = True
            self._condition.notify_all()


class BufferedQueue(Generic[T]):
    """Two queues that swap roles: producers fill one while the other is drained."""

    def __init__(self) -> None:
        self._queues: list[deque[T]] = [deque(), deque()]
        self._index = 0
        self._lock = threading.Lock()

    def enqueue(self, item: T) -> None:
        with self._lock:
            self._queues[self._index].append(item)

    def swap_dequeue(self) -> deque[T]:
        """Return the queue being filled and direct new items to the other one."""
        with self._lock:
            filled = self._queues[self._index]
            self._index ^= 1
            return filled

    def clear(self) -> None:
        with self._lock:
            self._queues = [deque(), deque()]