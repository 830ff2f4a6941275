"""Single-producer, single-consumer queue with blocking dequeue operations."""

from __future__ import annotations

from datetime import timedelta
from typing import Generic, TypeVar

from reformant.rwqueue import (
    DEFAULT_MAX_BLOCK_SIZE,
    DEFAULT_SIZE,
    QueueEmpty,
    ReaderWriterQueue,
)
from reformant.semaphore import LightweightSemaphore

T = TypeVar("T")

_ONE_MICROSECOND = timedelta(microseconds=1)


class BlockingReaderWriterQueue(Generic[T]):
    """A :class:`ReaderWriterQueue` whose consumer can wait for elements.

    A semaphore counts the queued elements, so the consumer may block until
    the producer has enqueued something.
    """

    def __init__(
        self, size: int = DEFAULT_SIZE, max_block_size: int = DEFAULT_MAX_BLOCK_SIZE
    ) -> None:
        self._inner: ReaderWriterQueue[T] = ReaderWriterQueue(size, max_block_size)
        self._sema = LightweightSemaphore()

    def try_enqueue(self, element: T) -> bool:
        """Enqueue ``element`` if there is room without allocating.

        Returns True if it was enqueued and False if the queue was full.
        """
        if self._inner.try_enqueue(element):
            self._sema.signal()
            return True
        return False

    def enqueue(self, element: T) -> None:
        """Enqueue ``element``, adding a block if the queue is full."""
        self._inner.enqueue(element)
        self._sema.signal()

    def try_dequeue(self) -> T:
        """Remove and return the front element without waiting.

        Raises QueueEmpty if no element is available.
        """
        if not self._sema.try_wait():
            raise QueueEmpty("queue is empty")
        return self._inner.try_dequeue()

    def wait_dequeue(self) -> T:
        """Remove and return the front element, waiting as long as needed."""
        while not self._sema.wait():
            pass
        return self._inner.try_dequeue()

    def wait_dequeue_timed(self, timeout: int | timedelta) -> T:
        """Remove and return the front element, waiting at most ``timeout``.

        ``timeout`` is a number of microseconds or a :class:`timedelta`. A
        negative timeout waits without limit. Raises QueueEmpty if the
        timeout expires before an element is available.
        """
        if isinstance(timeout, timedelta):
            timeout_usecs = timeout // _ONE_MICROSECOND
        else:
            timeout_usecs = int(timeout)
        if not self._sema.wait(timeout_usecs):
            raise QueueEmpty("timed out waiting for an element")
        return self._inner.try_dequeue()

    def peek(self) -> T:
        """Return the front element without removing it.

        Raises QueueEmpty if the queue appears empty. Consumer thread only.
        """
        return self._inner.peek()

    def pop(self) -> bool:
        """Remove the front element without returning it.

        Returns False if the queue appeared empty.
        """
        if self._sema.try_wait():
            self._inner.pop()
            return True
        return False

    def size_approx(self) -> int:
        """Approximate number of elements currently queued."""
        return self._sema.available_approx()

    def max_capacity(self) -> int:
        """Elements that fit, when empty, without allocating another block."""
        return self._inner.max_capacity()

    def __len__(self) -> int:
        return self.size_approx()