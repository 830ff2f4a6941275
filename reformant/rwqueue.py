"""Single-producer, single-consumer FIFO queue built from a ring of blocks.

Each block is a circular buffer that wastes one slot so that ``front ==
tail`` always means "empty". Blocks are linked in a circle. When the tail
block is full, the producer moves on to the next block if it is free. If it
is not free, a new block is allocated, unless the caller asked for an
enqueue that must not allocate. Blocks are never released. One thread may
enqueue while another dequeues.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_MAX_BLOCK_SIZE = 512
DEFAULT_SIZE = 15


def ceil_to_pow2(x: int) -> int:
    """Round ``x`` up to the next power of two (0 stays 0)."""
    if x < 0:
        raise ValueError("x must not be negative")
    if x == 0:
        return 0
    return 1 << (x - 1).bit_length()


class QueueEmpty(Exception):
    """Raised when an element is requested from an empty queue."""


class _Block:
    __slots__ = ("front", "tail", "size_mask", "data", "next")

    def __init__(self, capacity: int) -> None:
        self.front = 0
        self.tail = 0
        self.size_mask = capacity - 1
        self.data: list[Any] = [None] * capacity
        self.next: _Block = self

    def is_empty(self) -> bool:
        return self.front == self.tail

    def __len__(self) -> int:
        return (self.tail - self.front) & self.size_mask


class ReaderWriterQueue(Generic[T]):
    """FIFO queue for exactly one producer thread and one consumer thread."""

    def __init__(
        self, size: int = DEFAULT_SIZE, max_block_size: int = DEFAULT_MAX_BLOCK_SIZE
    ) -> None:
        if max_block_size < 2:
            raise ValueError("max_block_size must be at least 2")
        if ceil_to_pow2(max_block_size) != max_block_size:
            raise ValueError("max_block_size must be a power of 2")
        if size < 0:
            raise ValueError("size must not be negative")

        self._max_block_size = max_block_size
        # A spare slot is needed to hold `size` elements in one block.
        self._largest_block_size = ceil_to_pow2(size + 1)

        if self._largest_block_size > max_block_size * 2:
            # Reserve a spare block so the producer can fill `size` slots
            # while the consumer still holds a partially read block.
            block_count = (size + max_block_size * 2 - 3) // (max_block_size - 1)
            self._largest_block_size = max_block_size
            blocks = [_Block(max_block_size) for _ in range(block_count)]
            for block, following in zip(blocks, blocks[1:] + blocks[:1]):
                block.next = following
            first = blocks[0]
        else:
            first = _Block(self._largest_block_size)

        self._front_block = first
        self._tail_block = first

    def _blocks(self) -> Iterator[_Block]:
        start = self._front_block
        block = start
        while True:
            yield block
            block = block.next
            if block is start:
                return

    def _inner_enqueue(self, element: T, can_alloc: bool) -> bool:
        tail_block = self._tail_block
        next_tail = (tail_block.tail + 1) & tail_block.size_mask

        if next_tail != tail_block.front:
            tail_block.data[tail_block.tail] = element
            tail_block.tail = next_tail
            return True

        if tail_block.next is not self._front_block:
            # The tail block is full but the one after it is free.
            following = tail_block.next
            following.data[following.tail] = element
            following.tail = (following.tail + 1) & following.size_mask
            self._tail_block = following
            return True

        if not can_alloc:
            return False

        if self._largest_block_size >= self._max_block_size:
            new_size = self._largest_block_size
        else:
            new_size = self._largest_block_size * 2
        new_block = _Block(new_size)
        self._largest_block_size = new_size
        new_block.data[0] = element
        new_block.tail = 1
        new_block.next = tail_block.next
        tail_block.next = new_block
        self._tail_block = new_block
        return True

    def try_enqueue(self, element: T) -> bool:
        """Enqueue ``element`` if there is room without allocating.

        Returns True if it was enqueued and False if the queue was full.
        """
        return self._inner_enqueue(element, can_alloc=False)

    def enqueue(self, element: T) -> None:
        """Enqueue ``element``, adding a block if the queue is full."""
        self._inner_enqueue(element, can_alloc=True)

    def _locate_front(self) -> _Block | None:
        """Return the block holding the front element, or None if empty."""
        front_block = self._front_block
        if not front_block.is_empty():
            return front_block
        if front_block is self._tail_block:
            return None
        # Re-check: the producer may have filled the front block meanwhile.
        front_block = self._front_block
        if not front_block.is_empty():
            return front_block
        # The front block is drained and the producer has moved on, so the
        # next block necessarily holds an element.
        return front_block.next

    def try_dequeue(self) -> T:
        """Remove and return the front element.

        Raises QueueEmpty if the queue appears empty.
        """
        block = self._locate_front()
        if block is None:
            raise QueueEmpty("queue is empty")
        if block is not self._front_block:
            self._front_block = block
        index = block.front
        element = block.data[index]
        block.data[index] = None
        block.front = (index + 1) & block.size_mask
        return element

    def peek(self) -> T:
        """Return the front element without removing it.

        Raises QueueEmpty if the queue appears empty. Consumer thread only.
        """
        block = self._locate_front()
        if block is None:
            raise QueueEmpty("queue is empty")
        return block.data[block.front]

    def pop(self) -> bool:
        """Remove the front element without returning it.

        Returns False if the queue appeared empty.
        """
        try:
            self.try_dequeue()
        except QueueEmpty:
            return False
        return True

    def size_approx(self) -> int:
        """Approximate number of elements currently queued."""
        return sum(len(block) for block in self._blocks())

    def max_capacity(self) -> int:
        """Elements that fit, when empty, without allocating another block."""
        return sum(block.size_mask for block in self._blocks())

    def __len__(self) -> int:
        return self.size_approx()