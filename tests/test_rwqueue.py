import threading

import pytest

from reformant.rwqueue import QueueEmpty, ReaderWriterQueue, ceil_to_pow2


@pytest.mark.parametrize("x", [1, 2, 3, 5, 16, 17, 100, 511, 512, 513, 10**6])
def test_ceil_to_pow2_is_smallest_power_not_below(x):
    result = ceil_to_pow2(x)
    assert result & (result - 1) == 0
    assert result >= x
    assert result < 2 * x or result == x


def test_ceil_to_pow2_keeps_powers():
    assert ceil_to_pow2(512) == 512
    assert ceil_to_pow2(0) == 0


def test_ceil_to_pow2_rejects_negative():
    with pytest.raises(ValueError):
        ceil_to_pow2(-1)


def test_default_capacity():
    q = ReaderWriterQueue()
    assert q.max_capacity() == 15


@pytest.mark.parametrize("block_size", [0, 1, 3, 100])
def test_invalid_block_size(block_size):
    with pytest.raises(ValueError):
        ReaderWriterQueue(15, block_size)


def test_fifo_round_trip():
    q = ReaderWriterQueue()
    items = list(range(10))
    for item in items:
        assert q.try_enqueue(item)
    assert len(q) == len(items)
    assert [q.try_dequeue() for _ in items] == items
    assert len(q) == 0


def test_try_enqueue_fills_exactly_capacity():
    q = ReaderWriterQueue(15)
    capacity = q.max_capacity()
    for i in range(capacity):
        assert q.try_enqueue(i)
    assert not q.try_enqueue("overflow")
    assert q.size_approx() == capacity
    assert q.max_capacity() == capacity


def test_enqueue_grows_when_full():
    q = ReaderWriterQueue(3, 8)
    start = q.max_capacity()
    items = list(range(start * 10))
    for item in items:
        q.enqueue(item)
    assert q.max_capacity() > start
    assert q.size_approx() == len(items)
    assert [q.try_dequeue() for _ in items] == items


def test_large_size_preallocates_blocks():
    q = ReaderWriterQueue(100, 16)
    assert q.max_capacity() >= 100
    for i in range(100):
        assert q.try_enqueue(i)
    assert [q.try_dequeue() for _ in range(100)] == list(range(100))


def test_empty_queue_behaviour():
    q = ReaderWriterQueue()
    with pytest.raises(QueueEmpty):
        q.try_dequeue()
    with pytest.raises(QueueEmpty):
        q.peek()
    assert q.pop() is False


def test_peek_does_not_remove():
    q = ReaderWriterQueue()
    q.enqueue("a")
    q.enqueue("b")
    assert q.peek() == "a"
    assert q.peek() == "a"
    assert len(q) == 2
    assert q.try_dequeue() == "a"
    assert q.peek() == "b"


def test_pop_removes_front():
    q = ReaderWriterQueue()
    q.enqueue("a")
    q.enqueue("b")
    assert q.pop() is True
    assert q.try_dequeue() == "b"
    assert q.pop() is False


def test_interleaved_across_blocks():
    q = ReaderWriterQueue(1, 2)
    expected = []
    produced = 0
    out = []
    for round_ in range(50):
        for _ in range(round_ % 5 + 1):
            q.enqueue(produced)
            expected.append(produced)
            produced += 1
        for _ in range(round_ % 3 + 1):
            if q.size_approx():
                assert q.peek() == expected[len(out)]
                out.append(q.try_dequeue())
    while len(q):
        out.append(q.try_dequeue())
    assert out == expected


def test_reuses_free_block_without_allocating():
    q = ReaderWriterQueue(1, 2)
    for i in range(6):
        q.enqueue(i)
    capacity = q.max_capacity()
    for _ in range(6):
        q.try_dequeue()
    for i in range(capacity):
        assert q.try_enqueue(i)
    assert q.max_capacity() == capacity


def test_producer_consumer_threads():
    q = ReaderWriterQueue(15, 16)
    count = 20000
    received = []

    def produce():
        for i in range(count):
            q.enqueue(i)

    producer = threading.Thread(target=produce)
    producer.start()
    while len(received) < count:
        try:
            received.append(q.try_dequeue())
        except QueueEmpty:
            pass
    producer.join()
    assert received == list(range(count))