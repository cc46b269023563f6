import pytest

from structlab.linked_queue import LinkedQueue


def test_source_sequence():
    q = LinkedQueue()
    for value in (5, 10, 20):
        q.enqueue(value)
    assert list(q) == [5, 10, 20]
    assert q.dequeue() == 5
    assert list(q) == [10, 20]


def test_fifo_order_round_trip():
    values = ["a", "b", "c", "d"]
    q = LinkedQueue()
    for value in values:
        q.enqueue(value)
    assert [q.dequeue() for _ in values] == values
    assert len(q) == 0


def test_underflow_raises():
    with pytest.raises(IndexError):
        LinkedQueue().dequeue()


def test_reuse_after_emptying():
    q = LinkedQueue()
    q.enqueue(1)
    q.dequeue()
    q.enqueue(2)
    q.enqueue(3)
    assert list(q) == [2, 3]
    assert len(q) == 2


def test_single_item_iterates_once():
    q = LinkedQueue()
    q.enqueue(42)
    assert list(q) == [42]