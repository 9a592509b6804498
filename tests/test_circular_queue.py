import pytest

from algocollect.circular_queue import CircularQueue


def _filled(values):
    queue = CircularQueue()
    for value in values:
        queue.enqueue(value)
    return queue


def test_source_example():
    queue = _filled([10, 20, 30, 40, 50, 60, 70])
    assert queue.traverse() == [10, 20, 30, 40, 50, 60, 70, 10]
    queue.dequeue()
    assert queue.traverse() == [20, 30, 40, 50, 60, 70, 20]


def test_fifo_order():
    values = ["a", "b", "c", "d"]
    queue = _filled(values)
    assert [queue.dequeue() for _ in values] == values
    assert len(queue) == 0


def test_len_tracks_operations():
    queue = _filled(range(5))
    assert len(queue) == 5
    queue.dequeue()
    assert len(queue) == 4


def test_iteration_lists_values_front_to_rear():
    queue = _filled([3, 1, 4])
    assert list(queue) == [3, 1, 4]


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        CircularQueue().dequeue()


def test_traverse_empty_queue():
    assert CircularQueue().traverse() == []


def test_single_element_ring():
    queue = _filled([42])
    assert queue.traverse() == [42, 42]
    assert queue.dequeue() == 42
    assert list(queue) == []


def test_reuse_after_emptying():
    queue = _filled([1, 2])
    queue.dequeue()
    queue.dequeue()
    queue.enqueue(9)
    queue.enqueue(8)
    assert list(queue) == [9, 8]
    assert queue.traverse() == [9, 8, 9]


def test_interleaved_operations():
    queue = _filled([1, 2, 3])
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert queue.dequeue() == 2
    assert list(queue) == [3, 4]