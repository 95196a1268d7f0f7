import pytest

from dsalgo.queues import (
    ArrayDeque,
    ArrayQueue,
    LinkedListDeque,
    LinkedListQueue,
    QueueFullError,
)


def _make_queue(kind):
    return ArrayQueue(10) if kind == "array" else LinkedListQueue()


def _make_deque(kind):
    return ArrayDeque(10) if kind == "array" else LinkedListDeque()


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_queue_walkthrough(kind):
    queue = _make_queue(kind)
    for value in (1, 3, 2, 5, 4):
        queue.push(value)
    assert queue.to_list() == [1, 3, 2, 5, 4]
    assert queue.peek() == 1
    assert queue.pop() == 1
    assert queue.to_list() == [3, 2, 5, 4]
    assert len(queue) == 4
    assert queue.is_empty() is False


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_queue_empty_errors(kind):
    queue = _make_queue(kind)
    with pytest.raises(IndexError):
        queue.peek()
    with pytest.raises(IndexError):
        queue.pop()


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_queue_reuse_after_draining(kind):
    queue = _make_queue(kind)
    queue.push(1)
    queue.pop()
    queue.push(2)
    queue.push(3)
    assert queue.to_list() == [2, 3]
    assert queue.pop() == 2


def test_array_queue_wraps_around():
    queue = ArrayQueue(10)
    for value in (1, 3, 2, 5, 4):
        queue.push(value)
    queue.pop()
    for i in range(10):
        queue.push(i)
        queue.pop()
    assert len(queue) == 4
    assert queue.capacity() == 10
    assert queue.to_list()[-1] == 9


def test_array_queue_full():
    queue = ArrayQueue(2)
    queue.push(1)
    queue.push(2)
    with pytest.raises(QueueFullError):
        queue.push(3)
    assert queue.to_list() == [1, 2]


def test_zero_capacity_queue_is_full():
    queue = ArrayQueue(0)
    with pytest.raises(QueueFullError):
        queue.push(1)
    assert queue.to_list() == []


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayQueue(-1)
    with pytest.raises(ValueError):
        ArrayDeque(-1)


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_deque_walkthrough(kind):
    deque = _make_deque(kind)
    for value in (3, 2, 5):
        deque.push_last(value)
    assert deque.to_list() == [3, 2, 5]
    assert deque.peek_first() == 3
    assert deque.peek_last() == 5
    deque.push_last(4)
    assert deque.to_list() == [3, 2, 5, 4]
    deque.push_first(1)
    assert deque.to_list() == [1, 3, 2, 5, 4]
    assert deque.pop_last() == 4
    assert deque.pop_first() == 1
    assert deque.to_list() == [3, 2, 5]
    assert len(deque) == 3
    assert deque.is_empty() is False


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_deque_empty_errors(kind):
    deque = _make_deque(kind)
    for op in (deque.pop_first, deque.pop_last, deque.peek_first, deque.peek_last):
        with pytest.raises(IndexError):
            op()


@pytest.mark.parametrize("kind", ["array", "linked"])
def test_deque_drain_from_either_end(kind):
    deque = _make_deque(kind)
    for value in (1, 2, 3):
        deque.push_first(value)
    assert deque.to_list() == [3, 2, 1]
    assert [deque.pop_last() for _ in range(3)] == [1, 2, 3]
    assert deque.is_empty() is True
    deque.push_last(7)
    assert deque.peek_first() == deque.peek_last() == 7


def test_array_deque_full():
    deque = ArrayDeque(2)
    deque.push_first(1)
    deque.push_last(2)
    assert deque.capacity() == 2
    with pytest.raises(QueueFullError):
        deque.push_first(3)
    with pytest.raises(QueueFullError):
        deque.push_last(3)
    assert deque.to_list() == [1, 2]