import pytest

from conftest import ids
from errors import EmptyQueueError
from models import QueueState
from piece_queue import CircularQueue


def test_init_fills_every_slot(containers):
    queue, _ = containers
    assert queue.count == queue.capacity == 5
    assert queue.head == 0
    assert ids(queue.items()) == [1, 2, 3, 4, 5]


def test_dequeue_refills_tail(containers):
    queue, _ = containers
    front = queue.front()
    played = queue.dequeue()
    assert played == front
    assert queue.count == 5
    assert ids(queue.items()) == [2, 3, 4, 5, 6]


def test_front_does_not_remove(containers):
    queue, _ = containers
    assert queue.front() == queue.front()
    assert queue.count == 5


def test_head_wraps_around(containers):
    queue, _ = containers
    for _ in range(7):
        queue.dequeue()
    assert queue.head == 7 % queue.capacity
    assert ids(queue.items()) == [8, 9, 10, 11, 12]


def test_new_tail_id_exceeds_every_earlier_id(containers):
    queue, _ = containers
    seen = set(ids(queue.items()))
    for _ in range(20):
        queue.dequeue()
        tail = queue.items()[-1]
        assert tail.id > max(seen)
        seen.add(tail.id)


def test_empty_queue_fails_without_generating(containers):
    queue, _ = containers
    slots = queue.snapshot().slots
    queue.restore(QueueState(slots=slots, head=0, count=0))
    next_id = queue.generator.next_id
    with pytest.raises(EmptyQueueError):
        queue.front()
    with pytest.raises(EmptyQueueError):
        queue.dequeue()
    assert queue.count == 0
    assert queue.generator.next_id == next_id


@pytest.mark.parametrize("offset", [-1, 5])
def test_slot_index_is_bounds_checked(containers, offset):
    queue, _ = containers
    with pytest.raises(IndexError):
        queue.slot_index(offset)


def test_replace_returns_old_piece(containers):
    queue, _ = containers
    old_front, second = queue.piece_at(0), queue.piece_at(1)
    assert queue.replace(0, second) == old_front
    assert queue.front() == second


def test_capacity_must_be_positive(generator):
    with pytest.raises(ValueError):
        CircularQueue(generator, capacity=0)


def test_snapshot_is_a_value_copy(containers):
    queue, _ = containers
    state = queue.snapshot()
    queue.dequeue()
    assert ids(state.live()) == [1, 2, 3, 4, 5]


def test_restore_rejects_mismatched_capacity(containers, generator):
    queue, _ = containers
    other = CircularQueue(generator, capacity=4)
    before = queue.items()
    with pytest.raises(ValueError):
        queue.restore(other.snapshot())
    assert queue.items() == before
