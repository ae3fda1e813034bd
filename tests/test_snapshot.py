import pytest

from conftest import ids
from errors import NoSnapshotError
from game_logic import init_session, invert_block, play_front, reserve, swap_front_top
from snapshot import SnapshotManager, restore_state, save_state


def test_save_restore_round_trip(containers):
    queue, stack = containers
    reserve(queue, stack)
    play_front(queue)
    snap = save_state(queue, stack)
    queue_before, stack_before = queue.items(), stack.items()

    reserve(queue, stack)
    swap_front_top(queue, stack)
    invert_block(queue, stack)
    restore_state(snap, queue, stack)

    assert queue.items() == queue_before
    assert stack.items() == stack_before


def test_snapshot_does_not_alias_live_containers(containers):
    queue, stack = containers
    snap = save_state(queue, stack)
    reserve(queue, stack)
    assert ids(snap.queue.live()) == [1, 2, 3, 4, 5]
    assert snap.stack.live() == ()


def test_restore_without_snapshot(containers):
    queue, stack = containers
    with pytest.raises(NoSnapshotError):
        restore_state(None, queue, stack)


def test_manager_requires_a_save_first(containers):
    queue, stack = containers
    manager = SnapshotManager()
    assert not manager.has_snapshot
    with pytest.raises(NoSnapshotError):
        manager.restore(queue, stack)


def test_manager_keeps_only_latest_save(containers):
    queue, stack = containers
    manager = SnapshotManager()
    manager.save(queue, stack)
    play_front(queue)
    manager.save(queue, stack)
    expected = queue.items()
    play_front(queue)
    manager.restore(queue, stack)
    assert queue.items() == expected


def test_manager_reports_saved_state(containers):
    queue, stack = containers
    manager = SnapshotManager()
    manager.save(queue, stack)
    assert manager.has_snapshot


def test_ids_keep_increasing_after_restore(containers):
    queue, stack = containers
    snap = save_state(queue, stack)
    play_front(queue)
    restore_state(snap, queue, stack)
    assert ids(queue.items()) == [1, 2, 3, 4, 5]
    play_front(queue)
    assert queue.items()[-1].id == 7


def test_restore_is_atomic_when_stack_write_fails(containers, monkeypatch):
    queue, stack = containers
    snap = save_state(queue, stack)
    reserve(queue, stack)
    queue_before, stack_before = queue.items(), stack.items()

    def boom(state):
        raise RuntimeError("injected failure")

    monkeypatch.setattr(stack, "restore", boom)
    with pytest.raises(RuntimeError):
        restore_state(snap, queue, stack)
    assert queue.items() == queue_before
    assert stack.items() == stack_before


def test_restore_validates_before_writing(generator):
    queue, stack = init_session(generator)
    _, small_stack = init_session(generator, stack_capacity=2)
    snap = save_state(queue, small_stack)
    play_front(queue)
    before = queue.items()
    with pytest.raises(ValueError):
        restore_state(snap, queue, stack)
    assert queue.items() == before
