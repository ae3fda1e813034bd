"""
Single-slot save/restore of a queue and stack pair (one level of undo).
"""

import logging
from typing import Optional

from errors import NoSnapshotError
from models import Snapshot
from piece_queue import CircularQueue
from reserve_stack import BoundedStack

logger = logging.getLogger(__name__)


def save_state(queue: CircularQueue, stack: BoundedStack) -> Snapshot:
    """Value copy of both containers. The generator's id counter is not saved."""
    return Snapshot(queue=queue.snapshot(), stack=stack.snapshot())


def restore_state(snapshot: Optional[Snapshot], queue: CircularQueue, stack: BoundedStack) -> None:
    """
    Overwrite both containers with ``snapshot``, all or nothing.

    Both states are validated before anything is written; if writing the
    stack still fails, the queue is put back the way it was.
    """
    if snapshot is None:
        raise NoSnapshotError("no saved state to restore")
    queue.check_state(snapshot.queue)
    stack.check_state(snapshot.stack)

    previous = queue.snapshot()
    queue.restore(snapshot.queue)
    try:
        stack.restore(snapshot.stack)
    except Exception:
        queue.restore(previous)
        raise


class SnapshotManager:
    """Holds at most one snapshot; every save replaces the previous one."""

    def __init__(self) -> None:
        self._snapshot: Optional[Snapshot] = None

    @property
    def has_snapshot(self) -> bool:
        return self._snapshot is not None

    def save(self, queue: CircularQueue, stack: BoundedStack) -> Snapshot:
        self._snapshot = save_state(queue, stack)
        return self._snapshot

    def restore(self, queue: CircularQueue, stack: BoundedStack) -> None:
        # The slot is kept: undoing twice lands on the same state.
        restore_state(self._snapshot, queue, stack)
        logger.debug("Restored saved state")
