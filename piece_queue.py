"""
Fixed-capacity circular queue of upcoming pieces.
"""

import logging
from typing import List, Optional, Tuple

from config import QUEUE_CAPACITY
from errors import EmptyQueueError, PieceSupplyError
from generator import PieceGenerator
from models import Piece, QueueState

logger = logging.getLogger(__name__)


class CircularQueue:
    """
    FIFO over a fixed list of slots.

    Live pieces occupy ``[head, head + count) mod capacity``; the slot at
    ``(head + count) mod capacity`` is the next insertion point. Every
    dequeue is followed by a refill from the generator, so a full queue
    stays full.
    """

    def __init__(self, generator: PieceGenerator, capacity: int = QUEUE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"queue capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.generator = generator
        self._slots: List[Optional[Piece]] = [None] * capacity
        self.head = 0
        self.count = 0
        for _ in range(capacity):
            self._insert(generator.generate())

    def __len__(self) -> int:
        return self.count

    @property
    def tail_index(self) -> int:
        return (self.head + self.count) % self.capacity

    def _insert(self, piece: Piece) -> None:
        if self.count == self.capacity:
            raise PieceSupplyError("queue is full")
        self._slots[self.tail_index] = piece
        self.count += 1

    def slot_index(self, offset: int) -> int:
        """Backing-list index of the ``offset``-th live piece from the front."""
        if not 0 <= offset < self.count:
            raise IndexError(f"queue offset {offset} outside live window of {self.count}")
        return (self.head + offset) % self.capacity

    def piece_at(self, offset: int) -> Piece:
        return self._slots[self.slot_index(offset)]

    def replace(self, offset: int, piece: Piece) -> Piece:
        """Overwrite the ``offset``-th live piece in place and return the old one."""
        idx = self.slot_index(offset)
        old = self._slots[idx]
        self._slots[idx] = piece
        return old

    def front(self) -> Piece:
        if self.count == 0:
            raise EmptyQueueError("queue is empty")
        return self._slots[self.head]

    def dequeue(self) -> Piece:
        """Remove the front piece and immediately refill the tail."""
        piece = self.front()
        self.head = (self.head + 1) % self.capacity
        self.count -= 1
        new_piece = self.generator.generate()
        self._insert(new_piece)
        logger.debug(f"Dequeued {piece}, refilled with {new_piece}")
        return piece

    def items(self) -> Tuple[Piece, ...]:
        """Live pieces front-to-back."""
        return tuple(self._slots[(self.head + i) % self.capacity] for i in range(self.count))

    def snapshot(self) -> QueueState:
        return QueueState(slots=tuple(self._slots), head=self.head, count=self.count)

    def check_state(self, state: QueueState) -> None:
        """Raise ValueError if ``state`` cannot be restored into this queue."""
        if state.capacity != self.capacity:
            raise ValueError(
                f"queue state has capacity {state.capacity}, queue has {self.capacity}"
            )
        if not 0 <= state.head < self.capacity or not 0 <= state.count <= self.capacity:
            raise ValueError(f"queue state indices out of range: head={state.head}, count={state.count}")

    def restore(self, state: QueueState) -> None:
        self.check_state(state)
        self._slots = list(state.slots)
        self.head = state.head
        self.count = state.count
