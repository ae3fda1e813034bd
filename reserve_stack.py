"""
Fixed-capacity reserve stack.
"""

import logging
from typing import List, Optional, Tuple

from config import STACK_CAPACITY
from errors import StackEmptyError, StackFullError
from models import Piece, StackState

logger = logging.getLogger(__name__)


class BoundedStack:
    """LIFO over a fixed list of slots; live pieces occupy ``[0, top]``, ``top == -1`` when empty."""

    def __init__(self, capacity: int = STACK_CAPACITY):
        if capacity < 1:
            raise ValueError(f"stack capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._slots: List[Optional[Piece]] = [None] * capacity
        self.top = -1

    def __len__(self) -> int:
        return self.top + 1

    def is_empty(self) -> bool:
        return self.top == -1

    def is_full(self) -> bool:
        return self.top == self.capacity - 1

    def push(self, piece: Piece) -> None:
        if self.is_full():
            raise StackFullError("reserve stack is full")
        self.top += 1
        self._slots[self.top] = piece
        logger.debug(f"Pushed {piece} at slot {self.top}")

    def pop(self) -> Piece:
        piece = self.peek_top()
        self.top -= 1
        logger.debug(f"Popped {piece}")
        return piece

    def peek_top(self) -> Piece:
        if self.is_empty():
            raise StackEmptyError("reserve stack is empty")
        return self._slots[self.top]

    def _check_index(self, index: int) -> None:
        if not 0 <= index <= self.top:
            raise IndexError(f"stack index {index} outside live range [0, {self.top}]")

    def piece_at(self, index: int) -> Piece:
        self._check_index(index)
        return self._slots[index]

    def replace(self, index: int, piece: Piece) -> Piece:
        """Overwrite the live piece at ``index`` and return the old one."""
        self._check_index(index)
        old = self._slots[index]
        self._slots[index] = piece
        return old

    def items(self) -> Tuple[Piece, ...]:
        """Live pieces bottom-to-top."""
        return tuple(self._slots[: self.top + 1])

    def snapshot(self) -> StackState:
        return StackState(slots=tuple(self._slots), top=self.top)

    def check_state(self, state: StackState) -> None:
        if state.capacity != self.capacity:
            raise ValueError(
                f"stack state has capacity {state.capacity}, stack has {self.capacity}"
            )
        if not -1 <= state.top < self.capacity:
            raise ValueError(f"stack state top out of range: {state.top}")

    def restore(self, state: StackState) -> None:
        self.check_state(state)
        self._slots = list(state.slots)
        self.top = state.top
