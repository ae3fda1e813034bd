"""
Data models and state representations.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from config import PIECE_KINDS


@dataclass(frozen=True)
class Piece:
    """A single game piece: a kind symbol plus a session-unique id."""
    kind: str
    id: int

    def __post_init__(self) -> None:
        if self.kind not in PIECE_KINDS:
            raise ValueError(f"unknown piece kind {self.kind!r}")
        if self.id < 1:
            raise ValueError(f"piece id must be positive, got {self.id}")


@dataclass(frozen=True)
class QueueState:
    """Value copy of a circular queue: every slot, stale ones included."""
    slots: Tuple[Optional[Piece], ...]
    head: int
    count: int

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def live(self) -> Tuple[Piece, ...]:
        """Live pieces front-to-back."""
        cap = self.capacity
        return tuple(self.slots[(self.head + i) % cap] for i in range(self.count))


@dataclass(frozen=True)
class StackState:
    """Value copy of a bounded stack."""
    slots: Tuple[Optional[Piece], ...]
    top: int

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def live(self) -> Tuple[Piece, ...]:
        """Live pieces bottom-to-top."""
        return tuple(self.slots[: self.top + 1])


@dataclass(frozen=True)
class Snapshot:
    """Saved state of one queue and one stack, taken before a command."""
    queue: QueueState
    stack: StackState
