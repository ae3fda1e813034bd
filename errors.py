"""
Failure conditions reported by the piece queue, the reserve stack and the session.
"""


class PieceSupplyError(Exception):
    """Base class for recoverable failures the dispatcher reports to the player."""


class EmptyQueueError(PieceSupplyError):
    """The queue has no live pieces."""


class StackFullError(PieceSupplyError):
    """The reserve stack has no free slot."""


class StackEmptyError(PieceSupplyError):
    """The reserve stack has no piece to use."""


class SwapStackEmptyError(StackEmptyError):
    """A swap needs a reserved piece, but the stack is empty."""


class NoSnapshotError(PieceSupplyError):
    """Undo was requested before any state was saved."""


class InvalidCommandError(PieceSupplyError):
    """The menu choice does not name a command."""
