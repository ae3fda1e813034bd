"""
Command dispatcher: one player session over a queue, a reserve stack and an undo slot.
"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Deque, Dict, List, Optional, Union

from config import EVENT_LOG_SIZE
from errors import (
    EmptyQueueError,
    InvalidCommandError,
    NoSnapshotError,
    PieceSupplyError,
    StackEmptyError,
    StackFullError,
    SwapStackEmptyError,
)
from game_logic import (
    init_session,
    invert_block,
    play_front,
    reserve,
    swap_front_top,
    use_reserved,
)
from generator import PieceGenerator, make_generator
from models import Piece
from piece_queue import CircularQueue
from reserve_stack import BoundedStack
from snapshot import SnapshotManager

logger = logging.getLogger(__name__)


class Command(IntEnum):
    """Menu commands, numbered as in the classic text menu."""
    QUIT = 0
    PLAY = 1
    RESERVE = 2
    USE_RESERVED = 3
    SWAP = 4
    UNDO = 5
    INVERT = 6

    @classmethod
    def from_choice(cls, choice: Union[int, str]) -> "Command":
        # bool is an int subclass
        if isinstance(choice, bool) or not isinstance(choice, (int, str)):
            raise InvalidCommandError(f"invalid option {choice!r}")
        try:
            return cls(int(choice))
        except (TypeError, ValueError):
            raise InvalidCommandError(f"invalid option {choice!r}") from None


MENU_LABELS = {
    Command.PLAY: "Play piece",
    Command.RESERVE: "Reserve piece",
    Command.USE_RESERVED: "Use reserved piece",
    Command.SWAP: "Swap queue front with stack top",
    Command.UNDO: "Undo last move",
    Command.INVERT: "Invert queue and stack",
    Command.QUIT: "Quit",
}

# Commands that change the containers; a snapshot is taken before each.
MUTATING_COMMANDS = frozenset(
    {Command.PLAY, Command.RESERVE, Command.USE_RESERVED, Command.SWAP, Command.INVERT}
)

ERROR_MESSAGES = {
    EmptyQueueError: "Queue is empty!",
    StackFullError: "Stack is full!",
    StackEmptyError: "Stack is empty!",
    SwapStackEmptyError: "Stack is empty! Nothing to swap.",
    NoSnapshotError: "Nothing to undo yet.",
    InvalidCommandError: "Invalid option!",
}


@dataclass
class CommandResult:
    command: Optional[Command]
    ok: bool
    message: str
    piece: Optional[Piece] = None
    moved: int = 0


def format_piece(piece: Piece) -> str:
    return f"[{piece.kind}{piece.id}]"


def format_queue(queue: CircularQueue) -> str:
    return " ".join(format_piece(p) for p in queue.items())


def format_stack(stack: BoundedStack) -> str:
    if stack.is_empty():
        return "(empty)"
    return " ".join(format_piece(p) for p in stack.items())


class Session:
    """
    Owns everything one player mutates: generator, queue, stack and the undo slot.

    ``execute`` never raises for game-rule failures; they come back as a
    failed ``CommandResult`` whose message is ready to show.
    """

    def __init__(self, seed: Optional[int] = None, generator: Optional[PieceGenerator] = None):
        self.generator = generator if generator is not None else make_generator(seed)
        self.queue, self.stack = init_session(self.generator)
        self.snapshots = SnapshotManager()
        self.events: Deque[CommandResult] = deque(maxlen=EVENT_LOG_SIZE)
        self.played: List[Piece] = []
        self._played_at_save = 0
        self.finished = False
        self._handlers: Dict[Command, Callable[[], CommandResult]] = {
            Command.PLAY: self._play,
            Command.RESERVE: self._reserve,
            Command.USE_RESERVED: self._use_reserved,
            Command.SWAP: self._swap,
            Command.UNDO: self._undo,
            Command.INVERT: self._invert,
            Command.QUIT: self._quit,
        }

    def execute(self, choice: Union[Command, int, str]) -> CommandResult:
        try:
            command = Command.from_choice(choice)
        except InvalidCommandError as e:
            return self._record(self._failure(None, e))

        if command in MUTATING_COMMANDS:
            self.snapshots.save(self.queue, self.stack)
            self._played_at_save = len(self.played)
        try:
            result = self._handlers[command]()
        except PieceSupplyError as e:
            result = self._failure(command, e)
        return self._record(result)

    def _record(self, result: CommandResult) -> CommandResult:
        self.events.append(result)
        name = result.command.name if result.command is not None else "INVALID"
        logger.info(f"{name}: {result.message}")
        return result

    @staticmethod
    def _failure(command: Optional[Command], error: PieceSupplyError) -> CommandResult:
        message = ERROR_MESSAGES.get(type(error), str(error))
        return CommandResult(command=command, ok=False, message=message)

    def _play(self) -> CommandResult:
        piece = play_front(self.queue)
        self.played.append(piece)
        return CommandResult(Command.PLAY, True, f"You played {format_piece(piece)}", piece=piece)

    def _reserve(self) -> CommandResult:
        piece = reserve(self.queue, self.stack)
        return CommandResult(Command.RESERVE, True, f"You reserved {format_piece(piece)}", piece=piece)

    def _use_reserved(self) -> CommandResult:
        piece = use_reserved(self.stack)
        self.played.append(piece)
        return CommandResult(Command.USE_RESERVED, True, f"You used {format_piece(piece)}", piece=piece)

    def _swap(self) -> CommandResult:
        swap_front_top(self.queue, self.stack)
        message = (
            f"Swap done: {format_piece(self.queue.front())} <-> "
            f"{format_piece(self.stack.peek_top())}"
        )
        return CommandResult(Command.SWAP, True, message, moved=1)

    def _undo(self) -> CommandResult:
        self.snapshots.restore(self.queue, self.stack)
        del self.played[self._played_at_save:]
        return CommandResult(Command.UNDO, True, "Last move undone!")

    def _invert(self) -> CommandResult:
        n = invert_block(self.queue, self.stack)
        message = f"Inverted the first {n} pieces of the queue with the stack"
        return CommandResult(Command.INVERT, True, message, moved=n)

    def _quit(self) -> CommandResult:
        self.finished = True
        return CommandResult(Command.QUIT, True, "Leaving...")
