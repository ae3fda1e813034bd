"""
Core game logic: session setup and the moves between queue and reserve stack.
"""

import logging
from typing import Optional, Tuple

from config import INVERT_BLOCK_SIZE, QUEUE_CAPACITY, STACK_CAPACITY
from errors import SwapStackEmptyError
from generator import PieceGenerator, make_generator
from models import Piece
from piece_queue import CircularQueue
from reserve_stack import BoundedStack

logger = logging.getLogger(__name__)


def init_session(
    generator: Optional[PieceGenerator] = None,
    seed: Optional[int] = None,
    queue_capacity: int = QUEUE_CAPACITY,
    stack_capacity: int = STACK_CAPACITY,
) -> Tuple[CircularQueue, BoundedStack]:
    """Full queue of fresh pieces plus an empty reserve stack."""
    if generator is None:
        generator = make_generator(seed)
    queue = CircularQueue(generator, capacity=queue_capacity)
    stack = BoundedStack(capacity=stack_capacity)
    logger.debug(f"Session initialised with queue {queue.items()}")
    return queue, stack


def play_front(queue: CircularQueue) -> Piece:
    """Play the front piece; the queue refills itself."""
    return queue.dequeue()


def reserve(queue: CircularQueue, stack: BoundedStack) -> Piece:
    """
    Move the front piece onto the reserve stack.

    The push happens first, so a full stack leaves both containers
    untouched. Only once the piece is reserved is the front played off
    (and refilled).
    """
    piece = queue.front()
    stack.push(piece)
    queue.dequeue()
    return piece


def use_reserved(stack: BoundedStack) -> Piece:
    return stack.pop()


def swap_front_top(queue: CircularQueue, stack: BoundedStack) -> None:
    """Exchange the queue's front piece with the stack's top piece in place."""
    if stack.is_empty():
        raise SwapStackEmptyError("nothing reserved to swap with")
    front = queue.front()
    queue.replace(0, stack.replace(stack.top, front))


def invert_block(queue: CircularQueue, stack: BoundedStack) -> int:
    """
    Exchange up to INVERT_BLOCK_SIZE pieces between queue front and stack top.

    With ``n = min(INVERT_BLOCK_SIZE, len(queue), len(stack))``:
      - the stack's i-th piece from the top becomes the queue's i-th from the front,
      - the queue's old front block fills the stack's top ``n`` slots
        bottom-up, in front-to-back order.
    Neither container changes size. Returns ``n`` (0 is a valid no-op).
    """
    n = min(INVERT_BLOCK_SIZE, len(queue), len(stack))
    front_block = [queue.piece_at(i) for i in range(n)]

    for i in range(n):
        queue.replace(i, stack.piece_at(stack.top - i))

    base = stack.top - n + 1
    for i, piece in enumerate(front_block):
        stack.replace(base + i, piece)

    return n
