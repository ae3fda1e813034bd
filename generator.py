"""
Random piece generation with an explicit id counter.
"""

import random
from dataclasses import dataclass, field
from typing import Optional, Sequence

from config import FIRST_PIECE_ID, PIECE_KINDS
from models import Piece


@dataclass
class PieceGenerator:
    """
    Produces pieces of a uniformly random kind with strictly increasing ids.

    The random source and the counter are owned by the generator, so two
    sessions never share state and a seeded ``rng`` makes a session
    reproducible.
    """
    rng: random.Random = field(default_factory=random.Random)
    next_id: int = FIRST_PIECE_ID
    kinds: Sequence[str] = tuple(PIECE_KINDS)

    def generate(self) -> Piece:
        piece = Piece(kind=self.rng.choice(self.kinds), id=self.next_id)
        self.next_id += 1
        return piece


def make_generator(seed: Optional[int] = None) -> PieceGenerator:
    """Fresh generator whose ids start at FIRST_PIECE_ID."""
    return PieceGenerator(rng=random.Random(seed))
