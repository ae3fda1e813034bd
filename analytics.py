"""
Session analytics: tables over live containers, played pieces and simulations.
"""

from collections import Counter
from typing import Dict, Iterable

import pandas as pd

from config import PIECE_KINDS
from models import Piece
from session import Session, format_piece


def kind_counts(pieces: Iterable[Piece]) -> Dict[str, int]:
    """Count pieces per kind; every kind is present, possibly with 0."""
    counts = Counter(p.kind for p in pieces)
    return {k: counts[k] for k in PIECE_KINDS}


def container_table(session: Session) -> pd.DataFrame:
    """
    One row per live piece:
      - queue rows front-to-back (position 1 is the next piece to play),
      - stack rows bottom-to-top (the last row is the top).
    """
    rows = []
    for pos, piece in enumerate(session.queue.items(), start=1):
        rows.append({"Container": "Queue", "Position": pos, "Piece": format_piece(piece),
                     "Kind": piece.kind, "Id": piece.id})
    for pos, piece in enumerate(session.stack.items(), start=1):
        rows.append({"Container": "Stack", "Position": pos, "Piece": format_piece(piece),
                     "Kind": piece.kind, "Id": piece.id})
    return pd.DataFrame(rows, columns=["Container", "Position", "Piece", "Kind", "Id"])


def kind_frequency_table(pieces: Iterable[Piece]) -> pd.DataFrame:
    """Observed count and share per kind next to the uniform expectation."""
    counts = kind_counts(pieces)
    total = sum(counts.values())
    expected = 1 / len(PIECE_KINDS)
    data = []
    for k in PIECE_KINDS:
        data.append(
            {
                "Kind": k,
                "Count": counts[k],
                "Share": counts[k] / total if total else 0.0,
                "Expected share": expected,
            }
        )
    return pd.DataFrame(data)


def simulation_table(successes: Dict[str, int], failures: Dict[str, int]) -> pd.DataFrame:
    data = []
    for name in successes:
        ok, bad = successes[name], failures.get(name, 0)
        total = ok + bad
        data.append(
            {
                "Command": name,
                "Succeeded": ok,
                "Rejected": bad,
                "Rejection rate": bad / total if total else 0.0,
            }
        )
    return pd.DataFrame(data)
