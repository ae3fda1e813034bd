"""
Random playouts of whole sessions.
"""

import random
from collections import Counter
from typing import Dict, Optional, Tuple

from config import PIECE_KINDS, SIMULATION_GAMES, SIMULATION_STEPS
from session import MUTATING_COMMANDS, Command, CommandResult, Session

# UNDO is included so playouts exercise the restore path; QUIT is not.
PLAYOUT_COMMANDS = sorted(MUTATING_COMMANDS | {Command.UNDO})


def random_command_once(session: Session, rng: random.Random) -> CommandResult:
    """Pick one command uniformly from PLAYOUT_COMMANDS and run it on ``session``."""
    command = rng.choice(PLAYOUT_COMMANDS)
    return session.execute(command)


def simulate_sessions(
    n_games: int = SIMULATION_GAMES,
    n_steps: int = SIMULATION_STEPS,
    seed: Optional[int] = None,
) -> Tuple[Dict[str, int], Dict[str, int], Dict[str, int], float]:
    """
    Monte Carlo: play ``n_games`` fresh sessions of ``n_steps`` random commands each.

    Every session gets its own generator seeded from one master RNG, so the
    whole run is reproducible from ``seed``.

    Returns:
      - successes: command name -> number of successful executions
      - failures: command name -> number of rejected executions
      - kind_counts: piece kind -> times a piece of that kind was played
      - avg_played: average number of pieces played per game
    """
    rng = random.Random(seed)
    successes = Counter()
    failures = Counter()
    kind_counts = Counter()
    played_sum = 0

    for _ in range(n_games):
        session = Session(seed=rng.getrandbits(32))
        for _ in range(n_steps):
            result = random_command_once(session, rng)
            if result.ok:
                successes[result.command.name] += 1
            else:
                failures[result.command.name] += 1
        kind_counts.update(p.kind for p in session.played)
        played_sum += len(session.played)

    names = [c.name for c in PLAYOUT_COMMANDS]
    successes = {name: successes[name] for name in names}
    failures = {name: failures[name] for name in names}
    kind_counts = {k: kind_counts[k] for k in PIECE_KINDS}
    avg_played = played_sum / n_games if n_games > 0 else 0
    return successes, failures, kind_counts, avg_played
