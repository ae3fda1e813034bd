import sys
from pathlib import Path

# Ensure flat-module imports for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from game_logic import init_session
from generator import make_generator
from session import Session


@pytest.fixture
def generator():
    return make_generator(seed=1234)


@pytest.fixture
def containers(generator):
    """Fresh (queue, stack) pair from a seeded generator."""
    return init_session(generator)


@pytest.fixture
def session():
    return Session(seed=42)


def ids(pieces):
    return [p.id for p in pieces]
