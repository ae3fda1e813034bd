import logging

import pytest

from analytics import container_table, kind_counts, kind_frequency_table, simulation_table
from config import PIECE_KINDS
from logger_config import setup_logging
from models import Piece
from session import Command


def test_kind_counts_lists_every_kind():
    counts = kind_counts([Piece("I", 1), Piece("I", 2), Piece("Z", 3)])
    assert list(counts) == PIECE_KINDS
    assert counts["I"] == 2 and counts["Z"] == 1 and counts["O"] == 0


def test_container_table_fresh_session(session):
    df = container_table(session)
    assert len(df) == 5
    assert set(df["Container"]) == {"Queue"}
    assert df["Position"].tolist() == [1, 2, 3, 4, 5]
    assert df["Id"].tolist() == [1, 2, 3, 4, 5]


def test_container_table_includes_stack(session):
    session.execute(Command.RESERVE)
    df = container_table(session)
    stack_rows = df[df["Container"] == "Stack"]
    assert len(df) == 6
    assert stack_rows["Id"].tolist() == [1]


def test_kind_frequency_table_empty():
    df = kind_frequency_table([])
    assert df["Kind"].tolist() == PIECE_KINDS
    assert (df["Share"] == 0.0).all()
    assert df["Expected share"].iloc[0] == pytest.approx(1 / 7)


def test_kind_frequency_table_shares_sum_to_one(session):
    for _ in range(10):
        session.execute(Command.PLAY)
    df = kind_frequency_table(session.played)
    assert df["Count"].sum() == 10
    assert df["Share"].sum() == pytest.approx(1.0)


def test_simulation_table_rates():
    df = simulation_table({"PLAY": 3, "UNDO": 0}, {"PLAY": 1, "UNDO": 0})
    rates = dict(zip(df["Command"], df["Rejection rate"]))
    assert rates["PLAY"] == pytest.approx(0.25)
    assert rates["UNDO"] == 0.0


def test_setup_logging_to_file(tmp_path):
    log_file = tmp_path / "session.log"
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging(logging.DEBUG, log_file=str(log_file))
        logging.getLogger("session").info("hello")
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0], logging.FileHandler)
        root.handlers[0].flush()
        assert "hello" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
