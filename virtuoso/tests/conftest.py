"""
Pytest fixtures for Words Virtuoso tests.
"""

import random

import pytest

from ..engine_core.render import PlainRenderer
from ..session import GameSession
from .helpers import CANDIDATES, WORDS, FakeClock, write_lines


@pytest.fixture
def words_file(tmp_path) -> str:
    """Word list file with a handful of valid words."""
    return write_lines(tmp_path / "words.txt", WORDS)


@pytest.fixture
def candidates_file(tmp_path) -> str:
    """Candidate file with a single word, so the secret is 'crane'."""
    return write_lines(tmp_path / "candidates.txt", CANDIDATES)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(clock) -> GameSession:
    """A stopped session with plain rendering and a fixed seed."""
    return GameSession(
        rng=random.Random(42),
        clock=clock,
        renderer=PlainRenderer(),
    )


@pytest.fixture
def active_session(session, words_file, candidates_file) -> GameSession:
    """A started session whose secret is 'crane'."""
    assert session.start([words_file, candidates_file]) == "Words Virtuoso"
    return session
