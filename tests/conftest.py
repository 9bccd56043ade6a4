"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator, Sequence

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base
from src.floodit.board import Board
from src.floodit.game_state import GameState

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

StateFactory = Callable[[Sequence[Sequence[int]]], GameState]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def state_from_colors() -> StateFactory:
    """Call the inner function with rows of colors (rows[y][x]) to get a fresh GameState on exactly that board."""

    def _create_state(rows: Sequence[Sequence[int]]) -> GameState:
        return GameState(board=Board.from_colors(rows))

    return _create_state


@pytest.fixture
def single_odd_cell_rows() -> list[list[int]]:
    """10x10 board of color 0, except for a single cell of color 1 at (5, 5)."""
    rows = [[0] * 10 for _ in range(10)]
    rows[5][5] = 1
    return rows
