"""Shared fixtures for the Rainbow Snake tests."""
import random

import pytest

from rainbow_snake.actor import ActorState, Segment
from rainbow_snake.config import GameConfig
from rainbow_snake.grid import Cell
from rainbow_snake.scheduler import Scheduler
from rainbow_snake.session import GameSession


def build_actor(*cells):
    """Actor from (x, y) pairs, head first."""
    return ActorState([Segment(Cell(x, y)) for x, y in cells])


@pytest.fixture
def make_actor():
    return build_actor


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def session(scheduler):
    """A 10x10 session with a seeded RNG, started at (2, 2) heading right."""
    config = GameConfig(grid_size=10, start_cell=Cell(2, 2))
    return GameSession(config, scheduler, rng=random.Random(7))
