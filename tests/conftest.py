import pytest

from game.bullethell import Simulation


@pytest.fixture
def sim():
    """A seeded simulation with a round in progress"""
    s = Simulation(seed=1234)
    s.start_game()
    return s
