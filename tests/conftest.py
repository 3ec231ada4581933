import random

import pytest

from salvo.player import Player


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def small_fleet():
    """Tug at the top-left corner and a barge two rows down, on a 3 x 3 grid."""
    return [
        {"name": "tug", "length": 1, "position": (0, 0)},
        {"name": "barge", "length": 2, "position": (0, 2, "H")},
    ]


@pytest.fixture
def make_player(rng):
    def _make(id, **kwargs):
        kwargs.setdefault("rng", rng)
        return Player(id, **kwargs)

    return _make
