import os
import sys

import pytest

# Ensure project root is on sys.path so top-level modules import in tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from plants import PlantCatalog, default_catalog  # noqa: E402
from game_state import build_initial_state  # noqa: E402


class FixedDraw:
    """Entropy stand-in that always returns the same value from random()."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


def grass_only_records(drops=None):
    """Single-species catalog records for Grass (max_age=2, growth=1)."""
    return [
        {
            "name": "Grass",
            "max_age": 2,
            "size_per_turn": 1,
            "points_per_size": 1.0,
            "short_display": "w",
            "drops": drops if drops is not None else [],
        }
    ]


@pytest.fixture
def catalog() -> PlantCatalog:
    """The built-in Grass / Tall Grass / Shrub catalog."""
    return default_catalog()


@pytest.fixture
def state(catalog):
    """Fresh 6x6 session with a seeded drop generator."""
    return build_initial_state(board_size=6, catalog=catalog, seed=1234)


@pytest.fixture
def fixed_draw():
    return FixedDraw


@pytest.fixture
def grass_catalog():
    """Factory for a Grass-only catalog with the given drop table."""
    def make(drops=None) -> PlantCatalog:
        return PlantCatalog.from_records(grass_only_records(drops))
    return make
