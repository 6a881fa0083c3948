# simulation/rounds.py
"""
Round tick for Forest.

One call to advance_round() moves every board cell forward one round,
in row-major order:
- JUST_PLACED cells become GROWING without aging (one-tick grace period)
- GROWING cells age; matured plants score, drop new plants into the
  hand and leave their cell empty
- EMPTY cells are untouched
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Tuple

from board import CellStage
from plants import PlantInstance
from simulation.drops import resolve_drop

if TYPE_CHECKING:
    from game_state.state import GameState

Point = Tuple[int, int]


@dataclass
class Harvest:
    """A plant that matured during a round."""
    position: Point
    species: str
    points: float
    drops: List[PlantInstance] = field(default_factory=list)


@dataclass
class RoundReport:
    """Outcome of one round tick."""
    round: int                                  # Round number after the tick
    harvests: List[Harvest] = field(default_factory=list)

    @property
    def points(self) -> float:
        return sum(h.points for h in self.harvests)


def _harvest(state: GameState, position: Point, plant: PlantInstance) -> Harvest:
    """Score a matured plant and add its drops to the hand."""
    points = plant.size * plant.species.points_per_size
    state.score += points

    drops = resolve_drop(plant.species, state.catalog, state.rng)
    state.hand.append(drops)

    if drops:
        dropped = ", ".join(p.name for p in drops)
        state.messages.append(f"{plant.name} matured: +{points:g} points, dropped {dropped}.")
    else:
        state.messages.append(f"{plant.name} matured: +{points:g} points.")
    return Harvest(position, plant.name, points, drops)


def advance_round(state: GameState) -> RoundReport:
    """Advance the board by one round."""
    board = state.board
    harvests: List[Harvest] = []

    for position, cell in board:
        x, y = position
        if cell.stage is CellStage.JUST_PLACED:
            board.set_growing(x, y, cell.plant)
        elif cell.stage is CellStage.GROWING:
            plant = cell.plant
            plant.grow()
            if plant.is_mature:
                harvests.append(_harvest(state, position, plant))
                board.clear(x, y)

    state.round += 1
    state.messages.append(f"Round {state.round}.")
    return RoundReport(round=state.round, harvests=harvests)
