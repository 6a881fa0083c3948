# simulation/__init__.py
"""Simulation modules for Forest.

- rounds: the per-round board tick
- drops: weighted drop resolution for matured plants
"""

from simulation.rounds import Harvest, RoundReport, advance_round
from simulation.drops import choose_drop, resolve_drop

__all__ = ["Harvest", "RoundReport", "advance_round", "choose_drop", "resolve_drop"]
