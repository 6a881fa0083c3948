# simulation/drops.py
"""
Weighted drop resolution.

When a plant matures, one entry of its species' drop table is chosen
with probability proportional to its weight, and every species listed
by that entry is spawned as a fresh instance for the hand.
"""
from __future__ import annotations

from typing import List, Optional, Protocol

import numpy as np

from plants import DropEntry, PlantCatalog, PlantInstance, PlantSpecies


class EntropySource(Protocol):
    """Anything with a numpy-style random() returning a float in [0, 1)."""

    def random(self) -> float: ...


def choose_drop(species: PlantSpecies, rng: EntropySource) -> Optional[DropEntry]:
    """Pick one drop table entry by weight, or None.

    Entry i owns the interval (running_i, running_i + weight_i], open at
    the low end. A draw of exactly 0 therefore matches nothing, and an
    empty table never matches.
    """
    if not species.drops:
        return None

    weights = np.fromiter((d.weight for d in species.drops), dtype=np.float64, count=len(species.drops))
    upper = np.cumsum(weights)
    total = float(upper[-1])
    if total <= 0.0:
        return None

    r = float(rng.random()) * total

    # First entry whose cumulative sum reaches r
    idx = int(np.searchsorted(upper, r, side="left"))
    if idx >= len(species.drops):
        return None
    lower = float(upper[idx - 1]) if idx > 0 else 0.0
    if not lower < r:
        return None
    return species.drops[idx]


def resolve_drop(species: PlantSpecies, catalog: PlantCatalog, rng: EntropySource) -> List[PlantInstance]:
    """Spawn the plants produced by a matured species.

    Raises UnknownSpecies if the chosen entry names a species id missing
    from the catalog.
    """
    entry = choose_drop(species, rng)
    if entry is None:
        return []
    return [catalog.spawn(species_id) for species_id in entry.produces]
