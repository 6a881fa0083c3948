# hand.py
"""
hand.py - The player's hand of plants

Ordered list of plant instances plus a highlighted entry.

Removal is swap-remove: the last entry moves into the removed slot, so
order is NOT stable after a placement. Selection arithmetic after a
removal relies on this.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from plants import PlantInstance


class Hand:
    """
    Plants available to place.

    selected_index is None only when the hand is empty.
    """

    def __init__(self, plants: Optional[Iterable[PlantInstance]] = None):
        self.plants: List[PlantInstance] = list(plants) if plants is not None else []
        self.selected_index: Optional[int] = 0 if self.plants else None

    def select_next(self) -> None:
        """Highlight the next entry, wrapping to the start."""
        if not self.plants:
            return
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index + 1) % len(self.plants)

    def select_prev(self) -> None:
        """Highlight the previous entry, wrapping to the end."""
        if not self.plants:
            return
        if self.selected_index is None:
            self.selected_index = 0
        else:
            self.selected_index = (self.selected_index - 1) % len(self.plants)

    def selected(self) -> Optional[PlantInstance]:
        """Copy of the highlighted plant, or None."""
        if not self.plants or self.selected_index is None:
            return None
        return self.plants[self.selected_index].clone()

    def take_selected(self) -> Optional[PlantInstance]:
        """Remove and return the highlighted plant.

        The selection then steps back by one (staying put at index 0),
        and becomes None once the hand is empty.
        """
        if not self.plants or self.selected_index is None:
            return None
        idx = self.selected_index
        last = self.plants.pop()
        if idx < len(self.plants):
            taken, self.plants[idx] = self.plants[idx], last
        else:
            taken = last

        if not self.plants:
            self.selected_index = None
        else:
            self.selected_index = min(idx - 1 if idx > 0 else idx, len(self.plants) - 1)
        return taken

    def append(self, plants: Iterable[PlantInstance]) -> None:
        """Add plants to the end of the hand."""
        self.plants.extend(plants)
        if self.selected_index is None and self.plants:
            self.selected_index = 0

    def names(self) -> List[str]:
        return [p.name for p in self.plants]

    def __len__(self) -> int:
        return len(self.plants)

    def __iter__(self) -> Iterator[PlantInstance]:
        return iter(self.plants)

    def __getitem__(self, index: int) -> PlantInstance:
        return self.plants[index]
