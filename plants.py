# plants.py
"""
plants.py - Plant species, drop tables and the species catalog for Forest

Species are immutable definitions loaded once at startup:
- Grass: fast, cheap, spreads into Tall Grass
- Tall Grass: slower, occasionally drops a Shrub
- Shrub: slow, only reproduces itself

Drop tables name their targets in the source records. Names are resolved
to integer species ids when the catalog is built, so an unknown target is
a startup error and never surfaces during play.
"""
from __future__ import annotations

import json
import math
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Tuple, Union

from config import DEFAULT_PLANT_CLASS, EXPIRY_WARNING_TURNS

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Species definitions are malformed or inconsistent."""


class UnknownSpecies(CatalogError):
    """A species id or name is not present in the catalog."""


@dataclass(frozen=True)
class DropEntry:
    """One weighted outcome of a drop table."""
    weight: float                   # Relative chance, always > 0
    produces: Tuple[int, ...]       # Species ids spawned into the hand


@dataclass(frozen=True)
class PlantSpecies:
    """Immutable definition of a plant type."""
    id: int                         # Catalog index, assigned at load
    name: str                       # Unique key
    max_age: int                    # Turns of growth until maturity
    growth_per_turn: int            # Size gained per growing turn
    points_per_size: float          # Score multiplier applied on maturity
    glyph: str                      # Single char for the board
    plant_class: str = DEFAULT_PLANT_CLASS
    drops: Tuple[DropEntry, ...] = ()

    @property
    def projected_points(self) -> float:
        """Score earned if an instance is left to mature."""
        return self.max_age * self.growth_per_turn * self.points_per_size


@dataclass
class PlantInstance:
    """A concrete plant held in the hand or growing on the board."""
    species: PlantSpecies
    age: int = 0
    size: int = 0

    @property
    def name(self) -> str:
        return self.species.name

    @property
    def remaining_turns(self) -> int:
        return self.species.max_age - self.age

    @property
    def remaining_fraction(self) -> float:
        """Share of the lifetime still ahead (1.0 = fresh, 0.0 = mature)."""
        return max(0.0, self.remaining_turns / self.species.max_age)

    @property
    def expiring_soon(self) -> bool:
        return self.remaining_turns < EXPIRY_WARNING_TURNS

    @property
    def is_mature(self) -> bool:
        return self.age >= self.species.max_age

    @property
    def projected_points(self) -> float:
        return self.species.projected_points

    @property
    def label(self) -> str:
        """Board label, e.g. 'w: 1/2'."""
        return f"{self.species.glyph}: {self.age}/{self.species.max_age}"

    def grow(self) -> None:
        """Age by one turn."""
        self.age += 1
        self.size += self.species.growth_per_turn

    def clone(self) -> PlantInstance:
        return replace(self)

    def __str__(self) -> str:
        return self.label


# =============================================================================
# Species Definitions
# =============================================================================
# Same record shape as assets/plants.json
DEFAULT_PLANT_RECORDS: List[Dict[str, Any]] = [
    {
        "name": "Grass",
        "max_age": 2,
        "size_per_turn": 1,
        "points_per_size": 1.0,
        "class": "s",
        "short_display": "w",
        "drops": [
            {"chance": 1.0, "plants": ["Grass", "Grass"]},
            {"chance": 1.0, "plants": ["Grass", "Tall Grass"]},
        ],
    },
    {
        "name": "Tall Grass",
        "max_age": 4,
        "size_per_turn": 1,
        "points_per_size": 1.0,
        "class": "s",
        "short_display": "W",
        "drops": [
            {"chance": 5.0, "plants": ["Tall Grass", "Tall Grass"]},
            {"chance": 1.0, "plants": ["Tall Grass", "Shrub"]},
        ],
    },
    {
        "name": "Shrub",
        "max_age": 7,
        "size_per_turn": 1,
        "points_per_size": 1.0,
        "class": "S",
        "short_display": "Y",
        "drops": [
            {"chance": 5.0, "plants": ["Shrub", "Shrub"]},
        ],
    },
]


def _require(record: Mapping[str, Any], key: str, kind: Union[type, Tuple[type, ...]]) -> Any:
    """Fetch a typed field from a species record."""
    name = record.get("name", "<unnamed>")
    if key not in record:
        raise CatalogError(f"Species {name!r} is missing field {key!r}")
    value = record[key]
    # bool is an int subclass; a flag is never a valid number here
    if isinstance(value, bool) or not isinstance(value, kind):
        raise CatalogError(f"Species {name!r} field {key!r} has invalid value {value!r}")
    return value


def _parse_species(index: int, record: Mapping[str, Any], ids: Mapping[str, int]) -> PlantSpecies:
    """Build one species from its record, resolving drop targets to ids."""
    name = _require(record, "name", str)
    max_age = _require(record, "max_age", int)
    growth = _require(record, "size_per_turn", int)
    points = float(_require(record, "points_per_size", (int, float)))
    glyph = _require(record, "short_display", str)
    plant_class = record.get("class", DEFAULT_PLANT_CLASS)

    if max_age < 1:
        raise CatalogError(f"Species {name!r} needs max_age >= 1, got {max_age}")
    if growth < 0:
        raise CatalogError(f"Species {name!r} has negative size_per_turn")
    if len(glyph) != 1:
        raise CatalogError(f"Species {name!r} glyph must be one character, got {glyph!r}")
    if not isinstance(plant_class, str) or len(plant_class) != 1:
        raise CatalogError(f"Species {name!r} class must be one character")

    raw_drops = record.get("drops", [])
    if not isinstance(raw_drops, list):
        raise CatalogError(f"Species {name!r} drops must be a list")

    drops = []
    for raw in raw_drops:
        if not isinstance(raw, Mapping):
            raise CatalogError(f"Species {name!r} has a malformed drop entry: {raw!r}")
        weight = float(_require(raw, "chance", (int, float)))
        if not math.isfinite(weight) or weight <= 0:
            raise CatalogError(f"Species {name!r} has a drop with invalid chance {weight}")
        targets = _require(raw, "plants", list)
        produced = []
        for target in targets:
            if not isinstance(target, str):
                raise CatalogError(f"Species {name!r} has a malformed drop target {target!r}")
            if target not in ids:
                raise UnknownSpecies(f"Species {name!r} drops unknown plant {target!r}")
            produced.append(ids[target])
        drops.append(DropEntry(weight=weight, produces=tuple(produced)))

    return PlantSpecies(
        id=index,
        name=name,
        max_age=max_age,
        growth_per_turn=growth,
        points_per_size=points,
        glyph=glyph,
        plant_class=plant_class,
        drops=tuple(drops),
    )


class PlantCatalog:
    """
    Registry of every species in play.

    Immutable after construction. Species ids are positions in the
    catalog, so the first record is id 0.
    """

    def __init__(self, species: Sequence[PlantSpecies]):
        if not species:
            raise CatalogError("Catalog needs at least one species")
        self._species: Tuple[PlantSpecies, ...] = tuple(species)
        self._by_name: Dict[str, PlantSpecies] = {s.name: s for s in self._species}

    @classmethod
    def from_records(cls, records: Sequence[Mapping[str, Any]]) -> PlantCatalog:
        """Build a catalog from raw species records (JSON shape)."""
        if not isinstance(records, Sequence) or isinstance(records, (str, bytes)):
            raise CatalogError("Species definitions must be a list of records")

        ids: Dict[str, int] = {}
        for index, record in enumerate(records):
            if not isinstance(record, Mapping):
                raise CatalogError(f"Species record #{index} is not an object")
            name = _require(record, "name", str)
            if name in ids:
                raise CatalogError(f"Duplicate species name {name!r}")
            ids[name] = index

        return cls([_parse_species(i, r, ids) for i, r in enumerate(records)])

    def lookup(self, species_id: int) -> PlantSpecies:
        if not 0 <= species_id < len(self._species):
            raise UnknownSpecies(f"No species with id {species_id}")
        return self._species[species_id]

    def by_name(self, name: str) -> PlantSpecies:
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownSpecies(f"No species named {name!r}") from None

    def spawn(self, species_id: int) -> PlantInstance:
        """Fresh zero-age instance of a species."""
        return PlantInstance(self.lookup(species_id))

    @property
    def first(self) -> PlantSpecies:
        return self._species[0]

    def __len__(self) -> int:
        return len(self._species)

    def __iter__(self) -> Iterator[PlantSpecies]:
        return iter(self._species)


def default_catalog() -> PlantCatalog:
    """Catalog with the built-in species."""
    return PlantCatalog.from_records(DEFAULT_PLANT_RECORDS)


def load_catalog(path: Union[str, Path]) -> PlantCatalog:
    """Load species definitions from a JSON file.

    Raises CatalogError if the file is unreadable, is not valid JSON, or
    describes an inconsistent catalog.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            records = json.load(f)
    except OSError as exc:
        raise CatalogError(f"Cannot read species file {path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Species file {path} is not valid JSON: {exc}") from exc

    catalog = PlantCatalog.from_records(records)
    logger.info("Loaded %d species from %s", len(catalog), path)
    return catalog
