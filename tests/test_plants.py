import json

import pytest

from config import PLANTS_ASSET_PATH
from plants import (
    CatalogError,
    DEFAULT_PLANT_RECORDS,
    PlantCatalog,
    UnknownSpecies,
    load_catalog,
)


class TestCatalog:
    def test_default_species_resolved_to_ids(self, catalog):
        grass = catalog.by_name("Grass")
        tall = catalog.by_name("Tall Grass")
        assert catalog.first is grass
        assert grass.id == 0 and tall.id == 1
        assert [d.produces for d in grass.drops] == [(0, 0), (0, 1)]
        assert [d.weight for d in tall.drops] == [5.0, 1.0]

    def test_lookup_unknown_id_raises(self, catalog):
        with pytest.raises(UnknownSpecies):
            catalog.lookup(len(catalog))
        with pytest.raises(UnknownSpecies):
            catalog.by_name("Oak")

    def test_unknown_drop_target_is_config_error(self):
        records = [dict(DEFAULT_PLANT_RECORDS[0], drops=[{"chance": 1.0, "plants": ["Oak"]}])]
        with pytest.raises(UnknownSpecies):
            PlantCatalog.from_records(records)

    @pytest.mark.parametrize("field, value", [
        ("max_age", 0),
        ("max_age", "two"),
        ("size_per_turn", -1),
        ("short_display", "ww"),
        ("points_per_size", None),
    ])
    def test_malformed_species_rejected(self, field, value):
        record = dict(DEFAULT_PLANT_RECORDS[0], drops=[])
        record[field] = value
        with pytest.raises(CatalogError):
            PlantCatalog.from_records([record])

    @pytest.mark.parametrize("chance", [0, -1.5, float("nan"), float("inf")])
    def test_invalid_weight_rejected(self, chance):
        record = dict(DEFAULT_PLANT_RECORDS[0], drops=[{"chance": chance, "plants": ["Grass"]}])
        with pytest.raises(CatalogError):
            PlantCatalog.from_records([record])

    @pytest.mark.parametrize("target", [["Grass"], {"name": "Grass"}, 0])
    def test_non_string_drop_target_rejected(self, target):
        record = dict(DEFAULT_PLANT_RECORDS[0], drops=[{"chance": 1.0, "plants": [target]}])
        with pytest.raises(CatalogError):
            PlantCatalog.from_records([record])

    def test_duplicate_names_and_empty_catalog_rejected(self):
        record = dict(DEFAULT_PLANT_RECORDS[0], drops=[])
        with pytest.raises(CatalogError):
            PlantCatalog.from_records([record, record])
        with pytest.raises(CatalogError):
            PlantCatalog.from_records([])

    def test_spawn_is_fresh_instance(self, catalog):
        a = catalog.spawn(0)
        b = catalog.spawn(0)
        assert a is not b
        assert (a.age, a.size) == (0, 0)


class TestPlantInstance:
    def test_label_and_projection(self, catalog):
        plant = catalog.spawn(catalog.by_name("Tall Grass").id)
        assert plant.label == "W: 0/4"
        assert plant.projected_points == 4.0
        assert not plant.expiring_soon

        plant.grow()
        plant.grow()
        assert (plant.age, plant.size) == (2, 2)
        assert plant.remaining_fraction == 0.5
        assert plant.expiring_soon

    def test_clone_does_not_alias(self, catalog):
        plant = catalog.spawn(0)
        copy = plant.clone()
        copy.grow()
        assert plant.age == 0
        assert copy.species is plant.species


class TestLoadCatalog:
    def test_bundled_asset_matches_builtin(self, catalog):
        loaded = load_catalog(PLANTS_ASSET_PATH)
        assert [s for s in loaded] == [s for s in catalog]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "plants.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_invalid_encoding(self, tmp_path):
        path = tmp_path / "plants.json"
        path.write_bytes(b'[{"name": "\xff\xfe"}]')
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "missing.json")

    def test_custom_file(self, tmp_path):
        path = tmp_path / "plants.json"
        path.write_text(json.dumps([
            {"name": "Moss", "max_age": 1, "size_per_turn": 3, "points_per_size": 0.5,
             "short_display": "m", "drops": [{"chance": 2, "plants": ["Moss"]}]},
        ]), encoding="utf-8")
        loaded = load_catalog(path)
        moss = loaded.first
        assert moss.name == "Moss"
        assert moss.plant_class == "s"
        assert moss.projected_points == 1.5
