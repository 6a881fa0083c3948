import numpy as np
import pytest

from board import CellStage
from game_state import build_initial_state
from plants import PlantCatalog, UnknownSpecies
from simulation import advance_round, choose_drop, resolve_drop


class TestAdvanceRound:
    def test_grace_tick_does_not_age(self, state):
        plant = state.hand.take_selected()
        state.board.place(1, 1, plant)

        advance_round(state)
        cell = state.cell(1, 1)
        assert cell.stage is CellStage.GROWING
        assert cell.plant is plant
        assert (plant.age, plant.size) == (0, 0)
        assert state.round == 1

    def test_growing_plant_ages(self, state):
        state.board.place(0, 0, state.hand.take_selected())
        advance_round(state)
        advance_round(state)
        plant = state.cell(0, 0).plant
        assert (plant.age, plant.size) == (1, 1)
        assert state.score == 0.0

    @pytest.mark.parametrize("max_age, growth, pps", [(1, 1, 1.0), (3, 2, 0.5), (5, 0, 2.0)])
    def test_matures_after_grace_plus_max_age(self, max_age, growth, pps):
        catalog = PlantCatalog.from_records([{
            "name": "Fern", "max_age": max_age, "size_per_turn": growth,
            "points_per_size": pps, "short_display": "f",
        }])
        state = build_initial_state(board_size=3, catalog=catalog, seed=0)
        state.board.place(2, 2, state.hand.take_selected())

        for _ in range(max_age):
            advance_round(state)
            assert not state.board.can_place(2, 2)
        report = advance_round(state)

        assert state.board.can_place(2, 2)
        assert state.score == max_age * growth * pps
        assert report.points == max_age * growth * pps
        assert [h.position for h in report.harvests] == [(2, 2)]

    def test_empty_cells_untouched(self, state):
        advance_round(state)
        assert state.board.occupied_count() == 0
        assert state.round == 1
        assert len(state.hand) == 2

    def test_round_counter_increments(self, state):
        for expected in range(1, 5):
            report = advance_round(state)
            assert report.round == expected == state.round

    def test_drops_appended_to_hand(self, grass_catalog, fixed_draw):
        catalog = grass_catalog([{"chance": 1.0, "plants": ["Grass", "Grass"]}])
        state = build_initial_state(board_size=2, catalog=catalog, starting_hand_size=1)
        state.rng = fixed_draw(0.5)
        state.board.place(0, 0, state.hand.take_selected())
        assert state.hand.selected_index is None

        for _ in range(3):
            advance_round(state)

        assert state.hand.names() == ["Grass", "Grass"]
        assert state.hand.selected_index == 0
        assert all(p.age == 0 and p.size == 0 for p in state.hand)
        assert any("matured" in m for m in state.messages)


class TestChooseDrop:
    def test_empty_table_drops_nothing(self, grass_catalog, fixed_draw):
        catalog = grass_catalog([])
        assert choose_drop(catalog.first, fixed_draw(0.5)) is None
        assert resolve_drop(catalog.first, catalog, fixed_draw(0.5)) == []

    def test_zero_draw_drops_nothing(self, catalog, fixed_draw):
        assert resolve_drop(catalog.first, catalog, fixed_draw(0.0)) == []

    def test_interval_boundaries(self, catalog, fixed_draw):
        # Grass weights [1, 1]: entry 0 owns (0, 1], entry 1 owns (1, 2]
        grass = catalog.first
        assert choose_drop(grass, fixed_draw(0.25)) is grass.drops[0]
        assert choose_drop(grass, fixed_draw(0.5)) is grass.drops[0]
        assert choose_drop(grass, fixed_draw(0.75)) is grass.drops[1]

    def test_resolved_instances(self, catalog, fixed_draw):
        produced = resolve_drop(catalog.first, catalog, fixed_draw(0.9))
        assert [p.name for p in produced] == ["Grass", "Tall Grass"]

    def test_weighted_distribution(self, catalog):
        # Tall Grass weights [5, 1]
        tall = catalog.by_name("Tall Grass")
        rng = np.random.default_rng(2024)
        trials = 6000
        hits = sum(choose_drop(tall, rng) is tall.drops[0] for _ in range(trials))
        assert abs(hits / trials - 5 / 6) < 0.03

    def test_unknown_produced_id_is_fatal(self, catalog, fixed_draw):
        small = PlantCatalog([catalog.by_name("Tall Grass")])
        with pytest.raises(UnknownSpecies):
            resolve_drop(small.first, small, fixed_draw(0.1))
