import pytest

from hand import Hand


@pytest.fixture
def three_hand(catalog) -> Hand:
    """Hand holding Grass, Tall Grass, Shrub in that order."""
    return Hand(catalog.spawn(i) for i in range(3))


class TestSelection:
    def test_wraps_both_ways(self, three_hand):
        assert three_hand.selected_index == 0
        three_hand.select_prev()
        assert three_hand.selected_index == 2
        three_hand.select_next()
        assert three_hand.selected_index == 0

    def test_empty_hand_has_no_selection(self):
        hand = Hand()
        hand.select_next()
        hand.select_prev()
        assert hand.selected_index is None
        assert hand.selected() is None
        assert hand.take_selected() is None

    def test_selected_is_a_copy(self, three_hand):
        copy = three_hand.selected()
        copy.grow()
        assert three_hand[0].age == 0


class TestTakeSelected:
    def test_last_entry_removed_without_swap(self, three_hand):
        three_hand.selected_index = 2
        taken = three_hand.take_selected()
        assert taken.name == "Shrub"
        assert three_hand.names() == ["Grass", "Tall Grass"]
        assert three_hand.selected_index == 1

    def test_swap_remove_moves_last_into_slot(self, three_hand):
        taken = three_hand.take_selected()
        assert taken.name == "Grass"
        # Former last entry now fills slot 0
        assert three_hand.names() == ["Shrub", "Tall Grass"]
        assert three_hand.selected_index == 0

    def test_middle_entry(self, three_hand):
        three_hand.selected_index = 1
        taken = three_hand.take_selected()
        assert taken.name == "Tall Grass"
        assert three_hand.names() == ["Grass", "Shrub"]
        assert three_hand.selected_index == 0

    def test_emptying_hand_clears_selection(self, catalog):
        hand = Hand([catalog.spawn(0)])
        hand.take_selected()
        assert len(hand) == 0
        assert hand.selected_index is None


class TestAppend:
    def test_keeps_selection(self, three_hand, catalog):
        three_hand.select_next()
        three_hand.append([catalog.spawn(0), catalog.spawn(0)])
        assert three_hand.selected_index == 1
        assert len(three_hand) == 5

    def test_resets_selection_on_empty_hand(self, catalog):
        hand = Hand()
        hand.append([catalog.spawn(1)])
        assert hand.selected_index == 0
        assert hand.selected().name == "Tall Grass"
