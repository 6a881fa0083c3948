import pytest

from board import Board, CellOccupied, CellStage, OutOfBounds


@pytest.fixture
def board() -> Board:
    return Board(4, 3)


def test_new_board_is_empty(board):
    assert all(cell.is_empty for _, cell in board)
    assert all(board.can_place(x, y) for x, y in board.positions())
    assert board.occupied_count() == 0


def test_positions_are_row_major(board):
    positions = list(board.positions())
    assert positions[:5] == [(0, 0), (1, 0), (2, 0), (3, 0), (0, 1)]
    assert len(positions) == 12


def test_place_marks_cell_just_placed(board, catalog):
    plant = catalog.spawn(0)
    board.place(2, 1, plant)
    cell = board.cell(2, 1)
    assert cell.stage is CellStage.JUST_PLACED
    assert cell.plant is plant
    assert not board.can_place(2, 1)
    assert board.can_place(1, 2)


def test_place_on_occupied_cell_raises(board, catalog):
    board.place(0, 0, catalog.spawn(0))
    first = board.plant_at(0, 0)
    with pytest.raises(CellOccupied):
        board.place(0, 0, catalog.spawn(0))
    assert board.plant_at(0, 0) is first


@pytest.mark.parametrize("x, y", [(-1, 0), (4, 0), (0, 3), (0, -1)])
def test_out_of_bounds(board, catalog, x, y):
    with pytest.raises(OutOfBounds):
        board.place(x, y, catalog.spawn(0))
    with pytest.raises(OutOfBounds):
        board.can_place(x, y)
    with pytest.raises(OutOfBounds):
        board.cell(x, y)
    with pytest.raises(OutOfBounds):
        board.clear(x, y)


def test_clear_returns_previous_plant(board, catalog):
    plant = catalog.spawn(0)
    board.place(3, 2, plant)
    assert board.clear(3, 2) is plant
    assert board.can_place(3, 2)
    assert board.clear(3, 2) is None


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Board(0, 5)
