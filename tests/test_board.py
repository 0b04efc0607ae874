import random

import pytest

from bataille.board import (
    Board,
    Cell,
    Direction,
    Ship,
    populate,
    random_ship,
    ship_name,
)


def test_ship_cells_follow_direction():
    ship = Ship(size=3, direction=Direction.RIGHT, start=Cell(2, 2))
    assert ship.cells() == [Cell(2, 2), Cell(2, 3), Cell(2, 4)]


def test_ship_cells_upwards():
    ship = Ship(size=2, direction=Direction.UP, start=Cell(3, 1))
    assert ship.cells() == [Cell(3, 1), Cell(2, 1)]


@pytest.mark.parametrize(
    "size, name",
    [(2, "Torpilleur"), (3, "Contre_torpilleurs"), (4, "Croiseur"), (5, "Porte-avions")],
)
def test_ship_name(size, name):
    assert ship_name(size) == name
    assert Ship(size, Direction.DOWN, Cell(0, 0)).name == name


def test_ship_name_unknown_size():
    with pytest.raises(ValueError):
        ship_name(7)


def test_is_valid_out_of_bounds():
    board = Board(6)
    assert board.is_valid(Ship(3, Direction.LEFT, Cell(0, 1))) is False
    assert board.is_valid(Ship(3, Direction.LEFT, Cell(0, 2))) is True


def test_is_valid_overlap():
    board = Board(6)
    board.place(Ship(4, Direction.DOWN, Cell(0, 3)))
    assert board.is_valid(Ship(3, Direction.RIGHT, Cell(2, 1))) is False
    assert board.is_valid(Ship(3, Direction.RIGHT, Cell(5, 1))) is True


def test_place_rejects_invalid_ship():
    board = Board(6)
    with pytest.raises(ValueError):
        board.place(Ship(5, Direction.UP, Cell(1, 1)))


def test_place_marks_cells():
    board = Board(6)
    ship = Ship(4, Direction.DOWN, Cell(1, 2))
    board.place(ship)
    assert board.occupied_count() == ship.size
    assert all(board.grid[c.x][c.y] for c in ship.cells())


def test_segment_length_capped_at_five():
    board = Board(8)
    board.grid[0] = [True] * 8
    assert board.segment_length(0, 0, 0, 1) == 5


def test_ship_size_at():
    board = Board(6)
    ship = Ship(3, Direction.RIGHT, Cell(1, 1))
    board.place(ship)
    assert board.ship_size_at(1, 1) == ship.size
    assert board.ship_size_at(1, 3) == ship.size
    assert board.ship_size_at(4, 4) == 0


def test_random_ship_within_board():
    rng = random.Random(3)
    for _ in range(50):
        ship = random_ship(4, 6, rng)
        assert 0 <= ship.start.x < 6
        assert 0 <= ship.start.y < 6
        assert ship.size == 4


@pytest.mark.parametrize("seed", range(5))
def test_populate_places_fleet_without_overlap(seed):
    board = Board(6)
    ships = populate(board, random.Random(seed))
    assert sorted((s.size for s in ships), reverse=True) == [5, 4, 3, 3, 2]
    cells = [c for s in ships for c in s.cells()]
    assert len(set(cells)) == len(cells)
    assert board.occupied_count() == sum(s.size for s in ships)