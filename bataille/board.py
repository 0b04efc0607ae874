"""Board, ships and random fleet placement."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

FLEET: tuple[tuple[int, int], ...] = ((5, 1), (4, 1), (3, 2), (2, 1))
"""Pairs of (ship size, number of ships of that size), in placement order."""

MAX_SEGMENT = 5

_SHIP_NAMES = {
    2: "Torpilleur",
    3: "Contre_torpilleurs",
    4: "Croiseur",
    5: "Porte-avions",
}


class Direction(Enum):
    """Orientation of a ship, from its first cell."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> tuple[int, int]:
        """Row and column step taken by one cell in this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


@dataclass(frozen=True)
class Cell:
    """A square of the board: x is the row, y the column."""

    x: int
    y: int


def ship_name(size: int) -> str:
    """Return the name of the ship type of the given size."""
    try:
        return _SHIP_NAMES[size]
    except KeyError:
        raise ValueError(f"no ship type has size {size}") from None


@dataclass(frozen=True)
class Ship:
    """A ship of a given size laid out from its first cell in one direction."""

    size: int
    direction: Direction
    start: Cell

    @property
    def name(self) -> str:
        return ship_name(self.size)

    def cells(self) -> list[Cell]:
        """Every cell the ship covers, starting from its first cell."""
        dx, dy = self.direction.delta
        return [
            Cell(self.start.x + step * dx, self.start.y + step * dy)
            for step in range(self.size)
        ]


@dataclass
class Board:
    """A square grid of water and ship cells."""

    size: int
    grid: list[list[bool]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("board size must be positive")
        self.grid = [[False] * self.size for _ in range(self.size)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def is_valid(self, ship: Ship) -> bool:
        """True if the ship stays on the board and overlaps no other ship."""
        return all(
            self._inside(cell.x, cell.y) and not self.grid[cell.x][cell.y]
            for cell in ship.cells()
        )

    def place(self, ship: Ship) -> None:
        """Mark the ship's cells as occupied."""
        if not self.is_valid(ship):
            raise ValueError(f"cannot place {ship!r} on the board")
        for cell in ship.cells():
            self.grid[cell.x][cell.y] = True

    def segment_length(self, x: int, y: int, dx: int, dy: int) -> int:
        """Count consecutive ship cells from (x, y) along (dx, dy), at most five."""
        length = 0
        for step in range(MAX_SEGMENT):
            nx, ny = x + step * dx, y + step * dy
            if not self._inside(nx, ny) or not self.grid[nx][ny]:
                break
            length += 1
        return length

    def ship_size_at(self, x: int, y: int) -> int:
        """Longest ship segment reached from (x, y) in any of the four directions."""
        return max(
            self.segment_length(x, y, dx, dy)
            for dx, dy in (direction.delta for direction in Direction)
        )

    def occupied_count(self) -> int:
        """Number of cells holding part of a ship."""
        return sum(sum(row) for row in self.grid)


def random_ship(size: int, board_size: int, rng: random.Random) -> Ship:
    """Create a ship with a random direction and first cell."""
    direction = Direction(rng.randrange(4))
    x = rng.randrange(board_size)
    y = rng.randrange(board_size)
    return Ship(size=size, direction=direction, start=Cell(x, y))


def populate(board: Board, rng: random.Random) -> list[Ship]:
    """Place the standard fleet at random valid positions; return the ships placed."""
    ships = []
    for size, count in FLEET:
        for _ in range(count):
            ship = random_ship(size, board.size, rng)
            while not board.is_valid(ship):
                ship = random_ship(size, board.size, rng)
            board.place(ship)
            ships.append(ship)
    return ships