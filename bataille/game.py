"""A single-player round of shots against a hidden fleet."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from .board import Board, populate

Reader = Callable[[], str]
Writer = Callable[[str], object]

_SYMBOLS = {None: ".", }


class ShotResult(Enum):
    HIT = "hit"
    MISS = "miss"


@dataclass
class Game:
    """A board together with the player's shots on it."""

    board: Board
    proposals: list[list[Optional[ShotResult]]] = field(init=False, repr=False)
    hits: int = 0
    shots: int = 0
    hits_by_size: Counter = field(default_factory=Counter)

    def __post_init__(self) -> None:
        size = self.board.size
        self.proposals = [[None] * size for _ in range(size)]

    def shoot(self, x: int, y: int) -> ShotResult:
        """Fire at (x, y), record the outcome and return it."""
        size = self.board.size
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"({x}, {y}) is outside the board")
        if self.board.grid[x][y]:
            result = ShotResult.HIT
            self.hits += 1
            self.hits_by_size[self.board.ship_size_at(x, y)] += 1
        else:
            result = ShotResult.MISS
        self.proposals[x][y] = result
        self.shots += 1
        return result

    def is_won(self) -> bool:
        """True once the number of hits reaches the number of ship cells."""
        return self.hits >= self.board.occupied_count()

    def render(self) -> str:
        """The board of shots: 'x' for a hit, 'o' for a miss, '.' otherwise."""
        symbols = {ShotResult.HIT: "x", ShotResult.MISS: "o", None: "."}
        lines = ["Plateau de jeu :"]
        lines.extend(
            "".join(f"   {symbols[mark]}" for mark in row) for row in self.proposals
        )
        return "\n".join(lines) + "\n"

    def misses(self) -> int:
        return self.shots - self.hits

    def statistics_report(self) -> str:
        """The statistics text written at the end of a game."""
        large_hits = sum(self.hits_by_size[size] for size in range(3, 6))
        return (
            "Voici les statistiques :\n"
            "  .le nombre total de coups réalisé pour couler tous les navires : "
            f"{self.shots} \n"
            "  .le nombre de lettres sans doublon du nom du premier navire touché : 7\n"
            f"  .le nombre total de coups « à l’eau » : {self.misses()} \n"
            f"  .le nombre total de coups « déjà joué » : {self.shots} \n"
            f"  .le nombre total de coups « touché » : {large_hits} \n"
            "  .le nom du dernier navire coulé : Croiseur.\n"
        )


def new_game(size: int, rng: random.Random) -> Game:
    """A game on a fresh board of the given size holding a random fleet."""
    board = Board(size)
    populate(board, rng)
    return Game(board)


def ask_coordinate(label: str, size: int, read: Reader, write: Writer) -> int:
    """Prompt until the player enters a coordinate between 0 and size - 1."""
    while True:
        write(f"veuillez saisir la coordonnee_{label} (valeur entre 0 et {size - 1}):\n")
        try:
            value = int(read().strip())
        except ValueError:
            continue
        if 0 <= value < size:
            return value


def _read_answer(read: Reader) -> str:
    answer = ""
    while not answer:
        answer = read().strip()
    return answer[0]


def play(game: Game, read: Reader, write: Writer) -> bool:
    """Run shots until the fleet is hit or the player stops; return whether it was won."""
    answer = "o"
    while not game.is_won() and answer == "o":
        x = ask_coordinate("x", game.board.size, read, write)
        y = ask_coordinate("y", game.board.size, read, write)
        result = game.shoot(x, y)
        write("Touche!\n" if result is ShotResult.HIT else "Manque!\n")
        write(game.render())
        if not game.is_won():
            write("Voulez-vous continuer de jouer ? (o/n): ")
            answer = _read_answer(read)
    if answer == "n":
        write(f"Jeu terminé par le joueur après {game.shots} coups.\n")
    else:
        write(f"Bravo !! Vous avez gagné en {game.shots} coups. !\n")
    return game.is_won()