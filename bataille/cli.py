"""Command line entry point for the naval battle game."""

from __future__ import annotations

import random
import sys
from typing import Callable, Optional, Sequence

from .game import new_game, play

DEFAULT_STATS_FILE = "Stats.txt"
MIN_SIZE = 6
MAX_SIZE = 100


class UsageError(ValueError):
    """Raised for a command line the program does not accept."""


def parse_args(argv: Sequence[str]) -> Optional[str]:
    """Return the statistics file name, or None when no statistics are wanted."""
    if len(argv) > 2:
        raise UsageError("error: Exactly zero, one or two arguments must be provided")
    if not argv:
        return None
    if argv[0] not in ("-s", "-S"):
        raise UsageError("Unknown option")
    return argv[1] if len(argv) == 2 else DEFAULT_STATS_FILE


def ask_board_size(read: Callable[[], str], write: Callable[[str], object]) -> int:
    """Prompt until the player enters a board size between 6 and 100."""
    while True:
        write("Veuillez saisir la taille du plateau (6<= taille <=100): \n")
        try:
            size = int(read().strip())
        except ValueError:
            continue
        if MIN_SIZE <= size <= MAX_SIZE:
            return size


def run(
    argv: Sequence[str],
    read: Callable[[], str],
    write: Callable[[str], object],
    rng: random.Random,
) -> int:
    """Play one game as the command would; return the exit status."""
    try:
        stats_file = parse_args(argv)
    except UsageError as exc:
        write(f"{exc}\n")
        return 1
    write("Bienvenue au jeu Bataille Navale : \n")
    size = ask_board_size(read, write)
    if stats_file is None:
        game = new_game(size, rng)
        write("Début:\n")
        play(game, read, write)
        return 0
    try:
        stats = open(stats_file, "w", encoding="utf-8")
    except OSError:
        write(f"Erreur lors de l'ouverture du fichier {stats_file}.\n")
        return 1
    with stats:
        game = new_game(size, rng)
        write("Début:\n")
        play(game, read, write)
        stats.write(game.statistics_report())
    return 0


def _read_stdin() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        return run(argv, _read_stdin, sys.stdout.write, random.Random())
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())