# bataille

A terminal game of Battleship (*Bataille Navale*) for one player. The
computer hides a fleet on a square board and you fire at it until every ship
cell has been hit, or until you decide to stop. The game talks to you in
French.

## Installation

```
pip install .
```

## Playing

```
bataille
```

The game first asks how large the board should be. The size must be between
6 and 100 inclusive; the prompt repeats until you enter a whole number in
that range.

Five ships are then placed at random. None of them overlap and none run off
the board:

| Ship               | Size | Count |
|--------------------|------|-------|
| Porte-avions       | 5    | 1     |
| Croiseur           | 4    | 1     |
| Contre_torpilleurs | 3    | 2     |
| Torpilleur         | 2    | 1     |

Each turn works like this:

1. You enter an x coordinate (the row), then a y coordinate (the column).
   Both run from 0 to size − 1; each prompt repeats until the value is in
   range.
2. The game answers `Touche!` for a hit or `Manque!` for a miss.
3. It prints your shots so far: `x` marks a hit, `o` marks a miss and `.`
   marks a cell you have not fired at.
4. While ship cells remain unhit, it asks whether to continue. Only an answer
   starting with `o` carries on; any other answer ends the game.

Firing at a ship cell counts as a hit every time, even if you have hit that
cell before, so the game is won once the number of hits reaches the number of
ship cells.

If input ends (for example with Ctrl-D) or you press Ctrl-C, the program
stops with exit status 1.

## Statistics

```
bataille -s
bataille -S results.txt
```

With `-s` or `-S`, a statistics report is written to a file when the game
ends. It goes to `Stats.txt` unless you give another file name as the second
argument. The report gives the number of shots played, the number of misses
and the number of hits on ships of size 3 to 5; some of its other lines are
fixed text. If the file cannot be opened, an error is printed and the program
exits with status 1 before the game starts.

Any other option, or more than two arguments, prints an error and exits with
status 1.

## Using it from Python

`bataille.board` holds `Board`, `Ship`, `Cell`, `Direction`, `ship_name`,
`random_ship` and `populate`. `bataille.game` holds `Game`, `ShotResult`,
`new_game` and `play`:

```python
import random
from bataille.game import new_game

game = new_game(10, random.Random(42))
result = game.shoot(3, 4)      # ShotResult.HIT or ShotResult.MISS
print(game.render())
print(game.is_won(), game.shots, game.misses())
print(game.statistics_report())
```

`Game.shoot` raises `ValueError` for a cell outside the board.

`bataille.cli.run(argv, read, write, rng)` runs a whole session and returns
the exit status. You supply the argument list, a function returning one line
of input, a function writing output and the random generator, so a session
can be scripted.