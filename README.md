# cnake

A snake game played in the terminal. Steer the snake around the board and eat
fruit to grow longer. Running into your own body ends the game.

It needs a terminal with curses support and ANSI colours (a POSIX system).

## Installation

```
pip install .
```

## Playing

```
cnake
```

By default the walls wrap around: leaving one edge of the board brings the
snake back in from the opposite side. To make the walls deadly instead:

```
cnake --no-loop-walls
```

When the game ends, the number of pieces of fruit you ate is printed.

### Options

| Flag                      | Meaning                    |
|---------------------------|----------------------------|
| `-h`, `--help`            | Show the help text         |
| `-n`, `--no-loop-walls`   | Turn off wrap-around walls |

Unknown arguments are ignored.

### Controls

| Key | Action              |
|-----|---------------------|
| `w` | Move up             |
| `a` | Move left           |
| `s` | Move down           |
| `d` | Move right          |
| `p` | Pause / resume      |
| `q` | Quit (while paused) |

The snake cannot reverse straight back into itself; a key pointing the
opposite way is ignored. The help text also lists `h`/`j`/`k`/`l` and the
arrow keys, but only `w`, `a`, `s` and `d` steer the snake.

Each piece of fruit adds three cells to the snake's length and one point to
the score. The game also ends when no free cell is left for a new fruit.

### Terminal size

The board fills the terminal. The terminal must be at least 23 columns wide
and 13 rows tall, or the game exits with an error.

## Using it from Python

The game logic lives in `cnake.game.Game`, which can be driven without a
terminal:

```python
import random
from cnake.game import Game

game = Game(20, 10, loopable_walls=True, rng=random.Random(1))
game.handle_key("d")
vacated = game.step()   # the cell the tail left, or None
print(game.score, game.running, game.fruit)
```

- `cnake.game.Game` keeps the board size, the snake, the direction, the fruit,
  the score and the paused and running flags. `handle_key(key)` takes one key
  (or `None` for no key), `step()` advances one tick and `place_fruit()` puts
  the fruit on a random free cell.
- `cnake.game.Direction` is the movement direction.
- `cnake.game.start(screen, loopable_walls)` runs the interactive loop on a
  curses screen and returns the score.
- `cnake.body.SnakeBody` holds the snake's cells, head first.
- `cnake.coord.Coord` is the board position type.
- `cnake.term` writes blocks to the terminal with ANSI escapes (`move_to`,
  `put_block`) and switches the tty mode (`set_raw`, `set_cooked`).
- `cnake.cli` holds `main`, `parse_args` and `help_text`.

## What it does not do

There is no high-score table or other saved state, and no speed or board-size
settings: the board always fills the terminal and the game ticks every tenth
of a second.