# blockfall

A falling-block puzzle game played on a board 10 columns wide and 20 rows
high. There are seven piece shapes (I, J, L, O, S, T, Z). Pieces are drawn
from a bag that holds one of each shape. When the bag is empty it is
refilled, so each run of seven pieces contains every shape once, in random
order. Pieces can be moved, rotated, dropped to the bottom, and swapped with
the piece shown in the preview box. Clearing rows earns points, and pieces
fall faster as the score goes up.

## Installing

```
pip install .
```

pygame is the only runtime dependency.

## Playing

```
blockfall
```

To get the same piece order every time, pass a seed:

```
blockfall --seed 42
```

A 500 × 620 window opens at the main menu. The controls are:

| Key         | Where                    | Action                        |
|-------------|--------------------------|-------------------------------|
| Enter       | main menu                | start playing                 |
| H           | main menu                | show how to play              |
| Backspace   | how-to-play screen       | back to main menu             |
| A / Left    | playing                  | move piece left               |
| D / Right   | playing                  | move piece right              |
| S / Down    | playing                  | move piece down one row       |
| W / Up      | playing                  | rotate piece                  |
| Space       | playing                  | drop piece to the bottom      |
| Z           | playing                  | swap current and next piece   |
| Tab         | playing                  | pause                         |
| B           | paused                   | continue                      |
| R           | paused or game over      | start a new game              |
| M           | paused                   | reset and return to main menu |
| Escape      | anywhere                 | quit                          |

If a rotation would go off the board or overlap a locked cell, it is
undone. A piece that cannot move further down is locked into the board.
The game ends when the next piece does not fit where it appears.

### Scoring

| Rows cleared at once | Points |
|----------------------|--------|
| 1                    | 100    |
| 2                    | 300    |
| 3                    | 500    |

Clearing four or more rows at once earns no points.

Pieces fall by one row every `0.8 - score / 1000` seconds. When that value
reaches 0.2 seconds or less, the interval becomes 0.5 seconds instead
(see `blockfall.app.calculation_interval`).

## Using the game logic in code

The rules work without a window, so you can drive them directly:

```python
import random
from blockfall.game import Game

game = Game(rng=random.Random(1), sounds=None)
game.move_block_left()
game.rotate_block()
game.drop_block()
print(game.score, game.game_over)
print(game.ghost_positions())
```

- `blockfall.game.Game` has the current and next pieces, the score and the
  `game_over` flag. It also has `handle_key`, `reset` and
  `update_score`. `ghost_positions()` returns the cells where the current
  piece would land if dropped.
- `sounds` maps the names `"rotate"` and `"clear"` to objects that have a
  `play()` method. A missing entry is skipped.
- `blockfall.grid.Grid` is the board. `grid.grid` is a list of rows, where 0
  means an empty cell and any other value is a block id. `Grid.print()`
  writes the board as text.
- `blockfall.block` has `Block`, the seven shape classes `IBlock`, `JBlock`,
  `LBlock`, `OBlock`, `SBlock`, `TBlock` and `ZBlock`, and `all_blocks()`.
- `blockfall.app` has the screen states (`GameState`), the drop timer
  (`DropTimer`), the screen controller (`App`) and the `main` entry point.

## What it does not do

- It ships no music, sound effects, custom font or background images. The
  `blockfall` command plays silently, uses pygame's default font and fills
  each screen with a plain colour.
- The game-over screen lists "M" for the main menu, but on that screen only
  R (retry) and Escape (quit) work.
- The landing position from `ghost_positions()` is computed but not drawn.
- Scores are not saved between runs.

## Running the tests

```
pip install ".[test]"
pytest
```