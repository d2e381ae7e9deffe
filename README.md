# gridmatch

Building blocks for X/O grid games such as tic-tac-toe. It provides a resizable
board, moves, human and computer players with win/loss tracking, and a
plain-text board view.

## Installation

```
pip install .
```

## Usage

```python
import sys

from gridmatch.board import Board
from gridmatch.move import Move
from gridmatch.player import AIPlayer, HumanPlayer
from gridmatch.view import View

board = Board(3, 3)
alice = HumanPlayer("Alice", "Human", 0, 0, 0, "X")
bot = AIPlayer("Bot", "AI", 0, 0, 0, "O")

alice.make_move(Move(alice, 1, 1), board)   # places X at row 1, column 1

move = Move(bot, 0, 0)
bot.make_move(move, board)                  # places O in the first empty cell
print(move.position)                        # (0, 0)

View(board.rows, board.columns, board.snapshot()).draw(sys.stdout)

print(board.empty_cells())
print(board.is_full())
```

### Board (`gridmatch.board`)

`Board(rows, columns)` starts with every cell empty, which is a single space.
Negative sizes raise `ValueError`.

- `rows` and `columns` give the dimensions. `cells` is the live grid.
  `snapshot()` returns an independent copy of it.
- `get_cell(row, column)` and `is_cell_empty(row, column)` raise `ValueError`
  for positions off the board. `is_valid_position(row, column)` returns a
  boolean instead.
- `set_cell(row, column, symbol)` accepts only `"X"` or `"O"`, and only inside
  the grid. Anything else raises `ValueError`.
- `empty_cells()` lists the empty `(row, column)` positions in row-major
  order. `is_full()` tells whether no cell is empty.
- `reset()` clears every cell. `resize(rows, columns)` replaces the grid with
  an empty one of the new size. Both sizes must be positive, or it raises
  `ValueError`.

### Move (`gridmatch.move`)

`Move(player, row, column)` is a dataclass. `position` reads and writes the
`(row, column)` pair.

### Players (`gridmatch.player`)

`Player` is the abstract base class. It is constructed as
`(name, kind, wins, losses, played, symbol)`. It has the attributes `name`,
`kind`, `wins`, `losses`, `played`, `level` (starting at 1) and
`consecutive_wins` (starting at 0). If you assign to `symbol` later, the value
must be `"X"` or `"O"`, otherwise it raises `ValueError`.

- `update_stats(win)` records one game. A win adds to `wins` and to the streak.
  A loss adds to `losses` and ends the streak. Three wins in a row raise
  `level` by one and start a new streak.
- `reset_progress()` sets the counts and the streak back to zero and the level
  back to 1.

A `HumanPlayer` plays exactly the cell its `Move` names. It refuses a move
whose `player` is another player with `ValueError`.

An `AIPlayer` takes the first empty cell in row-major order, whatever cell the
move names. It writes that position and itself into the move. On a full board
it does nothing.

`str(player)` gives a multi-line description. For a human player this
includes games played, wins and losses. For an AI player it covers the name,
type, symbol and level only.

### View (`gridmatch.view`)

`View(rows, columns, data).render()` returns the grid drawn as text, with
column numbers across the top and row numbers down the side.
`draw(stream=None)` writes the same text to `stream`, or to standard output
if no stream is given.

## What it does not do

The package does not detect wins, does not alternate turns and does not run a
game loop. It has no command-line program and does not save players or
statistics. Those are left to the application built on these pieces.

## Running the tests

```
pip install .[test]
pytest
```