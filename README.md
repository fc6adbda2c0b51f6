# connectfour

Connect Four in the terminal. Play against a friend on the same keyboard, or
against the computer.

The board has seven columns and six rows. Players take turns dropping a piece
into a column, numbered 0 to 6. The piece lands on the lowest empty row. The
first player to line up four of their pieces through the piece just played
wins; the line can be horizontal, vertical or diagonal. If the board fills up
first, the game ends with "Board full!".

## Installing

```
pip install .
```

## Playing

```
connectfour
```

The start menu offers three choices:

- `1` starts a one-player game. A second menu asks for the opponent:
  - `1` is the "Dumb" reflex opponent. It scores each open column by the
    streaks next to it and plays the best one right away, after a short pause.
  - `2` is the "Smarter" minimax opponent. It searches ahead with
    alpha-beta pruning.
  - `B` goes back to the start menu.
- `2` starts a two-player game.
- `X` exits.

Then you enter the player names. The first player plays red and the second
blue; in a one-player game you are red and the computer is blue. Who moves
first is picked at random. On each turn you type a column number. If the
answer is not a number, or the column is full or off the board, you are asked
again.

If input ends part-way through, the command prints "Input ended." and exits
with status 1.

## Using it as a library

```python
from connectfour.board import Board
from connectfour.piece import Piece
from connectfour.quick_validator import QuickValidator

board = Board()
for column in range(4):
    board.place_piece(column, Piece.RED)

streak = QuickValidator(board).is_winning_move(3)
print(streak.count, streak.piece)   # 4 Red
print(board.render())
```

The modules:

- `connectfour.piece` — `Piece`, the content of a cell (`EMPTY`, `RED`, `BLUE`).
- `connectfour.board` — `Board`: `place_piece`, `get_piece`, `check_move`,
  `legal_moves`, `top_of_columns`, `is_full`, `reset`, `copy` and `render`.
- `connectfour.quick_validator` — `QuickValidator` with `is_winning_move`
  (longest streak through the top piece of a column) and `get_streak`
  (longest streak a piece dropped into a column would touch), returning
  `Streak` values.
- `connectfour.validator` — `Validator.find_streaks`, the runs of pieces that
  meet at a given cell, direction by direction.
- `connectfour.win_validator` — `WinValidator.is_game_over`, a whole-board
  check for a full top row or a run of a given length.
- `connectfour.players` — `Player`, `UserPlayer`, `ComputerPlayer`,
  `ReflexPlayer` and `MiniMaxPlayer` (search depth 10 by default).
- `connectfour.game` — `Game` (seating, menus, turn order), a standalone
  `Menu`, and the `GameType` and `OpponentType` enums.
- `connectfour.cli` — `play(game)` seats the players of a `Game` whose menus
  have been answered, plays the game out and returns the winner (or `None`
  when the board fills up); `main()` is the `connectfour` command.

`UserPlayer`, `Game`, `Menu` and `play` take optional `stdin` and `stdout`
streams, so a game can be driven from any text streams.

## What it does not do

- `OpponentType.EXPMAX` exists, and `Menu` will record it, but there is no
  such opponent: `Game.add_computer` returns `False` for it and the game's
  own menu does not offer it.
- Players have a `score` attribute, but nothing keeps scores across games,
  and nothing is saved to disk. Each run plays a single game.

## Running the tests

```
pip install .[test]
pytest
```