"""Fast streak measurements around a single column."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .board import Board
from .piece import Piece

_REACH = 4


@dataclass(frozen=True)
class Streak:
    """A run of ``count`` pieces of one kind."""

    count: int
    piece: Piece


_NO_STREAK = Streak(0, Piece.EMPTY)


class Direction(Enum):
    """Directions to walk from a cell, as (dx, dy) steps."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    FORWARDS_UP = (1, 1)
    FORWARDS_DOWN = (-1, -1)
    BACKWARDS_UP = (-1, 1)
    BACKWARDS_DOWN = (1, -1)
    DOWN = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


def _combine(first: Streak, second: Streak, adjust: int) -> Streak:
    if first.piece is not Piece.EMPTY and first.piece is second.piece:
        return Streak(first.count + second.count + adjust, first.piece)
    return _NO_STREAK


def _longest(streaks: list[Streak]) -> Streak:
    return max(streaks, key=lambda streak: streak.count)


class QuickValidator:
    """Measures streaks that run through the top of a column."""

    def __init__(self, board: Board) -> None:
        self._board = board

    def count(self, origin_x: int, origin_y: int, direction: Direction, piece_type: Piece) -> int:
        """Count up to four consecutive ``piece_type`` pieces from the origin."""
        if piece_type is Piece.EMPTY:
            return 0
        total = 0
        for step in range(_REACH):
            x = origin_x + step * direction.dx
            y = origin_y + step * direction.dy
            if self._board.get_piece(x, y) is not piece_type:
                break
            total += 1
        return total

    def is_winning_move(self, x: int) -> Streak:
        """Longest streak through the topmost piece of column ``x``."""
        top = self._board.top_of_columns()[x]
        y = top - 1 if top > 0 else top
        piece = self._board.get_piece(x, y)

        def run(direction: Direction) -> Streak:
            return Streak(self.count(x, y, direction, piece), piece)

        left, right = run(Direction.LEFT), run(Direction.RIGHT)
        fwd_up, fwd_down = run(Direction.FORWARDS_UP), run(Direction.FORWARDS_DOWN)
        back_up, back_down = run(Direction.BACKWARDS_UP), run(Direction.BACKWARDS_DOWN)
        # The origin is counted by both halves of a line, hence the -1.
        return _longest([
            left,
            right,
            _combine(left, right, -1),
            fwd_up,
            fwd_down,
            _combine(fwd_up, fwd_down, -1),
            back_up,
            back_down,
            _combine(back_up, back_down, -1),
            run(Direction.DOWN),
        ])

    def get_streak(self, x: int) -> Streak:
        """Longest streak a piece dropped into column ``x`` would touch."""
        y = self._board.top_of_columns()[x]

        def neighbour(direction: Direction) -> Streak:
            nx, ny = x + direction.dx, y + direction.dy
            piece = self._board.get_piece(nx, ny)
            return Streak(self.count(nx, ny, direction, piece) + 1, piece)

        left, right = neighbour(Direction.LEFT), neighbour(Direction.RIGHT)
        fwd_up, fwd_down = neighbour(Direction.FORWARDS_UP), neighbour(Direction.FORWARDS_DOWN)
        back_up, back_down = neighbour(Direction.BACKWARDS_UP), neighbour(Direction.BACKWARDS_DOWN)
        return _longest([
            left,
            right,
            _combine(left, right, 1),
            fwd_up,
            fwd_down,
            _combine(fwd_up, fwd_down, 1),
            back_up,
            back_down,
            _combine(back_up, back_down, 1),
            neighbour(Direction.DOWN),
        ])