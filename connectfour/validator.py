"""Streak search in the directions that run through a candidate cell."""

from __future__ import annotations

from typing import Callable

from .board import Board
from .piece import Piece

StreakPair = tuple[Piece, int]
_Bounds = Callable[[int, int], bool]


class Validator:
    """Finds the runs of pieces that meet at a candidate cell.

    Each direction is walked from the cell next to the candidate and stops at
    the first empty cell, at the first piece of another kind, or once
    ``streak_length`` pieces have been counted.
    """

    def __init__(self, board: Board) -> None:
        self._board = board

    def _walk(
        self,
        x: int,
        y: int,
        dx: int,
        dy: int,
        inside: _Bounds,
        streak_length: int,
    ) -> StreakPair:
        streak_type = Piece.EMPTY
        count = 0
        while inside(x, y) and count < streak_length:
            piece = self._board.get_piece(x, y)
            if piece is Piece.EMPTY:
                break
            if streak_type is Piece.EMPTY:
                streak_type = piece
            elif piece is not streak_type:
                break
            count += 1
            x += dx
            y += dy
        return streak_type, count

    @staticmethod
    def _opposite(first: StreakPair, second: StreakPair) -> list[StreakPair]:
        """Merge ``second`` into ``first`` when both runs are of the same kind."""
        if first[0] is second[0]:
            first = (first[0], first[1] + second[1])
        return [first, second]

    def find_streaks(
        self, candidate_column: int, top_of_column: int, streak_length: int
    ) -> list[StreakPair]:
        """Return (piece, count) runs around the cell at the given column and row.

        The list holds, in order: the backwards diagonal (up-left, down-right),
        the forwards diagonal (up-right, then the lower side), the horizontal
        (left, right) and finally the run straight down.  Where the two halves
        of a line are of the same kind the first half carries their sum.
        """
        last_x = self._board.width - 1
        last_y = self._board.height - 1
        height = self._board.height
        x, y = candidate_column, top_of_column

        streaks: list[StreakPair] = []

        top_left = self._walk(
            x - 1, y + 1, -1, 1, lambda cx, cy: cx >= 0 and cy <= height, streak_length
        )
        bottom_right = self._walk(
            x + 1, y - 1, 1, -1, lambda cx, cy: cx < last_x and cy >= 0, streak_length
        )
        streaks += self._opposite(top_left, bottom_right)

        top_right = self._walk(
            x + 1, y + 1, 1, 1, lambda cx, cy: cx < last_x and cy < last_y, streak_length
        )
        bottom_left = self._walk(
            x - 1, y - 1, 1, -1, lambda cx, cy: cx < last_x and cy >= 0, streak_length
        )
        streaks += self._opposite(top_right, bottom_left)

        left = self._walk(x - 1, y, -1, 0, lambda cx, cy: cx >= 0, streak_length)
        right = self._walk(x + 1, y, 1, 0, lambda cx, cy: cx < last_x, streak_length)
        streaks += self._opposite(left, right)

        streaks.append(self._walk(x, y - 1, 0, -1, lambda cx, cy: cy >= 0, streak_length))
        return streaks