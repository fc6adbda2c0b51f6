"""Whole-board check for a finished game."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .board import Board
from .piece import Piece

Cell = tuple[int, int]


class WinValidator:
    """Scans a board for a full top row or a long enough run of one kind."""

    def __init__(self, board: Board) -> None:
        self._board = board

    def is_game_over(self, streak_length: int = 4) -> bool:
        """Tell whether the board is full or holds a run of ``streak_length``."""
        return (
            self._board_full()
            or self._any_line(self._columns(), streak_length, stop_at_empty=True)
            or self._any_line(self._rows(), streak_length, stop_at_empty=True)
            or self._any_line(self._forward_diagonals(), streak_length, stop_at_empty=False)
            or self._any_line(self._backward_diagonals(), streak_length, stop_at_empty=False)
        )

    def _board_full(self) -> bool:
        top = self._board.height - 1
        return all(
            self._board.get_piece(x, top) is not Piece.EMPTY
            for x in range(self._board.width)
        )

    def _any_line(
        self, lines: Iterable[Iterable[Cell]], streak_length: int, *, stop_at_empty: bool
    ) -> bool:
        return any(self._has_streak(line, streak_length, stop_at_empty) for line in lines)

    def _has_streak(self, cells: Iterable[Cell], streak_length: int, stop_at_empty: bool) -> bool:
        streak_type = Piece.EMPTY
        count = 0
        for x, y in cells:
            piece = self._board.get_piece(x, y)
            if piece is Piece.EMPTY:
                # Columns and rows end at a gap; diagonals carry on past it.
                if stop_at_empty:
                    return False
                continue
            if streak_type is Piece.EMPTY:
                streak_type = piece
                count = 1
            elif piece is streak_type:
                count += 1
                if count >= streak_length:
                    return True
            else:
                streak_type = piece
                count = 1
        return False

    def _columns(self) -> Iterator[list[Cell]]:
        for x in range(self._board.width):
            yield [(x, y) for y in range(self._board.height)]

    def _rows(self) -> Iterator[list[Cell]]:
        for y in range(self._board.height):
            yield [(x, y) for x in range(self._board.width)]

    def _diagonal(self, x: int, y: int, dx: int) -> list[Cell]:
        cells = []
        while 0 <= x < self._board.width and y < self._board.height:
            cells.append((x, y))
            x += dx
            y += 1
        return cells

    def _forward_diagonals(self) -> Iterator[list[Cell]]:
        width, height = self._board.width, self._board.height
        for origin_y in range(height - 4, -1, -1):
            yield self._diagonal(0, origin_y, 1)
        for origin_x in range(1, width - 4):
            yield self._diagonal(origin_x, 0, 1)

    def _backward_diagonals(self) -> Iterator[list[Cell]]:
        width, height = self._board.width, self._board.height
        midpoint = width // 2
        for origin_y in range(height - 4, -1, -1):
            yield self._diagonal(width - 1, origin_y, -1)
        for origin_x in range(width - 1, midpoint - 1, -1):
            yield self._diagonal(origin_x, 0, -1)