"""The Connect Four board: seven columns of six cells."""

from __future__ import annotations

from .piece import Piece

_SYMBOLS = {
    Piece.BLUE: " \033[1;34mⵔ\033[0m ",
    Piece.RED: " \033[1;31mⵔ\033[0m ",
    Piece.EMPTY: " . ",
}


class Board:
    """A grid of pieces addressed by column ``x`` and row ``y`` (0 is the bottom)."""

    HEIGHT = 6
    WIDTH = 7
    COLUMN_FULL = -1

    TOP_BORDER = " _____________________\n"
    BOTTOM_BORDER = "  0  1  2  3  4  5  6\n\n"

    def __init__(self) -> None:
        self._grid: list[list[Piece]] = []
        self._tops: list[int] = []
        self._total = 0
        self._full = False
        self.reset()

    @property
    def height(self) -> int:
        return self.HEIGHT

    @property
    def width(self) -> int:
        return self.WIDTH

    def reset(self) -> None:
        """Empty every cell."""
        self._grid = [[Piece.EMPTY] * self.HEIGHT for _ in range(self.WIDTH)]
        self._tops = [0] * self.WIDTH
        self._total = 0
        self._full = False

    def copy(self) -> Board:
        """Return an independent copy of this board."""
        other = Board.__new__(Board)
        other._grid = [list(column) for column in self._grid]
        other._tops = list(self._tops)
        other._total = self._total
        other._full = self._full
        return other

    def place_piece(self, column: int, piece: Piece) -> bool:
        """Drop ``piece`` into ``column``; return False if it cannot be placed."""
        if not 0 <= column < self.WIDTH:
            raise IndexError(f"column {column} is off the board")
        if piece is Piece.EMPTY:
            return False
        top = self._tops[column]
        if top == self.COLUMN_FULL:
            return False
        if top >= self.HEIGHT:
            self._tops[column] = self.COLUMN_FULL
            return False
        self._grid[column][top] = piece
        self._tops[column] += 1
        self._total += 1
        self._full = self._total == self.HEIGHT * self.WIDTH
        return True

    def get_piece(self, x: int, y: int) -> Piece:
        """Return the piece at (x, y), or EMPTY for positions off the board."""
        if 0 <= x < self.WIDTH and 0 <= y < self.HEIGHT:
            return self._grid[x][y]
        return Piece.EMPTY

    def check_move(self, move: int) -> bool:
        """Tell whether a piece can be dropped into column ``move``."""
        if not 0 <= move < self.WIDTH:
            return False
        top = self._tops[move]
        return top != self.COLUMN_FULL and top < self.HEIGHT

    def legal_moves(self) -> list[int]:
        """Columns that still have room."""
        return [
            column
            for column, top in enumerate(self._tops)
            if top != self.COLUMN_FULL and top < self.HEIGHT
        ]

    def top_of_columns(self) -> list[int]:
        """The next free row of each column (COLUMN_FULL once marked full)."""
        return list(self._tops)

    def is_full(self) -> bool:
        return self._full

    def render(self) -> str:
        """Draw the board as text with coloured pieces."""
        rows = [
            "|" + "".join(_SYMBOLS[self._grid[x][y]] for x in range(self.WIDTH)) + "|\n"
            for y in reversed(range(self.HEIGHT))
        ]
        return self.TOP_BORDER + "".join(rows) + self.BOTTOM_BORDER

    def __str__(self) -> str:
        return self.render()