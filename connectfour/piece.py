"""Game pieces that occupy the cells of a board."""

from __future__ import annotations

from enum import Enum


class Piece(Enum):
    """The content of a single board cell."""

    EMPTY = 0
    RED = 1
    BLUE = 2

    def __str__(self) -> str:
        return self.name.capitalize()