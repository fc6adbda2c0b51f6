"""Human and computer players."""

from __future__ import annotations

import random
import re
import sys
import time
from dataclasses import dataclass
from typing import TextIO

from .board import Board
from .piece import Piece
from .quick_validator import QuickValidator, Streak

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class Player:
    """A participant in the game, holding a piece colour, a name and a score."""

    def __init__(self, piece: Piece = Piece.EMPTY, name: str = "NULL") -> None:
        self.piece = piece
        self.name = name
        self.score = 0

    def get_move(self, board: Board) -> int:
        """Choose a column to play in."""
        return 0


class UserPlayer(Player):
    """A player whose moves are typed in."""

    PROMPT = "Please enter a column to place your piece:\n"

    def __init__(
        self,
        piece: Piece = Piece.EMPTY,
        name: str = "NULL",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        super().__init__(piece, name)
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def get_move(self, board: Board) -> int:
        """Prompt for a column; return -1 when the answer is not a number."""
        self._stdout.write(self.PROMPT)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError("no more input")
        match = _LEADING_INT.match(line)
        return int(match.group(1)) if match else -1


class ComputerPlayer(Player):
    """A player that chooses its own moves."""

    def __init__(self, piece: Piece = Piece.EMPTY) -> None:
        super().__init__(piece, "CPU")

    def get_move(self, board: Board) -> int:
        return -1

    def move_value(self, streak: Streak) -> int:
        """Score a streak: own runs and blocks of three or more weigh most."""
        if streak.piece is self.piece:
            return 400 if streak.count >= 3 else 10 * streak.count
        if streak.piece is Piece.EMPTY:
            return 1
        return 200 if streak.count >= 3 else 10 * streak.count


class ReflexPlayer(ComputerPlayer):
    """Plays the column whose neighbouring streak scores best right now."""

    def __init__(self, piece: Piece = Piece.EMPTY, delay: float = 0.5) -> None:
        super().__init__(piece)
        self.delay = delay

    def get_move(self, board: Board) -> int:
        if self.delay > 0:
            time.sleep(self.delay)
        values = [0] * board.width
        validator = QuickValidator(board)
        for move in board.legal_moves():
            values[move] = self.move_value(validator.get_streak(move))
        return values.index(max(values))

    def move_value(self, streak: Streak) -> int:
        if streak.piece is self.piece:
            return 400 if streak.count > 3 else 10 * streak.count
        if streak.piece is Piece.EMPTY:
            return 1
        return 200 if streak.count > 3 else 10 * streak.count


@dataclass(frozen=True)
class Node:
    """A column together with the value the search gave it."""

    column: int
    value: int


class MiniMaxPlayer(ComputerPlayer):
    """Searches the game tree with alpha-beta pruning; blue maximises."""

    WIN = 1_000_000

    def __init__(self, piece: Piece = Piece.EMPTY, depth: int = 10) -> None:
        super().__init__(piece)
        self.depth = depth
        self._rng = random.Random()

    def get_move(self, board: Board) -> int:
        return self.minimax(board, 0, self.depth, _INT_MIN, _INT_MAX, True).column

    def move_value(self, streak: Streak) -> int:
        if streak.piece is Piece.BLUE:
            return self.WIN if streak.count >= 4 else 10 * streak.count
        if streak.piece is Piece.RED:
            return -self.WIN if streak.count >= 4 else -(10 * streak.count)
        return 0

    def minimax(
        self,
        board: Board,
        node: int,
        depth: int,
        alpha: int,
        beta: int,
        max_player: bool,
    ) -> Node:
        """Return the best column and its value for the side to move."""
        validator = QuickValidator(board)
        for column in range(board.width):
            value = self.move_value(validator.is_winning_move(column))
            if abs(value) == self.WIN:
                return Node(column, value)
            if depth == 0 or board.is_full():
                return Node(node, value)

        legal = board.legal_moves()
        if max_player:
            best = _INT_MIN
            chosen = self._rng.choice(legal)
            for move in legal:
                child = board.copy()
                if not child.place_piece(move, Piece.BLUE):
                    continue
                score = self.minimax(child, move, depth - 1, alpha, beta, False).value
                if score > best:
                    best, chosen = score, move
                alpha = max(alpha, best)
                if alpha >= beta:
                    break
            return Node(chosen, best)

        best = _INT_MAX
        chosen = self._rng.randrange(len(legal))
        for move in legal:
            child = board.copy()
            if not child.place_piece(move, Piece.RED):
                continue
            score = self.minimax(child, move, depth - 1, alpha, beta, True).value
            if score < best:
                best, chosen = score, move
            beta = min(beta, best)
            if alpha >= beta:
                break
        return Node(chosen, best)