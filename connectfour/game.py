"""Game set-up: players, turn order and the start menus."""

from __future__ import annotations

import random
import sys
from enum import Enum
from typing import TextIO

from .board import Board
from .piece import Piece
from .players import MiniMaxPlayer, Player, ReflexPlayer, UserPlayer


class GameType(Enum):
    ONE_PLAYER = 0
    TWO_PLAYER = 1


class OpponentType(Enum):
    REFLEX = 0
    MINIMAX = 1
    EXPMAX = 2


def _read_choice(stdin: TextIO) -> str | None:
    """Return the first non-blank character typed, or None at end of input."""
    while True:
        line = stdin.readline()
        if not line:
            return None
        text = line.strip()
        if text:
            return text[0]


class Game:
    """Holds the board and the two players of one game."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._rng = random.Random()
        self.board = Board()
        self.player_one: Player | None = None
        self.player_two: Player | None = None
        self.current_player: Player | None = None
        self.winner: Player | None = None
        self.score = 0
        self.game_type: GameType | None = None
        self.opponent_type: OpponentType | None = None

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def add_user(self, player_name: str) -> bool:
        """Seat a human player; the first is red, the second blue."""
        if self.player_one is None:
            self.player_one = UserPlayer(Piece.RED, player_name, self._stdin, self._stdout)
            return True
        if self.player_two is None:
            self.player_two = UserPlayer(Piece.BLUE, player_name, self._stdin, self._stdout)
            return True
        return False

    def add_computer(self, opponent_type: OpponentType) -> bool:
        """Seat a computer player of the given kind in the first free seat."""
        if self.player_one is None:
            factories = {OpponentType.REFLEX: ReflexPlayer, OpponentType.MINIMAX: MiniMaxPlayer}
            factory = factories.get(opponent_type)
            if factory is None:
                return False
            self.player_one = factory()
            return True
        if self.player_two is None:
            if opponent_type is OpponentType.REFLEX:
                self.player_two = ReflexPlayer(Piece.BLUE)
            elif opponent_type is OpponentType.MINIMAX:
                self.player_two = MiniMaxPlayer(Piece.BLUE)
            else:
                return False
            return True
        return False

    def opponent_menu(self) -> bool:
        """Ask for the computer opponent; False when the user goes back."""
        while True:
            self._write("\nPlease select an opponent type:\n")
            self._write("1) Dumb\n2) Smarter\nB) Back\n")
            choice = _read_choice(self._stdin)
            if choice is None:
                return False
            choice = choice.upper()
            if choice == "1":
                self.opponent_type = OpponentType.REFLEX
                return True
            if choice == "2":
                self.opponent_type = OpponentType.MINIMAX
                return True
            if choice == "B":
                return False
            self._write("Invalid Selection!\n")

    def start_menu(self) -> bool:
        """Ask for the game type; False when the user exits."""
        while True:
            self._write("ConnectFour\n\nPlease select an option from the menu:\n\n")
            self._write("1) One Player\n2) Two Player\nX) Exit\n")
            choice = _read_choice(self._stdin)
            if choice is None:
                return False
            choice = choice.upper()
            if choice == "1":
                self.game_type = GameType.ONE_PLAYER
                if self.opponent_menu():
                    return True
            elif choice == "2":
                self.game_type = GameType.TWO_PLAYER
                return True
            elif choice == "X":
                return False
            else:
                self._write("Invalid input!\n")

    def change_turn(self) -> None:
        """Hand the turn to the other player."""
        if self.current_player is None or self.player_one is None:
            raise RuntimeError("no current player")
        if self.current_player.name == self.player_one.name:
            self.current_player = self.player_two
        else:
            self.current_player = self.player_one

    def init_current_player(self) -> bool:
        """Pick the starting player at random; False if a seat is empty."""
        if self.player_one is None or self.player_two is None:
            return False
        self.current_player = self._rng.choice([self.player_one, self.player_two])
        return True


class Menu:
    """A standalone start menu that records the choices made."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self.game_type_selection: GameType | None = None
        self.opponent_type_selection: OpponentType | None = None

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def start_menu(self) -> bool:
        """Ask for the game type; False when the user exits."""
        while True:
            self._write("ConnectFour\n\n Please select an option from the menu:\n")
            self._write("1) One Player\n2) Two Player\nX) Exit\n")
            choice = _read_choice(self._stdin)
            if choice is None:
                return False
            if choice == "1":
                self.game_type_selection = GameType.ONE_PLAYER
                self.opponent_menu()
                return True
            if choice == "2":
                self.game_type_selection = GameType.TWO_PLAYER
                return True
            if choice == "X":
                return False

    def opponent_menu(self) -> bool:
        """Ask for the opponent type; False when the user goes back."""
        while True:
            self._write("Please select an opponent type:\n")
            self._write("1) Reflex\n2) MiniMax\n3) ExpMax\nB) Back\n")
            choice = _read_choice(self._stdin)
            if choice is None:
                return False
            if choice == "1":
                self.opponent_type_selection = OpponentType.REFLEX
                return True
            if choice == "2":
                self.opponent_type_selection = OpponentType.MINIMAX
                return True
            if choice == "3":
                self.opponent_type_selection = OpponentType.EXPMAX
                return True
            if choice == "B":
                return False
            self._write("Invalid Selection!\n")