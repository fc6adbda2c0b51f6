"""Command-line entry point: menus, seating and the turn loop."""

from __future__ import annotations

import sys
from typing import TextIO

from .game import Game, GameType
from .players import Player
from .quick_validator import QuickValidator

_WINNING_LENGTH = 4


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line.rstrip("\r\n")


def _ask(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(prompt)
    stdout.flush()
    return _read_line(stdin)


def _seat_players(game: Game, stdin: TextIO, stdout: TextIO) -> None:
    if game.game_type is GameType.TWO_PLAYER:
        first = _ask("Please enter name for Player1:\n", stdin, stdout)
        second = _ask("Please enter name for Player2:\n", stdin, stdout)
        game.add_user(first)
        game.add_user(second)
    elif game.game_type is GameType.ONE_PLAYER:
        name = _ask("Please enter your name:\n", stdin, stdout)
        game.add_user(name)
        if game.opponent_type is None:
            raise ValueError("no opponent type chosen")
        game.add_computer(game.opponent_type)
    else:
        raise ValueError("no game type chosen")


def play(game: Game, stdin: TextIO | None = None, stdout: TextIO | None = None) -> Player | None:
    """Seat the players of ``game`` and play it out.

    Returns the winning player, or None when the board fills up first.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    _seat_players(game, stdin, stdout)
    if not game.init_current_player():
        raise RuntimeError("both seats must be taken")

    board = game.board
    stdout.write(board.render())
    stdout.flush()

    while True:
        player = game.current_player
        if player is None:
            raise RuntimeError("no current player")
        stdout.write(f"{player.name}'s turn!\n")
        stdout.flush()

        move = player.get_move(board)
        while not board.check_move(move):
            stdout.write("Invalid Move!\n")
            stdout.flush()
            move = player.get_move(board)

        board.place_piece(move, player.piece)
        streak = QuickValidator(board).is_winning_move(move)
        winning = streak.count >= _WINNING_LENGTH and streak.piece is player.piece

        stdout.write(board.render())
        if winning:
            stdout.write(f"{player.name} wins!\n")
            stdout.flush()
            game.winner = player
            return player
        if board.is_full():
            stdout.write("Board full!\n")
            stdout.flush()
            return None
        stdout.flush()
        game.change_turn()


def main(argv: list[str] | None = None) -> int:
    """Run the menus and one game on the terminal."""
    stdin, stdout = sys.stdin, sys.stdout
    game = Game(stdin, stdout)
    try:
        if not game.start_menu():
            return 0
        play(game, stdin, stdout)
    except EOFError:
        stdout.write("\nInput ended.\n")
        stdout.flush()
        return 1
    except KeyboardInterrupt:
        stdout.write("\n")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())