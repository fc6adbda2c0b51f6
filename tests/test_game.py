import io

from connectfour.game import Game, GameType, Menu, OpponentType
from connectfour.piece import Piece
from connectfour.players import MiniMaxPlayer, ReflexPlayer, UserPlayer


def make_game(text=""):
    out = io.StringIO()
    return Game(io.StringIO(text), out), out


def test_start_menu_two_player():
    game, _ = make_game("2\n")
    assert game.start_menu() is True
    assert game.game_type is GameType.TWO_PLAYER


def test_start_menu_one_player_with_opponent():
    game, _ = make_game("1\n2\n")
    assert game.start_menu() is True
    assert game.game_type is GameType.ONE_PLAYER
    assert game.opponent_type is OpponentType.MINIMAX


def test_start_menu_back_then_exit_lowercase():
    game, out = make_game("1\nb\nx\n")
    assert game.start_menu() is False
    assert out.getvalue().count("Please select an opponent type:") == 1


def test_start_menu_invalid_input():
    game, out = make_game("z\nX\n")
    assert game.start_menu() is False
    assert "Invalid input!\n" in out.getvalue()


def test_opponent_menu_invalid_then_reflex():
    game, out = make_game("q\n1\n")
    assert game.opponent_menu() is True
    assert game.opponent_type is OpponentType.REFLEX
    assert "Invalid Selection!\n" in out.getvalue()


def test_start_menu_end_of_input():
    game, _ = make_game("")
    assert game.start_menu() is False


def test_add_user_seats_red_then_blue():
    game, _ = make_game()
    assert game.add_user("Ann") is True
    assert game.add_user("Bob") is True
    assert game.add_user("Cid") is False
    assert isinstance(game.player_one, UserPlayer)
    assert game.player_one.piece is Piece.RED
    assert game.player_two.piece is Piece.BLUE
    assert game.player_two.name == "Bob"


def test_add_computer_second_seat_is_blue():
    game, _ = make_game()
    game.add_user("Ann")
    assert game.add_computer(OpponentType.REFLEX) is True
    assert isinstance(game.player_two, ReflexPlayer)
    assert game.player_two.piece is Piece.BLUE
    assert game.add_computer(OpponentType.MINIMAX) is False


def test_add_computer_first_seat():
    game, _ = make_game()
    assert game.add_computer(OpponentType.MINIMAX) is True
    assert isinstance(game.player_one, MiniMaxPlayer)


def test_add_computer_expmax_rejected():
    game, _ = make_game()
    assert game.add_computer(OpponentType.EXPMAX) is False
    assert game.player_one is None


def test_init_current_player_needs_both_seats():
    game, _ = make_game()
    game.add_user("Ann")
    assert game.init_current_player() is False
    assert game.current_player is None


def test_init_and_change_turn_alternates():
    game, _ = make_game()
    game.add_user("Ann")
    game.add_user("Bob")
    assert game.init_current_player() is True
    first = game.current_player
    assert first in (game.player_one, game.player_two)
    game.change_turn()
    assert game.current_player is not first
    assert game.current_player in (game.player_one, game.player_two)
    game.change_turn()
    assert game.current_player is first


def test_menu_two_player():
    menu = Menu(io.StringIO("2\n"), io.StringIO())
    assert menu.start_menu() is True
    assert menu.game_type_selection is GameType.TWO_PLAYER


def test_menu_one_player_expmax():
    menu = Menu(io.StringIO("1\n3\n"), io.StringIO())
    assert menu.start_menu() is True
    assert menu.game_type_selection is GameType.ONE_PLAYER
    assert menu.opponent_type_selection is OpponentType.EXPMAX


def test_menu_exit_is_case_sensitive():
    menu = Menu(io.StringIO("x\n"), io.StringIO())
    assert menu.start_menu() is False
    menu = Menu(io.StringIO("X\n"), io.StringIO())
    assert menu.start_menu() is False
    assert menu.game_type_selection is None


def test_menu_opponent_invalid_then_back():
    out = io.StringIO()
    menu = Menu(io.StringIO("q\nB\n"), out)
    assert menu.opponent_menu() is False
    assert "Invalid Selection!\n" in out.getvalue()
    assert menu.opponent_type_selection is None