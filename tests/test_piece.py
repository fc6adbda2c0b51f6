import pytest

from connectfour.piece import Piece


@pytest.mark.parametrize(
    ("piece", "text"),
    [(Piece.EMPTY, "Empty"), (Piece.RED, "Red"), (Piece.BLUE, "Blue")],
)
def test_str_names_the_piece(piece, text):
    assert str(piece) == text


def test_pieces_have_distinct_names():
    names = [Piece.__str__(piece) for piece in Piece]
    assert names == ["Empty", "Red", "Blue"]
    assert len(set(names)) == len(names)


def test_lookup_by_value_round_trips():
    for piece in Piece:
        assert Piece(piece.value) is piece