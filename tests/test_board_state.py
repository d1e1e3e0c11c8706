import pytest

from chessrules.board import Board, get_piece, new_blank_game, new_game, set_piece
from chessrules.constants import START_FEN, Color, PieceType
from chessrules.errors import InvalidFenError
from chessrules.piece import Piece, new_piece
from chessrules.squares import parse_square


def test_new_game_layout() -> None:
    board = new_game()
    assert board.side_to_move == Color.WHITE
    assert board.get_piece(parse_square("e1")) == Piece(PieceType.KING, Color.WHITE)
    assert board.get_piece(parse_square("d8")) == Piece(PieceType.QUEEN, Color.BLACK)
    assert board.get_piece(parse_square("g2")) == Piece(PieceType.PAWN, Color.WHITE)
    assert board.get_piece(parse_square("e4")) is None
    assert len(list(board.pieces())) == 32


def test_blank_game_is_empty() -> None:
    board = new_blank_game()
    assert list(board.pieces()) == []
    assert board.side_to_move == Color.WHITE


def test_new_piece_is_unmoved() -> None:
    piece = new_piece(PieceType.PAWN, Color.BLACK)
    assert piece.moved is False
    assert piece.mark_moved().moved is True
    assert piece.moved is False


def test_set_piece_returns_new_board() -> None:
    before = new_blank_game()
    rook = new_piece(PieceType.ROOK, Color.WHITE)

    after = set_piece(before, (0, 0), rook)

    assert get_piece(after, (0, 0)) == rook
    assert get_piece(before, (0, 0)) is None
    assert after is not before


def test_start_fen_matches_new_game() -> None:
    board = Board.from_fen(START_FEN)
    assert board == new_game()
    assert hash(board) == hash(new_game())
    assert board.to_fen() == START_FEN


def test_fen_side_to_move_and_optional_fields() -> None:
    board = Board.from_fen("4k3/8/8/8/8/8/8/4K3 b")
    assert board.side_to_move == Color.BLACK
    assert board.to_fen() == "4k3/8/8/8/8/8/8/4K3 b - - 0 1"


def test_fen_marks_advanced_pawns_as_moved() -> None:
    board = Board.from_fen("4k3/8/3p4/8/4P3/8/6P1/4K3 w - - 0 1")
    assert board.get_piece(parse_square("e4")).moved is True
    assert board.get_piece(parse_square("d6")).moved is True
    assert board.get_piece(parse_square("g2")).moved is False


@pytest.mark.parametrize(
    "fen",
    [
        "bad",
        "8/8/8 w",
        "9/8/8/8/8/8/8/8 w",
        "8/8/8/8/8/8/8/7X w",
        "8/8/8/8/8/8/8/pppppppppp w",
        "8/8/8/8/8/8/8/8 x",
        "08/8/8/8/8/8/8/4K3 w",
        "8/8/8/8/8/8/8/\u00b2k5K w",
        "8/8/8/8/8/8/8/\u0663k4K w",
    ],
)
def test_invalid_fen_rejected(fen: str) -> None:
    with pytest.raises(InvalidFenError):
        Board.from_fen(fen)


def test_board_requires_64_squares() -> None:
    with pytest.raises(ValueError):
        Board(squares=(None,) * 10)


def test_str_renders_ranks_top_down() -> None:
    rows = str(new_game()).splitlines()
    assert rows[0] == "r n b q k b n r"
    assert rows[7] == "R N B Q K B N R"
    assert rows[8] == "side=w"
