"""Check detection, move validation and move application."""

from __future__ import annotations

from .board import Board
from .constants import Color, PieceType
from .movegen import valid_moves
from .squares import Square


def king_coords(board: Board, color: Color) -> Square | None:
    for square, piece in board.pieces():
        if piece.piece_type is PieceType.KING and piece.color == color:
            return square
    return None


def attacked_squares(board: Board, by_color: Color) -> set[Square]:
    """Union of pseudo-legal destinations of every ``by_color`` piece."""
    attacked: set[Square] = set()
    for square, piece in board.pieces():
        if piece.color == by_color:
            attacked.update(valid_moves(board, square))
    return attacked


def is_check(board: Board, color: Color) -> bool:
    """Whether ``color``'s king is attacked. A missing king is never in check."""
    king = king_coords(board, color)
    if king is None:
        return False
    return king in attacked_squares(board, color.opposite)


def is_valid_move(board: Board, origin: Square, target: Square) -> bool:
    return target in valid_moves(board, origin)


def move(board: Board, origin: Square, target: Square) -> Board:
    """Relocate the piece on ``origin`` to ``target``.

    Returns ``board`` itself when the move is not pseudo-legal. The side to
    move is left unchanged; see ``end_turn``.
    """
    piece = board.get_piece(origin)
    if piece is None or not is_valid_move(board, origin, target):
        return board
    return board.set_piece(target, piece.mark_moved()).set_piece(origin, None)


def move_causes_check(board: Board, origin: Square, target: Square) -> bool:
    """Whether playing the move would leave the side to move in check."""
    mover = board.side_to_move
    return is_check(move(board, origin, target), mover)


def end_turn(board: Board) -> Board:
    return board.with_side_to_move(board.side_to_move.opposite)
