"""Occupancy predicates over a board.

Squares passed here must already be on the board; bounds are the caller's job.
"""

from __future__ import annotations

from .board import Board
from .constants import Color, PieceType
from .squares import Square


def is_free(board: Board, square: Square) -> bool:
    return board.get_piece(square) is None


def is_friendly(board: Board, color: Color, square: Square) -> bool:
    piece = board.get_piece(square)
    return piece is not None and piece.color == color


def is_enemy(board: Board, color: Color, square: Square) -> bool:
    piece = board.get_piece(square)
    return piece is not None and piece.color == color.opposite


def is_type(board: Board, piece_type: PieceType, square: Square) -> bool:
    piece = board.get_piece(square)
    return piece is not None and piece.piece_type == piece_type
