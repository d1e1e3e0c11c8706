"""Pseudo-legal move generation per piece type."""

from __future__ import annotations

from collections.abc import Callable

from .board import Board
from .constants import Color, PieceType
from .queries import is_enemy, is_free, is_friendly
from .rays import DIAGONAL_RAYS, ORTHOGONAL_RAYS, remove_blocked
from .squares import Square, is_out_of_bounds


KNIGHT_DELTAS = ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))
KING_DELTAS = ((1, 1), (1, 0), (1, -1), (0, 1), (0, -1), (-1, 1), (-1, 0), (-1, -1))


def _leaper_moves(
    board: Board,
    color: Color,
    file_idx: int,
    rank_idx: int,
    deltas: tuple[tuple[int, int], ...],
) -> list[Square]:
    moves: list[Square] = []
    for df, dr in deltas:
        target = (file_idx + df, rank_idx + dr)
        # Bounds first: off-board squares must never reach the board lookup.
        if is_out_of_bounds(target):
            continue
        if is_friendly(board, color, target):
            continue
        moves.append(target)
    return moves


def _slider_moves(
    board: Board,
    color: Color,
    file_idx: int,
    rank_idx: int,
    rays: tuple[Callable[[int, int], list[Square]], ...],
) -> list[Square]:
    moves: list[Square] = []
    for ray in rays:
        moves.extend(remove_blocked(board, color, ray(file_idx, rank_idx)))
    return moves


def king_moves(board: Board, color: Color, file_idx: int, rank_idx: int) -> list[Square]:
    return _leaper_moves(board, color, file_idx, rank_idx, KING_DELTAS)


def knight_moves(board: Board, color: Color, file_idx: int, rank_idx: int) -> list[Square]:
    return _leaper_moves(board, color, file_idx, rank_idx, KNIGHT_DELTAS)


def rook_moves(board: Board, color: Color, file_idx: int, rank_idx: int) -> list[Square]:
    return _slider_moves(board, color, file_idx, rank_idx, ORTHOGONAL_RAYS)


def bishop_moves(board: Board, color: Color, file_idx: int, rank_idx: int) -> list[Square]:
    return _slider_moves(board, color, file_idx, rank_idx, DIAGONAL_RAYS)


def queen_moves(board: Board, color: Color, file_idx: int, rank_idx: int) -> list[Square]:
    return rook_moves(board, color, file_idx, rank_idx) + bishop_moves(board, color, file_idx, rank_idx)


def pawn_moves(board: Board, color: Color, file_idx: int, rank_idx: int) -> list[Square]:
    """Forward pushes (never captures) followed by diagonal captures."""
    step = color.forward
    piece = board.get_piece((file_idx, rank_idx))
    has_moved = piece is not None and piece.moved

    moves: list[Square] = []
    max_steps = 1 if has_moved else 2
    for distance in range(1, max_steps + 1):
        target = (file_idx, rank_idx + step * distance)
        if is_out_of_bounds(target) or not is_free(board, target):
            break
        moves.append(target)

    for df in (-1, 1):
        target = (file_idx + df, rank_idx + step)
        if not is_out_of_bounds(target) and is_enemy(board, color, target):
            moves.append(target)

    return moves


def valid_moves(board: Board, square: Square) -> list[Square]:
    """Every pseudo-legal destination for the piece on ``square``.

    Moves that would leave the mover's own king in check are included.
    """
    piece = board.get_piece(square)
    if piece is None:
        return []

    file_idx, rank_idx = square
    color = piece.color
    match piece.piece_type:
        case PieceType.KING:
            return king_moves(board, color, file_idx, rank_idx)
        case PieceType.QUEEN:
            return queen_moves(board, color, file_idx, rank_idx)
        case PieceType.ROOK:
            return rook_moves(board, color, file_idx, rank_idx)
        case PieceType.BISHOP:
            return bishop_moves(board, color, file_idx, rank_idx)
        case PieceType.KNIGHT:
            return knight_moves(board, color, file_idx, rank_idx)
        case PieceType.PAWN:
            return pawn_moves(board, color, file_idx, rank_idx)
        case _:
            raise ValueError(f"Unknown piece type: {piece.piece_type!r}")
