"""Full legality on top of the pseudo-legal rules, and strict move play."""

from __future__ import annotations

import logging

from .board import Board
from .errors import EmptySquareError, IllegalMoveError, WrongTurnError
from .move import Move
from .movegen import valid_moves
from .rules import end_turn, is_check, move, move_causes_check
from .squares import Square, square_name

logger = logging.getLogger(__name__)


def legal_moves(board: Board, square: Square) -> list[Square]:
    """Destinations for the piece on ``square`` that keep its own king safe.

    Only pieces belonging to the side to move have legal moves.
    """
    piece = board.get_piece(square)
    if piece is None or piece.color != board.side_to_move:
        return []
    return [target for target in valid_moves(board, square) if not move_causes_check(board, square, target)]


def all_legal_moves(board: Board) -> list[Move]:
    moves: list[Move] = []
    for square, piece in board.pieces():
        if piece.color != board.side_to_move:
            continue
        moves.extend(Move(square, target) for target in legal_moves(board, square))
    return moves


def is_legal_move(board: Board, origin: Square, target: Square) -> bool:
    return target in legal_moves(board, origin)


def in_check(board: Board) -> bool:
    """Whether the side to move is currently in check."""
    return is_check(board, board.side_to_move)


def play(board: Board, origin: Square, target: Square) -> Board:
    """Apply a fully legal move and hand the turn to the opponent."""
    piece = board.get_piece(origin)
    if piece is None:
        logger.debug("rejected %s%s: empty origin", square_name(origin), square_name(target))
        raise EmptySquareError(f"No piece on {square_name(origin)}")
    if piece.color != board.side_to_move:
        logger.debug("rejected %s%s: not %s's piece", square_name(origin), square_name(target), board.side_to_move)
        raise WrongTurnError(f"Piece on {square_name(origin)} does not belong to {board.side_to_move}")
    if target not in valid_moves(board, origin):
        logger.debug("rejected %s%s: not reachable", square_name(origin), square_name(target))
        raise IllegalMoveError(f"Illegal move: {square_name(origin)}{square_name(target)}")
    if move_causes_check(board, origin, target):
        logger.debug("rejected %s%s: king left in check", square_name(origin), square_name(target))
        raise IllegalMoveError(f"Illegal move: {square_name(origin)}{square_name(target)} leaves king in check")
    return end_turn(move(board, origin, target))


def play_uci(board: Board, text: str) -> Board:
    parsed = Move.from_uci(text)
    return play(board, parsed.origin, parsed.target)
