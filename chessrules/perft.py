"""Perft utilities for move generation correctness checks."""

from __future__ import annotations

import logging
from time import perf_counter

from .board import Board
from .game import all_legal_moves
from .move import Move
from .rules import end_turn, move

logger = logging.getLogger(__name__)


def _successor(board: Board, m: Move) -> Board:
    return end_turn(move(board, m.origin, m.target))


def _count(board: Board, depth: int) -> int:
    if depth == 0:
        return 1

    moves = all_legal_moves(board)
    if depth == 1:
        return len(moves)

    return sum(_count(_successor(board, m), depth - 1) for m in moves)


def perft(board: Board, depth: int) -> int:
    if depth < 0:
        raise ValueError("Depth must be >= 0")
    start = perf_counter()
    nodes = _count(board, depth)
    logger.debug("perft depth=%d nodes=%d elapsed_ms=%.1f", depth, nodes, (perf_counter() - start) * 1000.0)
    return nodes


def perft_divide(board: Board, depth: int) -> dict[str, int]:
    if depth < 1:
        raise ValueError("Depth must be >= 1 for perft divide")

    result: dict[str, int] = {}
    for m in all_legal_moves(board):
        result[m.uci()] = _count(_successor(board, m), depth - 1)
    return dict(sorted(result.items()))
