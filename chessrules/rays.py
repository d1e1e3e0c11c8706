"""Directional rays and blocking."""

from __future__ import annotations

from collections.abc import Iterable

from .board import Board
from .constants import Color, MAX_INDEX, MIN_INDEX
from .queries import is_enemy, is_free
from .squares import Square


def _up(start: int) -> range:
    return range(start + 1, MAX_INDEX + 1)


def _down(start: int) -> range:
    return range(start - 1, MIN_INDEX - 1, -1)


def north(file_idx: int, rank_idx: int) -> list[Square]:
    return [(file_idx, r) for r in _up(rank_idx)]


def south(file_idx: int, rank_idx: int) -> list[Square]:
    return [(file_idx, r) for r in _down(rank_idx)]


def east(file_idx: int, rank_idx: int) -> list[Square]:
    return [(f, rank_idx) for f in _up(file_idx)]


def west(file_idx: int, rank_idx: int) -> list[Square]:
    return [(f, rank_idx) for f in _down(file_idx)]


# zip stops at whichever edge is reached first.
def north_east(file_idx: int, rank_idx: int) -> list[Square]:
    return list(zip(_up(file_idx), _up(rank_idx)))


def north_west(file_idx: int, rank_idx: int) -> list[Square]:
    return list(zip(_down(file_idx), _up(rank_idx)))


def south_east(file_idx: int, rank_idx: int) -> list[Square]:
    return list(zip(_up(file_idx), _down(rank_idx)))


def south_west(file_idx: int, rank_idx: int) -> list[Square]:
    return list(zip(_down(file_idx), _down(rank_idx)))


ORTHOGONAL_RAYS = (north, south, east, west)
DIAGONAL_RAYS = (north_west, north_east, south_west, south_east)


def remove_blocked(board: Board, color: Color, squares: Iterable[Square]) -> list[Square]:
    """Cut a ray at its first occupied square.

    The occupied square itself is kept only when it holds an enemy piece.
    """
    reachable: list[Square] = []
    for square in squares:
        if is_free(board, square):
            reachable.append(square)
            continue
        if is_enemy(board, color, square):
            reachable.append(square)
        break
    return reachable
