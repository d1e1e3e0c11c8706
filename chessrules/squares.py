"""Square type and algebraic coordinate helpers.

A square is a ``(file, rank)`` pair with both components in ``0..7``;
``(0, 0)`` is a1 and ``(7, 7)`` is h8.
"""

from __future__ import annotations

from collections.abc import Container
from typing import Any, TypeAlias

from .constants import BOARD_SIZE, FILES, MAX_INDEX, MIN_INDEX, RANKS
from .errors import InvalidSquareError

Square: TypeAlias = tuple[int, int]


def square_name(square: Square) -> str:
    """Algebraic name of an on-board square, e.g. ``(4, 3)`` -> ``'e4'``."""
    file_idx, rank_idx = square
    return f"{FILES[file_idx]}{RANKS[rank_idx]}"


def parse_square(name: str) -> Square:
    """Parse an algebraic name, e.g. ``'e4'`` -> ``(4, 3)``."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise InvalidSquareError(f"Invalid square: {name!r}")
    return ord(name[0]) - ord("a"), ord(name[1]) - ord("1")


def is_out_of_bounds(square: Square) -> bool:
    file_idx, rank_idx = square
    return not (MIN_INDEX <= file_idx <= MAX_INDEX and MIN_INDEX <= rank_idx <= MAX_INDEX)


def index_of(square: Square) -> int:
    """Slot of ``square`` in a rank-major 64-entry layout (a1=0, h8=63)."""
    file_idx, rank_idx = square
    return rank_idx * BOARD_SIZE + file_idx


def square_at(index: int) -> Square:
    return index % BOARD_SIZE, index // BOARD_SIZE


ALL_SQUARES: tuple[Square, ...] = tuple(square_at(idx) for idx in range(BOARD_SIZE * BOARD_SIZE))


def all_coords() -> tuple[Square, ...]:
    return ALL_SQUARES


def contains(collection: Container[Any], item: Any) -> bool:
    return item in collection
