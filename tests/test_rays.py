import pytest

from chessrules.board import new_blank_game, new_game
from chessrules.constants import Color, PieceType
from chessrules.piece import new_piece
from chessrules.queries import is_enemy, is_free, is_friendly, is_type
from chessrules.rays import (
    east,
    north,
    north_east,
    north_west,
    remove_blocked,
    south,
    south_west,
    west,
)


def test_queries_on_start_position() -> None:
    board = new_game()

    assert is_free(board, (4, 3))
    assert not is_free(board, (4, 1))

    assert is_friendly(board, Color.WHITE, (0, 0))
    assert not is_enemy(board, Color.WHITE, (0, 0))
    assert is_enemy(board, Color.BLACK, (0, 0))

    assert not is_friendly(board, Color.WHITE, (4, 3))
    assert not is_enemy(board, Color.WHITE, (4, 3))

    assert is_type(board, PieceType.KING, (4, 0))
    assert not is_type(board, PieceType.QUEEN, (4, 0))
    assert not is_type(board, PieceType.KING, (4, 3))


def test_rays_stop_at_board_edge() -> None:
    assert north(0, 0) == [(0, r) for r in range(1, 8)]
    assert south(0, 0) == []
    assert east(6, 2) == [(7, 2)]
    assert west(2, 5) == [(1, 5), (0, 5)]
    assert north_east(0, 0) == [(i, i) for i in range(1, 8)]
    assert north_west(0, 0) == []
    assert south_west(3, 3) == [(2, 2), (1, 1), (0, 0)]


def test_remove_blocked_on_open_ray_keeps_everything() -> None:
    ray = north(0, 0)
    assert remove_blocked(new_blank_game(), Color.WHITE, ray) == ray


@pytest.mark.parametrize("k", range(7))
def test_friendly_blocker_truncates_before_it(k: int) -> None:
    ray = north(0, 0)
    board = new_blank_game().set_piece(ray[k], new_piece(PieceType.KNIGHT, Color.WHITE))
    assert remove_blocked(board, Color.WHITE, ray) == ray[:k]


@pytest.mark.parametrize("k", range(7))
def test_enemy_blocker_is_included_as_capture(k: int) -> None:
    ray = north_east(0, 0)
    board = new_blank_game().set_piece(ray[k], new_piece(PieceType.KNIGHT, Color.BLACK))
    assert remove_blocked(board, Color.WHITE, ray) == ray[: k + 1]


def test_only_first_blocker_matters() -> None:
    ray = north(0, 0)
    board = (
        new_blank_game()
        .set_piece((0, 3), new_piece(PieceType.PAWN, Color.BLACK))
        .set_piece((0, 5), new_piece(PieceType.PAWN, Color.BLACK))
    )
    assert remove_blocked(board, Color.WHITE, ray) == [(0, 1), (0, 2), (0, 3)]
