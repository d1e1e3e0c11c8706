import pytest

from chessrules.errors import InvalidSquareError
from chessrules.squares import all_coords, contains, is_out_of_bounds, parse_square, square_name


def test_named_corners_and_center() -> None:
    assert parse_square("a1") == (0, 0)
    assert parse_square("h8") == (7, 7)
    assert parse_square("e4") == (4, 3)
    assert square_name((4, 3)) == "e4"
    assert square_name((0, 7)) == "a8"


def test_round_trip_over_every_square() -> None:
    for square in all_coords():
        assert parse_square(square_name(square)) == square

    for name in ("a1", "b7", "c3", "d8", "e5", "f2", "g6", "h4"):
        assert square_name(parse_square(name)) == name


@pytest.mark.parametrize("name", ["", "a", "e44", "i1", "a9", "a0", "E4", "4e"])
def test_malformed_names_are_rejected(name: str) -> None:
    with pytest.raises(InvalidSquareError):
        parse_square(name)


def test_invalid_square_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_square("z9")


def test_bounds() -> None:
    on_board = set(all_coords())
    for file_idx in range(-2, 10):
        for rank_idx in range(-2, 10):
            square = (file_idx, rank_idx)
            assert is_out_of_bounds(square) == (square not in on_board)


def test_all_coords_is_complete_and_unique() -> None:
    coords = all_coords()
    assert len(coords) == 64
    assert len(set(coords)) == 64
    assert coords[0] == (0, 0)
    assert coords[-1] == (7, 7)


def test_contains() -> None:
    assert contains([(0, 0), (1, 1)], (1, 1))
    assert not contains([(0, 0)], (1, 1))
    assert not contains([], (0, 0))
