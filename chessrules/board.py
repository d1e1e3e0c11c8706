"""Immutable board representation with copy-on-write updates."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from .constants import (
    BACK_RANK,
    BOARD_SIZE,
    COLOR_SYMBOLS,
    PAWN_HOME_RANK,
    SYMBOL_TO_COLOR,
    Color,
    PieceType,
)
from .errors import InvalidFenError
from .piece import Piece, new_piece
from .squares import ALL_SQUARES, Square, index_of

_EMPTY_SQUARES: tuple[Piece | None, ...] = (None,) * (BOARD_SIZE * BOARD_SIZE)
_EMPTY_RUNS = "12345678"


@dataclass(frozen=True, slots=True)
class Board:
    """A position: piece placement plus the side to move.

    Instances are never mutated. ``set_piece`` and ``with_side_to_move``
    return new boards, so older snapshots stay valid and can be shared.
    """

    squares: tuple[Piece | None, ...] = _EMPTY_SQUARES
    side_to_move: Color = Color.WHITE

    def __post_init__(self) -> None:
        if len(self.squares) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Board needs 64 squares, got {len(self.squares)}")

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        """Build a board from the placement and side fields of a FEN string.

        Castling, en-passant and clock fields are optional and ignored.
        Pawns found off their home rank are marked as moved.
        """
        fields = fen.split()
        if not 2 <= len(fields) <= 6:
            raise InvalidFenError(f"Invalid FEN: {fen}")

        placement, side = fields[0], fields[1]

        ranks = placement.split("/")
        if len(ranks) != BOARD_SIZE:
            raise InvalidFenError(f"Invalid FEN board placement: {placement}")

        squares: list[Piece | None] = list(_EMPTY_SQUARES)
        for rank_idx, rank in enumerate(reversed(ranks)):
            file_idx = 0
            for ch in rank:
                if ch in _EMPTY_RUNS:
                    file_idx += int(ch)
                    continue
                if file_idx >= BOARD_SIZE:
                    raise InvalidFenError(f"Invalid rank in FEN: {rank}")
                try:
                    piece = Piece.from_symbol(ch)
                except ValueError as exc:
                    raise InvalidFenError(f"Invalid piece symbol in FEN: {ch}") from exc
                if piece.piece_type is PieceType.PAWN and rank_idx != PAWN_HOME_RANK[piece.color]:
                    piece = piece.mark_moved()
                squares[index_of((file_idx, rank_idx))] = piece
                file_idx += 1
            if file_idx != BOARD_SIZE:
                raise InvalidFenError(f"Invalid rank in FEN: {rank}")

        if side not in SYMBOL_TO_COLOR:
            raise InvalidFenError(f"Invalid side to move in FEN: {side}")

        return cls(tuple(squares), SYMBOL_TO_COLOR[side])

    def to_fen(self) -> str:
        rows = []
        for rank_idx in range(BOARD_SIZE - 1, -1, -1):
            row = ""
            empty = 0
            for file_idx in range(BOARD_SIZE):
                piece = self.get_piece((file_idx, rank_idx))
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece.symbol
            if empty:
                row += str(empty)
            rows.append(row)
        return f"{'/'.join(rows)} {COLOR_SYMBOLS[self.side_to_move]} - - 0 1"

    def get_piece(self, square: Square) -> Piece | None:
        return self.squares[index_of(square)]

    def set_piece(self, square: Square, piece: Piece | None) -> Board:
        squares = list(self.squares)
        squares[index_of(square)] = piece
        return replace(self, squares=tuple(squares))

    def with_side_to_move(self, color: Color) -> Board:
        return replace(self, side_to_move=color)

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in a1..h8 order."""
        for square, piece in zip(ALL_SQUARES, self.squares):
            if piece is not None:
                yield square, piece

    def __str__(self) -> str:
        rows = []
        for rank_idx in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file_idx in range(BOARD_SIZE):
                piece = self.get_piece((file_idx, rank_idx))
                row.append("." if piece is None else piece.symbol)
            rows.append(" ".join(row))
        return "\n".join(rows) + f"\nside={COLOR_SYMBOLS[self.side_to_move]}"


def new_blank_game() -> Board:
    return Board()


def new_game() -> Board:
    board = new_blank_game()
    for file_idx, piece_type in enumerate(BACK_RANK):
        board = board.set_piece((file_idx, 0), new_piece(piece_type, Color.WHITE))
        board = board.set_piece((file_idx, 7), new_piece(piece_type, Color.BLACK))
        board = board.set_piece((file_idx, PAWN_HOME_RANK[Color.WHITE]), new_piece(PieceType.PAWN, Color.WHITE))
        board = board.set_piece((file_idx, PAWN_HOME_RANK[Color.BLACK]), new_piece(PieceType.PAWN, Color.BLACK))
    return board


def get_piece(board: Board, square: Square) -> Piece | None:
    return board.get_piece(square)


def set_piece(board: Board, square: Square, piece: Piece | None) -> Board:
    return board.set_piece(square, piece)
