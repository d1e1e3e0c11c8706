"""Engine-wide constants and enumerations."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Rank direction a pawn of this color advances in."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    KING = 0
    QUEEN = 1
    ROOK = 2
    BISHOP = 3
    KNIGHT = 4
    PAWN = 5


BOARD_SIZE = 8
MIN_INDEX = 0
MAX_INDEX = BOARD_SIZE - 1

FILES = "abcdefgh"
RANKS = "12345678"

PIECE_SYMBOLS = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

SYMBOL_TO_TYPE = {v: k for k, v in PIECE_SYMBOLS.items()}

COLOR_SYMBOLS = {Color.WHITE: "w", Color.BLACK: "b"}
SYMBOL_TO_COLOR = {v: k for k, v in COLOR_SYMBOLS.items()}

# Rank each side's pawns start on; pawns elsewhere count as already moved.
PAWN_HOME_RANK = {Color.WHITE: 1, Color.BLACK: 6}

BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"
