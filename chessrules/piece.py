"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .constants import PIECE_SYMBOLS, SYMBOL_TO_TYPE, Color, PieceType


@dataclass(frozen=True, slots=True)
class Piece:
    piece_type: PieceType
    color: Color
    # Only consulted for pawns, to gate the two-square advance.
    moved: bool = False

    @property
    def symbol(self) -> str:
        """FEN letter: uppercase for white, lowercase for black."""
        letter = PIECE_SYMBOLS[self.piece_type]
        return letter.upper() if self.color is Color.WHITE else letter

    @classmethod
    def from_symbol(cls, symbol: str, moved: bool = False) -> Piece:
        try:
            piece_type = SYMBOL_TO_TYPE[symbol.lower()]
        except KeyError as exc:
            raise ValueError(f"Invalid piece symbol: {symbol!r}") from exc
        color = Color.WHITE if symbol.isupper() else Color.BLACK
        return cls(piece_type, color, moved)

    def mark_moved(self) -> Piece:
        return self if self.moved else replace(self, moved=True)

    def __str__(self) -> str:
        return self.symbol


def new_piece(piece_type: PieceType, color: Color) -> Piece:
    return Piece(piece_type, color)
