"""Chess rules engine over immutable positions."""

from .board import Board, new_blank_game, new_game
from .constants import Color, PieceType
from .move import Move
from .piece import Piece, new_piece

__all__ = ["Board", "Color", "Move", "Piece", "PieceType", "new_blank_game", "new_game", "new_piece"]
