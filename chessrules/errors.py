"""Exceptions raised by the strict parts of the rules engine."""

from __future__ import annotations


class ChessRulesError(Exception):
    pass


class InvalidSquareError(ChessRulesError, ValueError):
    pass


class InvalidFenError(ChessRulesError, ValueError):
    pass


class IllegalMoveError(ChessRulesError, ValueError):
    pass


class EmptySquareError(IllegalMoveError):
    pass


class WrongTurnError(IllegalMoveError):
    pass
