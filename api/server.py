"""FastAPI server exposing move generation and check queries."""

from __future__ import annotations

import logging
from typing import Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from chessrules.board import Board
from chessrules.config import get_settings
from chessrules.constants import COLOR_SYMBOLS, START_FEN, SYMBOL_TO_COLOR
from chessrules.errors import ChessRulesError
from chessrules.game import all_legal_moves, in_check, legal_moves, play_uci
from chessrules.move import Move
from chessrules.movegen import valid_moves
from chessrules.perft import perft, perft_divide
from chessrules.rules import is_check, king_coords
from chessrules.squares import Square, parse_square, square_name

logger = logging.getLogger(__name__)


class PositionRequest(BaseModel):
    fen: str = Field(default=START_FEN)


class LegalMovesRequest(PositionRequest):
    square: str | None = Field(default=None, min_length=2, max_length=2)


class SquareRequest(PositionRequest):
    square: str = Field(min_length=2, max_length=2)


class CheckRequest(PositionRequest):
    color: Literal["w", "b"] | None = None


class MoveRequest(PositionRequest):
    move: str = Field(min_length=4, max_length=4)


class PerftRequest(PositionRequest):
    depth: int = Field(default=2, ge=1)
    divide: bool = Field(default=False)


settings = get_settings()

app = FastAPI(title="Chess Rules API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _bad_request(exc: ChessRulesError) -> HTTPException:
    logger.info("rejected request: %s", exc)
    return HTTPException(status_code=400, detail=str(exc))


def _board_from_fen(fen: str) -> Board:
    try:
        return Board.from_fen(fen)
    except ChessRulesError as exc:
        raise _bad_request(exc) from exc


def _square(name: str) -> Square:
    try:
        return parse_square(name)
    except ChessRulesError as exc:
        raise _bad_request(exc) from exc


def _position_payload(board: Board) -> dict:
    return {
        "fen": board.to_fen(),
        "side_to_move": COLOR_SYMBOLS[board.side_to_move],
        "legal_moves": [m.uci() for m in all_legal_moves(board)],
        "in_check": in_check(board),
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/legal-moves")
def legal_moves_endpoint(payload: LegalMovesRequest) -> dict:
    board = _board_from_fen(payload.fen)
    if payload.square is None:
        return _position_payload(board)

    origin = _square(payload.square)
    return {
        "fen": board.to_fen(),
        "side_to_move": COLOR_SYMBOLS[board.side_to_move],
        "square": payload.square,
        "legal_moves": [Move(origin, target).uci() for target in legal_moves(board, origin)],
        "in_check": in_check(board),
    }


@app.post("/valid-moves")
def valid_moves_endpoint(payload: SquareRequest) -> dict:
    board = _board_from_fen(payload.fen)
    origin = _square(payload.square)
    return {
        "square": payload.square,
        "targets": [square_name(target) for target in valid_moves(board, origin)],
    }


@app.post("/check")
def check(payload: CheckRequest) -> dict:
    board = _board_from_fen(payload.fen)
    color = board.side_to_move if payload.color is None else SYMBOL_TO_COLOR[payload.color]
    king = king_coords(board, color)
    return {
        "color": COLOR_SYMBOLS[color],
        "in_check": is_check(board, color),
        "king": None if king is None else square_name(king),
    }


@app.post("/move")
def move(payload: MoveRequest) -> dict:
    board = _board_from_fen(payload.fen)
    try:
        after = play_uci(board, payload.move)
    except ChessRulesError as exc:
        raise _bad_request(exc) from exc
    response = _position_payload(after)
    response["last_move"] = payload.move.lower()
    return response


@app.post("/perft")
def run_perft(payload: PerftRequest) -> dict:
    if payload.depth > settings.max_perft_depth:
        raise HTTPException(status_code=400, detail=f"Depth must be <= {settings.max_perft_depth}")
    board = _board_from_fen(payload.fen)
    if payload.divide:
        return {"divide": perft_divide(board, payload.depth)}
    return {"nodes": perft(board, payload.depth)}
