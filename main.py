"""Command-line utilities for the chess rules engine."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.board import Board
from chessrules.config import configure_logging
from chessrules.constants import COLOR_SYMBOLS, START_FEN, SYMBOL_TO_COLOR
from chessrules.errors import ChessRulesError
from chessrules.game import legal_moves, play_uci
from chessrules.movegen import valid_moves
from chessrules.perft import perft, perft_divide
from chessrules.rules import is_check, king_coords
from chessrules.squares import parse_square, square_name

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chess rules engine utilities")
    parser.add_argument("--fen", default=START_FEN, help="FEN position")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default from settings)",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("show", help="Print the board")

    moves_parser = subparsers.add_parser("moves", help="List moves for the piece on a square")
    moves_parser.add_argument("square", help="Origin square, e.g. e2")
    moves_parser.add_argument("--pseudo", action="store_true", help="Include moves that leave the king in check")

    check_parser = subparsers.add_parser("check", help="Report whether a side is in check")
    check_parser.add_argument("--color", choices=sorted(SYMBOL_TO_COLOR), help="Side to test (default: side to move)")

    play_parser = subparsers.add_parser("play", help="Play moves in order and print the result")
    play_parser.add_argument("moves", nargs="+", help="Moves such as e2e4")

    perft_parser = subparsers.add_parser("perft", help="Run perft")
    perft_parser.add_argument("depth", type=int, help="Perft depth")
    perft_parser.add_argument("--divide", action="store_true", help="Show per-move split")

    return parser


def _dispatch(args: argparse.Namespace, board: Board) -> None:
    if args.command == "moves":
        origin = parse_square(args.square)
        targets = valid_moves(board, origin) if args.pseudo else legal_moves(board, origin)
        print(" ".join(square_name(t) for t in targets))
        return

    if args.command == "check":
        color = board.side_to_move if args.color is None else SYMBOL_TO_COLOR[args.color]
        king = king_coords(board, color)
        where = "-" if king is None else square_name(king)
        print(f"{COLOR_SYMBOLS[color]} king={where} check={'yes' if is_check(board, color) else 'no'}")
        return

    if args.command == "play":
        for text in args.moves:
            board = play_uci(board, text)
        print(board)
        print(board.to_fen())
        return

    if args.command == "perft":
        if args.divide:
            for move, count in perft_divide(board, args.depth).items():
                print(f"{move}: {count}")
        else:
            print(perft(board, args.depth))
        return

    print(board)


def run() -> None:
    parser = build_parser()
    args = parser.parse_args()
    try:
        configure_logging(args.log_level)
        board = Board.from_fen(args.fen)
        _dispatch(args, board)
    except (ChessRulesError, ValueError) as exc:
        logger.debug("command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    run()
