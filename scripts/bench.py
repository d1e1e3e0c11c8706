#!/usr/bin/env python3
"""Generate reproducible benchmark CSVs for the rules engine."""

from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chessrules.board import Board
from chessrules.constants import Color, START_FEN
from chessrules.perft import perft
from chessrules.rules import is_check


MIDDLEGAME_FEN = "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w - - 4 4"


@dataclass(frozen=True)
class PositionCase:
    name: str
    fen: str


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def run_perft_bench(depths_by_case: dict[PositionCase, list[int]]) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for case, depths in depths_by_case.items():
        for depth in depths:
            board = Board.from_fen(case.fen)
            start = perf_counter()
            nodes = perft(board, depth)
            elapsed_ms = (perf_counter() - start) * 1000.0
            nps = int(nodes / max(elapsed_ms / 1000.0, 1e-9))
            rows.append(
                {
                    "position": case.name,
                    "depth": depth,
                    "nodes": nodes,
                    "elapsed_ms": round(elapsed_ms, 3),
                    "nps": nps,
                }
            )
    return rows


def run_check_bench(cases: list[PositionCase], iterations: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for case in cases:
        board = Board.from_fen(case.fen)
        for color in Color:
            start = perf_counter()
            for _ in range(iterations):
                result = is_check(board, color)
            elapsed_ms = (perf_counter() - start) * 1000.0
            rows.append(
                {
                    "position": case.name,
                    "color": str(color),
                    "iterations": iterations,
                    "in_check": result,
                    "elapsed_ms": round(elapsed_ms, 3),
                    "per_call_us": round(elapsed_ms * 1000.0 / iterations, 2),
                }
            )
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate rules engine benchmark CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument(
        "--check-iterations",
        type=int,
        default=500,
        help="Number of check detection calls per position and color",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)

    cases = [
        PositionCase("start", START_FEN),
        PositionCase("middlegame", MIDDLEGAME_FEN),
    ]

    perft_rows = run_perft_bench(
        {
            cases[0]: [1, 2, 3],
            # Depth 3 here takes tens of seconds; keep default benchmark snappy.
            cases[1]: [1, 2],
        }
    )
    check_rows = run_check_bench(cases, iterations=args.check_iterations)

    perft_path = metrics_dir / "perft_metrics.csv"
    check_path = metrics_dir / "check_metrics.csv"

    _write_csv(
        perft_path,
        fieldnames=["position", "depth", "nodes", "elapsed_ms", "nps"],
        rows=perft_rows,
    )
    _write_csv(
        check_path,
        fieldnames=["position", "color", "iterations", "in_check", "elapsed_ms", "per_call_us"],
        rows=check_rows,
    )

    print(f"wrote {perft_path}")
    print(f"wrote {check_path}")


if __name__ == "__main__":
    main()
