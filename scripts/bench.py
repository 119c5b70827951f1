#!/usr/bin/env python3
"""Generate reproducible square-set benchmark CSVs."""

from __future__ import annotations

import argparse
import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from squareset.bitboards import BitBoard
from squareset.bitscan import BITSCANS

logger = logging.getLogger("squareset.bench")


@dataclass(frozen=True)
class BoardCase:
    name: str
    raw: int


CASES = [
    BoardCase("white_pawns", 0x0000_0000_0000_FF00),
    BoardCase("start_occupancy", 0xFFFF_0000_0000_FFFF),
    BoardCase("sparse", 0x0C0F_00D0_0000_0100),
    BoardCase("full", (1 << 64) - 1),
]


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def _ops_per_second(ops: int, elapsed_ms: float) -> int:
    return int(ops / max(elapsed_ms / 1000.0, 1e-9))


def run_pop_bench(cases: list[BoardCase], iterations: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for scan_name, scan in BITSCANS.items():
        for case in cases:
            pops = 0
            start = perf_counter()
            for _ in range(iterations):
                board = BitBoard.from_raw(case.raw)
                while board.pop_bit(scan) is not None:
                    pops += 1
            elapsed_ms = (perf_counter() - start) * 1000.0
            logger.debug("%s/%s: %d pops in %.3f ms", scan_name, case.name, pops, elapsed_ms)
            rows.append(
                {
                    "operation": "pop_bit",
                    "strategy": scan_name,
                    "board": case.name,
                    "ops": pops,
                    "elapsed_ms": round(elapsed_ms, 3),
                    "ops_per_sec": _ops_per_second(pops, elapsed_ms),
                }
            )
    return rows


def run_count_bench(cases: list[BoardCase], iterations: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for case in cases:
        board = BitBoard.from_raw(case.raw)
        start = perf_counter()
        for _ in range(iterations):
            board.count_bits()
        elapsed_ms = (perf_counter() - start) * 1000.0
        rows.append(
            {
                "operation": "count_bits",
                "strategy": "kernighan",
                "board": case.name,
                "ops": iterations,
                "elapsed_ms": round(elapsed_ms, 3),
                "ops_per_sec": _ops_per_second(iterations, elapsed_ms),
            }
        )
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate square-set benchmark CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=20_000,
        help="Boards drained per strategy and case",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if args.iterations < 1:
        raise SystemExit("--iterations must be >= 1")

    rows = run_pop_bench(CASES, args.iterations) + run_count_bench(CASES, args.iterations)

    path = Path(args.metrics_dir) / "bitscan_metrics.csv"
    _write_csv(
        path,
        fieldnames=["operation", "strategy", "board", "ops", "elapsed_ms", "ops_per_sec"],
        rows=rows,
    )
    logger.info("wrote %s", path)


if __name__ == "__main__":
    main()
