#!/usr/bin/env python3
"""Render square-set benchmark charts from CSV metrics into SVG."""

from __future__ import annotations

import argparse
import csv
import logging
from collections import defaultdict
from pathlib import Path

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]

logger = logging.getLogger("squareset.plot")

PALETTE = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "grid": "#2b2b2b",
    "text": "#e6e2d8",
    "muted": "#bdb8ad",
    "gold": "#c6a25a",
    "red": "#7d2a2a",
    "green": "#4e7d49",
}


def _load_csv(path: Path) -> list[dict[str, str]]:
    with path.open("r", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot square-set benchmark metrics")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Directory containing bitscan_metrics.csv",
    )
    parser.add_argument(
        "--output",
        default=str(ROOT / "docs" / "visuals" / "bitscan-charts.svg"),
        help="Output SVG path",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args()


def plot(rows: list[dict[str, str]], output: Path) -> None:
    plt.rcParams.update(
        {
            "font.family": "DejaVu Sans",
            "axes.facecolor": PALETTE["panel"],
            "figure.facecolor": PALETTE["bg"],
            "axes.edgecolor": PALETTE["grid"],
            "axes.labelcolor": PALETTE["text"],
            "xtick.color": PALETTE["muted"],
            "ytick.color": PALETTE["muted"],
            "text.color": PALETTE["text"],
            "axes.titlecolor": PALETTE["text"],
            "grid.color": PALETTE["grid"],
        }
    )

    fig, axes = plt.subplots(1, 2, figsize=(16, 6), dpi=150)
    fig.suptitle("Square Set Performance Snapshot", fontsize=18, fontweight="bold", color=PALETTE["text"])

    # pop_bit throughput per board, one bar group per strategy.
    pops_by_strategy: dict[str, dict[str, int]] = defaultdict(dict)
    counts: dict[str, int] = {}
    for row in rows:
        if row["operation"] == "pop_bit":
            pops_by_strategy[row["strategy"]][row["board"]] = int(row["ops_per_sec"])
        elif row["operation"] == "count_bits":
            counts[row["board"]] = int(row["ops_per_sec"])

    boards = sorted({board for data in pops_by_strategy.values() for board in data})
    colors = [PALETTE["gold"], PALETTE["red"], PALETTE["green"]]
    width = 0.8 / max(len(pops_by_strategy), 1)

    ax0 = axes[0]
    for idx, (strategy, data) in enumerate(sorted(pops_by_strategy.items())):
        positions = [b + idx * width for b in range(len(boards))]
        ax0.bar(positions, [data.get(board, 0) for board in boards], width=width,
                color=colors[idx % len(colors)], label=strategy)

    ax0.set_title("pop_bit Operations/Second by Board")
    ax0.set_xticks([b + width * (len(pops_by_strategy) - 1) / 2 for b in range(len(boards))])
    ax0.set_xticklabels(boards)
    ax0.set_ylabel("ops/sec")
    ax0.grid(True, axis="y", alpha=0.6)
    ax0.legend(frameon=False)

    ax1 = axes[1]
    count_boards = sorted(counts)
    ax1.bar(count_boards, [counts[board] for board in count_boards], color=PALETTE["green"])
    ax1.set_title("count_bits Operations/Second by Board")
    ax1.set_ylabel("ops/sec")
    ax1.grid(True, axis="y", alpha=0.6)

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout(rect=(0, 0, 1, 0.95))
    fig.savefig(output, format="svg")
    plt.close(fig)


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    output = Path(args.output)

    rows = _load_csv(Path(args.metrics_dir) / "bitscan_metrics.csv")
    plot(rows, output)
    logger.info("wrote %s", output)


if __name__ == "__main__":
    main()
