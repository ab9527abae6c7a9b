"""
Collector throughput benchmark

Inserts lines one at a time and builds the top-N ranking after every insert,
which is the worst case for the display (a redraw per line).

Examples:
  python -m debug.bench_collector
  python -m debug.bench_collector --lines 5000 --display 40 --distinct 100
"""

import argparse
import time
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from collector.line_collector import LineCollector

NUM_TEST_LINES = 1000
NUM_DISP_LINES = 50

console = Console()


@dataclass
class BenchResult:
    name: str
    lines: int
    seconds: float

    @property
    def lines_per_second(self) -> float:
        return self.lines / self.seconds if self.seconds > 0 else float("inf")


def make_lines(count: int, distinct: int) -> List[str]:
    """``count`` lines cycling through ``distinct`` values ("" when distinct is 0)."""
    if distinct <= 0:
        return [""] * count
    return [f"line {i % distinct}" for i in range(count)]


def bench(name: str, lines: List[str], display: int, rounds: int = 3) -> BenchResult:
    """Best of ``rounds`` runs, each on a fresh collector."""
    best = float("inf")
    for _ in range(max(rounds, 1)):
        lc = LineCollector()
        t0 = time.perf_counter()
        for line in lines:
            lc.insert(line)
            lc.ranking(display)
        best = min(best, time.perf_counter() - t0)
    return BenchResult(name=name, lines=len(lines), seconds=best)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark LineCollector insert + ranking throughput")
    parser.add_argument("--lines", type=int, default=NUM_TEST_LINES, help=f"Lines per run (default {NUM_TEST_LINES})")
    parser.add_argument("--display", type=int, default=NUM_DISP_LINES, help=f"Ranked rows taken per insert (default {NUM_DISP_LINES})")
    parser.add_argument("--distinct", type=int, default=100, help="Distinct values in the mixed run (default 100)")
    parser.add_argument("--rounds", type=int, default=3, help="Runs per case, best is reported (default 3)")
    args = parser.parse_args(argv)

    results = [
        bench("empty_lines", make_lines(args.lines, 0), args.display, args.rounds),
        bench("mixed_lines", make_lines(args.lines, args.distinct), args.display, args.rounds),
    ]

    table = Table(title="lines-throughput")
    table.add_column("case")
    table.add_column("lines", justify="right")
    table.add_column("seconds", justify="right")
    table.add_column("lines/s", justify="right")
    for r in results:
        table.add_row(r.name, str(r.lines), f"{r.seconds:.4f}", f"{r.lines_per_second:,.0f}")
    console.print(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
