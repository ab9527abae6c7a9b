#!/usr/bin/env python3
"""
linetop: live ranking of the most common input lines

Features
- Reads files in order, then stdin ("-" or no FILE arguments)
- Optional regex filter; a single capture group selects what is counted
- Redraws in place only when the counts changed (plus a periodic redraw
  to pick up terminal resizes)
- Final state stays on screen after the input ends

Requirements
    pip install rich

Usage:
    tail -f access.log | python linetop.py -r '"GET ([^ ]+)'
"""
from __future__ import annotations

import argparse
import re
from typing import List, Optional

from rich.console import Console

from collector.shared import SharedCollector
from feed.feeder import Feeder
from feed.filters import FilterError, LineFilter, compile_filter
from feed.sources import SourceList
from render.display import DEFAULT_INTERVAL, DisplayEngine
from render.terminal import Terminal

# ---------------- Configuration ----------------
EXIT_OK = 0
EXIT_NOT_A_TERMINAL = 3
EXIT_IO_ERROR = 4
EXIT_INTERRUPTED = 130

err_console = Console(stderr=True, highlight=False)


def regex_arg(value: str) -> re.Pattern[str]:
    """argparse type: compile a filter pattern with at most one group."""
    try:
        return compile_filter(value)
    except FilterError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def interval_arg(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not seconds > 0:
        raise argparse.ArgumentTypeError("interval must be greater than zero")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linetop",
        description=(
            "Interactively display the most common input lines. "
            "Input files (and stdin) are opened and processed in sequence."
        ),
    )
    parser.add_argument(
        "-r", "--regex",
        metavar="REGEX",
        type=regex_arg,
        help="Only count lines matching REGEX. If REGEX has a capture group, "
             "the captured text is counted instead of the whole line.",
    )
    parser.add_argument(
        "--interval",
        type=interval_arg,
        default=DEFAULT_INTERVAL,
        help=f"Seconds between display polls (default {DEFAULT_INTERVAL})",
    )
    parser.add_argument(
        "files",
        metavar="FILE",
        nargs="*",
        help='Files to process. If none are given stdin is used; pass "-" to read stdin explicitly.',
    )
    return parser


def run(
    sources: SourceList,
    terminal: Terminal,
    line_filter: Optional[LineFilter] = None,
    *,
    interval: float = DEFAULT_INTERVAL,
    feeder_factory=Feeder,
) -> int:
    """Start the feeder, drive the display until it finishes, report errors."""
    shared = SharedCollector()
    feeder = feeder_factory(sources, shared, line_filter)
    feeder.start()

    display = DisplayEngine(shared, terminal, interval=interval)
    try:
        display.run()
    except KeyboardInterrupt:
        terminal.newline()
        return EXIT_INTERRUPTED

    # the display only exits once the feeder is done, so this returns promptly
    feeder.join()

    if feeder.skipped:
        err_console.print(f"[dim]Skipped {feeder.skipped} line(s) that were not valid UTF-8[/dim]")
    if feeder.error is not None:
        err_console.print(f"[red]Read failed[/red]: {feeder.error}")
        return EXIT_IO_ERROR
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    terminal = Terminal()
    if not terminal.is_interactive():
        err_console.print("[red]Error[/red]: output is not an interactive terminal")
        return EXIT_NOT_A_TERMINAL

    line_filter = LineFilter(args.regex) if args.regex is not None else None
    return run(
        SourceList.parse(args.files),
        terminal,
        line_filter,
        interval=args.interval,
    )


if __name__ == "__main__":
    raise SystemExit(main())
