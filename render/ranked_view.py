"""Renders a Snapshot as a status line followed by ranked rows."""

from __future__ import annotations

from typing import List

from collector.shared import Snapshot
from render.terminal import Terminal, clip, sanitize

STATUS_STYLE = "yellow"
SEPARATOR = ": "


def status_line(snapshot: Snapshot) -> str:
    return f"{snapshot.total} total, {snapshot.unique} unique lines"


def format_rows(snapshot: Snapshot, width: int, max_rows: int) -> List[str]:
    """Format up to ``max_rows`` ranking rows clipped to ``width`` cells.

    Counts are right-aligned to the digit count of the first (largest)
    count so columns line up.
    """
    rows = snapshot.rows[: max(max_rows, 0)]
    if not rows:
        return []
    count_width = len(str(rows[0][0]))
    out: List[str] = []
    for count, line in rows:
        text = f"{count:>{count_width}}"
        room = width - count_width - len(SEPARATOR)
        if room > 0:
            text += SEPARATOR + clip(sanitize(line), room)
        else:
            text = clip(text, width)
        out.append(text)
    return out


def render(terminal: Terminal, snapshot: Snapshot) -> None:
    """Draw one frame without clearing the whole screen.

    Each row is cleared just before it is rewritten and everything below the
    last row is cleared afterwards, so every cell changes at most once.
    """
    width, height = terminal.size()
    with terminal.frame():
        terminal.home()
        terminal.clear_line()
        terminal.write(clip(status_line(snapshot), width), style=STATUS_STYLE)
        if height > 1:
            for row in format_rows(snapshot, width, height - 1):
                terminal.newline()
                terminal.clear_line()
                terminal.write(row)
        terminal.clear_below()
