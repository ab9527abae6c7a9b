"""Polling display loop that redraws the ranked view while input arrives."""

from __future__ import annotations

import time
from typing import Callable, Optional

from collector.shared import SharedCollector, Snapshot
from render.ranked_view import render
from render.terminal import Terminal

DEFAULT_INTERVAL = 0.05
FORCED_REDRAW_INTERVAL = 5.0


class DisplayEngine:
    """Redraws the view from snapshots until the feeder signals completion.

    A frame is drawn on the first poll, whenever the total changed, and at
    least every ``forced_redraw`` seconds (terminal resizes are not otherwise
    noticed). Once the feeder is done one last frame is always drawn.
    """

    def __init__(
        self,
        shared: SharedCollector,
        terminal: Terminal,
        *,
        interval: float = DEFAULT_INTERVAL,
        forced_redraw: float = FORCED_REDRAW_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.shared = shared
        self.terminal = terminal
        self.interval = interval
        self.forced_redraw = forced_redraw
        self.clock = clock
        self.first_frame = True
        self.last_total_rendered: Optional[int] = None
        self.next_forced_redraw = 0.0
        self.frames = 0

    def run(self) -> None:
        while not self.shared.finished:
            self.poll()
            # returns early as soon as the feeder is done
            self.shared.wait_finished(self.interval)
        self.final_render()

    def poll(self) -> bool:
        """Run one loop iteration; return True if a frame was drawn."""
        if self.first_frame:
            self.terminal.clear_screen()
        now = self.clock()
        force = self.first_frame or now >= self.next_forced_redraw
        snapshot = self._take_snapshot(None if force else self.last_total_rendered)
        self.first_frame = False
        if snapshot is None:
            return False
        self._draw(snapshot)
        self.next_forced_redraw = now + self.forced_redraw
        return True

    def final_render(self) -> bool:
        """Draw the complete final state; nothing when no line was counted."""
        snapshot = self._take_snapshot(None)
        if snapshot is None or snapshot.total == 0:
            return False
        self._draw(snapshot)
        # leave the cursor below the view
        self.terminal.newline()
        return True

    def _take_snapshot(self, since_total: Optional[int]) -> Optional[Snapshot]:
        _, height = self.terminal.size()
        return self.shared.snapshot(limit=max(height - 1, 0), since_total=since_total)

    def _draw(self, snapshot: Snapshot) -> None:
        render(self.terminal, snapshot)
        self.last_total_rendered = snapshot.total
        self.frames += 1
